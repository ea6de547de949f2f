"""Base fetcher implementing the Template Method pattern.

All backends share the same fetch flow:
    list_pull_requests() → _fetch_pull_requests()  ← differs per backend
                         → echo raw payload → PullRequest.from_dict()
    get_details()        → _fetch_details()        ← differs per backend
                         → echo raw payload → PullRequestDetails.from_dict()

Subclasses return raw JSON-compatible payloads shaped like `gh pr list` /
`gh pr view` output and raise FetchError on any failure. Nothing is retried.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod

from prstatus_core.models import PullRequest, PullRequestDetails

logger = logging.getLogger(__name__)

PR_LIST_FIELDS = ("number", "title", "author", "createdAt", "updatedAt", "url", "isDraft")
PR_DETAIL_FIELDS = ("reviews", "reviewRequests")


class FetchError(Exception):
    """An external call failed; the run must abort."""


class BaseFetcher(ABC):
    def list_pull_requests(self, limit: int) -> list[PullRequest]:
        """Return up to ``limit`` open pull requests in API order."""
        payload = self._fetch_pull_requests(limit)
        logger.info("PR_LIST=%s", json.dumps(payload, ensure_ascii=False))
        return [PullRequest.from_dict(d) for d in payload]

    def get_details(self, pr_number: int) -> PullRequestDetails:
        """Return the reviews and pending review requests of one PR."""
        payload = self._fetch_details(pr_number)
        logger.info("DETAILS for PR %s=%s", pr_number, json.dumps(payload, ensure_ascii=False))
        return PullRequestDetails.from_dict(payload)

    @abstractmethod
    def _fetch_pull_requests(self, limit: int) -> list[dict]:
        """Return the raw open-PR list with the PR_LIST_FIELDS keys."""

    @abstractmethod
    def _fetch_details(self, pr_number: int) -> dict:
        """Return a raw dict with ``reviews`` and ``reviewRequests`` lists."""
