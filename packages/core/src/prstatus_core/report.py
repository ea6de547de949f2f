"""PR status report orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from prstatus_core.config import load_labels, resolve_limit
from prstatus_core.fetchers.base import BaseFetcher
from prstatus_core.markdown import render_document, write_document
from prstatus_core.models import PullRequest
from prstatus_core.status import collect_reviewer_states, determine_pr_status

logger = logging.getLogger(__name__)


@dataclass
class StatusRow:
    """One classified pull request, ready for rendering."""

    pull_request: PullRequest
    status: str  # key into the locale labels, e.g. "approved"
    reviewers: dict[str, str] = field(default_factory=dict)  # login → review state


def collect_rows(fetcher: BaseFetcher, limit: int) -> list[StatusRow]:
    """Fetch and classify open PRs one at a time, in API order.

    Any FetchError propagates and aborts the whole collection.
    """
    rows = []
    for pr in fetcher.list_pull_requests(limit):
        details = fetcher.get_details(pr.number)
        rows.append(
            StatusRow(
                pull_request=pr,
                status=determine_pr_status(details.reviews, pr.is_draft),
                reviewers=collect_reviewer_states(details),
            )
        )
        logger.debug("PR #%s classified as %s", pr.number, rows[-1].status)
    return rows


def generate_report(
    fetcher: BaseFetcher,
    config: dict,
    output_dir: str | Path = ".",
    generated_at: datetime | None = None,
) -> Path:
    """Build the status page and write it, returning the written path.

    The document is only written once every PR has been fetched, so a failed
    run leaves the previous page untouched.
    """
    labels = load_labels(config)
    generated_at = generated_at or datetime.now()

    rows = collect_rows(fetcher, resolve_limit(config))
    content = render_document(rows, labels, generated_at)
    path = write_document(content, output_dir, config.get("output_filename") or "PR_Status.md")
    logger.info("Wrote %d pull request(s) to %s", len(rows), path)
    return path
