from __future__ import annotations

from github import GithubException

from prstatus_core.fetchers.base import BaseFetcher, FetchError
from prstatus_core.gh.pull_request import get_pull, get_pull_requests, get_repo, get_review_requests, get_reviews


def _iso(value) -> str | None:
    return value.isoformat() if value is not None else None


def _user(user) -> dict | None:
    return {"login": user.login} if user is not None else None


class ApiFetcher(BaseFetcher):
    """Fetches pull requests from the GitHub REST API via PyGithub.

    Review entries keep the REST shape (``user.login``); PR list entries are
    mapped to the `gh pr list --json` field names so both backends share one
    parser.
    """

    def __init__(self, repo: str, token: str):
        self.repo_name = repo
        self._token = token
        self._repo = None

    def _get_repo(self):
        if self._repo is None:
            try:
                self._repo = get_repo(self.repo_name, token=self._token)
            except GithubException as e:
                raise FetchError(f"Could not open repository {self.repo_name}: {e}")
        return self._repo

    def _fetch_pull_requests(self, limit: int) -> list[dict]:
        try:
            pulls = get_pull_requests(self._get_repo(), limit)
        except GithubException as e:
            raise FetchError(f"Could not list pull requests for {self.repo_name}: {e}")
        return [
            {
                "number": pr.number,
                "title": pr.title,
                "author": _user(pr.user),
                "createdAt": _iso(pr.created_at),
                "updatedAt": _iso(pr.updated_at),
                "url": pr.html_url,
                "isDraft": bool(pr.draft),
            }
            for pr in pulls
        ]

    def _fetch_details(self, pr_number: int) -> dict:
        try:
            pr = get_pull(self._get_repo(), pr_number)
            reviews = get_reviews(pr)
            users, teams = get_review_requests(pr)
        except GithubException as e:
            raise FetchError(f"Could not fetch reviews for PR #{pr_number}: {e}")
        return {
            "reviews": [{"user": _user(r.user), "state": r.state} for r in reviews],
            "reviewRequests": [{"login": u.login} for u in users] + [{"slug": t.slug} for t in teams],
        }
