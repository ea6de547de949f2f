from __future__ import annotations

from itertools import islice

from github import Github


def get_repo(repo_name: str, token: str):
    return Github(token).get_repo(repo_name)


def get_pull(repo, pr_number: int):
    return repo.get_pull(pr_number)


def get_pull_requests(repo, limit: int, state: str = "open"):
    """Return at most ``limit`` pull requests without paging past them."""
    return list(islice(repo.get_pulls(state=state), limit))


def get_reviews(pr):
    return list(pr.get_reviews())


def get_review_requests(pr):
    """Return (users, teams) with review requests still pending."""
    users, teams = pr.get_review_requests()
    return list(users), list(teams)
