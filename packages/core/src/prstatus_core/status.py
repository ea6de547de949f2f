"""Review status classification for pull requests and their reviewers."""

from __future__ import annotations

from prstatus_core.models import PullRequestDetails, Review

APPROVED = "APPROVED"
CHANGES_REQUESTED = "CHANGES_REQUESTED"
COMMENTED = "COMMENTED"
PENDING = "PENDING"

# Status keys double as label keys in prstatus_core.config.LOCALES.
DRAFT = "draft"
STATUS_APPROVED = "approved"
STATUS_CHANGES_REQUESTED = "changes_requested"
IN_REVIEW = "in_review"
NOT_REVIEWED = "not_reviewed"

_STATE_SUFFIX = {
    APPROVED: "✅",
    CHANGES_REQUESTED: "❌",
    COMMENTED: "💬",
    PENDING: "⏳",
    "": "⏳",
}


def determine_pr_status(reviews: list[Review], is_draft: bool) -> str:
    """Return the status key for a PR.

    Draft takes precedence over everything; otherwise any approval wins over
    any change request, regardless of who submitted them or when.
    """
    if is_draft:
        return DRAFT

    states = {r.state for r in reviews}
    if APPROVED in states:
        return STATUS_APPROVED
    if CHANGES_REQUESTED in states:
        return STATUS_CHANGES_REQUESTED
    if reviews:
        return IN_REVIEW
    return NOT_REVIEWED


def collect_reviewer_states(details: PullRequestDetails) -> dict[str, str]:
    """Map each reviewer login to the state shown for them, sorted by login.

    The last review per login in API order wins. Pending review requests then
    override to PENDING, so a re-requested approver shows as pending.
    """
    states: dict[str, str] = {}
    for review in details.reviews:
        if not review.author:
            continue
        states[review.author] = COMMENTED if review.state is None else review.state

    for request in details.review_requests:
        states[request.login] = PENDING

    return dict(sorted(states.items()))


def format_reviewer_status(reviewer: str, state: str) -> str:
    return f"{reviewer}{_STATE_SUFFIX.get(state, '')}"


def format_reviewers(states: dict[str, str], unassigned: str, separator: str = "<br>") -> str:
    """Join formatted reviewer tokens in login order, or return ``unassigned``."""
    if not states:
        return unassigned
    return separator.join(format_reviewer_status(login, states[login]) for login in sorted(states))
