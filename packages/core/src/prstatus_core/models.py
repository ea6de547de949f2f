"""Pull request data models.

Both fetch backends normalise their payloads into these dataclasses, so the
classifier and renderers never see backend-specific JSON shapes.
"""

from __future__ import annotations

from dataclasses import dataclass, field


def _login(obj: dict | None) -> str | None:
    if not obj:
        return None
    return obj.get("login")


@dataclass
class PullRequest:
    """An open pull request as listed by the fetcher."""

    number: int | None
    title: str
    url: str
    author: str
    created_at: str  # ISO-8601 timestamp
    updated_at: str  # ISO-8601 timestamp
    is_draft: bool = False

    @property
    def number_label(self) -> str:
        return f"#{self.number}" if self.number is not None else ""

    @property
    def created_date(self) -> str:
        return self.created_at.split("T", 1)[0]

    @property
    def updated_date(self) -> str:
        return self.updated_at.split("T", 1)[0]

    @classmethod
    def from_dict(cls, d: dict) -> PullRequest:
        """Build from a `gh pr list --json` entry.

        Missing fields become empty strings (a missing number becomes None)
        rather than raising.
        """
        return cls(
            number=d.get("number"),
            title=d.get("title") or "",
            url=d.get("url") or "",
            author=_login(d.get("author")) or "",
            created_at=d.get("createdAt") or "",
            updated_at=d.get("updatedAt") or "",
            is_draft=bool(d.get("isDraft")),
        )


@dataclass
class Review:
    """A submitted review. ``state`` is None when the payload carries none."""

    author: str | None
    state: str | None

    @classmethod
    def from_dict(cls, d: dict) -> Review:
        # gh's GraphQL payload uses `author`, the REST API uses `user`.
        return cls(author=_login(d.get("author")) or _login(d.get("user")), state=d.get("state"))


@dataclass
class ReviewRequest:
    """An outstanding review request for a user or a team."""

    login: str

    @classmethod
    def from_dict(cls, d: dict) -> ReviewRequest | None:
        login = d.get("login") or d.get("slug") or d.get("name")
        return cls(login=login) if login else None


@dataclass
class PullRequestDetails:
    reviews: list[Review] = field(default_factory=list)
    review_requests: list[ReviewRequest] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict) -> PullRequestDetails:
        requests = (ReviewRequest.from_dict(r) for r in d.get("reviewRequests") or [])
        return cls(
            reviews=[Review.from_dict(r) for r in d.get("reviews") or []],
            review_requests=[r for r in requests if r is not None],
        )
