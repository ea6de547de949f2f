"""Tests for payload parsing into the data models."""

from prstatus_core.models import PullRequest, PullRequestDetails, Review, ReviewRequest


def _pr_payload(**overrides):
    payload = {
        "number": 42,
        "title": "Fix | bug",
        "url": "https://github.com/owner/repo/pull/42",
        "author": {"login": "alice"},
        "createdAt": "2024-05-01T09:30:00Z",
        "updatedAt": "2024-05-03T18:00:00Z",
        "isDraft": False,
    }
    payload.update(overrides)
    return payload


class TestPullRequest:
    def test_parses_gh_payload(self):
        pr = PullRequest.from_dict(_pr_payload())
        assert pr.number == 42
        assert pr.author == "alice"
        assert pr.is_draft is False

    def test_dates_drop_time_of_day(self):
        pr = PullRequest.from_dict(_pr_payload())
        assert pr.created_date == "2024-05-01"
        assert pr.updated_date == "2024-05-03"

    def test_missing_fields_become_empty(self):
        pr = PullRequest.from_dict({"number": 1})
        assert pr.title == ""
        assert pr.author == ""
        assert pr.created_date == ""

    def test_missing_number_is_none(self):
        pr = PullRequest.from_dict({"title": "x"})
        assert pr.number is None
        assert pr.number_label == ""

    def test_number_label(self):
        assert PullRequest.from_dict({"number": 42}).number_label == "#42"

    def test_null_author_becomes_empty(self):
        pr = PullRequest.from_dict(_pr_payload(author=None))
        assert pr.author == ""


class TestReview:
    def test_author_login(self):
        review = Review.from_dict({"author": {"login": "bob"}, "state": "APPROVED"})
        assert review.author == "bob"
        assert review.state == "APPROVED"

    def test_falls_back_to_user_login(self):
        review = Review.from_dict({"user": {"login": "carol"}, "state": "COMMENTED"})
        assert review.author == "carol"

    def test_prefers_author_over_user(self):
        review = Review.from_dict({"author": {"login": "bob"}, "user": {"login": "carol"}})
        assert review.author == "bob"

    def test_missing_state_is_none(self):
        assert Review.from_dict({"author": {"login": "bob"}}).state is None


class TestReviewRequest:
    def test_user_request(self):
        assert ReviewRequest.from_dict({"__typename": "User", "login": "dave"}).login == "dave"

    def test_team_request_uses_slug(self):
        assert ReviewRequest.from_dict({"__typename": "Team", "slug": "backend", "name": "Backend"}).login == "backend"

    def test_unidentifiable_request_is_dropped(self):
        assert ReviewRequest.from_dict({"__typename": "Bot"}) is None


class TestPullRequestDetails:
    def test_parses_reviews_and_requests(self):
        details = PullRequestDetails.from_dict(
            {
                "reviews": [{"author": {"login": "bob"}, "state": "APPROVED"}],
                "reviewRequests": [{"login": "dave"}, {}],
            }
        )
        assert [r.author for r in details.reviews] == ["bob"]
        assert [r.login for r in details.review_requests] == ["dave"]

    def test_empty_payload(self):
        details = PullRequestDetails.from_dict({})
        assert details.reviews == []
        assert details.review_requests == []
