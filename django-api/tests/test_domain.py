"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import uuid
from datetime import time, timedelta

import pytest

from accounts.domain import Photo, PhotoKind, UserId
from applications.domain import ApplicationStatus
from common.domain.errors import ValidationError
from events.domain import Capacity, EventId, Money, TimePart
from reviews.domain import clean_review_input, summarize
from tests.fakes import NOW, make_event


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        assert Money(43000).amount == 43000

    def test_money_accepts_zero(self):
        assert Money(0).amount == 0

    def test_money_rejects_negative_amount(self):
        with pytest.raises(ValueError):
            Money(-1)

    def test_money_str_uses_thousands_separator(self):
        assert str(Money(43000)) == "43,000"


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_zero(self):
        assert Capacity(0).value == 0

    def test_capacity_rejects_negative_value(self):
        with pytest.raises(ValueError):
            Capacity(-1)


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_uuid(self):
        raw = str(uuid.uuid4())
        assert str(EventId.from_string(raw)) == raw

    def test_from_string_invalid_uuid(self):
        with pytest.raises(ValueError):
            EventId.from_string("not-a-uuid")




class TestTimePart:
    def test_rejects_blank_label(self):
        with pytest.raises(ValueError):
            TimePart(label="  ", starts=time(20), ends=time(23))

    def test_may_run_past_midnight(self):
        part = TimePart(label="Part 2", starts=time(23), ends=time(2))
        assert str(part) == "Part 2 23:00-02:00"


class TestEvent:
    def test_deadline_after_start_is_rejected(self):
        with pytest.raises(ValueError):
            make_event(application_deadline=NOW + timedelta(days=8))

    def test_end_must_follow_start(self):
        with pytest.raises(ValueError):
            make_event(ends_at=NOW + timedelta(days=7))

    def test_has_ended_at_end_time(self):
        event = make_event()
        assert not event.has_ended(event.ends_at - timedelta(seconds=1))
        assert event.has_ended(event.ends_at)


class TestUserAndPhoto:
    def test_user_id_must_be_positive(self):
        with pytest.raises(ValueError):
            UserId(0)

    def test_photo_requires_url(self):
        with pytest.raises(ValueError):
            Photo(url="", kind=PhotoKind.FACE)


class TestApplicationStatus:
    @pytest.mark.parametrize("status", [ApplicationStatus.CANCELLED, ApplicationStatus.COMPLETED])
    def test_terminal_statuses(self, status):
        assert status.is_terminal
        assert not any(status.can_move_to(target) for target in ApplicationStatus)

    def test_confirmed_cannot_go_back_to_waitlist(self):
        assert not ApplicationStatus.CONFIRMED.can_move_to(ApplicationStatus.WAITLIST)

    def test_waitlist_can_be_confirmed(self):
        assert ApplicationStatus.WAITLIST.can_move_to(ApplicationStatus.CONFIRMED)

    def test_every_status_has_a_label(self):
        assert all(status.label for status in ApplicationStatus)


class TestReviewInput:
    @pytest.mark.parametrize("rating", [1, 5])
    def test_rating_bounds_accepted(self, rating):
        assert clean_review_input(rating, "fine") == (rating, "fine")

    @pytest.mark.parametrize("rating", [0, 6, None])
    def test_rating_outside_range_rejected(self, rating):
        with pytest.raises(ValidationError) as exc:
            clean_review_input(rating, "fine")
        assert "rating" in exc.value.fields

    def test_content_is_stripped_before_length_check(self):
        assert clean_review_input(4, "  " + "a" * 300 + "  ") == (4, "a" * 300)

    @pytest.mark.parametrize("content", ["", "   ", "a" * 301])
    def test_content_outside_length_rejected(self, content):
        with pytest.raises(ValidationError) as exc:
            clean_review_input(4, content)
        assert "content" in exc.value.fields


class TestReviewStats:
    def test_empty_average_is_zero(self):
        stats = summarize([])
        assert stats.count == 0
        assert stats.average == 0.0
        assert stats.histogram == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}
