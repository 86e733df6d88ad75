"""Unit tests for OPEN / WAIT / CLOSED resolution.

Run with: pytest tests/test_availability.py -v
"""

from datetime import timedelta

import pytest

from events.domain import AvailabilityStatus, Capacity, EventListing, Headcount, resolve_status
from tests.fakes import NOW, make_event


def listing(confirmed_male=0, confirmed_female=0, **event_overrides) -> EventListing:
    return EventListing(
        event=make_event(**event_overrides),
        headcount=Headcount(confirmed_male=confirmed_male, confirmed_female=confirmed_female),
    )


class TestResolveStatus:
    def test_male_full_female_open_is_open(self):
        """Scenario A: one gender exhausted still leaves the event OPEN."""
        status = resolve_status(listing(confirmed_male=2, confirmed_female=0), NOW)
        assert status is AvailabilityStatus.OPEN

    def test_both_genders_full_is_wait(self):
        """Scenario B: both capacities exhausted before the deadline."""
        status = resolve_status(listing(confirmed_male=2, confirmed_female=2), NOW)
        assert status is AvailabilityStatus.WAIT

    @pytest.mark.parametrize("confirmed", [0, 2, 5])
    def test_past_deadline_is_closed_regardless_of_capacity(self, confirmed):
        """Scenario C: deadline one hour in the past."""
        item = listing(
            confirmed_male=confirmed,
            confirmed_female=confirmed,
            application_deadline=NOW - timedelta(hours=1),
        )
        assert resolve_status(item, NOW) is AvailabilityStatus.CLOSED

    def test_exactly_at_deadline_is_still_open(self):
        item = listing(application_deadline=NOW)
        assert resolve_status(item, NOW) is AvailabilityStatus.OPEN

    def test_over_confirmed_counts_as_exhausted(self):
        item = listing(confirmed_male=3, confirmed_female=4)
        assert resolve_status(item, NOW) is AvailabilityStatus.WAIT

    def test_zero_capacity_for_both_is_wait(self):
        item = listing(capacity_male=Capacity(0), capacity_female=Capacity(0))
        assert resolve_status(item, NOW) is AvailabilityStatus.WAIT


class TestStatusPresentation:
    def test_labels(self):
        assert AvailabilityStatus.OPEN.label == "Available"
        assert AvailabilityStatus.WAIT.label == "Waitlist"
        assert AvailabilityStatus.CLOSED.label == "Sold Out"

    def test_only_closed_rejects_applications(self):
        assert AvailabilityStatus.OPEN.accepts_applications
        assert AvailabilityStatus.WAIT.accepts_applications
        assert not AvailabilityStatus.CLOSED.accepts_applications
