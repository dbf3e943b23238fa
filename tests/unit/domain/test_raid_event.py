"""Unit tests for the RaidEvent lifecycle"""

import pytest

from src.domain.dkp_account import DkpAccount
from src.domain.raid_event import EventStatus, RaidEvent


def _event(**kwargs) -> RaidEvent:
    return RaidEvent(id=1, name="Sky Night", created_by="officer_1", **kwargs)


class TestRaidEventLifecycle:
    def test_new_event_is_active(self):
        event = _event()

        assert event.status == EventStatus.ACTIVE
        assert event.is_active
        assert event.closed_at is None

    def test_close_then_reopen(self):
        event = _event()

        event.close()
        assert event.status == EventStatus.CLOSED
        assert event.closed_at is not None

        event.reopen()
        assert event.status == EventStatus.ACTIVE
        assert event.closed_at is None

    def test_close_twice_is_rejected(self):
        event = _event(status=EventStatus.CLOSED)

        with pytest.raises(ValueError):
            event.close()

    def test_reopen_active_is_rejected(self):
        with pytest.raises(ValueError):
            _event().reopen()

    def test_transition_to_same_status_is_invalid(self):
        event = _event()

        assert not event.can_transition_to(EventStatus.ACTIVE)
        assert event.can_transition_to(EventStatus.CLOSED)


class TestTimestamps:
    def test_event_timestamps_are_utc_aware(self):
        event = _event()
        event.close()

        assert event.created_at.tzinfo is not None
        assert event.closed_at.utcoffset().total_seconds() == 0

    def test_account_timestamps_are_utc_aware(self):
        account = DkpAccount(account_id="acct-a")

        assert account.created_at.tzinfo is not None
        assert account.updated_at.tzinfo is not None
