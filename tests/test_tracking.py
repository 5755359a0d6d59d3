"""Unit tests for the tracking reducer."""

from datetime import date

import pytest

from opportunity_finder.models import TrackingField, TrackingState
from opportunity_finder.tracking import TrackingAction, apply_tracking, format_date


def _today() -> date:
    return date(2026, 3, 5)


def _apply(state: TrackingState, field: TrackingField, value: bool) -> TrackingState:
    return apply_tracking(state, TrackingAction(field=field, value=value), today=_today)


class TestFormatDate:
    """Tests for format_date."""

    def test_short_spanish_format_without_padding(self) -> None:
        assert format_date(date(2026, 3, 5)) == "5/3/2026"
        assert format_date(date(2026, 11, 23)) == "23/11/2026"


class TestApplyTracking:
    """Tests for apply_tracking."""

    def test_email_sent_stamps_date(self) -> None:
        state = _apply(TrackingState(), TrackingField.EMAIL_SENT, True)
        assert state.email_sent is True
        assert state.email_sent_date == "5/3/2026"

    def test_email_unsent_clears_date(self) -> None:
        state = _apply(TrackingState(), TrackingField.EMAIL_SENT, True)
        state = _apply(state, TrackingField.EMAIL_SENT, False)
        assert state.email_sent is False
        assert state.email_sent_date is None

    def test_email_unsent_cascades_to_response(self) -> None:
        """Unsetting emailSent always clears the response, whatever the prior state."""
        state = TrackingState(
            email_sent=True,
            email_sent_date="1/3/2026",
            response_received=True,
            response_received_date="2/3/2026",
            in_production=True,
        )
        state = _apply(state, TrackingField.EMAIL_SENT, False)
        assert state.response_received is False
        assert state.response_received_date is None
        assert state.in_production is True

    def test_email_unsent_on_inconsistent_state(self) -> None:
        """Cascade also repairs a response recorded without an email."""
        state = TrackingState(response_received=True, response_received_date="2/3/2026")
        state = _apply(state, TrackingField.EMAIL_SENT, False)
        assert state.response_received is False
        assert state.response_received_date is None

    def test_setting_twice_is_idempotent(self) -> None:
        once = _apply(TrackingState(), TrackingField.EMAIL_SENT, True)
        twice = _apply(once, TrackingField.EMAIL_SENT, True)
        assert twice == once

    def test_reset_keeps_original_stamp(self) -> None:
        """Re-setting an already-set flag does not restamp its date."""
        state = TrackingState(email_sent=True, email_sent_date="1/1/2026")
        state = _apply(state, TrackingField.EMAIL_SENT, True)
        assert state.email_sent_date == "1/1/2026"

    def test_response_received_stamps_and_clears(self) -> None:
        state = _apply(TrackingState(email_sent=True, email_sent_date="5/3/2026"), TrackingField.RESPONSE_RECEIVED, True)
        assert state.response_received_date == "5/3/2026"
        state = _apply(state, TrackingField.RESPONSE_RECEIVED, False)
        assert state.response_received is False
        assert state.response_received_date is None
        assert state.email_sent is True

    def test_response_without_email_not_guarded(self) -> None:
        """The reducer does not block responseReceived when emailSent is false."""
        state = _apply(TrackingState(), TrackingField.RESPONSE_RECEIVED, True)
        assert state.response_received is True
        assert state.email_sent is False

    @pytest.mark.parametrize("value", [True, False])
    def test_in_production_has_no_side_effects(self, value: bool) -> None:
        before = TrackingState(email_sent=True, email_sent_date="1/3/2026")
        after = _apply(before, TrackingField.IN_PRODUCTION, value)
        assert after.in_production is value
        assert after.model_copy(update={"in_production": before.in_production}) == before

    def test_input_state_unchanged(self) -> None:
        """apply_tracking returns a new state."""
        before = TrackingState()
        _apply(before, TrackingField.EMAIL_SENT, True)
        assert before == TrackingState()
