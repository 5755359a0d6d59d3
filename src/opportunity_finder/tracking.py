"""Tracking transitions expressed as a pure reducer."""

from datetime import date
from typing import Callable

from pydantic import BaseModel, ConfigDict

from opportunity_finder.models.tracking import TrackingField, TrackingState

Clock = Callable[[], date]


class TrackingAction(BaseModel):
    """Set one tracking flag to value."""

    model_config = ConfigDict(frozen=True)

    field: TrackingField
    value: bool


def format_date(day: date) -> str:
    """Short es-ES date (D/M/YYYY, no zero padding), as the browser locale renders it."""
    return f"{day.day}/{day.month}/{day.year}"


def _stamp(already_set: bool, current: str | None, today: Clock) -> str:
    # Re-setting a flag that is already on keeps its original date
    if already_set and current:
        return current
    return format_date(today())


def apply_tracking(
    state: TrackingState,
    action: TrackingAction,
    *,
    today: Clock = date.today,
) -> TrackingState:
    """
    Return the state after action. Rules:
    - emailSent: stamp/clear emailSentDate; unsetting also clears the response.
    - responseReceived: stamp/clear responseReceivedDate.
    - inProduction: flag only.
    """
    value = action.value
    if action.field is TrackingField.EMAIL_SENT:
        updates: dict = {
            "email_sent": value,
            "email_sent_date": (
                _stamp(state.email_sent, state.email_sent_date, today) if value else None
            ),
        }
        if not value:
            updates["response_received"] = False
            updates["response_received_date"] = None
    elif action.field is TrackingField.RESPONSE_RECEIVED:
        updates = {
            "response_received": value,
            "response_received_date": (
                _stamp(state.response_received, state.response_received_date, today)
                if value
                else None
            ),
        }
    else:
        updates = {"in_production": value}
    return state.model_copy(update=updates)
