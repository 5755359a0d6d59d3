"""Per-opportunity outreach tracking state."""

from enum import Enum
from typing import Optional

from pydantic import Field

from opportunity_finder.models.opportunity import OpportunityRecord, CamelModel


class TrackingField(str, Enum):
    """Boolean tracking flags the user can toggle."""

    EMAIL_SENT = "emailSent"
    RESPONSE_RECEIVED = "responseReceived"
    IN_PRODUCTION = "inProduction"


class TrackingState(CamelModel):
    """Manual outreach progress. Dates are set iff the matching flag is true."""

    email_sent: bool = Field(default=False, alias="emailSent")
    email_sent_date: Optional[str] = Field(default=None, alias="emailSentDate")
    response_received: bool = Field(default=False, alias="responseReceived")
    response_received_date: Optional[str] = Field(default=None, alias="responseReceivedDate")
    in_production: bool = Field(default=False, alias="inProduction")


class TrackedOpportunity(OpportunityRecord):
    """OpportunityRecord plus the user's tracking state."""

    tracking: TrackingState = Field(default_factory=TrackingState)

    @classmethod
    def from_record(cls, record: OpportunityRecord) -> "TrackedOpportunity":
        """Wrap a freshly generated record with zeroed tracking."""
        return cls.model_validate({**record.model_dump(), "tracking": TrackingState()})
