"""Data models for generated opportunities and tracking."""

from opportunity_finder.models.opportunity import (
    AcceptanceProbability,
    OpportunityRecord,
    ProposalEmail,
    Rating,
)
from opportunity_finder.models.tracking import (
    TrackedOpportunity,
    TrackingField,
    TrackingState,
)

__all__ = [
    "AcceptanceProbability",
    "OpportunityRecord",
    "ProposalEmail",
    "Rating",
    "TrackedOpportunity",
    "TrackingField",
    "TrackingState",
]
