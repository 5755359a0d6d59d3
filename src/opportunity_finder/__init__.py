"""Generate AI business opportunities for an industry and country, and track outreach."""

from opportunity_finder.config import Settings
from opportunity_finder.errors import (
    ConfigurationError,
    GenerationFailure,
    MalformedRecord,
    OpportunityFinderError,
    ValidationError,
)
from opportunity_finder.generation import GenerationClient
from opportunity_finder.session import SessionViewModel, Status

__all__ = [
    "ConfigurationError",
    "GenerationClient",
    "GenerationFailure",
    "MalformedRecord",
    "OpportunityFinderError",
    "SessionViewModel",
    "Settings",
    "Status",
    "ValidationError",
]
