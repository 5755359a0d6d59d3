"""Exception hierarchy for opportunity generation and session handling."""

from typing import Any, Optional

GENERIC_GENERATION_MESSAGE = (
    "No se pudieron obtener y analizar las oportunidades de negocio de la IA."
)


class OpportunityFinderError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(OpportunityFinderError):
    """Missing credential or invalid settings. Fatal at startup."""


class ValidationError(OpportunityFinderError):
    """User input rejected before any generation call (e.g. empty country)."""


class GenerationFailure(OpportunityFinderError):
    """
    The generation request failed: provider/network error, timeout,
    unparsable reply, or an empty/non-array result.
    The message is safe to show to the user; details live in __cause__.
    """

    def __init__(self, message: str = GENERIC_GENERATION_MESSAGE):
        super().__init__(message)


class MalformedRecord(GenerationFailure):
    """A returned record failed local schema validation."""

    def __init__(
        self,
        index: int,
        errors: Optional[list[dict[str, Any]]] = None,
        message: str = GENERIC_GENERATION_MESSAGE,
    ):
        super().__init__(message)
        self.index = index
        self.errors = errors or []

    def failing_fields(self) -> list[str]:
        """Dotted field paths that failed validation, e.g. 'acceptanceProbability.rating'."""
        return [".".join(str(p) for p in err.get("loc", ())) for err in self.errors]
