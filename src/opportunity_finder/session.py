"""Session view model: query, status, tracked results and their mutations.

Presentation is a pure function of this state. The view model runs on one
asyncio loop with at most one generation in flight; callers disable
re-submission while is_busy.
"""

import asyncio
import logging
from datetime import date
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel

from opportunity_finder.errors import GenerationFailure, ValidationError
from opportunity_finder.generation.client import GenerationClient
from opportunity_finder.models.tracking import TrackedOpportunity, TrackingField
from opportunity_finder.tracking import Clock, TrackingAction, apply_tracking

logger = logging.getLogger(__name__)

MISSING_INPUT_MESSAGE = "Por favor, proporciona tanto una industria como un país."
UNKNOWN_ERROR_MESSAGE = "Ocurrió un error desconocido."


class Status(str, Enum):
    """Lifecycle of the current generation request."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class QueryInputs(BaseModel):
    """Industry and country as typed by the user."""

    industry: str = ""
    country: str = ""

    def validated(self) -> "QueryInputs":
        """Trimmed copy; raises ValidationError if either field is blank."""
        industry = self.industry.strip()
        country = self.country.strip()
        if not industry or not country:
            raise ValidationError(MISSING_INPUT_MESSAGE)
        return QueryInputs(industry=industry, country=country)


class SessionViewModel:
    """In-memory state for one user session."""

    def __init__(self, client: GenerationClient, *, today: Clock = date.today):
        self.client = client
        self._today = today
        self.query = QueryInputs()
        self.status = Status.IDLE
        self.opportunities: list[TrackedOpportunity] = []
        self.error_message: Optional[str] = None

    @property
    def is_busy(self) -> bool:
        """True while a generation is in flight; re-submission should be disabled."""
        return self.status is Status.LOADING

    async def submit(self, industry: str, country: str) -> Status:
        """
        Validate inputs, run one generation and replace the result set.
        Every failure ends in Status.ERROR with a user-facing message.
        Cancellation returns to Status.IDLE and propagates.
        """
        self.query = QueryInputs(industry=industry, country=country)
        try:
            query = self.query.validated()
        except ValidationError as exc:
            self._fail(str(exc))
            return self.status

        self.query = query
        self.status = Status.LOADING
        self.opportunities = []
        self.error_message = None

        try:
            records = await self.client.generate(query.industry, query.country)
        except asyncio.CancelledError:
            self.status = Status.IDLE
            raise
        except GenerationFailure as exc:
            self._fail(str(exc) or UNKNOWN_ERROR_MESSAGE)
            return self.status
        except Exception as exc:
            logger.warning("Generation failed for %r/%r: %s", query.industry, query.country, exc)
            self._fail(str(exc) or UNKNOWN_ERROR_MESSAGE)
            return self.status

        self.opportunities = [TrackedOpportunity.from_record(r) for r in records]
        self.status = Status.SUCCESS
        return self.status

    def set_tracking(
        self,
        index: int,
        field: Union[TrackingField, str],
        value: bool,
    ) -> TrackedOpportunity:
        """
        Set one tracking flag on the opportunity at index and return the
        updated opportunity. The list is rebuilt with only that element
        replaced. Raises IndexError for an out-of-range index.
        """
        if not 0 <= index < len(self.opportunities):
            raise IndexError(f"No opportunity at index {index} (have {len(self.opportunities)})")
        opp = self.opportunities[index]
        action = TrackingAction(field=TrackingField(field), value=value)
        updated = opp.model_copy(
            update={"tracking": apply_tracking(opp.tracking, action, today=self._today)}
        )
        self.opportunities = [
            updated if i == index else o for i, o in enumerate(self.opportunities)
        ]
        return updated

    def _fail(self, message: str) -> None:
        self.error_message = message
        self.status = Status.ERROR
