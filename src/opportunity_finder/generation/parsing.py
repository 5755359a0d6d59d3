"""Parse and validate the model's raw reply into OpportunityRecords."""

import json
import logging
import re

from pydantic import ValidationError as PydanticValidationError

from opportunity_finder.errors import GenerationFailure, MalformedRecord
from opportunity_finder.models.opportunity import OpportunityRecord

from .schema import ENVELOPE_KEY

logger = logging.getLogger(__name__)

# Models sometimes wrap JSON in a markdown fence despite instructions
_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


def parse_opportunities(text: str) -> list[OpportunityRecord]:
    """
    Parse a reply expected to be one JSON array of opportunity objects.
    Also accepts {"opportunities": [...]} (OpenAI strict-mode envelope).
    Raises GenerationFailure on unparsable, non-array or empty replies and
    MalformedRecord on the first element that fails validation.
    """
    cleaned = (text or "").strip()
    match = _FENCE_RE.match(cleaned)
    if match:
        cleaned = match.group(1)

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        logger.warning("Model reply is not valid JSON: %s", cleaned[:200])
        raise GenerationFailure() from exc

    if isinstance(data, dict) and list(data) == [ENVELOPE_KEY]:
        data = data[ENVELOPE_KEY]

    if not isinstance(data, list) or not data:
        logger.warning("Model reply is empty or not an array: %s", type(data).__name__)
        raise GenerationFailure()

    records: list[OpportunityRecord] = []
    for index, item in enumerate(data):
        try:
            records.append(OpportunityRecord.model_validate(item))
        except PydanticValidationError as exc:
            failure = MalformedRecord(index, exc.errors(include_url=False))
            logger.warning(
                "Record %d failed validation: %s", index, ", ".join(failure.failing_fields())
            )
            raise failure from exc
    return records
