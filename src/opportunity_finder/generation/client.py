"""Generation client: prompt + schema in, validated opportunity records out."""

import asyncio
import logging

from opportunity_finder.config import (
    DEFAULT_RESULT_COUNT,
    DEFAULT_SENDER_NAME,
    DEFAULT_SENDER_URL,
    Settings,
)
from opportunity_finder.errors import GenerationFailure
from opportunity_finder.models.opportunity import OpportunityRecord

from .backends import BackendRegistry, GenerationBackend
from .parsing import parse_opportunities
from .prompt import build_prompt

logger = logging.getLogger(__name__)


class GenerationClient:
    """
    Single-shot opportunity generation against one backend.
    No retries: any failure surfaces as one GenerationFailure.
    Cancelling the awaiting task cancels the outbound call.
    """

    def __init__(
        self,
        backend: GenerationBackend,
        *,
        temperature: float = 0.8,
        timeout_seconds: float = 60.0,
        result_count: int = DEFAULT_RESULT_COUNT,
        sender_name: str = DEFAULT_SENDER_NAME,
        sender_url: str = DEFAULT_SENDER_URL,
    ):
        self.backend = backend
        self.temperature = temperature
        self.timeout_seconds = timeout_seconds
        self.result_count = result_count
        self.sender_name = sender_name
        self.sender_url = sender_url

    @classmethod
    def from_settings(cls, settings: Settings) -> "GenerationClient":
        """Build the client and its backend from injected settings."""
        return cls(
            BackendRegistry.from_settings(settings),
            temperature=settings.temperature,
            timeout_seconds=settings.timeout_seconds,
            result_count=settings.result_count,
            sender_name=settings.sender_name,
            sender_url=settings.sender_url,
        )

    async def generate(self, industry: str, country: str) -> list[OpportunityRecord]:
        """Generate opportunities for industry in country, in model order."""
        prompt = build_prompt(
            industry,
            country,
            count=self.result_count,
            sender_name=self.sender_name,
            sender_url=self.sender_url,
        )
        logger.info(
            "Generating %d opportunities for %r in %r with %s/%s",
            self.result_count,
            industry,
            country,
            self.backend.name,
            self.backend.model,
        )
        try:
            text = await asyncio.wait_for(
                self.backend.complete(prompt, temperature=self.temperature),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            logger.warning("Generation timed out after %.1fs", self.timeout_seconds)
            raise GenerationFailure() from exc
        except GenerationFailure:
            logger.exception("Error generating opportunities")
            raise
        except Exception as exc:
            logger.exception("Error generating opportunities")
            raise GenerationFailure() from exc

        records = parse_opportunities(text)
        if len(records) != self.result_count:
            logger.warning(
                "Model returned %d opportunities, expected %d", len(records), self.result_count
            )
        logger.info("Generated %d opportunities", len(records))
        return records
