"""Provider backends: one outbound structured-output call each.

Backends return the raw reply text. Provider and network errors are wrapped
in GenerationFailure with the original exception chained.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Type

import httpx
import openai
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from opportunity_finder.config import Settings
from opportunity_finder.errors import ConfigurationError, GenerationFailure

from .schema import to_gemini_schema, to_openai_schema


class GenerationBackend(ABC):
    """Standard interface for a hosted generative model."""

    name: str = ""

    def __init__(self, model: str):
        self.model = model

    @abstractmethod
    async def complete(self, prompt: str, *, temperature: float) -> str:
        """Send the prompt with the opportunity schema; return the reply text."""
        pass


class GeminiBackend(GenerationBackend):
    """Google Gemini through google-genai, schema-constrained JSON output."""

    name = "gemini"

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        *,
        timeout_seconds: float = 60.0,
        client: Optional[genai.Client] = None,
    ):
        super().__init__(model)
        self._client = client or genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=int(timeout_seconds * 1000)),
        )
        self._schema = to_gemini_schema()

    async def complete(self, prompt: str, *, temperature: float) -> str:
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=self._schema,
                    temperature=temperature,
                ),
            )
        except (genai_errors.APIError, httpx.HTTPError) as exc:
            raise GenerationFailure() from exc
        return response.text or ""


class OpenAIBackend(GenerationBackend):
    """OpenAI chat completions with a strict json_schema response format."""

    name = "openai"
    SCHEMA_NAME = "business_opportunities"

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        *,
        timeout_seconds: float = 60.0,
        client: Optional[openai.AsyncOpenAI] = None,
    ):
        super().__init__(model)
        self._client = client or openai.AsyncOpenAI(api_key=api_key, timeout=timeout_seconds)
        self._response_format: dict[str, Any] = {
            "type": "json_schema",
            "json_schema": {
                "name": self.SCHEMA_NAME,
                "schema": to_openai_schema(),
                "strict": True,
            },
        }

    async def complete(self, prompt: str, *, temperature: float) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=temperature,
                response_format=self._response_format,
            )
        except openai.OpenAIError as exc:
            raise GenerationFailure() from exc
        return response.choices[0].message.content or ""


class BackendRegistry:
    """Provides generation backends by provider name."""

    _backends: dict[str, Type[GenerationBackend]] = {
        "gemini": GeminiBackend,
        "openai": OpenAIBackend,
    }

    @classmethod
    def get(cls, provider: str, **kwargs) -> GenerationBackend:
        """Get a backend instance. kwargs passed to backend __init__."""
        backend_cls = cls._backends.get(provider.lower())
        if not backend_cls:
            raise ConfigurationError(
                f"Unknown LLM provider: {provider}. Available: {list(cls._backends.keys())}"
            )
        return backend_cls(**kwargs)

    @classmethod
    def from_settings(cls, settings: Settings) -> GenerationBackend:
        return cls.get(
            settings.provider,
            api_key=settings.api_key.get_secret_value(),
            model=settings.model_name,
            timeout_seconds=settings.timeout_seconds,
        )

    @classmethod
    def available_providers(cls) -> list[str]:
        return list(cls._backends.keys())
