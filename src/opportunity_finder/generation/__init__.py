"""Schema-constrained opportunity generation."""

from .backends import BackendRegistry, GeminiBackend, GenerationBackend, OpenAIBackend
from .client import GenerationClient
from .parsing import parse_opportunities
from .prompt import build_prompt
from .schema import OPPORTUNITY_LIST_SCHEMA, OPPORTUNITY_SCHEMA

__all__ = [
    "BackendRegistry",
    "GeminiBackend",
    "GenerationBackend",
    "GenerationClient",
    "OPPORTUNITY_LIST_SCHEMA",
    "OPPORTUNITY_SCHEMA",
    "OpenAIBackend",
    "build_prompt",
    "parse_opportunities",
]
