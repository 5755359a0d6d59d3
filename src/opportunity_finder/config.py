"""Settings for the generation client: provider, credential, sampling."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Literal, Optional

try:
    import yaml
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "PyYAML is required for settings loading. Run: poetry install"
    ) from e
from pydantic import BaseModel, Field, SecretStr
from pydantic import ValidationError as PydanticValidationError

from opportunity_finder.errors import ConfigurationError

Provider = Literal["gemini", "openai"]

DEFAULT_RESULT_COUNT = 10
DEFAULT_SENDER_NAME = "Moris Polanco, CEO"
DEFAULT_SENDER_URL = "https://soluciones-a-la-medida.base44.app/"

PROVIDER_ENV = "OPPORTUNITY_FINDER_LLM_PROVIDER"
MODEL_ENV = "OPPORTUNITY_FINDER_LLM_MODEL"

# Credential lookup order per provider; API_KEY is the legacy variable name
_API_KEY_ENVS: dict[str, tuple[str, ...]] = {
    "gemini": ("GEMINI_API_KEY", "API_KEY"),
    "openai": ("OPENAI_API_KEY",),
}

DEFAULT_MODELS: dict[str, str] = {
    "gemini": "gemini-2.5-flash",
    "openai": "gpt-4o-mini",
}


class Settings(BaseModel):
    """Process-wide configuration, read once at startup and injected."""

    provider: Provider = "gemini"
    api_key: SecretStr
    model: Optional[str] = Field(default=None, description="Defaults per provider")
    temperature: float = Field(default=0.8, ge=0, le=2)
    timeout_seconds: float = Field(default=60.0, gt=0)
    result_count: int = Field(default=DEFAULT_RESULT_COUNT, ge=1)

    sender_name: str = DEFAULT_SENDER_NAME
    sender_url: str = DEFAULT_SENDER_URL

    @property
    def model_name(self) -> str:
        return self.model or DEFAULT_MODELS[self.provider]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "Settings":
        """
        Build settings from environment variables.
        Raises ConfigurationError when the provider's API key is missing.
        """
        env = os.environ if environ is None else environ
        provider = str(overrides.pop("provider", None) or env.get(PROVIDER_ENV) or "gemini").lower()
        if provider not in _API_KEY_ENVS:
            raise ConfigurationError(
                f"Unknown LLM provider: {provider}. Available: {list(_API_KEY_ENVS)}"
            )

        data: dict = {"provider": provider}
        api_key = overrides.pop("api_key", None) or _api_key_from_env(provider, env)
        if not api_key:
            names = " or ".join(_API_KEY_ENVS[provider])
            raise ConfigurationError(f"{names} environment variable not set")
        data["api_key"] = api_key
        if env.get(MODEL_ENV):
            data["model"] = env[MODEL_ENV]
        data.update({k: v for k, v in overrides.items() if v is not None})
        return _validate(data)

    @classmethod
    def from_yaml(cls, path: str | Path, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Load settings from YAML. Supports nested (llm/proposal) or flat structure.
        The API key falls back to the environment when the file omits it.
        """
        try:
            data = yaml.safe_load(Path(path).read_text()) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigurationError(f"Cannot read settings file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigurationError(f"Settings file {path} must contain a mapping")
        llm = data.get("llm") or {}
        proposal = data.get("proposal") or {}
        if not isinstance(llm, dict) or not isinstance(proposal, dict):
            raise ConfigurationError(f"Settings file {path}: llm and proposal must be mappings")

        def _get(key: str, nested: dict, top: dict, default=None):
            return nested.get(key, top.get(key, default))

        flat: dict = {}
        for key in ("provider", "api_key", "model", "temperature", "timeout_seconds", "result_count"):
            flat[key] = _get(key, llm, data)
        flat["sender_name"] = _get("sender_name", proposal, data)
        flat["sender_url"] = _get("sender_url", proposal, data)
        return cls.from_env(environ, **flat)


def _api_key_from_env(provider: str, env: Mapping[str, str]) -> Optional[str]:
    for name in _API_KEY_ENVS[provider]:
        value = (env.get(name) or "").strip()
        if value:
            return value
    return None


def _validate(data: dict) -> Settings:
    try:
        return Settings.model_validate(data)
    except PydanticValidationError as exc:
        raise ConfigurationError(f"Invalid settings: {exc}") from exc
