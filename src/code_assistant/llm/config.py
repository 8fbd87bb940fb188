"""Configuration model for chat providers.

Public API (the "studs"):
    LLMConfig: Configuration model for chat providers
    DEFAULT_MODELS: Default model identifier per provider
"""

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator, model_validator

from code_assistant.llm.exceptions import ConfigError

DEFAULT_MODELS: dict[str, str] = {
    "openai": "gpt-3.5-turbo",
    "anthropic": "claude-3-sonnet-20240229",
}

# provider -> env var holding its API key
_API_KEY_ENV: dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}

# Settings shared by every provider: config field -> env var
_SHARED_ENV_MAP: dict[str, str] = {
    "model": "DEFAULT_AI_MODEL",
    "max_tokens": "MAX_TOKENS",
    "temperature": "TEMPERATURE",
    "timeout_seconds": "LLM_TIMEOUT_SECONDS",
    "base_url": "LLM_BASE_URL",
}


def _default_provider() -> str:
    # OpenAI wins when its key is present, otherwise fall back to Anthropic.
    if os.environ.get("OPENAI_API_KEY"):
        return "openai"
    return "anthropic"


class LLMConfig(BaseModel):
    """Configuration model for chat providers.

    Attributes:
        provider: Provider name
        api_key: Vendor API key
        model: Default model identifier (provider default when omitted)
        max_tokens: Default maximum output length
        temperature: Default sampling temperature (not range-checked)
        timeout_seconds: Request timeout for the owned HTTP client
        base_url: Override for the vendor endpoint base
    """

    provider: Literal["openai", "anthropic"] = Field(..., description="Provider name")
    api_key: SecretStr = Field(..., description="API key")
    model: str | None = Field(None, description="Default model identifier")
    max_tokens: int = Field(500, ge=1, description="Default maximum tokens to generate")
    temperature: float = Field(0.7, description="Default sampling temperature")
    timeout_seconds: float = Field(120, gt=0, le=600, description="Request timeout in seconds")
    base_url: str | None = Field(None, description="Vendor API base URL override")

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: SecretStr) -> SecretStr:
        """Strip surrounding whitespace; reject blank keys and keys unfit for a header."""
        key = v.get_secret_value().strip()
        if not key:
            raise ValueError("api_key must not be empty")
        if not key.isascii() or not key.isprintable():
            raise ValueError("api_key must contain only printable ASCII characters")
        return SecretStr(key)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str | None) -> str | None:
        """Validate base_url starts with https://."""
        if v is not None and not v.startswith("https://"):
            raise ValueError(f"base_url must start with 'https://': {v!r}")
        return v.rstrip("/") if v else v

    @model_validator(mode="after")
    def apply_provider_defaults(self) -> "LLMConfig":
        """Fill in the provider's default model."""
        if not self.model:
            self.model = DEFAULT_MODELS[self.provider]
        return self

    @classmethod
    def from_env(cls, provider: str | None = None) -> "LLMConfig":
        """Create LLMConfig from environment variables.

        Args:
            provider: Provider override; takes precedence over LLM_PROVIDER

        Environment variables:
            LLM_PROVIDER: openai or anthropic (default: openai when
                OPENAI_API_KEY is set, anthropic otherwise)
            OPENAI_API_KEY: OpenAI API key
            ANTHROPIC_API_KEY: Anthropic API key
            DEFAULT_AI_MODEL: Model identifier
            MAX_TOKENS: Default maximum tokens
            TEMPERATURE: Default sampling temperature
            LLM_TIMEOUT_SECONDS: Request timeout
            LLM_BASE_URL: Vendor endpoint base override

        Returns:
            LLMConfig instance

        Raises:
            ConfigError: If provider is unknown, the key is missing or a
                value does not validate
        """
        provider = provider or os.environ.get("LLM_PROVIDER") or _default_provider()
        if provider not in _API_KEY_ENV:
            raise ConfigError(f"Unknown provider: {provider}")

        key_var = _API_KEY_ENV[provider]
        api_key = os.environ.get(key_var)
        if not api_key:
            raise ConfigError(
                f"{key_var} environment variable is required when LLM_PROVIDER={provider}"
            )

        kwargs: dict[str, Any] = {"provider": provider, "api_key": api_key}
        for field, env_var in _SHARED_ENV_MAP.items():
            value = os.environ.get(env_var)
            if value:
                kwargs[field] = value

        return cls._build(kwargs)

    @classmethod
    def from_file(cls, path: str | Path, provider: str | None = None) -> "LLMConfig":
        """Create LLMConfig from a JSON or YAML file.

        The file holds a mapping with the same keys as the model fields.
        ``provider`` and ``api_key`` may be left out, in which case they
        are resolved the same way ``from_env`` resolves them.

        Args:
            path: Config file path
            provider: Provider override; takes precedence over the file.
                When it differs from the file's provider, the file's
                ``model`` is ignored and the provider default applies.

        Raises:
            ConfigError: If the file cannot be read or does not validate
        """
        path = Path(path)
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot load config file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")

        kwargs: dict[str, Any] = dict(data)
        if provider:
            # A model written for another vendor is meaningless after a provider switch
            if kwargs.get("provider") not in (None, provider):
                kwargs.pop("model", None)
            kwargs["provider"] = provider
        provider = kwargs.setdefault(
            "provider", os.environ.get("LLM_PROVIDER") or _default_provider()
        )
        if "api_key" not in kwargs and provider in _API_KEY_ENV:
            api_key = os.environ.get(_API_KEY_ENV[provider])
            if not api_key:
                raise ConfigError(
                    f"api_key missing from {path} and {_API_KEY_ENV[provider]} is not set"
                )
            kwargs["api_key"] = api_key

        return cls._build(kwargs)

    @classmethod
    def _build(cls, kwargs: dict[str, Any]) -> "LLMConfig":
        try:
            return cls(**kwargs)
        except ValidationError as e:
            # include_input=False keeps raw values (the key among them) out of the message
            details = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
                for err in e.errors(include_input=False)
            )
            raise ConfigError(f"Invalid configuration: {details}") from None


__all__ = ["LLMConfig", "DEFAULT_MODELS"]
