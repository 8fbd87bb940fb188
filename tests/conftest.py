"""Shared test fixtures."""

import pytest

_LLM_ENV_VARS = (
    "LLM_PROVIDER",
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
    "DEFAULT_AI_MODEL",
    "MAX_TOKENS",
    "TEMPERATURE",
    "LLM_TIMEOUT_SECONDS",
    "LLM_BASE_URL",
)


@pytest.fixture(autouse=True)
def _clean_llm_env(monkeypatch):
    """Keep the developer's real provider settings out of every test."""
    for var in _LLM_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield
