"""Programming-help facade over a chat provider.

Public API (the "studs"):
    Assistant: Builds explain/debug/generate prompts and delegates to a provider
"""

from typing import Any

import httpx

from code_assistant import prompts
from code_assistant.llm.config import LLMConfig
from code_assistant.llm.factory import create_chat_provider
from code_assistant.llm.providers.base import BaseChatProvider
from code_assistant.llm.types import Message


class Assistant:
    """Programming-help facade over a single chat provider.

    The provider is fixed at construction. Every operation is one
    stateless request; errors from the provider reach the caller as-is.

    Args:
        provider: Provider that answers every request
        language: Programming language the prompts are written for
    """

    def __init__(self, provider: BaseChatProvider, language: str = "Rust") -> None:
        self._provider = provider
        self._language = language

    @classmethod
    def from_config(
        cls,
        config: LLMConfig,
        *,
        client: httpx.AsyncClient | None = None,
        language: str = "Rust",
    ) -> "Assistant":
        """Create an assistant backed by the provider ``config`` selects."""
        return cls(create_chat_provider(config, client), language=language)

    @property
    def provider(self) -> BaseChatProvider:
        return self._provider

    @property
    def language(self) -> str:
        return self._language

    def build_explain_messages(self, topic: str) -> list[Message]:
        return prompts.EXPLAIN.render(
            supports_system_role=self._provider.supports_system_role,
            language=self._language,
            topic=topic,
        )

    def build_debug_messages(self, code: str, error: str) -> list[Message]:
        return prompts.DEBUG.render(
            supports_system_role=self._provider.supports_system_role,
            language=self._language,
            fence=self._language.lower(),
            code=code,
            error=error,
        )

    def build_generate_messages(self, description: str) -> list[Message]:
        return prompts.GENERATE.render(
            supports_system_role=self._provider.supports_system_role,
            language=self._language,
            description=description,
        )

    async def explain(self, topic: str) -> str:
        """Ask for a clear explanation of a programming concept."""
        return await self._provider.complete(self.build_explain_messages(topic))

    async def debug_code(self, code: str, error: str) -> str:
        """Ask for an explanation of ``error`` in ``code`` and a fix."""
        return await self._provider.complete(self.build_debug_messages(code, error))

    async def generate_code(self, description: str) -> str:
        """Ask for commented, idiomatic code meeting ``description``."""
        return await self._provider.complete(self.build_generate_messages(description))

    async def aclose(self) -> None:
        await self._provider.aclose()

    async def __aenter__(self) -> "Assistant":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


__all__ = ["Assistant"]
