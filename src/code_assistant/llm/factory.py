"""Factory function for creating chat providers.

Public API (the "studs"):
    create_chat_provider: Factory function to create provider instances
"""

import httpx

from code_assistant.llm.config import LLMConfig
from code_assistant.llm.providers.base import BaseChatProvider


def create_chat_provider(
    config: LLMConfig, client: httpx.AsyncClient | None = None
) -> BaseChatProvider:
    """Create a chat provider based on configuration.

    Args:
        config: LLMConfig specifying provider and settings
        client: Optional HTTP client to share; the caller keeps ownership

    Returns:
        BaseChatProvider: Configured provider instance

    Raises:
        ValueError: If provider is unknown

    Example:
        >>> config = LLMConfig(provider="anthropic", api_key="sk-...")
        >>> provider = create_chat_provider(config)
        >>> text = await provider.complete([Message(role="user", content="Hello")])
    """
    if config.provider == "openai":
        from code_assistant.llm.providers.openai import OpenAIProvider

        return OpenAIProvider(config, client)
    elif config.provider == "anthropic":
        from code_assistant.llm.providers.anthropic import AnthropicProvider

        return AnthropicProvider(config, client)
    else:
        raise ValueError(f"Unknown provider: {config.provider}")


__all__ = ["create_chat_provider"]
