"""Multi-provider chat-completion layer.

This module provides a unified interface for two chat-completion vendors:
- OpenAI chat completions
- Anthropic Claude messages

Public API (the "studs"):
    create_chat_provider: Factory function to create provider instances
    LLMConfig: Configuration model for chat providers
    Message: Message type for conversations
    Role: Message role enum
    CompletionRequest: Resolved request handed to an adapter
    BaseChatProvider: Abstract base class for providers

Example:
    >>> from code_assistant.llm import create_chat_provider, LLMConfig, Message
    >>>
    >>> config = LLMConfig(provider="openai", api_key="sk-...")
    >>> async with create_chat_provider(config) as provider:
    ...     text = await provider.complete([Message(role="user", content="Hello!")])
    >>> print(text)
"""

from code_assistant.llm.config import LLMConfig
from code_assistant.llm.exceptions import (
    ApiError,
    ConfigError,
    LLMError,
    NetworkError,
    ParseError,
)
from code_assistant.llm.factory import create_chat_provider
from code_assistant.llm.providers.base import BaseChatProvider
from code_assistant.llm.types import CompletionRequest, Message, Role

__all__ = [
    # Factory
    "create_chat_provider",
    # Config
    "LLMConfig",
    # Types
    "Message",
    "Role",
    "CompletionRequest",
    # Base class
    "BaseChatProvider",
    # Exceptions
    "LLMError",
    "NetworkError",
    "ApiError",
    "ParseError",
    "ConfigError",
]
