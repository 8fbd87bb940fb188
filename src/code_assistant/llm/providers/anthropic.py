"""Anthropic Claude provider implementation.

Public API (the "studs"):
    AnthropicProvider: Anthropic Messages API provider implementation
"""

from typing import Any

from code_assistant.llm.exceptions import ParseError
from code_assistant.llm.providers.base import BaseChatProvider
from code_assistant.llm.types import CompletionRequest

ANTHROPIC_VERSION = "2023-06-01"

# The Messages API rejects requests without max_tokens
DEFAULT_MAX_TOKENS = 500


class AnthropicProvider(BaseChatProvider):
    """Anthropic Claude provider implementation.

    Supports Claude models via the Messages API. Persona instructions are
    folded into the user turn rather than sent as a system message.
    """

    name = "anthropic"
    default_base_url = "https://api.anthropic.com/v1"
    path = "/messages"
    supports_system_role = False

    def build_payload(self, request: CompletionRequest) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": request.model,
            "max_tokens": (
                request.max_tokens if request.max_tokens is not None else DEFAULT_MAX_TOKENS
            ),
            "messages": [msg.to_wire() for msg in request.messages],
        }
        if request.temperature is not None:
            payload["temperature"] = request.temperature
        return payload

    def build_headers(self) -> dict[str, str]:
        return {
            "x-api-key": self._api_key.get_secret_value(),
            "anthropic-version": ANTHROPIC_VERSION,
            "Content-Type": "application/json",
        }

    def extract_text(self, data: Any) -> str:
        # Anthropic returns: content: [{type: "text", text: "..."}, ...]
        blocks = data.get("content") if isinstance(data, dict) else None
        if not isinstance(blocks, list):
            raise ParseError(f"anthropic response has no content array: {self._fragment(data)}")

        block = next(
            (b for b in blocks if isinstance(b, dict) and b.get("type") == "text"),
            None,
        )
        if block is None:
            raise ParseError("No text response from Claude")

        text = block.get("text")
        if not isinstance(text, str):
            raise ParseError(f"anthropic text block has no text: {self._fragment(block)}")
        return text


__all__ = ["AnthropicProvider", "ANTHROPIC_VERSION", "DEFAULT_MAX_TOKENS"]
