"""OpenAI chat-completions provider implementation.

Public API (the "studs"):
    OpenAIProvider: OpenAI chat-completions provider implementation
"""

from typing import Any

from code_assistant.llm.exceptions import ParseError
from code_assistant.llm.providers.base import BaseChatProvider
from code_assistant.llm.types import CompletionRequest


class OpenAIProvider(BaseChatProvider):
    """OpenAI chat-completions provider implementation.

    Also works against any OpenAI-compatible gateway when ``base_url`` is
    set in the config.
    """

    name = "openai"
    default_base_url = "https://api.openai.com/v1"
    path = "/chat/completions"
    supports_system_role = True

    def build_payload(self, request: CompletionRequest) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": request.model,
            "messages": [msg.to_wire() for msg in request.messages],
        }
        if request.max_tokens is not None:
            payload["max_tokens"] = request.max_tokens
        if request.temperature is not None:
            payload["temperature"] = request.temperature
        return payload

    def build_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key.get_secret_value()}",
            "Content-Type": "application/json",
        }

    def extract_text(self, data: Any) -> str:
        # choices[0].message.content
        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list):
            raise ParseError(f"openai response has no choices array: {self._fragment(data)}")
        if not choices:
            raise ParseError("No response from OpenAI: choices is empty")

        first = choices[0]
        message = first.get("message") if isinstance(first, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str):
            raise ParseError(f"openai choice has no message content: {self._fragment(first)}")
        return content


__all__ = ["OpenAIProvider"]
