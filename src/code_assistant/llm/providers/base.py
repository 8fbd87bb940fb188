"""Abstract base class for chat providers.

Public API (the "studs"):
    BaseChatProvider: Abstract base class for chat providers
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

import httpx

from code_assistant.llm.config import LLMConfig
from code_assistant.llm.exceptions import ApiError, NetworkError, ParseError
from code_assistant.llm.types import CompletionRequest, Message

_logger = logging.getLogger(__name__)

# Longest slice of a response body quoted back in a ParseError
_FRAGMENT_LIMIT = 200


class BaseChatProvider(ABC):
    """Abstract base class for chat providers.

    A provider is bound to one vendor and one API key at construction and
    holds no per-call state, so concurrent ``complete`` calls against a
    single instance are safe. Subclasses describe the vendor wire format
    through ``build_payload``, ``build_headers`` and ``extract_text``;
    the request/response cycle itself lives here.

    Args:
        config: Resolved provider configuration
        client: Optional HTTP client. When given, the caller owns it and
            ``aclose`` leaves it open.
    """

    name: str = ""
    default_base_url: str = ""
    path: str = ""
    # Whether the vendor integration takes persona instructions as a
    # separate system message.
    supports_system_role: bool = True

    def __init__(self, config: LLMConfig, client: httpx.AsyncClient | None = None) -> None:
        self._api_key = config.api_key
        self._model: str = config.model or ""
        self._max_tokens = config.max_tokens
        self._temperature = config.temperature
        self._endpoint = f"{config.base_url or self.default_base_url}{self.path}"
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=config.timeout_seconds)

    @property
    def model(self) -> str:
        return self._model

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self._model!r}, endpoint={self._endpoint!r})"

    def build_request(
        self,
        messages: Sequence[Message],
        model: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> CompletionRequest:
        """Resolve per-call overrides against the configured defaults."""
        return CompletionRequest(
            model=model or self._model,
            messages=tuple(messages),
            max_tokens=max_tokens if max_tokens is not None else self._max_tokens,
            temperature=temperature if temperature is not None else self._temperature,
        )

    @abstractmethod
    def build_payload(self, request: CompletionRequest) -> dict[str, Any]:
        """Serialize a request into the vendor's JSON body."""
        ...

    @abstractmethod
    def build_headers(self) -> dict[str, str]:
        """Return the vendor's authentication and content headers."""
        ...

    @abstractmethod
    def extract_text(self, data: Any) -> str:
        """Pull the first assistant reply out of a decoded response body.

        Raises:
            ParseError: If the body has no reply in the expected place
        """
        ...

    async def complete(
        self,
        messages: Sequence[Message],
        model: str | None = None,
        *,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> str:
        """Send one chat-completion request and return the reply text.

        Exactly one HTTP request is made; nothing is retried.

        Args:
            messages: Conversation messages in turn order
            model: Model override (configured default when None)
            max_tokens: Maximum tokens override
            temperature: Sampling temperature override

        Returns:
            Reply text of the first assistant candidate

        Raises:
            NetworkError: Transport failure, timeouts included
            ApiError: Non-2xx status; the body is not parsed
            ParseError: Body is not JSON or has no extractable reply
        """
        request = self.build_request(messages, model, max_tokens, temperature)
        payload = self.build_payload(request)

        _logger.debug(
            "POST %s provider=%s model=%s messages=%d",
            self._endpoint,
            self.name,
            request.model,
            len(request.messages),
        )
        try:
            response = await self._client.post(
                self._endpoint, json=payload, headers=self.build_headers()
            )
        except httpx.ProtocolError as e:
            # Protocol errors can quote header values, the auth header included
            raise NetworkError(f"{self.name} request failed: {type(e).__name__}") from e
        except httpx.HTTPError as e:
            raise NetworkError(f"{self.name} request failed: {e}") from e

        _logger.debug("%s responded with status %d", self.name, response.status_code)
        if not response.is_success:
            raise ApiError(
                response.status_code,
                f"{self.name} API request failed: {response.status_code} {response.reason_phrase}",
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ParseError(
                f"{self.name} returned a non-JSON body: {response.text[:_FRAGMENT_LIMIT]!r}"
            ) from e

        return self.extract_text(data)

    async def aclose(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "BaseChatProvider":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    @staticmethod
    def _fragment(value: Any) -> str:
        return repr(value)[:_FRAGMENT_LIMIT]


__all__ = ["BaseChatProvider"]
