"""Exceptions for the chat-completion layer.

Public API (the "studs"):
    LLMError: Base exception for all LLM errors
    NetworkError: Transport-level failure (DNS, connect, TLS, timeout)
    ApiError: Non-2xx HTTP status from the vendor
    ParseError: Vendor response did not have the expected shape
    ConfigError: Missing or invalid configuration
"""


class LLMError(Exception):
    """Base exception for all LLM errors."""

    pass


class NetworkError(LLMError):
    """The request never produced an HTTP response."""

    pass


class ApiError(LLMError):
    """The vendor answered with a non-2xx status.

    Attributes:
        status_code: Numeric HTTP status returned by the vendor
    """

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"API request failed: {status_code}")


class ParseError(LLMError):
    """Response body was not JSON, or held no extractable reply."""

    pass


class ConfigError(LLMError, ValueError):
    """Required configuration value missing or invalid."""

    pass


__all__ = [
    "LLMError",
    "NetworkError",
    "ApiError",
    "ParseError",
    "ConfigError",
]
