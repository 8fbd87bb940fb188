"""Type definitions for the chat-completion layer.

Public API (the "studs"):
    Role: Message role enum
    Message: Represents a single message in a conversation
    CompletionRequest: Fully resolved request handed to a provider adapter
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Message role."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """Represents a single message in a conversation.

    Attributes:
        role: Message role (system, user or assistant)
        content: Message content text
    """

    model_config = ConfigDict(frozen=True)

    role: Role = Field(..., description="Message role: system, user, or assistant")
    content: str = Field(..., description="Message content")

    def to_wire(self) -> dict[str, str]:
        """Return the ``{role, content}`` mapping both vendors accept."""
        return {"role": self.role.value, "content": self.content}


class CompletionRequest(BaseModel):
    """Request built once per ``complete`` call.

    Attributes:
        model: Model identifier
        messages: Conversation messages, in turn order
        max_tokens: Maximum tokens to generate (None leaves it to the adapter)
        temperature: Sampling temperature, passed through unchecked
    """

    model_config = ConfigDict(frozen=True)

    model: str = Field(..., description="Model identifier")
    messages: tuple[Message, ...] = Field(..., description="Messages in turn order")
    max_tokens: int | None = Field(None, description="Maximum tokens to generate")
    temperature: float | None = Field(None, description="Sampling temperature")


__all__ = ["Role", "Message", "CompletionRequest"]
