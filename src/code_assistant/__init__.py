"""code-assistant - programming help from chat-completion models.

code-assistant wraps two chat-completion vendors (OpenAI and Anthropic)
behind one provider interface and builds programming-help prompts on top.

Key components:
    - Assistant: explain / debug / generate facade
    - create_chat_provider: Picks the provider an LLMConfig selects
    - CLI: code-assistant explain | debug | generate

Quick start:
    export OPENAI_API_KEY=sk-...
    code-assistant explain ownership
    code-assistant debug main.rs --error "borrow of moved value: `s`"
    code-assistant generate "a thread-safe counter"
"""

__version__ = "0.1.0"

from .assistant import Assistant
from .llm import LLMConfig, Message, Role, create_chat_provider

__all__ = [
    "Assistant",
    "LLMConfig",
    "Message",
    "Role",
    "create_chat_provider",
    "__version__",
]
