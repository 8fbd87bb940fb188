"""Prompt templates used by the assistant facade.

Each template carries two personas: a full one sent as a system message to
providers that take one, and a short one prefixed to the user turn for
providers that don't.
"""

from dataclasses import dataclass

from code_assistant.llm.types import Message, Role


@dataclass(frozen=True)
class PromptTemplate:
    persona: str
    short_persona: str
    body: str

    def render(self, *, supports_system_role: bool, **fields: str) -> list[Message]:
        """Render the template into the message list for one provider style."""
        persona = self.persona.format(**fields)
        prompt = self.body.format(**fields)
        if supports_system_role:
            return [
                Message(role=Role.SYSTEM, content=persona),
                Message(role=Role.USER, content=prompt),
            ]
        short = self.short_persona.format(**fields)
        return [Message(role=Role.USER, content=f"{short} {prompt}")]


EXPLAIN = PromptTemplate(
    persona=(
        "You are an expert {language} programmer who explains concepts clearly "
        "with practical examples."
    ),
    short_persona="You are an expert {language} programmer.",
    body="Explain this {language} programming concept clearly and concisely with examples: {topic}",
)

DEBUG = PromptTemplate(
    persona=(
        "You are a {language} expert who helps debug code. "
        "Provide clear explanations and corrected code."
    ),
    short_persona="You are a {language} debugging expert.",
    body=(
        "Help debug this {language} code. Code:\n```{fence}\n{code}\n```\n"
        "Error: {error}\n\nPlease explain the issue and provide a fix."
    ),
)

GENERATE = PromptTemplate(
    persona=(
        "You are a {language} expert who writes clean, idiomatic code. "
        "Always include proper error handling and comments."
    ),
    short_persona="You are a {language} code generation expert.",
    body=(
        "Generate {language} code for the following requirement: {description}\n\n"
        "Please provide clean, idiomatic {language} code with comments."
    ),
)


__all__ = ["PromptTemplate", "EXPLAIN", "DEBUG", "GENERATE"]
