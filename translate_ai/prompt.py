"""Prompt construction for a single translation request."""

from dataclasses import dataclass

SYSTEM_TEMPLATE = (
    "Translate the following text from {source} to {target}. "
    "Only return the {target} translation without any extra explanation or text."
)


@dataclass(frozen=True)
class Prompt:
    """System instruction plus the user's text, as sent to the model."""

    system: str
    user: str

    def to_messages(self) -> list[dict[str, str]]:
        """Return the prompt as a chat-completions message list."""
        return [
            {"role": "system", "content": self.system},
            {"role": "user", "content": self.user},
        ]


def build_prompt(source_language: str, target_language: str, text: str) -> Prompt:
    """Compose the translation prompt.

    The user message is the text verbatim; callers are responsible for
    rejecting empty text before getting here.
    """
    system = SYSTEM_TEMPLATE.format(source=source_language, target=target_language)
    return Prompt(system=system, user=text)
