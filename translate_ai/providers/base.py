"""Abstract model provider interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from translate_ai.prompt import Prompt


@dataclass(frozen=True)
class ModelResponse:
    """Generated output of a model call. content is None when the API omitted it."""

    content: str | None = None


class ModelProvider(ABC):
    """Base class for all model providers."""

    @abstractmethod
    async def invoke(self, prompt: Prompt) -> ModelResponse:
        """Send the prompt to the model and return its response.

        Args:
            prompt: System instruction and user text.

        Returns:
            The model response.

        Raises:
            Exception: On network or API failure. Providers do not retry.
        """
        ...

    async def close(self) -> None:
        """Release any resources held by the provider."""
