"""Echo provider: returns the user text unchanged. For offline use and testing."""

from translate_ai.prompt import Prompt
from translate_ai.providers.base import ModelProvider, ModelResponse


class EchoProvider(ModelProvider):
    """Returns the user message as the model content."""

    async def invoke(self, prompt: Prompt) -> ModelResponse:
        return ModelResponse(content=prompt.user)
