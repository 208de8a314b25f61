"""Model provider adapters, selectable by name from configuration."""

from translate_ai.providers.base import ModelProvider
from translate_ai.providers.echo import EchoProvider
from translate_ai.providers.mistral import MistralProvider

PROVIDERS: dict[str, type[ModelProvider]] = {
    "echo": EchoProvider,
    "mistral": MistralProvider,
}


def get_provider_class(name: str) -> type[ModelProvider]:
    """Return the adapter class registered under name (see TRANSLATION_PROVIDER)."""
    try:
        return PROVIDERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown provider '{name}'. Available: {sorted(PROVIDERS)}"
        ) from None


def load_provider(name: str, **kwargs) -> ModelProvider:
    """Build the model adapter the controller sends prompts to.

    Keyword arguments go to the adapter constructor; without them each
    adapter reads its own settings from config (e.g. MISTRAL_API_KEY).

    Raises:
        ValueError: If name is not registered, or the adapter's settings are
            incomplete.
    """
    return get_provider_class(name)(**kwargs)
