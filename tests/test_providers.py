"""Tests for model providers and the provider registry."""

import json

import httpx
import pytest

from translate_ai.clipboard import Clipboard
from translate_ai.controller import ERROR_TEXT, TranslationController
from translate_ai.prompt import build_prompt
from translate_ai.providers import PROVIDERS, get_provider_class, load_provider
from translate_ai.providers.echo import EchoProvider
from translate_ai.providers.mistral import MistralProvider
from translate_ai.theme_store import MemoryThemeStore


def _completion(content) -> dict:
    """Build a chat-completions response body."""
    return {
        "id": "cmpl-1",
        "object": "chat.completion",
        "model": "mistral-large-latest",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


def _make_mistral(handler, **kwargs) -> MistralProvider:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return MistralProvider(
        api_key="test-key",
        endpoint="https://api.example.test/",
        client=client,
        **kwargs,
    )


class TestRegistry:
    def test_known_providers(self):
        assert set(PROVIDERS) == {"echo", "mistral"}

    def test_load_echo(self):
        assert isinstance(load_provider("echo"), EchoProvider)

    def test_load_mistral_with_kwargs(self):
        provider = load_provider("mistral", api_key="k")
        assert isinstance(provider, MistralProvider)
        assert provider.model == "mistral-large-latest"
        assert provider.temperature == 0.0

    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unknown provider"):
            load_provider("deepl")

    def test_provider_class_lookup(self):
        assert get_provider_class("mistral") is MistralProvider
        with pytest.raises(ValueError, match="Available"):
            get_provider_class("")


class TestEchoProvider:
    @pytest.mark.asyncio
    async def test_returns_user_text(self):
        response = await EchoProvider().invoke(build_prompt("English", "Italian", "Hello"))
        assert response.content == "Hello"


class TestMistralProvider:
    @pytest.mark.asyncio
    async def test_request_shape(self):
        """Posts model, temperature 0 and both messages with the bearer key."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=_completion("Ciao"))

        provider = _make_mistral(handler)
        response = await provider.invoke(build_prompt("English", "Italian", "Hello"))
        await provider.close()

        assert response.content == "Ciao"
        assert seen["url"] == "https://api.example.test/v1/chat/completions"
        assert seen["auth"] == "Bearer test-key"
        assert seen["body"]["model"] == "mistral-large-latest"
        assert seen["body"]["temperature"] == 0.0
        assert seen["body"]["messages"][0]["role"] == "system"
        assert seen["body"]["messages"][1] == {"role": "user", "content": "Hello"}

    @pytest.mark.asyncio
    async def test_chunked_content_joined(self):
        chunks = [
            {"type": "text", "text": "Ciao "},
            {"type": "reference", "reference_ids": [1]},
            {"type": "text", "text": "mondo"},
        ]
        provider = _make_mistral(lambda request: httpx.Response(200, json=_completion(chunks)))
        response = await provider.invoke(build_prompt("English", "Italian", "Hello world"))
        assert response.content == "Ciao mondo"

    @pytest.mark.asyncio
    async def test_missing_content(self):
        provider = _make_mistral(lambda request: httpx.Response(200, json={"choices": []}))
        response = await provider.invoke(build_prompt("English", "Italian", "Hello"))
        assert response.content is None

    @pytest.mark.asyncio
    async def test_http_error_raised(self):
        provider = _make_mistral(
            lambda request: httpx.Response(401, json={"message": "Unauthorized"})
        )
        with pytest.raises(httpx.HTTPStatusError):
            await provider.invoke(build_prompt("English", "Italian", "Hello"))

    @pytest.mark.asyncio
    async def test_transport_error_raised(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        provider = _make_mistral(handler)
        with pytest.raises(httpx.ConnectError):
            await provider.invoke(build_prompt("English", "Italian", "Hello"))

    def test_api_key_required(self, monkeypatch):
        monkeypatch.setattr("translate_ai.config.MISTRAL_API_KEY", "")
        with pytest.raises(ValueError, match="MISTRAL_API_KEY"):
            MistralProvider()

    def test_settings_from_config(self, monkeypatch):
        monkeypatch.setattr("translate_ai.config.MISTRAL_API_KEY", "env-key")
        monkeypatch.setattr("translate_ai.config.MISTRAL_ENDPOINT", "https://proxy.test")
        monkeypatch.setattr("translate_ai.config.MISTRAL_MODEL", "mistral-small-latest")

        provider = MistralProvider()

        assert provider.endpoint == "https://proxy.test"
        assert provider.model == "mistral-small-latest"


class _NullClipboard(Clipboard):
    def copy(self, text: str) -> None:
        pass


class TestMistralThroughController:
    """End-to-end translate action over a mocked Mistral endpoint."""

    @staticmethod
    def _controller(handler) -> TranslationController:
        return TranslationController(
            provider=_make_mistral(handler),
            clipboard=_NullClipboard(),
            theme_store=MemoryThemeStore(),
        )

    @pytest.mark.asyncio
    async def test_hello_to_ciao(self):
        controller = self._controller(lambda request: httpx.Response(200, json=_completion("Ciao")))
        controller.set_input("Hello")

        await controller.translate()
        await controller.aclose()

        assert controller.state.translated_text == "Ciao"
        assert controller.state.is_loading is False

    @pytest.mark.asyncio
    async def test_server_error_shows_placeholder(self):
        controller = self._controller(lambda request: httpx.Response(503))
        controller.set_input("Hello")

        await controller.translate()
        await controller.aclose()

        assert controller.state.translated_text == ERROR_TEXT
        assert controller.state.is_loading is False
