"""Tests for ContentGenerator."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from ollamakit.config import HostConfig, OllamaEnvironment
from ollamakit.generator import ContentGenerator
from ollamakit.providers import OllamaOpenAICompatibleProvider, ProviderError
from tests.conftest import FakeAPIStatusError, make_config, mock_openai_module


def _generator(env: OllamaEnvironment | None = None) -> ContentGenerator:
    provider = OllamaOpenAICompatibleProvider(
        make_config(), HostConfig(version="1.0.0"), env or OllamaEnvironment()
    )
    with patch.dict("sys.modules", {"openai": mock_openai_module()}):
        gen = ContentGenerator(provider)
    gen._client = MagicMock()
    return gen


def _request(**overrides: Any) -> dict[str, Any]:
    request: dict[str, Any] = {
        "model": "gpt-4",
        "messages": [{"role": "user", "content": "Hello"}],
    }
    request.update(overrides)
    return request


def _chunk(content: str | None) -> SimpleNamespace:
    return SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=content))])


class TestGenerate:
    def test_sends_adapted_request(self) -> None:
        gen = _generator()
        response = SimpleNamespace(choices=[])
        gen._client.chat.completions.create.return_value = response

        result = gen.generate(_request(), "sid-1")

        assert result is response
        kwargs = gen._client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "qwen:0.5b"
        assert kwargs["stream"] is False
        assert kwargs["messages"] == [{"role": "user", "content": "Hello"}]

    def test_forces_non_streaming(self) -> None:
        gen = _generator()
        gen.generate(_request(stream=True), "sid")
        assert gen._client.chat.completions.create.call_args.kwargs["stream"] is False

    def test_env_model_override(self) -> None:
        gen = _generator(OllamaEnvironment(model="llama3:8b"))
        gen.generate(_request(), "sid")
        assert gen._client.chat.completions.create.call_args.kwargs["model"] == "llama3:8b"

    def test_retryable_status_error(self) -> None:
        gen = _generator()
        gen._client.chat.completions.create.side_effect = FakeAPIStatusError(
            "rate limited", status_code=429
        )

        with pytest.raises(ProviderError) as exc_info:
            gen.generate(_request(), "sid")

        assert exc_info.value.retryable is True
        assert exc_info.value.status_code == 429
        assert exc_info.value.provider == "ollama"

    def test_non_retryable_status_error(self) -> None:
        gen = _generator()
        gen._client.chat.completions.create.side_effect = FakeAPIStatusError(
            "model not found", status_code=404
        )

        with pytest.raises(ProviderError) as exc_info:
            gen.generate(_request(), "sid")

        assert exc_info.value.retryable is False
        assert exc_info.value.status_code == 404

    def test_connection_error(self) -> None:
        gen = _generator()
        gen._client.chat.completions.create.side_effect = ConnectionError("refused")

        with pytest.raises(ProviderError, match="refused") as exc_info:
            gen.generate(_request(), "sid")

        assert exc_info.value.retryable is False
        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    def test_provider_error_propagates(self) -> None:
        gen = _generator()
        original = ProviderError("boom", retryable=True, provider="ollama")
        gen._client.chat.completions.create.side_effect = original

        with pytest.raises(ProviderError) as exc_info:
            gen.generate(_request(), "sid")

        assert exc_info.value is original


class TestGenerateStream:
    def test_yields_text_deltas(self) -> None:
        gen = _generator()
        gen._client.chat.completions.create.return_value = iter(
            [_chunk("Hel"), _chunk(None), SimpleNamespace(choices=[]), _chunk("lo")]
        )

        chunks = list(gen.generate_stream(_request(), "sid"))

        assert chunks == ["Hel", "lo"]
        assert gen._client.chat.completions.create.call_args.kwargs["stream"] is True

    def test_error_wrapped(self) -> None:
        gen = _generator()
        gen._client.chat.completions.create.side_effect = FakeAPIStatusError(
            "overloaded", status_code=503
        )

        with pytest.raises(ProviderError) as exc_info:
            list(gen.generate_stream(_request(), "sid"))

        assert exc_info.value.retryable is True


class TestContentGenerator:
    def test_builds_client_from_provider(self) -> None:
        mod = mock_openai_module()
        provider = OllamaOpenAICompatibleProvider(
            make_config(base_url=None), HostConfig(), OllamaEnvironment()
        )
        with patch.dict("sys.modules", {"openai": mod}):
            gen = ContentGenerator(provider)

        assert gen.provider is provider
        assert gen._client is mod.OpenAI.return_value
        assert mod.OpenAI.call_args.kwargs["base_url"] == "http://localhost:11434/v1"

    def test_close(self) -> None:
        gen = _generator()
        gen.close()
        gen._client.close.assert_called_once()

    def test_import_error_when_openai_missing(self) -> None:
        provider = OllamaOpenAICompatibleProvider(make_config(), HostConfig(), OllamaEnvironment())
        with patch.dict("sys.modules", {"openai": None}):
            with pytest.raises(ImportError, match="openai is required"):
                ContentGenerator(provider)
