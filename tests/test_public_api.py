"""Tests for public API surface."""

from __future__ import annotations

import ollamakit


class TestPublicAPI:
    def test_version_string(self) -> None:
        assert isinstance(ollamakit.__version__, str)
        assert ollamakit.__version__ == "0.1.0"

    def test_all_names_importable(self) -> None:
        for name in ollamakit.__all__:
            obj = getattr(ollamakit, name)
            assert obj is not None, f"{name} is None"

    def test_providers_share_interface(self) -> None:
        assert issubclass(
            ollamakit.OllamaOpenAICompatibleProvider, ollamakit.OpenAICompatibleProvider
        )
        assert issubclass(
            ollamakit.DefaultOpenAICompatibleProvider, ollamakit.OpenAICompatibleProvider
        )

    def test_exception_classes(self) -> None:
        assert issubclass(ollamakit.ProviderError, Exception)
