"""Shared test fixtures and helpers."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from ollamakit.config import GenerationConfig, HostConfig

OLLAMA_ENV_VARS = ("OLLAMA_HOST", "OLLAMA_MODEL", "OLLAMA_API_KEY")


@pytest.fixture(autouse=True)
def _clean_ollama_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without Ollama variables from the developer's shell."""
    for name in OLLAMA_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class FakeAPIStatusError(Exception):
    """Stub for openai.APIStatusError used in tests."""

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


def mock_openai_module() -> MagicMock:
    """Return a MagicMock that behaves like the openai module."""
    mod = MagicMock()
    mod.APIStatusError = FakeAPIStatusError
    return mod


def make_config(**overrides: Any) -> GenerationConfig:
    defaults: dict[str, Any] = {
        "api_key": "test-key",
        "base_url": "http://localhost:11434/v1",
        "model": "qwen:0.5b",
    }
    defaults.update(overrides)
    return GenerationConfig(**defaults)


@pytest.fixture
def host_config() -> HostConfig:
    return HostConfig(version="0.0.14")
