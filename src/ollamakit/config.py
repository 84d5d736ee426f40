"""Configuration values consumed by OpenAI-compatible providers."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, SecretStr, field_validator

from ollamakit.constants import OLLAMA_API_KEY_ENV, OLLAMA_HOST_ENV, OLLAMA_MODEL_ENV


class GenerationConfig(BaseModel):
    """How to reach a chat-completion backend.

    Every field is optional; providers fill in their own fallbacks.

    Attributes:
        api_key: API key for authentication.
        base_url: Base URL of the OpenAI-compatible endpoint.
        model: Default model identifier for outgoing requests.
        timeout: Request timeout in milliseconds.
        max_retries: Number of retries performed by the client transport.
    """

    model_config = {"frozen": True}

    api_key: SecretStr | None = None
    base_url: str | None = None
    model: str | None = None
    timeout: float | None = None
    max_retries: int | None = None


class HostConfig(BaseModel):
    """Settings of the application embedding the client."""

    model_config = {"frozen": True}

    version: str | None = None

    def get_version(self) -> str | None:
        return self.version


class OllamaEnvironment(BaseModel):
    """Ollama-related environment variables, captured once at startup.

    Empty values are stored as ``None`` so that ``OLLAMA_HOST=""`` behaves
    exactly like an unset variable.

    Attributes:
        host: Value of ``OLLAMA_HOST`` (e.g. ``http://gpu-box:11434``).
        model: Value of ``OLLAMA_MODEL``; overrides the request model.
        api_key: Value of ``OLLAMA_API_KEY``.
    """

    model_config = {"frozen": True}

    host: str | None = None
    model: str | None = None
    api_key: str | None = None

    @field_validator("host", "model", "api_key", mode="before")
    @classmethod
    def _empty_as_none(cls, value: str | None) -> str | None:
        return value or None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> OllamaEnvironment:
        """Read the Ollama variables from *environ* (``os.environ`` by default)."""
        if environ is None:
            environ = os.environ
        return cls(
            host=environ.get(OLLAMA_HOST_ENV),
            model=environ.get(OLLAMA_MODEL_ENV),
            api_key=environ.get(OLLAMA_API_KEY_ENV),
        )
