"""Abstract base class for OpenAI-compatible providers."""

from __future__ import annotations

import platform
import sys
from abc import ABC, abstractmethod
from types import ModuleType
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, SecretStr

from ollamakit.config import GenerationConfig, HostConfig
from ollamakit.constants import CLIENT_NAME, DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT

if TYPE_CHECKING:
    from openai import AsyncOpenAI, OpenAI

ChatCompletionRequest = dict[str, Any]
"""Keyword arguments for ``client.chat.completions.create()``."""


class ProviderError(Exception):
    """Error from a chat-completion call made through a provider's client.

    Attributes:
        retryable: Whether the caller should retry the request.
        provider: Name of the provider that raised the error.
        status_code: HTTP status code from the server, if available.
    """

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        provider: str = "",
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.retryable = retryable
        self.provider = provider
        self.status_code = status_code


class ClientSettings(BaseModel):
    """Resolved values bound into an ``openai`` client.

    Attributes:
        api_key: Credential sent as the bearer token. ``None`` lets the SDK
            fall back to ``OPENAI_API_KEY``.
        base_url: Base URL of the endpoint. ``None`` selects the SDK default.
        timeout: Request timeout in milliseconds.
        max_retries: Retries performed by the SDK transport.
        default_headers: Headers added to every request.
    """

    model_config = {"frozen": True}

    api_key: SecretStr | None = None
    base_url: str | None = None
    timeout: float
    max_retries: int
    default_headers: dict[str, str] = Field(default_factory=dict)

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000

    def client_kwargs(self) -> dict[str, Any]:
        """Keyword arguments accepted by ``openai.OpenAI`` and ``openai.AsyncOpenAI``."""
        return {
            "api_key": self.api_key.get_secret_value() if self.api_key else None,
            "base_url": self.base_url,
            "timeout": self.timeout_seconds,
            "max_retries": self.max_retries,
            "default_headers": dict(self.default_headers),
        }


def build_user_agent(host_config: HostConfig) -> str:
    """Return ``<client>/<version> (<platform>; <arch>)`` for the running host."""
    version = host_config.get_version() or "unknown"
    return f"{CLIENT_NAME}/{version} ({sys.platform}; {platform.machine()})"


def _import_openai(provider: str) -> ModuleType:
    try:
        import openai
    except ImportError as exc:
        raise ImportError(
            f"openai is required for {provider}. Install it with: pip install openai"
        ) from exc
    return openai


class OpenAICompatibleProvider(ABC):
    """Backend that speaks the OpenAI Chat Completions protocol.

    Subclasses decide how credentials and addresses are resolved and how
    outgoing requests are rewritten. Building a client never touches the
    network.
    """

    def __init__(self, config: GenerationConfig, host_config: HostConfig) -> None:
        self._config = config
        self._host_config = host_config

    @property
    def name(self) -> str:
        """Provider name (e.g. 'ollama', 'openai')."""
        return self.__class__.__name__

    @property
    def config(self) -> GenerationConfig:
        return self._config

    @property
    def host_config(self) -> HostConfig:
        return self._host_config

    def build_headers(self) -> dict[str, str]:
        return {"User-Agent": build_user_agent(self._host_config)}

    def _timeout(self) -> float:
        return self._config.timeout if self._config.timeout is not None else DEFAULT_TIMEOUT

    def _max_retries(self) -> int:
        if self._config.max_retries is not None:
            return self._config.max_retries
        return DEFAULT_MAX_RETRIES

    @abstractmethod
    def resolve_client_settings(self) -> ClientSettings:
        """Resolve credentials, address, timeout and retries for a new client."""
        ...

    @abstractmethod
    def build_request(
        self, request: ChatCompletionRequest, session_id: str
    ) -> ChatCompletionRequest:
        """Return a copy of *request* adjusted for this backend.

        Args:
            request: Keyword arguments for ``chat.completions.create()``.
                Never mutated.
            session_id: Identifier of the prompt/session issuing the request.

        Returns:
            A new request mapping.
        """
        ...

    def build_client(self) -> OpenAI:
        openai = _import_openai(self.name)
        return openai.OpenAI(**self.resolve_client_settings().client_kwargs())

    def build_async_client(self) -> AsyncOpenAI:
        openai = _import_openai(self.name)
        return openai.AsyncOpenAI(**self.resolve_client_settings().client_kwargs())
