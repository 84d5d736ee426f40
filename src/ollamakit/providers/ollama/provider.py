"""Ollama provider: an OpenAI-compatible client pointed at a local Ollama server."""

from __future__ import annotations

import logging

from pydantic import SecretStr

from ollamakit.config import GenerationConfig, HostConfig, OllamaEnvironment
from ollamakit.constants import (
    DEFAULT_OLLAMA_API_KEY,
    DEFAULT_OLLAMA_BASE_URL,
    OLLAMA_DEFAULT_PORT,
)
from ollamakit.providers.base import (
    ChatCompletionRequest,
    ClientSettings,
    OpenAICompatibleProvider,
)

logger = logging.getLogger("ollamakit.providers.ollama")


class OllamaOpenAICompatibleProvider(OpenAICompatibleProvider):
    """Provider for a locally hosted Ollama server.

    ``OLLAMA_HOST``, ``OLLAMA_MODEL`` and ``OLLAMA_API_KEY`` take precedence
    over the generation config. Pass *env* to pin those values; without it
    the process environment is read on every call.
    """

    def __init__(
        self,
        config: GenerationConfig,
        host_config: HostConfig,
        env: OllamaEnvironment | None = None,
    ) -> None:
        super().__init__(config, host_config)
        self._env = env

    @property
    def name(self) -> str:
        return "ollama"

    def _environment(self) -> OllamaEnvironment:
        return self._env if self._env is not None else OllamaEnvironment.from_env()

    def resolve_client_settings(self) -> ClientSettings:
        env = self._environment()
        config = self._config

        if env.api_key:
            api_key = SecretStr(env.api_key)
        elif config.api_key and config.api_key.get_secret_value():
            api_key = config.api_key
        else:
            api_key = SecretStr(DEFAULT_OLLAMA_API_KEY)

        if env.host:
            base_url = f"{env.host}/v1"
        else:
            base_url = config.base_url or DEFAULT_OLLAMA_BASE_URL
        logger.debug("Ollama base URL resolved to %s", base_url)

        return ClientSettings(
            api_key=api_key,
            base_url=base_url,
            timeout=self._timeout(),
            max_retries=self._max_retries(),
            default_headers=self.build_headers(),
        )

    def build_request(
        self,
        request: ChatCompletionRequest,
        session_id: str,  # noqa: ARG002
    ) -> ChatCompletionRequest:
        """Apply the model override and default to non-streaming.

        The model comes from ``OLLAMA_MODEL``, then the configured model, then
        the request itself. An explicit ``stream`` value is kept; a missing one
        becomes ``False``.
        """
        updated = dict(request)

        env = self._environment()
        if env.model:
            updated["model"] = env.model
        elif self._config.model:
            updated["model"] = self._config.model
        if updated.get("model") != request.get("model"):
            logger.debug("Ollama model override: %s -> %s", request.get("model"), updated["model"])

        if updated.get("stream") is None:
            updated["stream"] = False

        return updated

    @staticmethod
    def is_ollama_provider(
        config: GenerationConfig | None,
        env: OllamaEnvironment | None = None,
    ) -> bool:
        """Whether *config* and the environment point at an Ollama server."""
        if env is None:
            env = OllamaEnvironment.from_env()
        if env.host or env.model:
            return True
        base_url = config.base_url if config is not None else None
        return bool(base_url and OLLAMA_DEFAULT_PORT in base_url)
