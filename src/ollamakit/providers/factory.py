"""Select the provider variant for a generation config."""

from __future__ import annotations

import logging

from ollamakit.config import GenerationConfig, HostConfig, OllamaEnvironment
from ollamakit.providers.base import OpenAICompatibleProvider
from ollamakit.providers.default import DefaultOpenAICompatibleProvider
from ollamakit.providers.ollama import OllamaOpenAICompatibleProvider

logger = logging.getLogger("ollamakit.providers")


def determine_provider(
    config: GenerationConfig,
    host_config: HostConfig,
    env: OllamaEnvironment | None = None,
) -> OpenAICompatibleProvider:
    """Return the Ollama provider when the config targets Ollama, else the hosted one.

    Args:
        config: Generation settings supplied by the caller.
        host_config: Settings of the embedding application.
        env: Captured Ollama environment. Read from ``os.environ`` when omitted.
    """
    if env is None:
        env = OllamaEnvironment.from_env()
    if OllamaOpenAICompatibleProvider.is_ollama_provider(config, env):
        logger.debug("Using Ollama provider (base_url=%s)", config.base_url)
        return OllamaOpenAICompatibleProvider(config, host_config, env)
    logger.debug("Using hosted OpenAI-compatible provider (base_url=%s)", config.base_url)
    return DefaultOpenAICompatibleProvider(config, host_config)
