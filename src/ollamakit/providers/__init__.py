"""OpenAI-compatible providers."""

from ollamakit.providers.base import (
    ChatCompletionRequest,
    ClientSettings,
    OpenAICompatibleProvider,
    ProviderError,
    build_user_agent,
)
from ollamakit.providers.default import DefaultOpenAICompatibleProvider
from ollamakit.providers.factory import determine_provider
from ollamakit.providers.ollama import OllamaOpenAICompatibleProvider

__all__ = [
    "ChatCompletionRequest",
    "ClientSettings",
    "DefaultOpenAICompatibleProvider",
    "OllamaOpenAICompatibleProvider",
    "OpenAICompatibleProvider",
    "ProviderError",
    "build_user_agent",
    "determine_provider",
]
