"""ollamakit - OpenAI-compatible client adapter for local Ollama servers."""

from ollamakit._version import __version__
from ollamakit.config import GenerationConfig, HostConfig, OllamaEnvironment
from ollamakit.constants import DEFAULT_MAX_RETRIES, DEFAULT_OLLAMA_BASE_URL, DEFAULT_TIMEOUT
from ollamakit.generator import ContentGenerator
from ollamakit.providers import (
    ChatCompletionRequest,
    ClientSettings,
    DefaultOpenAICompatibleProvider,
    OllamaOpenAICompatibleProvider,
    OpenAICompatibleProvider,
    ProviderError,
    build_user_agent,
    determine_provider,
)

__all__ = [
    "ChatCompletionRequest",
    "ClientSettings",
    "ContentGenerator",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_OLLAMA_BASE_URL",
    "DEFAULT_TIMEOUT",
    "DefaultOpenAICompatibleProvider",
    "GenerationConfig",
    "HostConfig",
    "OllamaEnvironment",
    "OllamaOpenAICompatibleProvider",
    "OpenAICompatibleProvider",
    "ProviderError",
    "__version__",
    "build_user_agent",
    "determine_provider",
]
