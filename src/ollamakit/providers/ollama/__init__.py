"""Ollama provider."""

from ollamakit.providers.ollama.provider import OllamaOpenAICompatibleProvider

__all__ = ["OllamaOpenAICompatibleProvider"]
