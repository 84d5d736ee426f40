"""Shared defaults for OpenAI-compatible providers."""

from __future__ import annotations

DEFAULT_TIMEOUT = 120_000
"""Request timeout in milliseconds."""

DEFAULT_MAX_RETRIES = 3

CLIENT_NAME = "OllamaKit"

OLLAMA_DEFAULT_PORT = "11434"
DEFAULT_OLLAMA_BASE_URL = f"http://localhost:{OLLAMA_DEFAULT_PORT}/v1"
DEFAULT_OLLAMA_API_KEY = "ollama"

OLLAMA_HOST_ENV = "OLLAMA_HOST"
OLLAMA_MODEL_ENV = "OLLAMA_MODEL"
OLLAMA_API_KEY_ENV = "OLLAMA_API_KEY"
