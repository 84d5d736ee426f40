"""Chat with a local Ollama server through the OpenAI-compatible API.

Picks the provider from the configuration and environment, then sends a
single non-streaming request followed by a streaming one.

Environment variables:
    OLLAMA_HOST     Server address, e.g. http://localhost:11434 (optional)
    OLLAMA_MODEL    Model to use, overrides the configured one (optional)
    OLLAMA_API_KEY  Credential for servers behind an auth proxy (optional)

Run with:
    ollama pull qwen2.5:0.5b
    uv run python examples/ollama_chat.py
"""

from __future__ import annotations

import logging

from ollamakit import (
    ContentGenerator,
    GenerationConfig,
    HostConfig,
    OllamaEnvironment,
    ProviderError,
    __version__,
    determine_provider,
)

logging.basicConfig(level=logging.DEBUG)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("openai").setLevel(logging.WARNING)


def main() -> None:
    env = OllamaEnvironment.from_env()
    config = GenerationConfig(
        base_url="http://localhost:11434/v1",
        model="qwen2.5:0.5b",
        timeout=60_000,
    )
    provider = determine_provider(config, HostConfig(version=__version__), env)
    print(f"Provider: {provider.name}")
    print(f"Client settings: {provider.resolve_client_settings()!r}")

    gen = ContentGenerator(provider)
    request = {
        "model": "gpt-4o",
        "messages": [{"role": "user", "content": "Say hello in one short sentence."}],
        "temperature": 0.2,
    }

    try:
        response = gen.generate(request, "example-session")
        print(f"Reply: {response.choices[0].message.content}")

        print("Streaming: ", end="", flush=True)
        for delta in gen.generate_stream(request, "example-session"):
            print(delta, end="", flush=True)
        print()
    except ProviderError as exc:
        print(f"Request failed (retryable={exc.retryable}, status={exc.status_code}): {exc}")
    finally:
        gen.close()


if __name__ == "__main__":
    main()
