"""Chat-completion calls routed through an OpenAI-compatible provider."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from typing import Any, NoReturn

from ollamakit.providers.base import (
    ChatCompletionRequest,
    OpenAICompatibleProvider,
    ProviderError,
    _import_openai,
)

logger = logging.getLogger("ollamakit.generator")

_RETRYABLE_STATUS = frozenset({429, 500, 502, 503})


class ContentGenerator:
    """Sends chat-completion requests using a provider's client and request rules."""

    def __init__(self, provider: OpenAICompatibleProvider) -> None:
        openai = _import_openai(provider.name)
        self._provider = provider
        self._api_status_error = openai.APIStatusError
        self._client = provider.build_client()

    @property
    def provider(self) -> OpenAICompatibleProvider:
        return self._provider

    def _raise_provider_error(self, exc: Exception) -> NoReturn:
        if isinstance(exc, ProviderError):
            raise exc
        if isinstance(exc, self._api_status_error):
            status_code = getattr(exc, "status_code", None)
            raise ProviderError(
                str(exc),
                retryable=status_code in _RETRYABLE_STATUS,
                provider=self._provider.name,
                status_code=status_code,
            ) from exc
        raise ProviderError(
            str(exc),
            retryable=False,
            provider=self._provider.name,
            status_code=None,
        ) from exc

    def generate(self, request: ChatCompletionRequest, session_id: str) -> Any:
        """Run a non-streaming completion and return the SDK response."""
        kwargs = self._provider.build_request(request, session_id)
        kwargs["stream"] = False

        t0 = time.monotonic()
        try:
            response = self._client.chat.completions.create(**kwargs)
        except Exception as exc:
            self._raise_provider_error(exc)
        logger.debug(
            "Completion for session %s from %s/%s in %.0f ms",
            session_id,
            self._provider.name,
            kwargs.get("model"),
            (time.monotonic() - t0) * 1000,
        )
        return response

    def generate_stream(self, request: ChatCompletionRequest, session_id: str) -> Iterator[str]:
        """Yield text deltas from a streaming completion."""
        kwargs = self._provider.build_request(request, session_id)
        kwargs["stream"] = True

        try:
            stream = self._client.chat.completions.create(**kwargs)
            for chunk in stream:
                if not chunk.choices:
                    continue
                content = chunk.choices[0].delta.content
                if content:
                    yield content
        except Exception as exc:
            self._raise_provider_error(exc)

    def close(self) -> None:
        self._client.close()
