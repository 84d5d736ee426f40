"""Hosted OpenAI-compatible provider."""

from __future__ import annotations

from ollamakit.providers.base import (
    ChatCompletionRequest,
    ClientSettings,
    OpenAICompatibleProvider,
)


class DefaultOpenAICompatibleProvider(OpenAICompatibleProvider):
    """Provider for hosted APIs that need no request rewriting.

    A missing ``api_key`` or ``base_url`` is left to the ``openai`` SDK,
    which reads ``OPENAI_API_KEY`` / ``OPENAI_BASE_URL`` itself.
    """

    @property
    def name(self) -> str:
        return "openai"

    def resolve_client_settings(self) -> ClientSettings:
        config = self._config
        return ClientSettings(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=self._timeout(),
            max_retries=self._max_retries(),
            default_headers=self.build_headers(),
        )

    def build_request(
        self,
        request: ChatCompletionRequest,
        session_id: str,  # noqa: ARG002
    ) -> ChatCompletionRequest:
        return dict(request)
