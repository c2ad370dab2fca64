"""OpenAI chat-completions client for JSON answers."""

from __future__ import annotations

import openai
from openai import AsyncOpenAI
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from taxwise.infrastructure.exceptions import LLMError
from taxwise.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_RETRYABLE = (
    openai.APIConnectionError,
    openai.APITimeoutError,
    openai.RateLimitError,
)


def _mime_type(data_uri: str) -> str:
    """Return the MIME type of a data: URI ("" if not a data URI)."""
    if not data_uri.startswith("data:"):
        return ""
    return data_uri[5:].split(";", 1)[0].split(",", 1)[0].lower()


class OpenAIClient:
    """Single-turn completion with response_format=json_object.

    Image attachments are sent as image_url parts; other document types are
    referenced in the text only, since chat completions accept images inline.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str = "gpt-4o-mini",
        *,
        base_url: str | None = None,
        temperature: float = 0.2,
        max_tokens: int = 2048,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._client: AsyncOpenAI | None = None

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self._api_key:
                raise LLMError(self.provider, "API key not configured")
            self._client = AsyncOpenAI(api_key=self._api_key, base_url=self._base_url)
        return self._client

    @property
    def provider(self) -> str:
        return "openai"

    @staticmethod
    def _build_content(prompt: str, attachments: list[str]) -> list[dict]:
        parts: list[dict] = [{"type": "text", "text": prompt}]
        for uri in attachments:
            mime = _mime_type(uri)
            if mime.startswith("image/"):
                parts.append({"type": "image_url", "image_url": {"url": uri}})
            else:
                parts.append(
                    {"type": "text", "text": f"[Attached document of type {mime or 'unknown'}]"}
                )
        return parts

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=30),
        retry=retry_if_exception_type(_RETRYABLE),
        reraise=True,
    )
    async def _create(self, content: list[dict]):
        return await self._get_client().chat.completions.create(
            model=self._model,
            messages=[{"role": "user", "content": content}],
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            response_format={"type": "json_object"},
        )

    async def complete_json(self, prompt: str, attachments: list[str]) -> str:
        """Return the model's raw text answer. Raises LLMError on failure."""
        try:
            response = await self._create(self._build_content(prompt, attachments))
        except LLMError:
            raise
        except openai.OpenAIError as e:
            logger.error("OpenAI completion failed: %s", e)
            raise LLMError(self.provider, str(e)) from e
        usage = getattr(response, "usage", None)
        if usage is not None:
            logger.info(
                "LLM completion model=%s input_tokens=%s output_tokens=%s",
                self._model,
                usage.prompt_tokens,
                usage.completion_tokens,
            )
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
