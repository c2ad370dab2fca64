"""LLM client factory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from taxwise.application.interfaces.services import ILLMClient
from taxwise.infrastructure.external.llm.openai_client import OpenAIClient

if TYPE_CHECKING:
    from taxwise.core.config import Settings


def get_llm_client(settings: "Settings") -> ILLMClient:
    """Return the client for settings.llm_provider.

    The API key is checked on first use, not here, so the app starts
    without one and only the suggestions route fails.
    """
    if settings.llm_provider == "openai":
        return OpenAIClient(
            api_key=(
                settings.openai_api_key.get_secret_value()
                if settings.openai_api_key
                else None
            ),
            model=settings.llm_model,
            base_url=settings.openai_base_url,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
        )
    raise ValueError(f"Unsupported LLM provider: {settings.llm_provider}")
