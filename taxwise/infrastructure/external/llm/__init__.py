"""Language-model clients."""

from taxwise.infrastructure.external.llm.factory import get_llm_client
from taxwise.infrastructure.external.llm.openai_client import OpenAIClient

__all__ = ["OpenAIClient", "get_llm_client"]
