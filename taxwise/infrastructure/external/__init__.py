"""External service adapters (object storage, signed URLs, LLM)."""
