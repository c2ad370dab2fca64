"""Infrastructure layer: Firebase, storage and LLM adapters."""
