"""Core: settings, lifespan, exception handlers and rate limiting."""
