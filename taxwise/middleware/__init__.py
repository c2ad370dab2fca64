"""ASGI middleware."""

from taxwise.middleware.request_id import (
    RequestIDMiddleware,
    RequestIdLogFilter,
    request_id_var,
)
from taxwise.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "RequestIdLogFilter",
    "TimeoutMiddleware",
    "request_id_var",
]
