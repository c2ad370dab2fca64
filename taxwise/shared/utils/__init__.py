"""Shared utilities: datetime and id generators."""

from taxwise.shared.utils.datetime import ensure_utc, to_epoch_millis, utc_now
from taxwise.shared.utils.generators import generate_cuid

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "to_epoch_millis",
]
