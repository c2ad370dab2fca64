"""Encode/decode Python values to/from Firestore REST API typed values.

Firestore REST represents every field as a one-key dict naming its type
(``{"stringValue": "x"}``, ``{"timestampValue": "...Z"}``, ...).
"""

import base64
from datetime import datetime
from typing import Any

from taxwise.shared.utils.datetime import ensure_utc


def encode_value(v: Any) -> dict:
    """Encode one Python value; bool is checked before int (bool subclasses int)."""
    if v is None:
        return {"nullValue": None}
    if isinstance(v, bool):
        return {"booleanValue": v}
    if isinstance(v, int):
        return {"integerValue": str(v)}
    if isinstance(v, float):
        return {"doubleValue": v}
    if isinstance(v, datetime):
        utc = ensure_utc(v)
        assert utc is not None
        return {"timestampValue": utc.strftime("%Y-%m-%dT%H:%M:%S.%fZ")}
    if isinstance(v, str):
        return {"stringValue": v}
    if isinstance(v, bytes):
        return {"bytesValue": base64.standard_b64encode(v).decode("ascii")}
    if isinstance(v, (list, tuple)):
        return {"arrayValue": {"values": [encode_value(x) for x in v]}}
    if isinstance(v, dict):
        return {"mapValue": {"fields": encode_fields(v)}}
    raise TypeError(f"Unsupported Firestore value type: {type(v)}")


def encode_fields(data: dict[str, Any]) -> dict[str, dict]:
    """Encode a flat dict into the Document.fields mapping."""
    return {k: encode_value(v) for k, v in data.items()}


def _parse_timestamp(raw: str) -> datetime:
    # Firestore may return nanosecond precision; fromisoformat accepts at most 6 digits.
    head, _, frac = raw.rstrip("Z").partition(".")
    if frac:
        head = f"{head}.{frac[:6]}"
    return datetime.fromisoformat(head + "+00:00")


def decode_value(obj: dict) -> Any:
    """Decode one typed Firestore value; unknown types decode to None."""
    if "nullValue" in obj:
        return None
    if "booleanValue" in obj:
        return obj["booleanValue"]
    if "integerValue" in obj:
        return int(obj["integerValue"])
    if "doubleValue" in obj:
        return float(obj["doubleValue"])
    if "timestampValue" in obj:
        return _parse_timestamp(obj["timestampValue"])
    if "stringValue" in obj:
        return obj["stringValue"]
    if "bytesValue" in obj:
        return base64.standard_b64decode(obj["bytesValue"])
    if "arrayValue" in obj:
        return [decode_value(x) for x in obj["arrayValue"].get("values") or []]
    if "mapValue" in obj:
        return decode_fields(obj["mapValue"].get("fields"))
    return None


def decode_fields(fields: dict | None) -> dict[str, Any]:
    """Decode a Document.fields mapping into a plain dict."""
    if not fields:
        return {}
    return {k: decode_value(v) for k, v in fields.items()}


def decode_document(document: dict | None) -> dict[str, Any]:
    """Convert a REST Document body (with "fields") to a Python dict."""
    if not document:
        return {}
    return decode_fields(document.get("fields"))
