"""Response shape normalization for loosely-typed platform payloads."""

from __future__ import annotations

from typing import Any


def extract_records(payload: Any) -> list[dict[str, Any]]:
    """Normalize a platform response into a flat list of raw record dicts.

    Accepted shapes, all equivalent:
      - a direct list of records
      - an object whose values are the records (keyed by id)
      - a ``{"data": ...}`` envelope wrapping either of the above
    """
    if isinstance(payload, dict):
        if "data" in payload:
            payload = payload["data"]
        elif "success" in payload or "meta" in payload:
            # Envelope with nothing in it
            return []

    if isinstance(payload, list):
        items = payload
    elif isinstance(payload, dict):
        items = list(payload.values())
    else:
        return []

    return [item for item in items if isinstance(item, dict)]
