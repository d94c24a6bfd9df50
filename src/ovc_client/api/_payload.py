from __future__ import annotations

from typing import Any


def compact(payload: dict[str, Any]) -> dict[str, Any]:
    """Drop unset (None) fields so the API applies its own defaults."""
    return {k: v for k, v in payload.items() if v is not None}
