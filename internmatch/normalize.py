"""Canonical form used for every string comparison in the engine."""
from __future__ import annotations

from typing import Any


def normalize(s: Any) -> str:
    """Lower-case and trim. ``None`` becomes the empty string."""
    if s is None:
        return ""
    return str(s).lower().strip()
