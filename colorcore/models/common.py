# File: colorcore/models/common.py
from __future__ import annotations

from typing import Any, Dict, List

from colorcore.color import normalize_hex


def as_dict(v: Any) -> Dict[str, Any]:
    return v if isinstance(v, dict) else {}


def as_list(v: Any) -> List[Any]:
    return v if isinstance(v, list) else []


def as_str(v: Any, default: str = "") -> str:
    if v is None:
        return default
    if isinstance(v, str):
        return v
    return str(v)


def as_int(v: Any, default: int = 0) -> int:
    if v is None or isinstance(v, bool):
        return default
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


def as_bool(v: Any, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, int):
        return v != 0
    if isinstance(v, str):
        s = v.strip().lower()
        if s in ("1", "true", "yes", "on"):
            return True
        if s in ("0", "false", "no", "off"):
            return False
    return default


def as_color(v: Any, default: str) -> str:
    """Canonical #rrggbb, or `default` when v is not a hex colour."""
    return normalize_hex(v) or default


def as_choice(v: Any, choices: tuple[str, ...], default: str) -> str:
    s = as_str(v, default).strip().lower()
    return s if s in choices else default


def clamp_int(v: int, lo: int, hi: int) -> int:
    if v < lo:
        return lo
    if v > hi:
        return hi
    return v
