from __future__ import annotations

import os


def env_bool(name: str, default: bool = False) -> bool:
    val = os.environ.get(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "y", "on"}


def env_int(name: str, default: int = 0, *, minimum: int | None = None) -> int:
    """Integer from the environment; unset, malformed or below `minimum` gives `default`."""
    val = os.environ.get(name)
    if val is None or not val.strip():
        return default
    try:
        n = int(val.strip())
    except ValueError:
        return default
    if minimum is not None and n < minimum:
        return default
    return n


def env_str(name: str, default: str = "") -> str:
    return str(os.environ.get(name, default) or default).strip()
