"""One-line fallbacks for values that may be missing, falsy or mistyped."""

from __future__ import annotations

from typing import Any, TypeVar

from .coerce import coerce, is_truthy
from .errors import MISSING

T = TypeVar("T")


def or_default(value: Any, default: T) -> T:
    """``value`` coerced to the kind of ``default`` when truthy, else ``default``.

    ``0``, ``""``, ``False``, NaN, ``None`` and empty containers all fall back.
    """

    return coerce(value, default, strict=False) if is_truthy(value) else default


def defined_or_default(value: Any, default: T) -> T:
    """Like ``or_default`` but only ``None`` falls back; ``0`` and ``""`` are kept."""

    if value is None or value is MISSING:
        return default
    return coerce(value, default, strict=False)


def or_empty_array(value: Any) -> list[Any]:
    if isinstance(value, list):
        return value
    return []


def or_empty_string(value: Any) -> str:
    return str(value) if is_truthy(value) else ""


def or_undefined(value: T) -> T | None:
    """Return ``value`` when truthy, else ``None`` (handy before JSON dumps)."""

    return value if is_truthy(value) else None


__all__ = [
    "defined_or_default",
    "or_default",
    "or_empty_array",
    "or_empty_string",
    "or_undefined",
]
