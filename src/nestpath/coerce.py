"""Best-effort conversion of a value to the kind of a reference "shape" value."""

from __future__ import annotations

import decimal
import math
import numbers
from typing import Any, Literal, TypeAlias, TypeVar, cast

from .errors import MISSING, TypeConversionError

T = TypeVar("T")

ValueKind: TypeAlias = Literal[
    "undefined", "boolean", "integer", "number", "string", "object"
]

_NAN = float("nan")
_INFINITIES = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}
_FLOAT_WORDS = frozenset({"inf", "infinity", "nan"})


def value_kind(value: object) -> ValueKind:
    """Classify ``value`` the way ``coerce`` dispatches on it."""

    if value is None or value is MISSING:
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    return "object"


def is_truthy(value: object) -> bool:
    """Python truthiness, except that NaN counts as falsy."""

    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def coerce(value: Any, shape: T, *, strict: bool = True) -> T:
    """Convert ``value`` to the kind of ``shape`` when the kinds differ.

    Values already of the shape's kind, and any value when the shape is an
    object (containers, callables, dates, models) or ``None``, are returned
    unchanged. Numeric conversions never fail; non-numeric input becomes NaN.

    With ``strict=False`` an object against an ``int`` shape also becomes NaN
    instead of raising. The readers and fallback helpers coerce this way.

    Raises:
        TypeConversionError: if ``strict``, ``shape`` is an ``int`` and
            ``value`` is an object that has no integer form.
    """

    value_type = value_kind(value)
    target = value_kind(shape)
    if value_type == target or target == "object":
        return cast(T, value)

    if target == "boolean":
        return cast(T, is_truthy(value))
    if target == "number":
        return cast(T, _to_float(value))
    if target == "string":
        return cast(T, str(value))
    if target == "integer":
        return cast(T, _to_integer(value, strict))
    return cast(T, value)


def _parse_number(raw: str) -> int | float:
    text = raw.strip()
    if not text:
        return 0
    if text in _INFINITIES:
        return _INFINITIES[text]
    # Digit separators and Python's inf/nan spellings are not numbers here.
    if "_" in text or text.lstrip("+-").lower() in _FLOAT_WORDS:
        return _NAN
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return int(text, 0)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return _NAN


def _to_float(value: object) -> float:
    if value is None or value is MISSING:
        return 0.0
    if isinstance(value, str):
        return float(_parse_number(value))
    if isinstance(value, (numbers.Real, decimal.Decimal)):
        return float(value)
    return _NAN


def _to_integer(value: object, strict: bool) -> int | float:
    if isinstance(value, str):
        value = _parse_number(value)
    if isinstance(value, (numbers.Real, decimal.Decimal)):
        try:
            return int(value)
        except (OverflowError, ValueError):
            return _NAN
    if not strict:
        return _NAN
    raise TypeConversionError(value, "int")


__all__ = ["ValueKind", "coerce", "is_truthy", "value_kind"]
