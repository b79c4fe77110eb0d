from __future__ import annotations

from typing import Final


class _NestpathMissing:
    """Sentinel for members that are absent, as opposed to present and ``None``."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "nestpath.MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = _NestpathMissing()


class NestpathError(Exception):
    """Base class for errors raised by nestpath."""


class TypeConversionError(NestpathError, TypeError):
    """Raised when a value cannot be coerced to the kind of a shape value."""

    def __init__(self, value: object, target: str) -> None:
        self.value = value
        self.target = target
        super().__init__(
            f"cannot convert {type(value).__name__} value {value!r} to {target}"
        )


__all__ = ["MISSING", "NestpathError", "TypeConversionError"]
