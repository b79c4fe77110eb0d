"""Path normalization and single-step member access."""

from __future__ import annotations

import numbers
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import TypeAlias

from .config import NESTPATH_CONFIG
from .errors import MISSING, _NestpathMissing

PathSpec: TypeAlias = str | Sequence[str]

DELIMITER = "."
INVOKE_MARKER = "()"

PATH_MISSING: _NestpathMissing = MISSING

_IMMUTABLE_TYPES = (
    str,
    bytes,
    numbers.Number,
    tuple,
    frozenset,
    range,
    Mapping,
    Sequence,
)


def normalize_path(path: object) -> list[object] | None:
    """Return the step tokens of ``path`` as a new list.

    Strings are split on ``.``; lists and tuples are copied so the caller's
    sequence is left intact. Any other path shape returns ``None``.
    Items of a sequence path are not validated here.
    """

    if isinstance(path, str):
        return path.split(DELIMITER)
    if isinstance(path, (list, tuple)):
        return list(path)
    return None


def parse_step(token: str) -> tuple[str, bool]:
    """Split an ``name()`` invocation marker off ``token``."""

    if token.endswith(INVOKE_MARKER):
        return token[: -len(INVOKE_MARKER)], True
    return token, False


def read_member(context: object, name: str) -> object:
    """Read one member of ``context``; ``PATH_MISSING`` when there is none.

    Mappings resolve keys only: ``name`` first, then its integer value when
    ``name`` is all digits. Sequences resolve in-range digit tokens, then fall
    back to attributes like any other object.
    """

    if context is None or context is MISSING:
        return PATH_MISSING

    if isinstance(context, Mapping):
        if name in context:
            return context[name]
        index = _as_index(name)
        if index is not None and index in context:
            return context[index]
        return PATH_MISSING

    if isinstance(context, Sequence):
        index = _as_index(name)
        if index is not None:
            if index < len(context):
                return context[index]
            return PATH_MISSING

    if not _attribute_allowed(name):
        return PATH_MISSING
    return getattr(context, name, PATH_MISSING)


def is_writable_container(value: object) -> bool:
    """Whether ``value`` can hold members assigned by ``write_member``."""

    if value is None or value is MISSING:
        return False
    if isinstance(value, (MutableMapping, MutableSequence)):
        return True
    if isinstance(value, _IMMUTABLE_TYPES):
        return False
    return not callable(value)


def write_member(container: object, name: str, value: object) -> bool:
    """Assign ``value`` at ``name`` on ``container``; ``False`` if refused."""

    if isinstance(container, MutableMapping):
        try:
            container[name] = value
        except (TypeError, ValueError):
            return False
        return True

    if isinstance(container, MutableSequence):
        index = _as_index(name)
        if index is None or index >= len(container):
            return False
        try:
            container[index] = value
        except (TypeError, ValueError):
            return False
        return True

    if not is_writable_container(container) or not _attribute_allowed(name):
        return False
    try:
        setattr(container, name, value)
    except (AttributeError, TypeError, ValueError):
        return False
    return True


def _as_index(name: str) -> int | None:
    if name.isascii() and name.isdigit():
        return int(name)
    return None


def _attribute_allowed(name: str) -> bool:
    if not name:
        return False
    if name.startswith("_"):
        return NESTPATH_CONFIG.allow_private_members
    return True


__all__ = [
    "DELIMITER",
    "INVOKE_MARKER",
    "PATH_MISSING",
    "PathSpec",
    "is_writable_container",
    "normalize_path",
    "parse_step",
    "read_member",
    "write_member",
]
