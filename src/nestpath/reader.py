"""Null-safe reads of deeply nested values."""

from __future__ import annotations

from typing import Any, TypeVar, overload

from .coerce import coerce, is_truthy
from .errors import MISSING
from .paths import PATH_MISSING, normalize_path, parse_step, read_member
from .runtime.logging import log_fallback

T = TypeVar("T")


@overload
def get_from(context: Any, path: Any) -> Any: ...


@overload
def get_from(context: Any, path: Any, default: T) -> T: ...


def get_from(context: Any, path: Any, default: Any = MISSING) -> Any:
    """Read the value at ``path`` inside ``context``.

    ``path`` is a dot-delimited string (``"model.settings.bin_count"``) or a
    list/tuple of step names. Digit steps index sequences and a step ending
    in ``()`` calls the named member with no arguments::

        get_from(jobs, "0.get_status().code", 404)

    Any break in the path (an invalid path type, a missing member, a ``None``
    along the way or at the end) returns ``default``, or ``None`` when no
    default was given. On success the value is returned as is, or passed
    through ``coerce`` against ``default`` when one was given, so
    ``get_from(doc, "port", 0)`` yields an ``int`` even for ``"8080"``. A leaf
    with no form of the default's kind (a dict read with an ``int`` default)
    comes back as NaN rather than raising.
    Exceptions raised by invoked members propagate.
    """

    fallback = None if default is MISSING else default

    resolved = _resolve(context, path)
    if resolved is PATH_MISSING:
        return fallback

    if default is MISSING:
        return resolved
    return coerce(resolved, default, strict=False)


def exists_on(context: Any, path: Any) -> bool:
    """Whether ``path`` resolves inside ``context`` to a value other than ``None``."""

    return _resolve(context, path) is not PATH_MISSING


def _resolve(context: Any, path: Any) -> Any:
    steps = normalize_path(path)
    if steps is None:
        log_fallback(path, "path must be a string or a sequence of strings")
        return PATH_MISSING

    current = context
    consumed = 0
    while current is not None and consumed < len(steps):
        token = steps[consumed]
        consumed += 1
        if not isinstance(token, str):
            log_fallback(path, f"step {token!r} is not a string")
            return PATH_MISSING

        name, invoke = parse_step(token)
        member = read_member(current, name)
        if invoke:
            if member is PATH_MISSING or not is_truthy(member):
                log_fallback(path, f"no member {name!r} to call")
                return PATH_MISSING
            if not callable(member):
                log_fallback(path, f"member {name!r} is not callable")
                return PATH_MISSING
            current = member()
        elif member is PATH_MISSING:
            log_fallback(path, f"no member {name!r}")
            return PATH_MISSING
        else:
            current = member

    if consumed < len(steps):
        log_fallback(path, f"None reached with {len(steps) - consumed} step(s) left")
        return PATH_MISSING
    if current is None or current is MISSING:
        log_fallback(path, "resolved to None")
        return PATH_MISSING
    return current


__all__ = ["exists_on", "get_from"]
