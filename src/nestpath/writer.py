"""Writes into nested containers, creating missing levels on the way."""

from __future__ import annotations

from typing import Any

from .paths import (
    PATH_MISSING,
    is_writable_container,
    normalize_path,
    read_member,
    write_member,
)
from .runtime.logging import log_fallback


def set_on(context: Any, path: Any, value: Any) -> Any:
    """Assign ``value`` at ``path`` inside ``context`` and return what was stored.

    Missing or ``None`` intermediate members are replaced with empty dicts.
    Members holding anything that cannot take members (numbers, strings,
    callables, tuples) stop the write. Returns ``None`` when the value could
    not be set. Validating models may store a converted value, which is what
    gets returned.

    The write is not atomic: dicts created along the path before a failure
    stay in ``context``.
    """

    if not is_writable_container(context):
        log_fallback(path, "root is not a writable container")
        return None

    steps = normalize_path(path)
    if steps is None:
        log_fallback(path, "path must be a string or a sequence of strings")
        return None
    if not steps:
        log_fallback(path, "path is empty")
        return None

    key = steps.pop()
    cursor = context
    for token in steps:
        if not is_writable_container(cursor):
            break
        if not isinstance(token, str):
            log_fallback(path, f"step {token!r} is not a string")
            return None

        member = read_member(cursor, token)
        if member is PATH_MISSING or member is None:
            if not write_member(cursor, token, {}):
                cursor = None
                break
            # Read back; validating models may have converted the dict.
            member = read_member(cursor, token)
        cursor = member

    if not isinstance(key, str) or not key:
        log_fallback(path, f"final step {key!r} is not a non-empty string")
        return None
    if not is_writable_container(cursor) or not write_member(cursor, key, value):
        log_fallback(path, f"cannot assign {key!r}")
        return None
    stored = read_member(cursor, key)
    return None if stored is PATH_MISSING else stored


__all__ = ["set_on"]
