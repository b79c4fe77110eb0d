from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

import pytest

from .config import NESTPATH_CONFIG


@dataclass(frozen=True)
class _NestpathConfigSnapshot:
    trace_fallbacks: bool
    allow_private_members: bool
    log_level: str

    @classmethod
    def capture(cls) -> "_NestpathConfigSnapshot":
        return cls(
            trace_fallbacks=NESTPATH_CONFIG.trace_fallbacks,
            allow_private_members=NESTPATH_CONFIG.allow_private_members,
            log_level=NESTPATH_CONFIG.log_level,
        )

    def restore(self) -> None:
        NESTPATH_CONFIG.trace_fallbacks = self.trace_fallbacks
        NESTPATH_CONFIG.allow_private_members = self.allow_private_members
        NESTPATH_CONFIG.log_level = self.log_level


def _apply_test_config() -> None:
    NESTPATH_CONFIG.trace_fallbacks = False
    NESTPATH_CONFIG.allow_private_members = False
    NESTPATH_CONFIG.log_level = "WARNING"


@contextmanager
def nestpath_test_env() -> Generator[None, None, None]:
    """Reset ``NESTPATH_CONFIG`` to defaults and restore it on exit."""
    snapshot = _NestpathConfigSnapshot.capture()
    _apply_test_config()
    try:
        yield
    finally:
        snapshot.restore()


@pytest.fixture()
def nestpath_config() -> Generator[object, None, None]:
    """Yield ``NESTPATH_CONFIG`` with defaults applied; changes are undone after the test."""
    with nestpath_test_env():
        yield NESTPATH_CONFIG
