from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, field_validator

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag (1/0, true/false), got {raw!r}")


class NestpathConfig(BaseModel):
    """Process-wide switches for traversal and diagnostics."""

    model_config = ConfigDict(validate_assignment=True)

    trace_fallbacks: bool = False
    allow_private_members: bool = False
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> NestpathConfig:
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        raw = env.get("NESTPATH_TRACE_FALLBACKS")
        if raw is not None:
            values["trace_fallbacks"] = _parse_bool("NESTPATH_TRACE_FALLBACKS", raw)

        raw = env.get("NESTPATH_ALLOW_PRIVATE_MEMBERS")
        if raw is not None:
            values["allow_private_members"] = _parse_bool(
                "NESTPATH_ALLOW_PRIVATE_MEMBERS", raw
            )

        raw = env.get("NESTPATH_LOG_LEVEL")
        if raw:
            values["log_level"] = raw

        return cls.model_validate(values)

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


NESTPATH_CONFIG = NestpathConfig.from_env()


__all__ = ["NESTPATH_CONFIG", "NestpathConfig"]
