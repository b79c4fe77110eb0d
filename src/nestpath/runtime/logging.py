from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from ..config import NESTPATH_CONFIG

LOGGER_NAME = "nestpath"

_FALLBACK_STYLE = "yellow"


class _NestpathRichConsoleHandler(RichHandler):
    """Console handler that prefixes records with a bracketed source location."""

    def __init__(self, level: int = logging.NOTSET) -> None:
        super().__init__(
            level=level,
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )

    @staticmethod
    def _format_location(record: logging.LogRecord) -> str:
        return f"[{Path(record.pathname).name}:{record.lineno}]"

    @staticmethod
    def _format_message_text(record: logging.LogRecord) -> Text:
        message = record.getMessage()
        text = Text(message)
        # Fallback records carry the reason after the first ": ".
        if getattr(record, "nestpath_fallback", False):
            head, sep, _ = message.partition(": ")
            if sep:
                text.stylize(_FALLBACK_STYLE, 0, len(head))
        return text

    def render_message(self, record: logging.LogRecord, message: str) -> Text:
        text = Text(self._format_location(record) + " ", style="dim")
        text.append_text(self._format_message_text(record))
        return text


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Attach the rich console handler to the ``nestpath`` logger once.

    ``level`` defaults to ``NESTPATH_CONFIG.log_level``. Calling this again only
    updates the level.
    """

    logger = get_logger()
    if level is None:
        level = NESTPATH_CONFIG.log_level_number
    logger.setLevel(level)

    for handler in logger.handlers:
        if isinstance(handler, _NestpathRichConsoleHandler):
            handler.setLevel(level)
            return logger

    logger.addHandler(_NestpathRichConsoleHandler(level=level))
    return logger


def log_fallback(path: object, reason: str) -> None:
    """Emit a DEBUG record for a soft failure when tracing is enabled."""

    if not NESTPATH_CONFIG.trace_fallbacks:
        return
    get_logger().debug(
        "fallback %r: %s",
        path,
        reason,
        extra={"nestpath_fallback": True},
    )


__all__ = ["LOGGER_NAME", "configure_logging", "get_logger", "log_fallback"]
