from .logging import LOGGER_NAME, configure_logging, get_logger, log_fallback

__all__ = ["LOGGER_NAME", "configure_logging", "get_logger", "log_fallback"]
