"""
nestpath: null-safe reads and writes on deeply nested data.

This package uses a src-layout. Import the package as `nestpath`.
"""

from importlib.metadata import version

__version__ = version("nestpath")

from .coerce import coerce, is_truthy, value_kind
from .config import NESTPATH_CONFIG, NestpathConfig
from .errors import MISSING, NestpathError, TypeConversionError
from .fallbacks import (
    defined_or_default,
    or_default,
    or_empty_array,
    or_empty_string,
    or_undefined,
)
from .reader import exists_on, get_from
from .runtime import configure_logging, get_logger
from .writer import set_on

__all__ = [
    "__version__",
    "MISSING",
    "NESTPATH_CONFIG",
    "NestpathConfig",
    "NestpathError",
    "TypeConversionError",
    "coerce",
    "configure_logging",
    "defined_or_default",
    "exists_on",
    "get_from",
    "get_logger",
    "is_truthy",
    "or_default",
    "or_empty_array",
    "or_empty_string",
    "or_undefined",
    "set_on",
    "value_kind",
]
