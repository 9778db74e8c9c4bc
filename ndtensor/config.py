"""Environment-driven defaults for ndtensor."""

import logging
import os


LOG_LEVEL_ENV = "NDTENSOR_LOG_LEVEL"
DEFAULT_DTYPE_ENV = "NDTENSOR_DEFAULT_DTYPE"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_DTYPE = "float64"


def log_level() -> int:
    """Return the logging level named by ``NDTENSOR_LOG_LEVEL``.

    Unknown names fall back to ``WARNING``.
    """
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(level, int):
        return logging.WARNING
    return level


def default_dtype() -> str:
    """Return the element type used when a tensor is created without one.

    The environment variable ``NDTENSOR_DEFAULT_DTYPE`` overrides the built-in
    ``float64``. It is read on every call, and validated by the caller through
    :func:`ndtensor.dtype.dtype_info`.
    """
    forced = os.environ.get(DEFAULT_DTYPE_ENV)
    if forced:
        return forced.strip().lower()
    return DEFAULT_DTYPE
