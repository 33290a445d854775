from __future__ import annotations
import logging
import os

_TRUTHY = {"1", "true", "yes", "on"}

DEFAULT_RECURSION_LIMIT = 200_000
# Stack for the evaluation thread; deep Lisp recursion needs far more than the default.
DEFAULT_STACK_SIZE_MB = 512


def verbose_from_env(var: str = "SPRIG_VERBOSE") -> bool:
    return os.environ.get(var, "").strip().lower() in _TRUTHY


def _positive_int(var: str, default: int) -> int:
    raw = os.environ.get(var, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def get_recursion_limit(var: str = "SPRIG_RECURSION_LIMIT") -> int:
    return _positive_int(var, DEFAULT_RECURSION_LIMIT)


def get_stack_size(var: str = "SPRIG_STACK_SIZE_MB") -> int:
    """Evaluation thread stack size in bytes."""
    return _positive_int(var, DEFAULT_STACK_SIZE_MB) * 1024 * 1024


def get_log_level(var: str = "LOGLEVEL", default: int = logging.WARNING) -> int:
    """
    Determine log level from the LOGLEVEL environment variable.
    Defaults to WARNING if not set or not a logging level name.
    """
    name = os.getenv(var, "").strip().upper()
    if name:
        level = getattr(logging, name, None)
        if isinstance(level, int):
            return level
    return default
