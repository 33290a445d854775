from __future__ import annotations

from sprig import config

# NOTE: process-global, set once by the host before evaluation starts.
_verbose: bool = config.verbose_from_env()


def set_verbose(flag: bool) -> None:
    global _verbose
    _verbose = flag


def is_verbose() -> bool:
    return _verbose
