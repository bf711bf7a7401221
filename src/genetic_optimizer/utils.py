"""Utility helpers: a timer and import-path resolution."""

import importlib
import time
from contextlib import contextmanager
from typing import Any, Callable

from .logging import get_logger

logger = get_logger(__name__)


@contextmanager
def timer(name: str):
    """Context manager measuring execution time."""

    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        logger.info(f"{name} took {duration:.3f}s")


def load_callable(path: str) -> Callable[..., Any]:
    """Resolve ``"package.module:attribute"`` to a callable."""

    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"expected 'module:function', got {path!r}")
    module = importlib.import_module(module_name)
    target: Any = module
    for part in attr.split("."):
        target = getattr(target, part)
    if not callable(target):
        raise ValueError(f"{path!r} is not callable")
    return target


__all__ = ["timer", "load_callable"]
