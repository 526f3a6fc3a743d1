"""Utilities for tracing nested storage operations in debug logs."""

import contextvars
from contextlib import contextmanager
import logging
from time import perf_counter
from typing import Generator


_LOGGER = logging.getLogger(__name__)

# No public API
__all__: list[str] = []


_operations: contextvars.ContextVar[tuple[str, ...]] = contextvars.ContextVar(
    "operations", default=()
)


@contextmanager
def trace_context(operation: str) -> Generator[str, None, None]:
    """Time the wrapped storage operation and yield its nested label.

    The label joins the operations that are in progress in the current task,
    e.g. `Write .mesh/a > Load .mesh/a`.
    """
    operations = (*_operations.get(), operation)
    token = _operations.set(operations)
    label = " > ".join(operations)
    start = perf_counter()
    _LOGGER.debug("[Trace] > %s", label)
    try:
        yield label
    finally:
        _operations.reset(token)
        _LOGGER.debug("[Trace] < %s (%0.2fs)", label, perf_counter() - start)
