"""Context-local execution state.

Holds the profiler shared by every operation started from the current context
and the key of the operation currently running, so nested calls can be
attributed to their caller.
"""

from __future__ import annotations

import contextvars
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator

__all__ = [
    "ExecutionContext",
    "get_current_execution_context",
    "get_current_operation",
    "running_operation",
]


@dataclass
class ExecutionContext:
    profiler: Any | None = None


_execution_context: contextvars.ContextVar[ExecutionContext | None] = (
    contextvars.ContextVar("execution_context", default=None)
)
_current_operation: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "current_operation", default=None
)


def get_current_execution_context() -> ExecutionContext:
    """Get or create the execution context of the current task."""
    ctx = _execution_context.get()
    if ctx is None:
        ctx = ExecutionContext()
        _execution_context.set(ctx)
    return ctx


def get_current_operation() -> str | None:
    """Key of the operation running in the current task, if any."""
    return _current_operation.get()


@contextmanager
def running_operation(key: str) -> Iterator[str | None]:
    """Mark ``key`` as the running operation; yields the caller's key."""
    caller = _current_operation.get()
    token = _current_operation.set(key)
    try:
        yield caller
    finally:
        _current_operation.reset(token)
