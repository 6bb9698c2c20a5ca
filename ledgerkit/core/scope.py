"""Scope - cooperative cancellation and cleanup for operation trees.

A Scope is created by the executor for every operation call. Nested operations
run under a child scope derived from their caller's scope, so canceling a scope
is observed by every operation below it at its next ``throw_if_canceled()``
check. Cancellation never preempts a handler; it only becomes visible at those
explicit check points.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import weakref
from typing import Any, Callable

from .errors import OperationCanceledError, ScopeTeardownError

__all__ = ["Scope"]

logger = logging.getLogger(__name__)


class Scope:
    """Hierarchical cancellation and cleanup context.

    Attributes:
        teardown_errors: Failures collected from teardown callbacks once the
            scope has been closed (empty until then).

    Example:
        scope = Scope()
        scope.on_cleanup(lambda: print("released"))
        task = client.nfts().find_mint_with_metadata_by_metadata(address)
        await task.run(scope)
    """

    def __init__(self, parent: Scope | None = None) -> None:
        self._parent = parent
        self._children: weakref.WeakSet[Scope] = weakref.WeakSet()
        self._callbacks: list[Callable[[], Any]] = []
        self._canceled = False
        self._closed = False
        self._timer: asyncio.TimerHandle | None = None
        self.teardown_errors: tuple[BaseException, ...] = ()

        if parent is not None:
            parent._children.add(self)
            # A scope derived from a canceled parent starts canceled.
            self._canceled = parent.canceled

    @property
    def parent(self) -> Scope | None:
        return self._parent

    @property
    def canceled(self) -> bool:
        return self._canceled

    @property
    def closed(self) -> bool:
        return self._closed

    def derive(self) -> Scope:
        """Create a child scope that observes this scope's cancellation."""
        return Scope(self)

    def cancel(self) -> None:
        """Cancel this scope and every live descendant.

        Returns immediately. Operations running under the scope stop at their
        next ``throw_if_canceled()`` check; completed work is not rolled back.
        """
        if self._canceled:
            return
        self._canceled = True
        for child in list(self._children):
            child.cancel()

    def cancel_after(self, delay: float) -> None:
        """Schedule cancellation on the running event loop after ``delay`` seconds."""
        loop = asyncio.get_running_loop()
        if self._timer is not None:
            self._timer.cancel()
        self._timer = loop.call_later(delay, self.cancel)

    def throw_if_canceled(self) -> None:
        """Raise OperationCanceledError if this scope has been canceled."""
        if self._canceled:
            raise OperationCanceledError()

    def on_cleanup(self, callback: Callable[[], Any]) -> Callable[[], Any]:
        """Register a sync or async callback to run once when the scope exits.

        Callbacks run in reverse registration order. Returns the callback so the
        method can be used as a decorator.
        """
        if self._closed:
            raise RuntimeError("Cannot register a cleanup callback on a closed scope")
        self._callbacks.append(callback)
        return callback

    async def close(self) -> tuple[BaseException, ...]:
        """Run teardown callbacks exactly once, most recent first.

        Every callback runs even if an earlier one fails. Failures are collected
        and returned (and kept on ``teardown_errors``). A callback interrupted
        by a BaseException such as ``asyncio.CancelledError`` does not stop the
        others; the first such exception is raised after all of them ran.
        """
        if self._closed:
            return ()
        self._closed = True

        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

        errors: list[BaseException] = []
        interrupt: BaseException | None = None
        while self._callbacks:
            callback = self._callbacks.pop()
            try:
                result = callback()
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.warning(f"Teardown callback {callback!r} failed: {e!r}")
                errors.append(e)
            except BaseException as e:
                # Re-raised once the remaining callbacks have run.
                if interrupt is None:
                    interrupt = e

        if self._parent is not None:
            self._parent._children.discard(self)

        self.teardown_errors = tuple(errors)
        if interrupt is not None:
            raise interrupt
        return self.teardown_errors

    async def exit(self, error: BaseException | None = None) -> None:
        """Close the scope and report teardown failures.

        Without a primary ``error``, teardown failures are raised as a
        ScopeTeardownError. With one, the primary error is left for the caller
        to re-raise unchanged and the teardown failures are attached to it as
        a note.
        """
        failures = await self.close()
        if not failures:
            return
        teardown_error = ScopeTeardownError(list(failures))
        if error is None:
            raise teardown_error
        error.add_note(str(teardown_error))

    async def __aenter__(self) -> Scope:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.exit(exc)

    def __repr__(self) -> str:
        state = "canceled" if self._canceled else "active"
        if self._closed:
            state += ", closed"
        return f"Scope({state}, cleanups={len(self._callbacks)})"
