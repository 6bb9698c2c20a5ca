"""Executor - dispatches operations to their registered handlers."""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from .operation import Operation
from .profiling import operation_context
from .registry import OperationRegistry
from .scope import Scope

if TYPE_CHECKING:
    from .client import Client

__all__ = ["Executor"]

logger = logging.getLogger(__name__)

O = TypeVar("O")


class Executor:
    """Run operations against a registry on behalf of a client.

    The executor owns no state beyond the scopes it creates. Handler errors
    (including collaborator errors from drivers) propagate unchanged; teardown
    callbacks of the operation's scope always run first.
    """

    def __init__(self, client: Client, registry: OperationRegistry) -> None:
        self._client = client
        self._registry = registry

    async def run(self, operation: Operation[Any, O], parent_scope: Scope | None = None) -> O:
        """Execute an operation and return its output.

        Args:
            operation: Operation instance to dispatch
            parent_scope: Scope of the calling operation, if nested. The
                operation runs under a child of it.

        Raises:
            UnregisteredOperationError: If no handler is registered for the key.
            OperationCanceledError: If the scope is canceled before the handler
                starts, or the handler observes cancellation.
        """
        handler = self._registry.resolve(operation.key)
        scope = parent_scope.derive() if parent_scope is not None else Scope()
        logger.debug(f"Running {operation!r}")

        with operation_context(operation.key):
            try:
                # A scope canceled before dispatch never reaches the handler.
                scope.throw_if_canceled()
                result = handler(operation.input, self._client, scope)
                if inspect.isawaitable(result):
                    result = await result
            except BaseException as error:
                logger.debug(f"{operation!r} failed: {error.__class__.__name__}")
                await scope.exit(error)
                raise
            await scope.exit()

        logger.debug(f"{operation!r} completed")
        return result
