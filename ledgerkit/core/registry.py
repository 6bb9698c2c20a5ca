"""Operation registry: maps operation keys to handlers."""

from __future__ import annotations

import logging
import threading
from typing import Any, Awaitable, Callable, TypeVar

from .errors import DuplicateOperationError, UnregisteredOperationError
from .operation import OperationDescriptor, OperationHandler

__all__ = ["OperationRegistry"]

logger = logging.getLogger(__name__)

I = TypeVar("I")
O = TypeVar("O")

_Entry = tuple[OperationDescriptor, OperationHandler]


class OperationRegistry:
    """Map operation keys to handler functions (sync or async).

    One registry per client. Plugins write to it while the client is being
    constructed; afterwards it is only read by the executor.

    Example:
        registry = OperationRegistry()
        registry.register(load_bid_operation, load_bid_operation_handler)
        handler = registry.resolve("LoadBidOperation")
    """

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.RLock()

    def register(
        self,
        descriptor: OperationDescriptor[I, O],
        handler: Callable[[I, Any, Any], Awaitable[O] | O],
    ) -> OperationDescriptor[I, O]:
        """Register the handler for a descriptor.

        Raises:
            DuplicateOperationError: If the key already has a handler. The
                existing registration stays active.
        """
        with self._lock:
            if descriptor.key in self._entries:
                raise DuplicateOperationError(descriptor.key)
            self._entries[descriptor.key] = (descriptor, handler)
        logger.debug(f"Registered operation '{descriptor.key}'")
        return descriptor

    def resolve(self, key: str | OperationDescriptor) -> OperationHandler:
        """Get the handler for a key or descriptor.

        Raises:
            UnregisteredOperationError: If no handler is registered.
        """
        return self._get(key)[1]

    def get_descriptor(self, key: str | OperationDescriptor) -> OperationDescriptor:
        """Get the registered descriptor for a key."""
        return self._get(key)[0]

    def _get(self, key: str | OperationDescriptor) -> _Entry:
        name = key.key if isinstance(key, OperationDescriptor) else key
        with self._lock:
            entry = self._entries.get(name)
            if entry is None:
                raise UnregisteredOperationError(name, list(self._entries))
            return entry

    def has(self, key: str | OperationDescriptor) -> bool:
        name = key.key if isinstance(key, OperationDescriptor) else key
        with self._lock:
            return name in self._entries

    def keys(self) -> list[str]:
        """Return all registered operation keys."""
        with self._lock:
            return list(self._entries)

    def snapshot(self) -> dict[str, _Entry]:
        """Copy the current registrations (used to roll back a failed install)."""
        with self._lock:
            return dict(self._entries)

    def restore(self, snapshot: dict[str, _Entry]) -> None:
        """Replace all registrations with a snapshot."""
        with self._lock:
            self._entries = dict(snapshot)

    def __contains__(self, key: str | OperationDescriptor) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"OperationRegistry(operations={self.keys()})"
