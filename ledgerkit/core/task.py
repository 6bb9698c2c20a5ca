"""Task - the runnable handle returned by client facades."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .operation import Operation

if TYPE_CHECKING:
    from .client import Client
    from .scope import Scope

__all__ = ["Task"]

O = TypeVar("O")


@dataclass
class Task(Generic[O]):
    """An operation bound to the client that will execute it.

    Facade methods build the operation and return a Task; nothing runs until
    ``run()`` is awaited. Awaiting the task directly is shorthand for
    ``await task.run()``.

    Example:
        bid = await client.auctions().for_auction_house(house).load_bid(lazy).run(scope)
    """

    operation: Operation[Any, O]
    client: Client

    async def run(self, scope: Scope | None = None) -> O:
        """Execute the operation, deriving its scope from ``scope`` if given."""
        return await self.client.run(self.operation, scope)

    def __await__(self):
        return self.run().__await__()

    def __repr__(self) -> str:
        return f"Task({self.operation.key}, {self.operation.operation_id})"
