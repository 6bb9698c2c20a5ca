"""Operation - a typed, named unit of asynchronous work.

An OperationDescriptor identifies "an operation with input I producing output
O". Calling a descriptor with an input builds a fresh Operation instance that
the executor dispatches to whichever handler a plugin registered for the
descriptor's key.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Generic, TypeVar
from uuid import UUID, uuid4

if TYPE_CHECKING:
    from .client import Client
    from .scope import Scope

__all__ = ["Operation", "OperationDescriptor", "OperationHandler", "use_operation"]

I = TypeVar("I")
O = TypeVar("O")

OperationHandler = Callable[[Any, "Client", "Scope"], Awaitable[Any] | Any]
"""Handler signature: (input, client, scope) -> output, sync or async"""


@dataclass(frozen=True)
class OperationDescriptor(Generic[I, O]):
    """Immutable identifier for an operation with typed input and output.

    Descriptors compare by key only. They are created once, at module level,
    and registered with a handler when their plugin is installed.

    Attributes:
        key: Identifier unique among the operations of a client
        input_type: Class the input must be an instance of (``object`` to skip)
        output_type: Declared output type (informational)
    """

    key: str
    input_type: Any = field(default=object, compare=False)
    output_type: Any = field(default=object, compare=False)

    def __call__(self, input: I) -> Operation[I, O]:
        """Build a fresh operation instance for ``input``."""
        if isinstance(self.input_type, type) and not isinstance(input, self.input_type):
            raise TypeError(
                f"Operation '{self.key}' expects input of type "
                f"{self.input_type.__name__}, got {type(input).__name__}"
            )
        return Operation(descriptor=self, input=input)

    def __repr__(self) -> str:
        return f"OperationDescriptor({self.key!r})"


@dataclass(frozen=True)
class Operation(Generic[I, O]):
    """A single call of an operation: descriptor plus input.

    Attributes:
        descriptor: Descriptor identifying the handler to dispatch to
        input: Input passed to the handler
        operation_id: Unique identifier of this call
    """

    descriptor: OperationDescriptor[I, O]
    input: I
    operation_id: UUID = field(default_factory=uuid4, compare=False)

    @property
    def key(self) -> str:
        return self.descriptor.key

    def __repr__(self) -> str:
        return f"Operation({self.key}, {self.operation_id})"


def use_operation(
    key: str,
    input_type: type[I] | Any = object,
    output_type: type[O] | Any = object,
) -> OperationDescriptor[I, O]:
    """Declare an operation descriptor.

    Keys are not tracked globally. Uniqueness is enforced per client: a
    second handler registered for the same key raises
    DuplicateOperationError.

    Example:
        load_bid_operation = use_operation("LoadBidOperation", LoadBidInput, Bid)
    """
    if not key:
        raise ValueError("Operation key must be a non-empty string")
    return OperationDescriptor(key=key, input_type=input_type, output_type=output_type)
