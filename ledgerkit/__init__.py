"""ledgerkit - Plugin-based async client for ledger programs."""

from .core import (
    Capability,
    Client,
    DuplicateOperationError,
    FunctionPlugin,
    HydrationConflictError,
    LedgerKitError,
    Operation,
    OperationCanceledError,
    OperationDescriptor,
    OperationRegistry,
    Plugin,
    PluginInstallError,
    Scope,
    ScopeTeardownError,
    Task,
    UnregisteredOperationError,
    assemble,
    profile,
    use_operation,
)
from .config import ClientConfig
from .drivers import (
    AccountNotFoundError,
    LocalFilesystemDriver,
    MemoryFilesystemDriver,
    MemoryLedger,
    ProgramError,
)
from .plugins import core_plugins
from .types import Address, Amount, Currency, amount, sol, token

__version__ = "0.1.0"

__all__ = [
    # Core
    "Capability",
    "Client",
    "ClientConfig",
    "FunctionPlugin",
    "Operation",
    "OperationDescriptor",
    "OperationRegistry",
    "Plugin",
    "Scope",
    "Task",
    "assemble",
    "core_plugins",
    "profile",
    "use_operation",
    # Errors
    "AccountNotFoundError",
    "DuplicateOperationError",
    "HydrationConflictError",
    "LedgerKitError",
    "OperationCanceledError",
    "PluginInstallError",
    "ProgramError",
    "ScopeTeardownError",
    "UnregisteredOperationError",
    # Drivers
    "LocalFilesystemDriver",
    "MemoryFilesystemDriver",
    "MemoryLedger",
    # Types
    "Address",
    "Amount",
    "Currency",
    "amount",
    "sol",
    "token",
]
