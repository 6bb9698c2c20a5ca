"""Operation-dispatch framework: registry, executor, scopes and plugins."""

from .errors import (
    DuplicateOperationError,
    HydrationConflictError,
    LedgerKitError,
    OperationCanceledError,
    PluginInstallError,
    ScopeTeardownError,
    UnregisteredOperationError,
)
from .scope import Scope
from .operation import Operation, OperationDescriptor, OperationHandler, use_operation
from .registry import OperationRegistry
from .task import Task
from .executor import Executor
from .plugin import Capability, FunctionPlugin, Plugin, PluginLoader
from .client import Client
from .hydration import assemble, is_lazy, record_fields
from .context import get_current_operation
from .profiling import (
    disable_profiling,
    enable_profiling,
    get_profiler,
    is_profiling_enabled,
    profile,
)

__all__ = [
    "Capability",
    "Client",
    "DuplicateOperationError",
    "Executor",
    "FunctionPlugin",
    "HydrationConflictError",
    "LedgerKitError",
    "Operation",
    "OperationCanceledError",
    "OperationDescriptor",
    "OperationHandler",
    "OperationRegistry",
    "Plugin",
    "PluginInstallError",
    "PluginLoader",
    "Scope",
    "ScopeTeardownError",
    "Task",
    "UnregisteredOperationError",
    "assemble",
    "disable_profiling",
    "enable_profiling",
    "get_current_operation",
    "get_profiler",
    "is_lazy",
    "is_profiling_enabled",
    "profile",
    "record_fields",
    "use_operation",
]
