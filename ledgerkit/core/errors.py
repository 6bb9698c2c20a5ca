"""Core error types for ledgerkit."""

from __future__ import annotations


class LedgerKitError(Exception):
    """Base exception for all ledgerkit errors."""

    pass


class DuplicateOperationError(LedgerKitError):
    """Raised when a second handler is registered for an operation key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(
            f"Operation '{key}' already has a registered handler. "
            "Operation keys must be unique per client."
        )


class UnregisteredOperationError(LedgerKitError):
    """Raised when an operation is run but no plugin registered a handler."""

    def __init__(self, key: str, available: list[str] | None = None):
        self.key = key
        self.available: tuple[str, ...] = tuple(available or ())
        available_display = ", ".join(self.available) if self.available else "none"
        super().__init__(
            f"No handler registered for operation '{key}'. "
            f"Available: {available_display}"
        )


class OperationCanceledError(LedgerKitError):
    """Raised when a scope check observes cancellation."""

    def __init__(self, message: str = "The operation has been canceled."):
        super().__init__(message)


class ScopeTeardownError(LedgerKitError):
    """Raised when one or more teardown callbacks fail.

    Attributes:
        errors: Exceptions raised by the failing callbacks, in execution order.
    """

    def __init__(self, errors: list[BaseException]):
        self.errors: tuple[BaseException, ...] = tuple(errors)
        causes = "; ".join(f"{e.__class__.__name__}: {e}" for e in self.errors)
        super().__init__(
            f"{len(self.errors)} teardown callback(s) failed. Causes: {causes}"
        )


class PluginInstallError(LedgerKitError):
    """Raised when plugins are installed on a client more than once."""

    pass


class HydrationConflictError(LedgerKitError):
    """Raised when hydration would overwrite a field of the lazy record."""

    def __init__(self, record: str, field_name: str, lazy_value: object, value: object):
        self.record = record
        self.field_name = field_name
        super().__init__(
            f"Cannot hydrate {record}: field '{field_name}' is {lazy_value!r} on the "
            f"lazy record but the nested fetch produced {value!r}."
        )
