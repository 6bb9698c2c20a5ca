"""Errors raised by drivers (ledger, filesystem).

The framework never wraps these; they reach callers exactly as raised so
callers can match on the original failure kind.
"""

from __future__ import annotations

from ..core.errors import LedgerKitError

# Error codes shared by ledger drivers for account-level failures.
ACCOUNT_ALREADY_IN_USE = 0x0
ACCOUNT_NOT_INITIALIZED = 0x1


class DriverError(LedgerKitError):
    """Base exception for driver failures."""

    pass


class AccountNotFoundError(DriverError):
    """Raised when an expected account does not exist on the ledger."""

    def __init__(
        self,
        address: str,
        account_type: str | None = None,
        solution: str | None = None,
    ):
        self.address = address
        self.account_type = account_type
        message = (
            f"The account of type [{account_type}] was not found at the provided "
            f"address [{address}]."
            if account_type
            else f"No account was found at the provided address [{address}]."
        )
        if solution:
            message = f"{message} {solution}"
        super().__init__(message)


class UnexpectedAccountError(DriverError):
    """Raised when an account holds data of a different type than expected."""

    def __init__(self, address: str, expected_type: str, actual_type: str):
        self.address = address
        self.expected_type = expected_type
        self.actual_type = actual_type
        super().__init__(
            f"Expected account [{address}] to be of type [{expected_type}] "
            f"but it holds [{actual_type}]."
        )


class TransactionFailedError(DriverError):
    """Raised when the ledger rejects a transaction.

    Attributes:
        program: Address of the program whose instruction failed
        code: Program error code
        logs: Program logs emitted before the failure
    """

    def __init__(self, program: str, code: int, logs: list[str]):
        self.program = program
        self.code = code
        self.logs: tuple[str, ...] = tuple(logs)
        super().__init__(
            f"Transaction failed in program [{program}] with error code {code:#x}."
        )


class ProgramError(DriverError):
    """A transaction failure resolved by a registered program error resolver."""

    def __init__(
        self,
        program_name: str,
        code: int,
        name: str,
        message: str,
        cause: TransactionFailedError | None = None,
    ):
        self.program_name = program_name
        self.code = code
        self.name = name
        self.cause = cause
        super().__init__(f"{program_name} > {name} ({code:#x}): {message}")
