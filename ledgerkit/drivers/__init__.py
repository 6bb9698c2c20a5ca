"""Drivers: the external collaborators operation handlers call into."""

from .base import Driver
from .errors import (
    AccountNotFoundError,
    DriverError,
    ProgramError,
    TransactionFailedError,
    UnexpectedAccountError,
)
from .filesystem import (
    File,
    FilesystemDriver,
    LocalFilesystemDriver,
    MemoryFilesystemDriver,
)
from .ledger import (
    Account,
    AccountWrite,
    LedgerDriver,
    Transaction,
    assert_account_exists,
    parse_account,
)
from .memory import MemoryLedger

__all__ = [
    "Account",
    "AccountNotFoundError",
    "AccountWrite",
    "Driver",
    "DriverError",
    "File",
    "FilesystemDriver",
    "LedgerDriver",
    "LocalFilesystemDriver",
    "MemoryFilesystemDriver",
    "MemoryLedger",
    "ProgramError",
    "Transaction",
    "TransactionFailedError",
    "UnexpectedAccountError",
    "assert_account_exists",
    "parse_account",
]
