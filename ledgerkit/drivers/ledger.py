"""Ledger driver interface and the records it exchanges."""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping, TypeVar

from ..types.address import Address
from .base import Driver
from .errors import AccountNotFoundError, UnexpectedAccountError

__all__ = [
    "Account",
    "AccountWrite",
    "LedgerDriver",
    "Transaction",
    "assert_account_exists",
    "parse_account",
]

T = TypeVar("T")


@dataclass(frozen=True)
class Account:
    """An account read from the ledger.

    ``data`` holds the decoded account data; decoding is the driver's concern.
    """

    address: Address
    owner: Address
    data: Any
    lamports: int = 0


@dataclass(frozen=True)
class AccountWrite:
    """One account write in a transaction.

    Attributes:
        create: The account must not exist yet (otherwise it must exist)
    """

    address: Address
    owner: Address
    data: Any
    lamports: int = 0
    create: bool = True


@dataclass(frozen=True)
class Transaction:
    """An ordered set of account writes applied atomically."""

    writes: tuple[AccountWrite, ...]
    fee_payer: Address
    signers: tuple[Address, ...] = field(default_factory=tuple)
    memo: str = ""


class LedgerDriver(Driver):
    """Asynchronous access to the authoritative ledger."""

    @abstractmethod
    async def get_account(
        self, address: Address, commitment: str | None = None
    ) -> Account | None:
        """Fetch one account, or None if it does not exist."""

    @abstractmethod
    async def get_multiple_accounts(
        self, addresses: list[Address], commitment: str | None = None
    ) -> list[Account | None]:
        """Fetch several accounts in one round trip, preserving order."""

    @abstractmethod
    async def get_program_accounts(
        self,
        program: Address,
        filters: Mapping[str, Any] | None = None,
        commitment: str | None = None,
    ) -> list[Account]:
        """Scan accounts owned by a program whose data fields match ``filters``.

        The ``type`` filter matches the name of the account data type; every
        other key is compared against the data field of the same name.
        """

    @abstractmethod
    async def send_transaction(
        self, transaction: Transaction, commitment: str | None = None
    ) -> str:
        """Submit a transaction and return its signature once confirmed."""


def assert_account_exists(
    account: Account | None,
    address: Address,
    account_type: str | None = None,
    solution: str | None = None,
) -> Account:
    """Return the account or raise AccountNotFoundError."""
    if account is None:
        raise AccountNotFoundError(address, account_type, solution)
    return account


def parse_account(
    account: Account, data_type: type[T], type_name: str | None = None
) -> T:
    """Return the account data, checking it is of the expected type.

    Raises:
        UnexpectedAccountError: If the account holds another kind of data.
    """
    if not isinstance(account.data, data_type):
        raise UnexpectedAccountError(
            account.address,
            type_name or data_type.__name__,
            type(account.data).__name__,
        )
    return account.data
