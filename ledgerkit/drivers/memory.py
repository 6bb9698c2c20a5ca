"""In-memory ledger driver for tests and local development."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Mapping
from uuid import uuid4

import cloudpickle

from ..types.address import Address
from .errors import (
    ACCOUNT_ALREADY_IN_USE,
    ACCOUNT_NOT_INITIALIZED,
    TransactionFailedError,
)
from .ledger import Account, LedgerDriver, Transaction

__all__ = ["MemoryLedger"]

logger = logging.getLogger(__name__)

_MISSING = object()


class MemoryLedger(LedgerDriver):
    """Ledger held in a dict, applying transactions without validation rules.

    Every call suspends once (optionally for ``latency`` seconds) like a real
    network call, and is appended to ``calls`` so tests can observe which
    round trips an operation made.

    Example:
        ledger = MemoryLedger()
        client = Client(ledger)
        ...
        state = ledger.snapshot()
        ledger.restore(state)
    """

    name = "memory"

    def __init__(self, latency: float = 0.0) -> None:
        self.latency = latency
        self.calls: list[tuple[str, Any]] = []
        self.transactions: list[Transaction] = []
        self._accounts: dict[Address, Account] = {}

    async def _round_trip(self, method: str, argument: Any) -> None:
        self.calls.append((method, argument))
        await asyncio.sleep(self.latency)

    # Reads

    async def get_account(
        self, address: Address, commitment: str | None = None
    ) -> Account | None:
        await self._round_trip("get_account", address)
        return self._accounts.get(address)

    async def get_multiple_accounts(
        self, addresses: list[Address], commitment: str | None = None
    ) -> list[Account | None]:
        await self._round_trip("get_multiple_accounts", tuple(addresses))
        return [self._accounts.get(address) for address in addresses]

    async def get_program_accounts(
        self,
        program: Address,
        filters: Mapping[str, Any] | None = None,
        commitment: str | None = None,
    ) -> list[Account]:
        await self._round_trip("get_program_accounts", program)
        filters = filters or {}
        return [
            account
            for account in self._accounts.values()
            if account.owner == program and _matches(account.data, filters)
        ]

    # Writes

    async def send_transaction(
        self, transaction: Transaction, commitment: str | None = None
    ) -> str:
        await self._round_trip("send_transaction", len(transaction.writes))

        # Validate every write before applying any of them.
        for write in transaction.writes:
            exists = write.address in self._accounts
            if write.create and exists:
                raise TransactionFailedError(
                    write.owner,
                    ACCOUNT_ALREADY_IN_USE,
                    [
                        f"Program {write.owner} invoke [1]",
                        f"Allocate: account {write.address} already in use",
                        f"Program {write.owner} failed: custom program error: 0x0",
                    ],
                )
            if not write.create and not exists:
                raise TransactionFailedError(
                    write.owner,
                    ACCOUNT_NOT_INITIALIZED,
                    [
                        f"Program {write.owner} invoke [1]",
                        f"Account {write.address} is not initialized",
                        f"Program {write.owner} failed: custom program error: 0x1",
                    ],
                )

        for write in transaction.writes:
            self._accounts[write.address] = Account(
                address=write.address,
                owner=write.owner,
                data=write.data,
                lamports=write.lamports,
            )

        self.transactions.append(transaction)
        signature = uuid4().hex
        logger.debug(
            f"Applied transaction {signature} with {len(transaction.writes)} write(s)"
        )
        return signature

    # Test helpers

    def set_account(self, account: Account) -> None:
        """Write an account directly, bypassing transactions."""
        self._accounts[account.address] = account

    def accounts(self) -> dict[Address, Account]:
        return dict(self._accounts)

    def count_calls(self, method: str | None = None) -> int:
        if method is None:
            return len(self.calls)
        return sum(1 for name, _ in self.calls if name == method)

    def reset_calls(self) -> None:
        self.calls.clear()

    def snapshot(self) -> bytes:
        """Serialize all accounts.

        Uses cloudpickle so account data classes defined locally (in tests or
        notebooks) are captured too.
        """
        return cloudpickle.dumps(self._accounts)

    def restore(self, snapshot: bytes) -> None:
        """Replace all accounts with a snapshot taken by ``snapshot()``."""
        self._accounts = cloudpickle.loads(snapshot)


def _matches(data: Any, filters: Mapping[str, Any]) -> bool:
    for key, expected in filters.items():
        if key == "type":
            if type(data).__name__ != expected:
                return False
            continue
        if getattr(data, key, _MISSING) != expected:
            return False
    return True
