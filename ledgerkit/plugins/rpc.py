"""RPC plugin: ledger reads and transaction submission for handlers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Mapping

from ..core.plugin import Capability
from ..drivers.errors import TransactionFailedError
from ..drivers.ledger import Account, Transaction, assert_account_exists
from ..types.address import Address

if TYPE_CHECKING:
    from ..core.client import Client

__all__ = ["RpcClient", "RpcModule", "rpc_module"]

logger = logging.getLogger(__name__)


class RpcClient:
    """Thin facade over the ledger driver applying client defaults."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def _commitment(self, commitment: str | None) -> str:
        return commitment or self._client.config.commitment

    async def get_account(
        self, address: Address, commitment: str | None = None
    ) -> Account | None:
        return await self._client.ledger().get_account(
            address, self._commitment(commitment)
        )

    async def get_existing_account(
        self,
        address: Address,
        account_type: str | None = None,
        commitment: str | None = None,
    ) -> Account:
        """Fetch an account that must exist.

        Raises:
            AccountNotFoundError: If there is no account at ``address``.
        """
        account = await self.get_account(address, commitment)
        return assert_account_exists(account, address, account_type)

    async def get_multiple_accounts(
        self, addresses: list[Address], commitment: str | None = None
    ) -> list[Account | None]:
        return await self._client.ledger().get_multiple_accounts(
            addresses, self._commitment(commitment)
        )

    async def get_program_accounts(
        self,
        program: Address,
        filters: Mapping[str, Any] | None = None,
        commitment: str | None = None,
    ) -> list[Account]:
        return await self._client.ledger().get_program_accounts(
            program, filters, self._commitment(commitment)
        )

    async def send_and_confirm_transaction(
        self, transaction: Transaction, commitment: str | None = None
    ) -> str:
        """Submit a transaction, resolving failures through registered programs."""
        try:
            return await self._client.ledger().send_transaction(
                transaction, self._commitment(commitment)
            )
        except TransactionFailedError as error:
            resolved = self._resolve_error(error)
            if resolved is error:
                raise
            logger.debug(f"Resolved transaction failure to {resolved!r}")
            raise resolved from error

    def _resolve_error(self, error: TransactionFailedError) -> Exception:
        if "programs" not in self._client.capabilities:
            return error
        return self._client.programs().resolve_error(error)


class RpcModule:
    """Attaches ``client.rpc()``."""

    name = "rpc"

    def install(self, client: Client) -> Iterable[Capability]:
        return [Capability("rpc", RpcClient)]


def rpc_module() -> RpcModule:
    return RpcModule()
