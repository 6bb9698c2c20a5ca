"""Auction House domain errors."""

from __future__ import annotations

from ...core.errors import LedgerKitError
from ...types.amount import Currency


class AuctionHouseError(LedgerKitError):
    """Base exception for Auction House operations."""

    pass


class CurrencyMismatchError(AuctionHouseError):
    """Raised when a price is not in the auction house's treasury currency."""

    def __init__(self, expected: Currency, actual: Currency):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected a price in {expected.symbol} ({expected.decimals} decimals) "
            f"but got {actual.symbol} ({actual.decimals} decimals)."
        )


class NoInstructionsToSendError(AuctionHouseError):
    """Raised when an update would not change anything."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            f"The operation '{operation}' has no changes to send to the ledger."
        )
