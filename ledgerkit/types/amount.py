"""Amounts of native currency and tokens, stored in basis points."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

__all__ = [
    "Amount",
    "Currency",
    "SOL",
    "amount",
    "format_amount",
    "lamports",
    "sol",
    "token",
]


@dataclass(frozen=True)
class Currency:
    """A currency with a symbol and the number of decimals of its basis unit."""

    symbol: str
    decimals: int
    namespace: str = "spl-token"


SOL = Currency(symbol="SOL", decimals=9, namespace="sol")


@dataclass(frozen=True)
class Amount:
    """An integer number of basis units of a currency."""

    basis_points: int
    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.basis_points, int):
            raise TypeError("Amount basis points must be an integer")

    def __add__(self, other: Amount) -> Amount:
        self._assert_same_currency(other)
        return Amount(self.basis_points + other.basis_points, self.currency)

    def __sub__(self, other: Amount) -> Amount:
        self._assert_same_currency(other)
        return Amount(self.basis_points - other.basis_points, self.currency)

    def _assert_same_currency(self, other: Amount) -> None:
        if other.currency != self.currency:
            raise ValueError(
                f"Cannot combine amounts in {self.currency.symbol} and "
                f"{other.currency.symbol}"
            )

    def __str__(self) -> str:
        return format_amount(self)


def amount(basis_points: int, currency: Currency) -> Amount:
    return Amount(int(basis_points), currency)


def _to_basis_points(value: float | int | str, decimals: int) -> int:
    return int(Decimal(str(value)).scaleb(decimals).to_integral_value())


def sol(value: float | int | str) -> Amount:
    """Amount of native currency in whole SOL."""
    return Amount(_to_basis_points(value, SOL.decimals), SOL)


def lamports(value: int) -> Amount:
    """Amount of native currency in its basis unit."""
    return Amount(int(value), SOL)


def token(value: float | int | str, decimals: int = 0, symbol: str = "Token") -> Amount:
    """Amount of a token with the given decimals."""
    currency = Currency(symbol=symbol, decimals=decimals)
    return Amount(_to_basis_points(value, decimals), currency)


def format_amount(value: Amount) -> str:
    decimals = value.currency.decimals
    units = Decimal(value.basis_points).scaleb(-decimals)
    return f"{value.currency.symbol} {units:.{decimals}f}"
