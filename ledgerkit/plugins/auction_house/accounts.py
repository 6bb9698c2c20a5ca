"""Auction House program accounts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ...types.address import Address

__all__ = [
    "AuctionHouseAccountData",
    "BidReceiptData",
    "ListingReceiptData",
    "TradeStateData",
]


@dataclass(frozen=True)
class AuctionHouseAccountData:
    creator: Address
    authority: Address
    treasury_mint: Address
    auction_house_fee_account: Address
    auction_house_treasury: Address
    fee_withdrawal_destination: Address
    treasury_withdrawal_destination: Address
    seller_fee_basis_points: int
    requires_sign_off: bool = False
    can_change_sale_price: bool = False


@dataclass(frozen=True)
class TradeStateData:
    auction_house: Address
    wallet: Address
    mint: Address
    price: int
    token_size: int
    side: Literal["buy", "sell"]
    token_account: Address | None = None


@dataclass(frozen=True)
class BidReceiptData:
    trade_state: Address
    bookkeeper: Address
    auction_house: Address
    buyer: Address
    metadata: Address
    price: int
    token_size: int
    created_at: int
    token_account: Address | None = None
    purchase_receipt: Address | None = None
    canceled_at: int | None = None


@dataclass(frozen=True)
class ListingReceiptData:
    trade_state: Address
    bookkeeper: Address
    auction_house: Address
    seller: Address
    metadata: Address
    price: int
    token_size: int
    created_at: int
    purchase_receipt: Address | None = None
    canceled_at: int | None = None
