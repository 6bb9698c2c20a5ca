"""Auction House models.

Bids and listings come in two forms. The lazy form (``LazyBid``,
``LazyListing``) is built straight from a receipt account and holds only
addresses and raw values. The full form adds the resolved token or mint and
the token amount in that mint's currency. A bid with a token account is a
``PrivateBid`` (it targets one holder's token); without one it is a
``PublicBid`` (any holder of the mint may accept it).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from ...drivers.ledger import Account, parse_account
from ...types.address import Address
from ...types.amount import Amount, Currency, amount
from ..nft.accounts import WRAPPED_SOL_MINT
from ..nft.models import MintWithMetadata, TokenWithMetadata
from .accounts import AuctionHouseAccountData, BidReceiptData, ListingReceiptData

__all__ = [
    "AuctionHouse",
    "Bid",
    "LazyBid",
    "LazyListing",
    "Listing",
    "PrivateBid",
    "PublicBid",
    "to_auction_house",
    "to_lazy_bid",
    "to_lazy_listing",
]


@dataclass(frozen=True)
class AuctionHouse:
    model: ClassVar[str] = "auctionHouse"

    address: Address
    creator_address: Address
    authority_address: Address
    treasury_mint_address: Address
    fee_account_address: Address
    treasury_account_address: Address
    fee_withdrawal_destination_address: Address
    treasury_withdrawal_destination_address: Address
    seller_fee_basis_points: int
    requires_sign_off: bool
    can_change_sale_price: bool
    currency: Currency

    @property
    def is_native(self) -> bool:
        return self.treasury_mint_address == WRAPPED_SOL_MINT


def to_auction_house(account: Account, currency: Currency) -> AuctionHouse:
    data = parse_account(account, AuctionHouseAccountData, "AuctionHouse")
    return AuctionHouse(
        address=account.address,
        creator_address=data.creator,
        authority_address=data.authority,
        treasury_mint_address=data.treasury_mint,
        fee_account_address=data.auction_house_fee_account,
        treasury_account_address=data.auction_house_treasury,
        fee_withdrawal_destination_address=data.fee_withdrawal_destination,
        treasury_withdrawal_destination_address=data.treasury_withdrawal_destination,
        seller_fee_basis_points=data.seller_fee_basis_points,
        requires_sign_off=data.requires_sign_off,
        can_change_sale_price=data.can_change_sale_price,
        currency=currency,
    )


# --------------------------------------------------------------------------- #
# Bids
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, kw_only=True)
class _BidFields:
    model: ClassVar[str] = "bid"

    auction_house: AuctionHouse
    trade_state_address: Address
    bookkeeper_address: Address
    buyer_address: Address
    metadata_address: Address
    token_address: Address | None
    receipt_address: Address | None
    purchase_receipt_address: Address | None
    price: Amount
    token_size: int
    created_at: int
    canceled_at: int | None = None

    @property
    def is_public(self) -> bool:
        return self.token_address is None


@dataclass(frozen=True, kw_only=True)
class LazyBid(_BidFields):
    lazy: ClassVar[bool] = True


@dataclass(frozen=True, kw_only=True)
class PublicBid(_BidFields):
    lazy: ClassVar[bool] = False

    mint: MintWithMetadata
    tokens: Amount


@dataclass(frozen=True, kw_only=True)
class PrivateBid(_BidFields):
    lazy: ClassVar[bool] = False

    token: TokenWithMetadata
    tokens: Amount


Bid = Union[PublicBid, PrivateBid]


def to_lazy_bid(account: Account, auction_house: AuctionHouse) -> LazyBid:
    data = parse_account(account, BidReceiptData, "BidReceipt")
    return LazyBid(
        auction_house=auction_house,
        trade_state_address=data.trade_state,
        bookkeeper_address=data.bookkeeper,
        buyer_address=data.buyer,
        metadata_address=data.metadata,
        token_address=data.token_account,
        receipt_address=account.address,
        purchase_receipt_address=data.purchase_receipt,
        price=amount(data.price, auction_house.currency),
        token_size=data.token_size,
        created_at=data.created_at,
        canceled_at=data.canceled_at,
    )


# --------------------------------------------------------------------------- #
# Listings
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, kw_only=True)
class _ListingFields:
    model: ClassVar[str] = "listing"

    auction_house: AuctionHouse
    trade_state_address: Address
    bookkeeper_address: Address
    seller_address: Address
    metadata_address: Address
    receipt_address: Address | None
    purchase_receipt_address: Address | None
    price: Amount
    token_size: int
    created_at: int
    canceled_at: int | None = None


@dataclass(frozen=True, kw_only=True)
class LazyListing(_ListingFields):
    lazy: ClassVar[bool] = True


@dataclass(frozen=True, kw_only=True)
class Listing(_ListingFields):
    lazy: ClassVar[bool] = False

    token: TokenWithMetadata
    tokens: Amount


def to_lazy_listing(account: Account, auction_house: AuctionHouse) -> LazyListing:
    data = parse_account(account, ListingReceiptData, "ListingReceipt")
    return LazyListing(
        auction_house=auction_house,
        trade_state_address=data.trade_state,
        bookkeeper_address=data.bookkeeper,
        seller_address=data.seller,
        metadata_address=data.metadata,
        receipt_address=account.address,
        purchase_receipt_address=data.purchase_receipt,
        price=amount(data.price, auction_house.currency),
        token_size=data.token_size,
        created_at=data.created_at,
        canceled_at=data.canceled_at,
    )
