"""Listing operations: create, find and load (hydrate) listings."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ...config import Commitment
from ...core.hydration import assemble
from ...core.operation import use_operation
from ...core.scope import Scope
from ...drivers.ledger import AccountWrite, Transaction
from ...types.address import Address
from ...types.amount import Amount, amount, token
from ..nft.accounts import find_associated_token_account_pda, find_metadata_pda
from .accounts import ListingReceiptData, TradeStateData
from .errors import CurrencyMismatchError
from .models import AuctionHouse, LazyListing, Listing, to_lazy_listing
from .program import (
    AUCTION_HOUSE_PROGRAM,
    find_auction_house_trade_state_pda,
    find_listing_receipt_pda,
)

if TYPE_CHECKING:
    from ...core.client import Client

__all__ = [
    "CreateListingInput",
    "CreateListingOutput",
    "FindListingByTradeStateInput",
    "LoadListingInput",
    "create_listing_operation",
    "find_listing_by_trade_state_operation",
    "load_listing_operation",
    "HANDLERS",
]


@dataclass(frozen=True)
class LoadListingInput:
    lazy_listing: LazyListing
    load_json_metadata: bool | None = None
    commitment: Commitment | None = None


@dataclass(frozen=True)
class FindListingByTradeStateInput:
    address: Address
    auction_house: AuctionHouse
    load_json_metadata: bool | None = None
    commitment: Commitment | None = None


@dataclass(frozen=True)
class CreateListingInput:
    """List an NFT for sale.

    Attributes:
        seller: Defaults to the client identity
        token_account: Defaults to the seller's associated token account
    """

    auction_house: AuctionHouse
    mint_account: Address
    price: Amount | None = None
    tokens: Amount | None = None
    seller: Address | None = None
    token_account: Address | None = None
    bookkeeper: Address | None = None
    print_receipt: bool = True
    load_json_metadata: bool | None = None
    commitment: Commitment | None = None


@dataclass(frozen=True)
class CreateListingOutput:
    listing: Listing
    seller_trade_state: Address
    receipt_address: Address | None
    bookkeeper_address: Address
    signature: str


load_listing_operation = use_operation("LoadListingOperation", LoadListingInput, Listing)
find_listing_by_trade_state_operation = use_operation(
    "FindListingByTradeStateOperation", FindListingByTradeStateInput, Listing
)
create_listing_operation = use_operation(
    "CreateListingOperation", CreateListingInput, CreateListingOutput
)


async def load_listing_handler(
    input: LoadListingInput, client: Client, scope: Scope
) -> Listing:
    lazy_listing = input.lazy_listing
    token_model = await client.nfts().find_token_with_metadata_by_metadata(
        lazy_listing.metadata_address,
        lazy_listing.seller_address,
        load_json_metadata=input.load_json_metadata,
        commitment=input.commitment,
    ).run(scope)
    scope.throw_if_canceled()

    return assemble(
        Listing,
        lazy_listing,
        token=token_model,
        tokens=amount(lazy_listing.token_size, token_model.mint.currency),
    )


async def find_listing_by_trade_state_handler(
    input: FindListingByTradeStateInput, client: Client, scope: Scope
) -> Listing:
    receipt_address = find_listing_receipt_pda(input.address)
    account = await client.rpc().get_existing_account(
        receipt_address, "ListingReceipt", input.commitment
    )
    lazy_listing = to_lazy_listing(account, input.auction_house)
    scope.throw_if_canceled()

    return await client.run(
        load_listing_operation(
            LoadListingInput(lazy_listing, input.load_json_metadata, input.commitment)
        ),
        scope,
    )


async def create_listing_handler(
    input: CreateListingInput, client: Client, scope: Scope
) -> CreateListingOutput:
    auction_house = input.auction_house
    price = input.price or amount(0, auction_house.currency)
    if price.currency != auction_house.currency:
        raise CurrencyMismatchError(auction_house.currency, price.currency)
    tokens = input.tokens or token(1)

    seller = input.seller or client.identity()
    bookkeeper = input.bookkeeper or client.identity()
    token_account = input.token_account or find_associated_token_account_pda(
        input.mint_account, seller
    )
    metadata_address = find_metadata_pda(input.mint_account)
    trade_state = find_auction_house_trade_state_pda(
        auction_house.address,
        seller,
        auction_house.treasury_mint_address,
        input.mint_account,
        price.basis_points,
        tokens.basis_points,
        token_account,
    )
    receipt_address = find_listing_receipt_pda(trade_state) if input.print_receipt else None
    created_at = int(time.time())

    writes = [
        AccountWrite(
            trade_state,
            AUCTION_HOUSE_PROGRAM,
            TradeStateData(
                auction_house=auction_house.address,
                wallet=seller,
                mint=input.mint_account,
                price=price.basis_points,
                token_size=tokens.basis_points,
                side="sell",
                token_account=token_account,
            ),
        )
    ]
    if receipt_address is not None:
        writes.append(
            AccountWrite(
                receipt_address,
                AUCTION_HOUSE_PROGRAM,
                ListingReceiptData(
                    trade_state=trade_state,
                    bookkeeper=bookkeeper,
                    auction_house=auction_house.address,
                    seller=seller,
                    metadata=metadata_address,
                    price=price.basis_points,
                    token_size=tokens.basis_points,
                    created_at=created_at,
                ),
            )
        )
    transaction = Transaction(
        writes=tuple(writes), fee_payer=client.identity(), signers=(seller,)
    )

    scope.throw_if_canceled()
    signature = await client.rpc().send_and_confirm_transaction(transaction, input.commitment)
    scope.throw_if_canceled()

    lazy_listing = LazyListing(
        auction_house=auction_house,
        trade_state_address=trade_state,
        bookkeeper_address=bookkeeper,
        seller_address=seller,
        metadata_address=metadata_address,
        receipt_address=receipt_address,
        purchase_receipt_address=None,
        price=price,
        token_size=tokens.basis_points,
        created_at=created_at,
    )
    listing = await client.run(
        load_listing_operation(
            LoadListingInput(lazy_listing, input.load_json_metadata, input.commitment)
        ),
        scope,
    )
    return CreateListingOutput(
        listing=listing,
        seller_trade_state=trade_state,
        receipt_address=receipt_address,
        bookkeeper_address=bookkeeper,
        signature=signature,
    )


HANDLERS = (
    (load_listing_operation, load_listing_handler),
    (find_listing_by_trade_state_operation, find_listing_by_trade_state_handler),
    (create_listing_operation, create_listing_handler),
)
