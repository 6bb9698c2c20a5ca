"""Bid operations: create, find, scan and load (hydrate) bids."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from ...config import Commitment
from ...core.hydration import assemble
from ...core.operation import use_operation
from ...core.scope import Scope
from ...drivers.ledger import AccountWrite, Transaction
from ...types.address import Address
from ...types.amount import Amount, amount, token
from ..nft.accounts import find_associated_token_account_pda, find_metadata_pda
from .accounts import BidReceiptData, TradeStateData
from .errors import CurrencyMismatchError
from .models import AuctionHouse, Bid, LazyBid, PrivateBid, PublicBid, to_lazy_bid
from .program import (
    AUCTION_HOUSE_PROGRAM,
    find_auction_house_trade_state_pda,
    find_bid_receipt_pda,
)

if TYPE_CHECKING:
    from ...core.client import Client

__all__ = [
    "CreateBidInput",
    "CreateBidOutput",
    "FindBidByTradeStateInput",
    "FindBidsByInput",
    "LoadBidInput",
    "create_bid_operation",
    "find_bid_by_trade_state_operation",
    "find_bids_by_operation",
    "load_bid_operation",
    "HANDLERS",
]


@dataclass(frozen=True)
class LoadBidInput:
    lazy_bid: LazyBid
    load_json_metadata: bool | None = None
    commitment: Commitment | None = None


@dataclass(frozen=True)
class FindBidByTradeStateInput:
    address: Address
    auction_house: AuctionHouse
    load_json_metadata: bool | None = None
    commitment: Commitment | None = None


@dataclass(frozen=True)
class FindBidsByInput:
    """Scan the bid receipts of an auction house.

    Attributes:
        type: Receipt field to match; ``mint`` matches the mint's metadata
        public_key: Address to match
    """

    auction_house: AuctionHouse
    type: Literal["buyer", "metadata", "mint"]
    public_key: Address
    commitment: Commitment | None = None


@dataclass(frozen=True)
class CreateBidInput:
    """Place a bid on an NFT.

    Attributes:
        price: Defaults to zero in the auction house currency
        tokens: Defaults to one token
        buyer: Defaults to the client identity
        seller: Owner of the token; makes the bid private on their
            associated token account
        token_account: Token account the bid targets; makes the bid private
        print_receipt: Also write a bid receipt so the bid can be found later
    """

    auction_house: AuctionHouse
    mint_account: Address
    price: Amount | None = None
    tokens: Amount | None = None
    buyer: Address | None = None
    seller: Address | None = None
    token_account: Address | None = None
    bookkeeper: Address | None = None
    print_receipt: bool = True
    load_json_metadata: bool | None = None
    commitment: Commitment | None = None


@dataclass(frozen=True)
class CreateBidOutput:
    bid: Bid
    buyer_trade_state: Address
    receipt_address: Address | None
    bookkeeper_address: Address
    signature: str


load_bid_operation = use_operation("LoadBidOperation", LoadBidInput, object)
find_bid_by_trade_state_operation = use_operation(
    "FindBidByTradeStateOperation", FindBidByTradeStateInput, object
)
find_bids_by_operation = use_operation(
    "FindBidsByPublicKeyFieldOperation", FindBidsByInput, list
)
create_bid_operation = use_operation("CreateBidOperation", CreateBidInput, CreateBidOutput)


async def load_bid_handler(input: LoadBidInput, client: Client, scope: Scope) -> Bid:
    lazy_bid = input.lazy_bid
    nfts = client.nfts()

    match lazy_bid.token_address:
        case None:
            mint = await nfts.find_mint_with_metadata_by_metadata(
                lazy_bid.metadata_address,
                load_json_metadata=input.load_json_metadata,
                commitment=input.commitment,
            ).run(scope)
            scope.throw_if_canceled()
            return assemble(
                PublicBid,
                lazy_bid,
                mint=mint,
                tokens=amount(lazy_bid.token_size, mint.currency),
            )
        case token_address:
            token_model = await nfts.find_token_with_metadata_by_address(
                token_address,
                load_json_metadata=input.load_json_metadata,
                commitment=input.commitment,
            ).run(scope)
            scope.throw_if_canceled()
            return assemble(
                PrivateBid,
                lazy_bid,
                token=token_model,
                tokens=amount(lazy_bid.token_size, token_model.mint.currency),
            )


async def find_bid_by_trade_state_handler(
    input: FindBidByTradeStateInput, client: Client, scope: Scope
) -> Bid:
    receipt_address = find_bid_receipt_pda(input.address)
    account = await client.rpc().get_existing_account(
        receipt_address, "BidReceipt", input.commitment
    )
    lazy_bid = to_lazy_bid(account, input.auction_house)
    scope.throw_if_canceled()

    return await client.run(
        load_bid_operation(LoadBidInput(lazy_bid, input.load_json_metadata, input.commitment)),
        scope,
    )


async def find_bids_by_handler(
    input: FindBidsByInput, client: Client, scope: Scope
) -> list[LazyBid]:
    match input.type:
        case "buyer":
            filters = {"buyer": input.public_key}
        case "metadata":
            filters = {"metadata": input.public_key}
        case "mint":
            filters = {"metadata": find_metadata_pda(input.public_key)}
        case _:
            raise ValueError(f"Cannot find bids by '{input.type}'")

    filters = {
        "type": BidReceiptData.__name__,
        "auction_house": input.auction_house.address,
        **filters,
    }
    accounts = await client.rpc().get_program_accounts(
        AUCTION_HOUSE_PROGRAM, filters, input.commitment
    )
    return [to_lazy_bid(account, input.auction_house) for account in accounts]


async def create_bid_handler(
    input: CreateBidInput, client: Client, scope: Scope
) -> CreateBidOutput:
    auction_house = input.auction_house
    price = input.price or amount(0, auction_house.currency)
    if price.currency != auction_house.currency:
        raise CurrencyMismatchError(auction_house.currency, price.currency)
    tokens = input.tokens or token(1)

    buyer = input.buyer or client.identity()
    bookkeeper = input.bookkeeper or client.identity()
    token_account = input.token_account
    if token_account is None and input.seller is not None:
        token_account = find_associated_token_account_pda(input.mint_account, input.seller)

    metadata_address = find_metadata_pda(input.mint_account)
    trade_state = find_auction_house_trade_state_pda(
        auction_house.address,
        buyer,
        auction_house.treasury_mint_address,
        input.mint_account,
        price.basis_points,
        tokens.basis_points,
        token_account,
    )
    receipt_address = find_bid_receipt_pda(trade_state) if input.print_receipt else None
    created_at = int(time.time())

    writes = [
        AccountWrite(
            trade_state,
            AUCTION_HOUSE_PROGRAM,
            TradeStateData(
                auction_house=auction_house.address,
                wallet=buyer,
                mint=input.mint_account,
                price=price.basis_points,
                token_size=tokens.basis_points,
                side="buy",
                token_account=token_account,
            ),
        )
    ]
    if receipt_address is not None:
        writes.append(
            AccountWrite(
                receipt_address,
                AUCTION_HOUSE_PROGRAM,
                BidReceiptData(
                    trade_state=trade_state,
                    bookkeeper=bookkeeper,
                    auction_house=auction_house.address,
                    buyer=buyer,
                    metadata=metadata_address,
                    price=price.basis_points,
                    token_size=tokens.basis_points,
                    created_at=created_at,
                    token_account=token_account,
                ),
            )
        )
    transaction = Transaction(
        writes=tuple(writes), fee_payer=client.identity(), signers=(buyer,)
    )

    scope.throw_if_canceled()
    signature = await client.rpc().send_and_confirm_transaction(transaction, input.commitment)
    scope.throw_if_canceled()

    lazy_bid = LazyBid(
        auction_house=auction_house,
        trade_state_address=trade_state,
        bookkeeper_address=bookkeeper,
        buyer_address=buyer,
        metadata_address=metadata_address,
        token_address=token_account,
        receipt_address=receipt_address,
        purchase_receipt_address=None,
        price=price,
        token_size=tokens.basis_points,
        created_at=created_at,
    )
    bid = await client.run(
        load_bid_operation(LoadBidInput(lazy_bid, input.load_json_metadata, input.commitment)),
        scope,
    )
    return CreateBidOutput(
        bid=bid,
        buyer_trade_state=trade_state,
        receipt_address=receipt_address,
        bookkeeper_address=bookkeeper,
        signature=signature,
    )


HANDLERS = (
    (load_bid_operation, load_bid_handler),
    (find_bid_by_trade_state_operation, find_bid_by_trade_state_handler),
    (find_bids_by_operation, find_bids_by_handler),
    (create_bid_operation, create_bid_handler),
)
