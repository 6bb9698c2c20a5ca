"""Auction House program address, derived addresses and error resolution."""

from __future__ import annotations

from ...drivers.errors import (
    ACCOUNT_ALREADY_IN_USE,
    ACCOUNT_NOT_INITIALIZED,
    ProgramError,
    TransactionFailedError,
)
from ...types.address import Address, find_program_address

__all__ = [
    "AUCTION_HOUSE_PROGRAM",
    "AUCTION_HOUSE_PROGRAM_NAME",
    "find_auction_house_fee_pda",
    "find_auction_house_pda",
    "find_auction_house_trade_state_pda",
    "find_auction_house_treasury_pda",
    "find_bid_receipt_pda",
    "find_listing_receipt_pda",
    "resolve_auction_house_error",
]

AUCTION_HOUSE_PROGRAM = Address("AuctionHouseProgram111111111111111111111")
AUCTION_HOUSE_PROGRAM_NAME = "AuctionHouseProgram"

_PROGRAM_ERRORS: dict[int, tuple[str, str]] = {
    ACCOUNT_ALREADY_IN_USE: (
        "AccountAlreadyInUse",
        "An account this instruction creates already exists, e.g. an identical "
        "bid or listing was already placed.",
    ),
    ACCOUNT_NOT_INITIALIZED: (
        "AccountNotInitialized",
        "An account this instruction updates does not exist.",
    ),
}


def find_auction_house_pda(creator: Address, treasury_mint: Address) -> Address:
    return find_program_address(AUCTION_HOUSE_PROGRAM, "auction_house", creator, treasury_mint)


def find_auction_house_fee_pda(auction_house: Address) -> Address:
    return find_program_address(
        AUCTION_HOUSE_PROGRAM, "auction_house", auction_house, "fee_payer"
    )


def find_auction_house_treasury_pda(auction_house: Address) -> Address:
    return find_program_address(
        AUCTION_HOUSE_PROGRAM, "auction_house", auction_house, "treasury"
    )


def find_auction_house_trade_state_pda(
    auction_house: Address,
    wallet: Address,
    treasury_mint: Address,
    token_mint: Address,
    price: int,
    token_size: int,
    token_account: Address | None = None,
) -> Address:
    seeds: list[str | int] = ["auction_house", wallet, auction_house]
    if token_account is not None:
        seeds.append(token_account)
    seeds.extend([treasury_mint, token_mint, price, token_size])
    return find_program_address(AUCTION_HOUSE_PROGRAM, *seeds)


def find_bid_receipt_pda(trade_state: Address) -> Address:
    return find_program_address(AUCTION_HOUSE_PROGRAM, "bid_receipt", trade_state)


def find_listing_receipt_pda(trade_state: Address) -> Address:
    return find_program_address(AUCTION_HOUSE_PROGRAM, "listing_receipt", trade_state)


def resolve_auction_house_error(error: TransactionFailedError) -> ProgramError | None:
    """Map an Auction House transaction failure to a named program error."""
    known = _PROGRAM_ERRORS.get(error.code)
    if known is None:
        return None
    name, message = known
    return ProgramError(AUCTION_HOUSE_PROGRAM_NAME, error.code, name, message, cause=error)
