"""Operations creating, finding and updating auction houses."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ...config import Commitment
from ...core.operation import use_operation
from ...core.scope import Scope
from ...drivers.ledger import AccountWrite, Transaction, parse_account
from ...types.address import Address
from ...types.amount import SOL
from ..nft.accounts import WRAPPED_SOL_MINT
from ..nft.models import to_mint
from .accounts import AuctionHouseAccountData
from .errors import NoInstructionsToSendError
from .models import AuctionHouse, to_auction_house
from .program import (
    AUCTION_HOUSE_PROGRAM,
    find_auction_house_fee_pda,
    find_auction_house_pda,
    find_auction_house_treasury_pda,
)

if TYPE_CHECKING:
    from ...core.client import Client

__all__ = [
    "CreateAuctionHouseInput",
    "CreateAuctionHouseOutput",
    "FindAuctionHouseByAddressInput",
    "UpdateAuctionHouseInput",
    "UpdateAuctionHouseOutput",
    "create_auction_house_operation",
    "find_auction_house_by_address_operation",
    "update_auction_house_operation",
    "HANDLERS",
]


@dataclass(frozen=True)
class FindAuctionHouseByAddressInput:
    address: Address
    commitment: Commitment | None = None


@dataclass(frozen=True)
class CreateAuctionHouseInput:
    """Create an auction house.

    Addresses left unset default to the client identity.
    """

    seller_fee_basis_points: int
    requires_sign_off: bool = False
    can_change_sale_price: bool = False
    treasury_mint: Address = WRAPPED_SOL_MINT
    creator: Address | None = None
    authority: Address | None = None
    fee_withdrawal_destination: Address | None = None
    treasury_withdrawal_destination: Address | None = None
    commitment: Commitment | None = None


@dataclass(frozen=True)
class CreateAuctionHouseOutput:
    auction_house: AuctionHouse
    signature: str


@dataclass(frozen=True)
class UpdateAuctionHouseInput:
    """Update an auction house. Fields left as None keep their current value."""

    auction_house: AuctionHouse
    new_authority: Address | None = None
    seller_fee_basis_points: int | None = None
    requires_sign_off: bool | None = None
    can_change_sale_price: bool | None = None
    fee_withdrawal_destination: Address | None = None
    treasury_withdrawal_destination: Address | None = None
    commitment: Commitment | None = None


@dataclass(frozen=True)
class UpdateAuctionHouseOutput:
    auction_house: AuctionHouse
    signature: str


find_auction_house_by_address_operation = use_operation(
    "FindAuctionHouseByAddressOperation", FindAuctionHouseByAddressInput, AuctionHouse
)
create_auction_house_operation = use_operation(
    "CreateAuctionHouseOperation", CreateAuctionHouseInput, CreateAuctionHouseOutput
)
update_auction_house_operation = use_operation(
    "UpdateAuctionHouseOperation", UpdateAuctionHouseInput, UpdateAuctionHouseOutput
)


async def find_auction_house_by_address_handler(
    input: FindAuctionHouseByAddressInput, client: Client, scope: Scope
) -> AuctionHouse:
    rpc = client.rpc()
    account = await rpc.get_existing_account(input.address, "AuctionHouse", input.commitment)
    data = parse_account(account, AuctionHouseAccountData, "AuctionHouse")

    if data.treasury_mint == WRAPPED_SOL_MINT:
        return to_auction_house(account, SOL)

    scope.throw_if_canceled()
    mint_account = await rpc.get_existing_account(data.treasury_mint, "Mint", input.commitment)
    return to_auction_house(account, to_mint(mint_account).currency)


async def create_auction_house_handler(
    input: CreateAuctionHouseInput, client: Client, scope: Scope
) -> CreateAuctionHouseOutput:
    identity = client.identity()
    creator = input.creator or identity
    address = find_auction_house_pda(creator, input.treasury_mint)

    data = AuctionHouseAccountData(
        creator=creator,
        authority=input.authority or identity,
        treasury_mint=input.treasury_mint,
        auction_house_fee_account=find_auction_house_fee_pda(address),
        auction_house_treasury=find_auction_house_treasury_pda(address),
        fee_withdrawal_destination=input.fee_withdrawal_destination or identity,
        treasury_withdrawal_destination=input.treasury_withdrawal_destination or identity,
        seller_fee_basis_points=input.seller_fee_basis_points,
        requires_sign_off=input.requires_sign_off,
        can_change_sale_price=input.can_change_sale_price,
    )
    transaction = Transaction(
        writes=(AccountWrite(address, AUCTION_HOUSE_PROGRAM, data),),
        fee_payer=identity,
        signers=(creator,),
    )

    scope.throw_if_canceled()
    signature = await client.rpc().send_and_confirm_transaction(transaction, input.commitment)
    scope.throw_if_canceled()

    auction_house = await client.run(
        find_auction_house_by_address_operation(
            FindAuctionHouseByAddressInput(address, input.commitment)
        ),
        scope,
    )
    return CreateAuctionHouseOutput(auction_house=auction_house, signature=signature)


async def update_auction_house_handler(
    input: UpdateAuctionHouseInput, client: Client, scope: Scope
) -> UpdateAuctionHouseOutput:
    current = input.auction_house
    changes = {
        "authority": input.new_authority,
        "seller_fee_basis_points": input.seller_fee_basis_points,
        "requires_sign_off": input.requires_sign_off,
        "can_change_sale_price": input.can_change_sale_price,
        "fee_withdrawal_destination": input.fee_withdrawal_destination,
        "treasury_withdrawal_destination": input.treasury_withdrawal_destination,
    }
    rpc = client.rpc()
    account = await rpc.get_existing_account(current.address, "AuctionHouse", input.commitment)
    data = parse_account(account, AuctionHouseAccountData, "AuctionHouse")

    updated = dataclasses.replace(
        data, **{name: value for name, value in changes.items() if value is not None}
    )
    if updated == data:
        raise NoInstructionsToSendError(update_auction_house_operation.key)

    transaction = Transaction(
        writes=(AccountWrite(current.address, AUCTION_HOUSE_PROGRAM, updated, create=False),),
        fee_payer=client.identity(),
        signers=(data.authority,),
    )

    scope.throw_if_canceled()
    signature = await rpc.send_and_confirm_transaction(transaction, input.commitment)
    scope.throw_if_canceled()

    auction_house = await client.run(
        find_auction_house_by_address_operation(
            FindAuctionHouseByAddressInput(current.address, input.commitment)
        ),
        scope,
    )
    return UpdateAuctionHouseOutput(auction_house=auction_house, signature=signature)


HANDLERS = (
    (find_auction_house_by_address_operation, find_auction_house_by_address_handler),
    (create_auction_house_operation, create_auction_house_handler),
    (update_auction_house_operation, update_auction_house_handler),
)
