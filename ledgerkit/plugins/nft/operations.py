"""NFT operations and their handlers.

Every handler that makes more than one ledger call checks its scope between
calls, so a canceled caller stops the lookup at the next round trip.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping

from ...config import Commitment
from ...core.operation import use_operation
from ...core.scope import Scope
from ...drivers.ledger import (
    Account,
    AccountWrite,
    Transaction,
    assert_account_exists,
    parse_account,
)
from ...types.address import Address, new_address
from .accounts import (
    TOKEN_METADATA_PROGRAM,
    TOKEN_PROGRAM,
    MetadataAccountData,
    MintAccountData,
    TokenAccountData,
    find_associated_token_account_pda,
    find_metadata_pda,
)
from .models import (
    Metadata,
    MintWithMetadata,
    TokenWithMetadata,
    to_metadata,
    to_mint_with_metadata,
    to_token_with_metadata,
)

if TYPE_CHECKING:
    from ...core.client import Client

__all__ = [
    "CreateNftInput",
    "CreateNftOutput",
    "FindMintWithMetadataByAddressInput",
    "FindMintWithMetadataByMetadataInput",
    "FindTokenWithMetadataByAddressInput",
    "FindTokenWithMetadataByMetadataInput",
    "LoadJsonMetadataInput",
    "create_nft_operation",
    "find_mint_with_metadata_by_address_operation",
    "find_mint_with_metadata_by_metadata_operation",
    "find_token_with_metadata_by_address_operation",
    "find_token_with_metadata_by_metadata_operation",
    "load_json_metadata_operation",
    "HANDLERS",
]


# --------------------------------------------------------------------------- #
# Inputs and outputs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class LoadJsonMetadataInput:
    uri: str


@dataclass(frozen=True)
class FindMintWithMetadataByAddressInput:
    address: Address
    load_json_metadata: bool | None = None
    commitment: Commitment | None = None


@dataclass(frozen=True)
class FindMintWithMetadataByMetadataInput:
    metadata_address: Address
    load_json_metadata: bool | None = None
    commitment: Commitment | None = None


@dataclass(frozen=True)
class FindTokenWithMetadataByAddressInput:
    address: Address
    load_json_metadata: bool | None = None
    commitment: Commitment | None = None


@dataclass(frozen=True)
class FindTokenWithMetadataByMetadataInput:
    metadata_address: Address
    owner: Address
    load_json_metadata: bool | None = None
    commitment: Commitment | None = None


@dataclass(frozen=True)
class CreateNftInput:
    """Mint a new NFT.

    Attributes:
        uri: Location of the off-ledger JSON metadata
        owner: Wallet receiving the token (default: client identity)
        update_authority: Metadata update authority (default: client identity)
        mint: Address of the new mint (default: a fresh address)
        decimals: 0 for NFTs
        supply: Number of basis units minted to the owner
    """

    name: str = "My NFT"
    symbol: str = ""
    uri: str = ""
    seller_fee_basis_points: int = 500
    owner: Address | None = None
    update_authority: Address | None = None
    mint: Address | None = None
    decimals: int = 0
    supply: int = 1
    commitment: Commitment | None = None


@dataclass(frozen=True)
class CreateNftOutput:
    mint_address: Address
    metadata_address: Address
    token_address: Address
    signature: str
    token: TokenWithMetadata


load_json_metadata_operation = use_operation(
    "LoadJsonMetadataOperation", LoadJsonMetadataInput, dict
)
find_mint_with_metadata_by_address_operation = use_operation(
    "FindMintWithMetadataByAddressOperation",
    FindMintWithMetadataByAddressInput,
    MintWithMetadata,
)
find_mint_with_metadata_by_metadata_operation = use_operation(
    "FindMintWithMetadataByMetadataOperation",
    FindMintWithMetadataByMetadataInput,
    MintWithMetadata,
)
find_token_with_metadata_by_address_operation = use_operation(
    "FindTokenWithMetadataByAddressOperation",
    FindTokenWithMetadataByAddressInput,
    TokenWithMetadata,
)
find_token_with_metadata_by_metadata_operation = use_operation(
    "FindTokenWithMetadataByMetadataOperation",
    FindTokenWithMetadataByMetadataInput,
    TokenWithMetadata,
)
create_nft_operation = use_operation("CreateNftOperation", CreateNftInput, CreateNftOutput)


# --------------------------------------------------------------------------- #
# Handlers
# --------------------------------------------------------------------------- #


def _should_load_json(client: Client, load_json_metadata: bool | None) -> bool:
    if load_json_metadata is None:
        return client.config.load_json_metadata
    return load_json_metadata


async def load_json_metadata_handler(
    input: LoadJsonMetadataInput, client: Client, scope: Scope
) -> Mapping[str, Any] | None:
    """Read JSON metadata through the filesystem driver.

    Returns None when the URI is empty or nothing exists at it.
    """
    if not input.uri:
        return None
    filesystem = client.filesystem()
    if not await filesystem.file_exists(input.uri):
        return None
    scope.throw_if_canceled()
    file = await filesystem.read(input.uri)
    return file.json()


async def _load_metadata(
    client: Client,
    scope: Scope,
    metadata_account: Account,
    load_json_metadata: bool | None,
) -> Metadata:
    metadata = to_metadata(metadata_account)
    if not _should_load_json(client, load_json_metadata):
        return metadata
    scope.throw_if_canceled()
    json = await client.run(
        load_json_metadata_operation(LoadJsonMetadataInput(metadata.uri)), scope
    )
    return to_metadata(metadata_account, json=json, json_loaded=True)


async def find_mint_with_metadata_by_address_handler(
    input: FindMintWithMetadataByAddressInput, client: Client, scope: Scope
) -> MintWithMetadata:
    metadata_address = find_metadata_pda(input.address)
    mint_account, metadata_account = await client.rpc().get_multiple_accounts(
        [input.address, metadata_address], input.commitment
    )
    mint_account = assert_account_exists(mint_account, input.address, "Mint")
    metadata_account = assert_account_exists(metadata_account, metadata_address, "Metadata")

    metadata = await _load_metadata(client, scope, metadata_account, input.load_json_metadata)
    return to_mint_with_metadata(mint_account, metadata)


async def find_mint_with_metadata_by_metadata_handler(
    input: FindMintWithMetadataByMetadataInput, client: Client, scope: Scope
) -> MintWithMetadata:
    rpc = client.rpc()
    metadata_account = await rpc.get_existing_account(
        input.metadata_address, "Metadata", input.commitment
    )
    mint_address = to_metadata(metadata_account).mint_address
    scope.throw_if_canceled()

    mint_account = await rpc.get_existing_account(mint_address, "Mint", input.commitment)
    metadata = await _load_metadata(client, scope, metadata_account, input.load_json_metadata)
    return to_mint_with_metadata(mint_account, metadata)


async def find_token_with_metadata_by_address_handler(
    input: FindTokenWithMetadataByAddressInput, client: Client, scope: Scope
) -> TokenWithMetadata:
    rpc = client.rpc()
    token_account = await rpc.get_existing_account(input.address, "Token", input.commitment)
    mint_address = parse_account(token_account, TokenAccountData, "Token").mint
    scope.throw_if_canceled()

    mint = await client.run(
        find_mint_with_metadata_by_address_operation(
            FindMintWithMetadataByAddressInput(
                mint_address, input.load_json_metadata, input.commitment
            )
        ),
        scope,
    )
    return to_token_with_metadata(token_account, mint)


async def find_token_with_metadata_by_metadata_handler(
    input: FindTokenWithMetadataByMetadataInput, client: Client, scope: Scope
) -> TokenWithMetadata:
    rpc = client.rpc()
    metadata_account = await rpc.get_existing_account(
        input.metadata_address, "Metadata", input.commitment
    )
    mint_address = to_metadata(metadata_account).mint_address
    token_address = find_associated_token_account_pda(mint_address, input.owner)
    scope.throw_if_canceled()

    mint_account, token_account = await rpc.get_multiple_accounts(
        [mint_address, token_address], input.commitment
    )
    mint_account = assert_account_exists(mint_account, mint_address, "Mint")
    token_account = assert_account_exists(token_account, token_address, "Token")

    metadata = await _load_metadata(client, scope, metadata_account, input.load_json_metadata)
    return to_token_with_metadata(token_account, to_mint_with_metadata(mint_account, metadata))


async def create_nft_handler(
    input: CreateNftInput, client: Client, scope: Scope
) -> CreateNftOutput:
    owner = input.owner or client.identity()
    update_authority = input.update_authority or client.identity()
    mint_address = input.mint or new_address()
    metadata_address = find_metadata_pda(mint_address)
    token_address = find_associated_token_account_pda(mint_address, owner)

    transaction = Transaction(
        writes=(
            AccountWrite(
                mint_address,
                TOKEN_PROGRAM,
                MintAccountData(
                    decimals=input.decimals,
                    supply=input.supply,
                    mint_authority=update_authority,
                ),
            ),
            AccountWrite(
                metadata_address,
                TOKEN_METADATA_PROGRAM,
                MetadataAccountData(
                    mint=mint_address,
                    update_authority=update_authority,
                    name=input.name,
                    symbol=input.symbol,
                    uri=input.uri,
                    seller_fee_basis_points=input.seller_fee_basis_points,
                ),
            ),
            AccountWrite(
                token_address,
                TOKEN_PROGRAM,
                TokenAccountData(mint=mint_address, owner=owner, amount=input.supply),
            ),
        ),
        fee_payer=client.identity(),
        signers=(client.identity(),),
    )

    scope.throw_if_canceled()
    signature = await client.rpc().send_and_confirm_transaction(
        transaction, input.commitment
    )
    scope.throw_if_canceled()

    token = await client.run(
        find_token_with_metadata_by_metadata_operation(
            FindTokenWithMetadataByMetadataInput(
                metadata_address, owner, commitment=input.commitment
            )
        ),
        scope,
    )
    return CreateNftOutput(
        mint_address=mint_address,
        metadata_address=metadata_address,
        token_address=token_address,
        signature=signature,
        token=token,
    )


HANDLERS = (
    (load_json_metadata_operation, load_json_metadata_handler),
    (
        find_mint_with_metadata_by_address_operation,
        find_mint_with_metadata_by_address_handler,
    ),
    (
        find_mint_with_metadata_by_metadata_operation,
        find_mint_with_metadata_by_metadata_handler,
    ),
    (
        find_token_with_metadata_by_address_operation,
        find_token_with_metadata_by_address_handler,
    ),
    (
        find_token_with_metadata_by_metadata_operation,
        find_token_with_metadata_by_metadata_handler,
    ),
    (create_nft_operation, create_nft_handler),
)
