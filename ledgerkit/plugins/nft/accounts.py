"""Token and metadata program accounts."""

from __future__ import annotations

from dataclasses import dataclass

from ...types.address import Address, find_program_address

__all__ = [
    "ASSOCIATED_TOKEN_PROGRAM",
    "MetadataAccountData",
    "MintAccountData",
    "TOKEN_METADATA_PROGRAM",
    "TOKEN_PROGRAM",
    "TokenAccountData",
    "WRAPPED_SOL_MINT",
    "find_associated_token_account_pda",
    "find_metadata_pda",
]

TOKEN_PROGRAM = Address("TokenProgram1111111111111111111111111111")
ASSOCIATED_TOKEN_PROGRAM = Address("AssociatedTokenProgram111111111111111111")
TOKEN_METADATA_PROGRAM = Address("TokenMetadataProgram11111111111111111111")
WRAPPED_SOL_MINT = Address("So11111111111111111111111111111111111112")


@dataclass(frozen=True)
class MintAccountData:
    decimals: int
    supply: int
    mint_authority: Address | None = None


@dataclass(frozen=True)
class TokenAccountData:
    mint: Address
    owner: Address
    amount: int


@dataclass(frozen=True)
class MetadataAccountData:
    mint: Address
    update_authority: Address
    name: str
    symbol: str
    uri: str
    seller_fee_basis_points: int


def find_metadata_pda(mint: Address) -> Address:
    return find_program_address(TOKEN_METADATA_PROGRAM, "metadata", mint)


def find_associated_token_account_pda(mint: Address, owner: Address) -> Address:
    return find_program_address(ASSOCIATED_TOKEN_PROGRAM, owner, TOKEN_PROGRAM, mint)
