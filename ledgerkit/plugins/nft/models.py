"""NFT models built from token and metadata accounts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping

from ...drivers.ledger import Account, parse_account
from ...types.address import Address
from ...types.amount import Amount, Currency, amount
from .accounts import (
    WRAPPED_SOL_MINT,
    MetadataAccountData,
    MintAccountData,
    TokenAccountData,
)

__all__ = [
    "Metadata",
    "Mint",
    "MintWithMetadata",
    "Token",
    "TokenWithMetadata",
    "to_metadata",
    "to_mint",
    "to_mint_with_metadata",
    "to_token",
    "to_token_with_metadata",
]


@dataclass(frozen=True)
class Metadata:
    model: ClassVar[str] = "metadata"

    address: Address
    mint_address: Address
    update_authority_address: Address
    name: str
    symbol: str
    uri: str
    seller_fee_basis_points: int
    json: Mapping[str, Any] | None = None
    json_loaded: bool = False


@dataclass(frozen=True)
class Mint:
    model: ClassVar[str] = "mint"

    address: Address
    mint_authority_address: Address | None
    decimals: int
    supply: Amount
    currency: Currency

    @property
    def is_wrapped_sol(self) -> bool:
        return self.address == WRAPPED_SOL_MINT


@dataclass(frozen=True)
class MintWithMetadata(Mint):
    metadata: Metadata


@dataclass(frozen=True)
class Token:
    model: ClassVar[str] = "token"

    address: Address
    mint_address: Address
    owner_address: Address
    amount: Amount


@dataclass(frozen=True)
class TokenWithMetadata(Token):
    mint: MintWithMetadata

    @property
    def metadata(self) -> Metadata:
        return self.mint.metadata


def to_metadata(
    account: Account,
    json: Mapping[str, Any] | None = None,
    json_loaded: bool = False,
) -> Metadata:
    data = parse_account(account, MetadataAccountData, "Metadata")
    return Metadata(
        address=account.address,
        mint_address=data.mint,
        update_authority_address=data.update_authority,
        name=data.name,
        symbol=data.symbol,
        uri=data.uri,
        seller_fee_basis_points=data.seller_fee_basis_points,
        json=json,
        json_loaded=json_loaded,
    )


def to_mint(account: Account, symbol: str = "") -> Mint:
    data = parse_account(account, MintAccountData, "Mint")
    currency = Currency(symbol=symbol or "Token", decimals=data.decimals)
    return Mint(
        address=account.address,
        mint_authority_address=data.mint_authority,
        decimals=data.decimals,
        supply=amount(data.supply, currency),
        currency=currency,
    )


def to_mint_with_metadata(mint_account: Account, metadata: Metadata) -> MintWithMetadata:
    mint = to_mint(mint_account, metadata.symbol)
    return MintWithMetadata(
        address=mint.address,
        mint_authority_address=mint.mint_authority_address,
        decimals=mint.decimals,
        supply=mint.supply,
        currency=mint.currency,
        metadata=metadata,
    )


def to_token(account: Account, currency: Currency) -> Token:
    data = parse_account(account, TokenAccountData, "Token")
    return Token(
        address=account.address,
        mint_address=data.mint,
        owner_address=data.owner,
        amount=amount(data.amount, currency),
    )


def to_token_with_metadata(
    token_account: Account, mint: MintWithMetadata
) -> TokenWithMetadata:
    token = to_token(token_account, mint.currency)
    return TokenWithMetadata(
        address=token.address,
        mint_address=token.mint_address,
        owner_address=token.owner_address,
        amount=token.amount,
        mint=mint,
    )
