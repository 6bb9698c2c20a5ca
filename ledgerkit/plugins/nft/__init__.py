"""NFT plugin: mints, tokens, metadata and JSON metadata."""

from .accounts import (
    ASSOCIATED_TOKEN_PROGRAM,
    TOKEN_METADATA_PROGRAM,
    TOKEN_PROGRAM,
    WRAPPED_SOL_MINT,
    MetadataAccountData,
    MintAccountData,
    TokenAccountData,
    find_associated_token_account_pda,
    find_metadata_pda,
)
from .client import NftClient
from .models import Metadata, Mint, MintWithMetadata, Token, TokenWithMetadata
from .operations import (
    CreateNftInput,
    CreateNftOutput,
    create_nft_operation,
    find_mint_with_metadata_by_address_operation,
    find_mint_with_metadata_by_metadata_operation,
    find_token_with_metadata_by_address_operation,
    find_token_with_metadata_by_metadata_operation,
    load_json_metadata_operation,
)
from .plugin import NftModule, nft_module

__all__ = [
    "ASSOCIATED_TOKEN_PROGRAM",
    "CreateNftInput",
    "CreateNftOutput",
    "Metadata",
    "MetadataAccountData",
    "Mint",
    "MintAccountData",
    "MintWithMetadata",
    "NftClient",
    "NftModule",
    "TOKEN_METADATA_PROGRAM",
    "TOKEN_PROGRAM",
    "Token",
    "TokenAccountData",
    "TokenWithMetadata",
    "WRAPPED_SOL_MINT",
    "create_nft_operation",
    "find_associated_token_account_pda",
    "find_metadata_pda",
    "find_mint_with_metadata_by_address_operation",
    "find_mint_with_metadata_by_metadata_operation",
    "find_token_with_metadata_by_address_operation",
    "find_token_with_metadata_by_metadata_operation",
    "load_json_metadata_operation",
    "nft_module",
]
