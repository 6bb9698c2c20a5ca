"""NftClient - facade attached to the client as ``client.nfts()``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from ...config import Commitment
from ...core.task import Task
from ...types.address import Address
from .models import MintWithMetadata, TokenWithMetadata
from .operations import (
    CreateNftInput,
    CreateNftOutput,
    FindMintWithMetadataByAddressInput,
    FindMintWithMetadataByMetadataInput,
    FindTokenWithMetadataByAddressInput,
    FindTokenWithMetadataByMetadataInput,
    LoadJsonMetadataInput,
    create_nft_operation,
    find_mint_with_metadata_by_address_operation,
    find_mint_with_metadata_by_metadata_operation,
    find_token_with_metadata_by_address_operation,
    find_token_with_metadata_by_metadata_operation,
    load_json_metadata_operation,
)

if TYPE_CHECKING:
    from ...core.client import Client


class NftClient:
    """Build NFT operations bound to a client."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def create(self, **kwargs: Any) -> Task[CreateNftOutput]:
        return self._client.task(create_nft_operation(CreateNftInput(**kwargs)))

    def find_mint_with_metadata_by_address(
        self,
        address: Address,
        *,
        load_json_metadata: bool | None = None,
        commitment: Commitment | None = None,
    ) -> Task[MintWithMetadata]:
        return self._client.task(
            find_mint_with_metadata_by_address_operation(
                FindMintWithMetadataByAddressInput(address, load_json_metadata, commitment)
            )
        )

    def find_mint_with_metadata_by_metadata(
        self,
        metadata_address: Address,
        *,
        load_json_metadata: bool | None = None,
        commitment: Commitment | None = None,
    ) -> Task[MintWithMetadata]:
        return self._client.task(
            find_mint_with_metadata_by_metadata_operation(
                FindMintWithMetadataByMetadataInput(
                    metadata_address, load_json_metadata, commitment
                )
            )
        )

    def find_token_with_metadata_by_address(
        self,
        address: Address,
        *,
        load_json_metadata: bool | None = None,
        commitment: Commitment | None = None,
    ) -> Task[TokenWithMetadata]:
        return self._client.task(
            find_token_with_metadata_by_address_operation(
                FindTokenWithMetadataByAddressInput(address, load_json_metadata, commitment)
            )
        )

    def find_token_with_metadata_by_metadata(
        self,
        metadata_address: Address,
        owner: Address,
        *,
        load_json_metadata: bool | None = None,
        commitment: Commitment | None = None,
    ) -> Task[TokenWithMetadata]:
        return self._client.task(
            find_token_with_metadata_by_metadata_operation(
                FindTokenWithMetadataByMetadataInput(
                    metadata_address, owner, load_json_metadata, commitment
                )
            )
        )

    def load_json_metadata(self, uri: str) -> Task[Mapping[str, Any] | None]:
        return self._client.task(load_json_metadata_operation(LoadJsonMetadataInput(uri)))
