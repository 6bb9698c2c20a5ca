"""NFT plugin."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from ...core.plugin import Capability
from .client import NftClient
from .operations import HANDLERS

if TYPE_CHECKING:
    from ...core.client import Client


class NftModule:
    """Registers NFT operations and attaches ``client.nfts()``."""

    name = "nfts"

    def install(self, client: Client) -> Iterable[Capability]:
        operations = client.operations()
        for descriptor, handler in HANDLERS:
            operations.register(descriptor, handler)
        return [Capability("nfts", NftClient)]


def nft_module() -> NftModule:
    return NftModule()
