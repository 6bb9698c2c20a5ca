"""Auction House plugin."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from ...core.plugin import Capability
from ..programs import Program
from . import auction_houses, bids, listings
from .client import AuctionsClient
from .program import (
    AUCTION_HOUSE_PROGRAM,
    AUCTION_HOUSE_PROGRAM_NAME,
    resolve_auction_house_error,
)

if TYPE_CHECKING:
    from ...core.client import Client


class AuctionHouseModule:
    """Registers the Auction House program and operations, attaches ``client.auctions()``.

    Requires the ``programs`` and ``nfts`` capabilities, so it must be
    installed after their plugins.
    """

    name = "auctions"

    def install(self, client: Client) -> Iterable[Capability]:
        client.programs().register(
            Program(
                AUCTION_HOUSE_PROGRAM_NAME,
                AUCTION_HOUSE_PROGRAM,
                resolve_auction_house_error,
            )
        )
        operations = client.operations()
        for module in (auction_houses, bids, listings):
            for descriptor, handler in module.HANDLERS:
                operations.register(descriptor, handler)
        return [Capability("auctions", AuctionsClient)]


def auction_house_module() -> AuctionHouseModule:
    return AuctionHouseModule()
