"""Auction House facades attached to the client as ``client.auctions()``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ...config import Commitment
from ...core.task import Task
from ...types.address import Address
from .auction_houses import (
    CreateAuctionHouseInput,
    CreateAuctionHouseOutput,
    FindAuctionHouseByAddressInput,
    UpdateAuctionHouseInput,
    UpdateAuctionHouseOutput,
    create_auction_house_operation,
    find_auction_house_by_address_operation,
    update_auction_house_operation,
)
from .bids import (
    CreateBidInput,
    CreateBidOutput,
    FindBidByTradeStateInput,
    FindBidsByInput,
    LoadBidInput,
    create_bid_operation,
    find_bid_by_trade_state_operation,
    find_bids_by_operation,
    load_bid_operation,
)
from .listings import (
    CreateListingInput,
    CreateListingOutput,
    FindListingByTradeStateInput,
    LoadListingInput,
    create_listing_operation,
    find_listing_by_trade_state_operation,
    load_listing_operation,
)
from .models import AuctionHouse, Bid, LazyBid, LazyListing, Listing

if TYPE_CHECKING:
    from ...core.client import Client

__all__ = ["AuctionHouseClient", "AuctionsClient"]


class AuctionsClient:
    """Create and look up auction houses."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def create_auction_house(self, **kwargs: Any) -> Task[CreateAuctionHouseOutput]:
        return self._client.task(
            create_auction_house_operation(CreateAuctionHouseInput(**kwargs))
        )

    def find_auction_house_by_address(
        self, address: Address, *, commitment: Commitment | None = None
    ) -> Task[AuctionHouse]:
        return self._client.task(
            find_auction_house_by_address_operation(
                FindAuctionHouseByAddressInput(address, commitment)
            )
        )

    def update_auction_house(
        self, auction_house: AuctionHouse, **kwargs: Any
    ) -> Task[UpdateAuctionHouseOutput]:
        return self._client.task(
            update_auction_house_operation(UpdateAuctionHouseInput(auction_house, **kwargs))
        )

    def for_auction_house(self, auction_house: AuctionHouse) -> AuctionHouseClient:
        return AuctionHouseClient(self._client, auction_house)


class AuctionHouseClient:
    """Bids and listings scoped to one auction house."""

    def __init__(self, client: Client, auction_house: AuctionHouse) -> None:
        self._client = client
        self.auction_house = auction_house

    def create_bid(self, **kwargs: Any) -> Task[CreateBidOutput]:
        return self._client.task(
            create_bid_operation(CreateBidInput(auction_house=self.auction_house, **kwargs))
        )

    def find_bid_by_address(
        self,
        trade_state: Address,
        *,
        load_json_metadata: bool | None = None,
        commitment: Commitment | None = None,
    ) -> Task[Bid]:
        return self._client.task(
            find_bid_by_trade_state_operation(
                FindBidByTradeStateInput(
                    trade_state, self.auction_house, load_json_metadata, commitment
                )
            )
        )

    def find_bids_by(
        self, type: str, public_key: Address, *, commitment: Commitment | None = None
    ) -> Task[list[LazyBid]]:
        return self._client.task(
            find_bids_by_operation(
                FindBidsByInput(self.auction_house, type, public_key, commitment)
            )
        )

    def load_bid(
        self,
        lazy_bid: LazyBid,
        *,
        load_json_metadata: bool | None = None,
        commitment: Commitment | None = None,
    ) -> Task[Bid]:
        return self._client.task(
            load_bid_operation(LoadBidInput(lazy_bid, load_json_metadata, commitment))
        )

    def create_listing(self, **kwargs: Any) -> Task[CreateListingOutput]:
        return self._client.task(
            create_listing_operation(
                CreateListingInput(auction_house=self.auction_house, **kwargs)
            )
        )

    def find_listing_by_address(
        self,
        trade_state: Address,
        *,
        load_json_metadata: bool | None = None,
        commitment: Commitment | None = None,
    ) -> Task[Listing]:
        return self._client.task(
            find_listing_by_trade_state_operation(
                FindListingByTradeStateInput(
                    trade_state, self.auction_house, load_json_metadata, commitment
                )
            )
        )

    def load_listing(
        self,
        lazy_listing: LazyListing,
        *,
        load_json_metadata: bool | None = None,
        commitment: Commitment | None = None,
    ) -> Task[Listing]:
        return self._client.task(
            load_listing_operation(
                LoadListingInput(lazy_listing, load_json_metadata, commitment)
            )
        )

    def update(self, **kwargs: Any) -> Task[UpdateAuctionHouseOutput]:
        return self._client.task(
            update_auction_house_operation(
                UpdateAuctionHouseInput(self.auction_house, **kwargs)
            )
        )

    def __repr__(self) -> str:
        return f"AuctionHouseClient(address={self.auction_house.address})"
