"""Auction House plugin: auction houses, bids and listings."""

from .accounts import (
    AuctionHouseAccountData,
    BidReceiptData,
    ListingReceiptData,
    TradeStateData,
)
from .auction_houses import (
    CreateAuctionHouseInput,
    CreateAuctionHouseOutput,
    UpdateAuctionHouseInput,
    UpdateAuctionHouseOutput,
    create_auction_house_operation,
    find_auction_house_by_address_operation,
    update_auction_house_operation,
)
from .bids import (
    CreateBidInput,
    CreateBidOutput,
    LoadBidInput,
    create_bid_operation,
    find_bid_by_trade_state_operation,
    find_bids_by_operation,
    load_bid_operation,
)
from .client import AuctionHouseClient, AuctionsClient
from .errors import AuctionHouseError, CurrencyMismatchError, NoInstructionsToSendError
from .listings import (
    CreateListingInput,
    CreateListingOutput,
    LoadListingInput,
    create_listing_operation,
    find_listing_by_trade_state_operation,
    load_listing_operation,
)
from .models import (
    AuctionHouse,
    Bid,
    LazyBid,
    LazyListing,
    Listing,
    PrivateBid,
    PublicBid,
)
from .plugin import AuctionHouseModule, auction_house_module
from .program import (
    AUCTION_HOUSE_PROGRAM,
    AUCTION_HOUSE_PROGRAM_NAME,
    find_auction_house_pda,
    find_auction_house_trade_state_pda,
    find_bid_receipt_pda,
    find_listing_receipt_pda,
)

__all__ = [
    "AUCTION_HOUSE_PROGRAM",
    "AUCTION_HOUSE_PROGRAM_NAME",
    "AuctionHouse",
    "AuctionHouseAccountData",
    "AuctionHouseClient",
    "AuctionHouseError",
    "AuctionHouseModule",
    "AuctionsClient",
    "Bid",
    "BidReceiptData",
    "CreateAuctionHouseInput",
    "CreateAuctionHouseOutput",
    "CreateBidInput",
    "CreateBidOutput",
    "CreateListingInput",
    "CreateListingOutput",
    "CurrencyMismatchError",
    "LazyBid",
    "LazyListing",
    "Listing",
    "ListingReceiptData",
    "LoadBidInput",
    "LoadListingInput",
    "NoInstructionsToSendError",
    "PrivateBid",
    "PublicBid",
    "TradeStateData",
    "UpdateAuctionHouseInput",
    "UpdateAuctionHouseOutput",
    "auction_house_module",
    "create_auction_house_operation",
    "create_bid_operation",
    "create_listing_operation",
    "find_auction_house_by_address_operation",
    "find_auction_house_pda",
    "find_auction_house_trade_state_pda",
    "find_bid_by_trade_state_operation",
    "find_bids_by_operation",
    "find_listing_by_trade_state_operation",
    "find_listing_receipt_pda",
    "find_bid_receipt_pda",
    "load_bid_operation",
    "load_listing_operation",
]
