"""Tests for auction house listings."""

import pytest

from ledgerkit import AccountNotFoundError, sol, token
from ledgerkit.plugins.auction_house import (
    CurrencyMismatchError,
    LazyListing,
    Listing,
    find_listing_receipt_pda,
)
from ledgerkit.plugins.auction_house.models import to_lazy_listing


@pytest.mark.asyncio
async def test_create_listing(client, create_nft, create_auction_house):
    house = await create_auction_house()
    nft = await create_nft()
    auction = client.auctions().for_auction_house(house)

    output = await auction.create_listing(mint_account=nft.mint_address, price=sol(5))
    listing = output.listing

    assert isinstance(listing, Listing)
    assert listing.seller_address == client.identity()
    assert listing.price == sol(5)
    assert listing.tokens == token(1)
    assert listing.token == nft
    assert listing.receipt_address == find_listing_receipt_pda(output.seller_trade_state)
    assert await auction.find_listing_by_address(output.seller_trade_state) == listing


@pytest.mark.asyncio
async def test_load_lazy_listing(client, ledger, create_nft, create_auction_house):
    house = await create_auction_house()
    nft = await create_nft()
    auction = client.auctions().for_auction_house(house)
    output = await auction.create_listing(mint_account=nft.mint_address, price=sol(5))

    lazy_listing = to_lazy_listing(ledger.accounts()[output.receipt_address], house)
    assert isinstance(lazy_listing, LazyListing)
    assert lazy_listing.lazy

    first = await auction.load_listing(lazy_listing)
    second = await auction.load_listing(lazy_listing)

    assert first == second == output.listing


@pytest.mark.asyncio
async def test_receipt_less_listing_cannot_be_found(client, create_nft, create_auction_house):
    house = await create_auction_house()
    nft = await create_nft()
    auction = client.auctions().for_auction_house(house)

    output = await auction.create_listing(
        mint_account=nft.mint_address, price=sol(5), print_receipt=False
    )

    with pytest.raises(AccountNotFoundError, match=r"\[ListingReceipt\]"):
        await auction.find_listing_by_address(output.seller_trade_state)


@pytest.mark.asyncio
async def test_listing_requires_seller_token(
    client, create_wallet, create_nft, create_auction_house
):
    house = await create_auction_house()
    nft = await create_nft()
    stranger = create_wallet()

    with pytest.raises(AccountNotFoundError, match=r"\[Token\]"):
        await stranger.auctions().for_auction_house(house).create_listing(
            mint_account=nft.mint_address, price=sol(5)
        )


@pytest.mark.asyncio
async def test_listing_price_must_use_house_currency(
    client, create_nft, create_auction_house
):
    house = await create_auction_house()
    nft = await create_nft()

    with pytest.raises(CurrencyMismatchError):
        await client.auctions().for_auction_house(house).create_listing(
            mint_account=nft.mint_address, price=token(5)
        )
