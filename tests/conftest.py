"""Shared test fixtures."""

import pytest

from ledgerkit import Client, MemoryFilesystemDriver, MemoryLedger
from ledgerkit.core.profiling import disable_profiling
from ledgerkit.types import new_address


@pytest.fixture(autouse=True)
def reset_profiling():
    """Ensure every test starts and ends with profiling disabled."""
    disable_profiling()
    yield
    disable_profiling()


@pytest.fixture
def ledger():
    return MemoryLedger()


@pytest.fixture
def filesystem():
    return MemoryFilesystemDriver(
        {
            "/nfts/rare.json": {"name": "Rare NFT", "image": "https://example.com/rare.png"},
            "/nfts/broken.json": "{not json",
        }
    )


@pytest.fixture
def client(ledger, filesystem):
    """Client with the core plugins installed over an in-memory ledger."""
    return Client(ledger, filesystem=filesystem)


@pytest.fixture
def bare_client(ledger, filesystem):
    """Client without any plugins."""
    return Client(ledger, filesystem=filesystem, plugins=[])


@pytest.fixture
def create_wallet(ledger, filesystem):
    """Create another client sharing the same ledger under a fresh identity."""

    def _create_wallet() -> Client:
        return Client(ledger, filesystem=filesystem, identity=new_address())

    return _create_wallet


@pytest.fixture
def create_nft(client):
    """Mint an NFT and return its token with metadata."""

    async def _create_nft(**kwargs):
        output = await client.nfts().create(**kwargs)
        return output.token

    return _create_nft


@pytest.fixture
def create_auction_house(client):
    async def _create_auction_house(**kwargs):
        kwargs.setdefault("seller_fee_basis_points", 200)
        output = await client.auctions().create_auction_house(**kwargs)
        return output.auction_house

    return _create_auction_house
