"""Tests for the in-memory ledger and the filesystem drivers."""

import json
from dataclasses import dataclass

import pytest

from ledgerkit.drivers import (
    Account,
    AccountWrite,
    LocalFilesystemDriver,
    MemoryFilesystemDriver,
    MemoryLedger,
    Transaction,
    TransactionFailedError,
    UnexpectedAccountError,
    parse_account,
)
from ledgerkit.drivers.errors import ACCOUNT_ALREADY_IN_USE, ACCOUNT_NOT_INITIALIZED
from ledgerkit.types import new_address

PROGRAM = new_address()


@dataclass(frozen=True)
class Counter:
    owner: str
    value: int


@dataclass(frozen=True)
class Label:
    owner: str
    text: str


def _write(address, data, create=True):
    return AccountWrite(address, PROGRAM, data, create=create)


@pytest.mark.asyncio
async def test_send_transaction_applies_writes():
    ledger = MemoryLedger()
    address = new_address()

    signature = await ledger.send_transaction(
        Transaction(writes=(_write(address, Counter("me", 1)),), fee_payer="me")
    )

    account = await ledger.get_account(address)
    assert account.data == Counter("me", 1)
    assert account.owner == PROGRAM
    assert signature
    assert len(ledger.transactions) == 1


@pytest.mark.asyncio
async def test_failed_transaction_applies_nothing():
    ledger = MemoryLedger()
    existing, fresh = new_address(), new_address()
    ledger.set_account(Account(existing, PROGRAM, Counter("me", 1)))

    with pytest.raises(TransactionFailedError) as exc_info:
        await ledger.send_transaction(
            Transaction(
                writes=(_write(fresh, Counter("me", 2)), _write(existing, Counter("me", 3))),
                fee_payer="me",
            )
        )

    assert exc_info.value.code == ACCOUNT_ALREADY_IN_USE
    assert exc_info.value.program == PROGRAM
    assert exc_info.value.logs
    assert await ledger.get_account(fresh) is None
    assert (await ledger.get_account(existing)).data == Counter("me", 1)


@pytest.mark.asyncio
async def test_update_of_missing_account_fails():
    ledger = MemoryLedger()

    with pytest.raises(TransactionFailedError) as exc_info:
        await ledger.send_transaction(
            Transaction(writes=(_write(new_address(), Counter("me", 1), create=False),), fee_payer="me")
        )

    assert exc_info.value.code == ACCOUNT_NOT_INITIALIZED


@pytest.mark.asyncio
async def test_get_program_accounts_filters():
    ledger = MemoryLedger()
    ledger.set_account(Account(new_address(), PROGRAM, Counter("me", 1)))
    ledger.set_account(Account(new_address(), PROGRAM, Counter("you", 2)))
    ledger.set_account(Account(new_address(), PROGRAM, Label("me", "hello")))
    ledger.set_account(Account(new_address(), new_address(), Counter("me", 3)))

    mine = await ledger.get_program_accounts(PROGRAM, {"owner": "me"})
    counters = await ledger.get_program_accounts(PROGRAM, {"type": "Counter"})
    my_counters = await ledger.get_program_accounts(PROGRAM, {"type": "Counter", "owner": "me"})

    assert len(mine) == 2
    assert len(counters) == 2
    assert [account.data for account in my_counters] == [Counter("me", 1)]
    assert ledger.count_calls("get_program_accounts") == 3
    assert ledger.count_calls() == 3


@pytest.mark.asyncio
async def test_get_multiple_accounts_preserves_order():
    ledger = MemoryLedger()
    first, missing, last = new_address(), new_address(), new_address()
    ledger.set_account(Account(first, PROGRAM, Counter("me", 1)))
    ledger.set_account(Account(last, PROGRAM, Counter("me", 2)))

    accounts = await ledger.get_multiple_accounts([last, missing, first])

    assert [account and account.address for account in accounts] == [last, None, first]


def test_snapshot_and_restore():
    ledger = MemoryLedger()
    address = new_address()
    ledger.set_account(Account(address, PROGRAM, Counter("me", 1)))
    snapshot = ledger.snapshot()

    ledger.set_account(Account(address, PROGRAM, Counter("me", 2)))
    ledger.set_account(Account(new_address(), PROGRAM, Counter("me", 3)))
    ledger.restore(snapshot)

    assert list(ledger.accounts()) == [address]
    assert ledger.accounts()[address].data == Counter("me", 1)


def test_parse_account_checks_type():
    account = Account(new_address(), PROGRAM, Counter("me", 1))

    assert parse_account(account, Counter) == Counter("me", 1)
    with pytest.raises(UnexpectedAccountError) as exc_info:
        parse_account(account, Label, "Label")
    assert exc_info.value.actual_type == "Counter"


@pytest.mark.asyncio
async def test_local_filesystem(tmp_path):
    (tmp_path / "nfts").mkdir()
    (tmp_path / "nfts" / "rare.json").write_text(json.dumps({"name": "Rare NFT"}))
    filesystem = LocalFilesystemDriver(tmp_path)

    assert await filesystem.file_exists("nfts/rare.json")
    assert not await filesystem.file_exists("nfts")
    assert await filesystem.directory_exists("nfts")
    assert await filesystem.has("nfts")
    assert not await filesystem.has("missing.json")

    file = await filesystem.read(f"file://{tmp_path}/nfts/rare.json")
    assert file.filename == "rare.json"
    assert file.content_type == "application/json"
    assert file.json() == {"name": "Rare NFT"}

    with pytest.raises(FileNotFoundError):
        await filesystem.read("nfts/missing.json")


@pytest.mark.asyncio
async def test_memory_filesystem():
    filesystem = MemoryFilesystemDriver({"nfts/rare.json": {"name": "Rare NFT"}})
    filesystem.write("/notes/readme.txt", "hello")

    assert await filesystem.file_exists("/nfts/rare.json")
    assert await filesystem.directory_exists("nfts")
    assert not await filesystem.directory_exists("nft")
    assert (await filesystem.read("file:///nfts/rare.json")).json() == {"name": "Rare NFT"}
    assert (await filesystem.read("notes/readme.txt")).text() == "hello"

    with pytest.raises(FileNotFoundError):
        await filesystem.read("/nfts/missing.json")
