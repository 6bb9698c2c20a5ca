"""Tests for plugin installation and capability extension."""

import logging

import pytest

from ledgerkit import Client, MemoryLedger
from ledgerkit.core import (
    Capability,
    DuplicateOperationError,
    FunctionPlugin,
    Plugin,
    PluginInstallError,
    use_operation,
)
from ledgerkit.plugins import core_plugins, nft_module

ping = use_operation("Ping")


async def pong(input, client, scope):
    return "pong"


class Facade:
    def __init__(self, client, label="facade"):
        self.client = client
        self.label = label


def test_core_plugins_installed(client):
    assert set(client.capabilities) == {"programs", "rpc", "nfts", "auctions"}
    assert "CreateBidOperation" in client.operations()
    assert "LoadBidOperation" in client.operations()
    assert "AuctionHouseProgram" in client.programs()


def test_plugins_satisfy_protocol():
    assert all(isinstance(plugin, Plugin) for plugin in core_plugins())
    assert isinstance(FunctionPlugin(lambda client: None), Plugin)


@pytest.mark.asyncio
async def test_plugin_registers_operation_and_capability():
    def install(client):
        client.operations().register(ping, pong)
        return [Capability("pinger", Facade)]

    client = Client(MemoryLedger(), plugins=[FunctionPlugin(install, "ping")])

    assert await client.run(ping(None)) == "pong"
    facade = client.pinger()
    assert isinstance(facade, Facade)
    assert facade.client is client
    assert client.capability("pinger")(label="custom").label == "custom"


def test_duplicate_operation_aborts_construction():
    installed = []

    def install_a(client):
        installed.append(client)
        client.operations().register(ping, pong)
        return [Capability("a", Facade)]

    def install_b(client):
        client.operations().register(use_operation("Ping"), pong)
        return [Capability("b", Facade)]

    with pytest.raises(DuplicateOperationError):
        Client(MemoryLedger(), plugins=[FunctionPlugin(install_a), FunctionPlugin(install_b)])

    partial = installed[0]
    assert dict(partial.capabilities) == {}
    assert "Ping" not in partial.operations()
    with pytest.raises(AttributeError):
        partial.a()


def test_failing_plugin_error_propagates_unchanged():
    def install(client):
        raise RuntimeError("cannot install")

    with pytest.raises(RuntimeError, match="cannot install"):
        Client(MemoryLedger(), plugins=[nft_module(), FunctionPlugin(install)])


def test_capability_first_write_wins(caplog):
    first = Capability("shared", lambda client: "first")
    second = Capability("shared", lambda client: "second")

    with caplog.at_level(logging.WARNING, logger="ledgerkit.core.plugin"):
        client = Client(
            MemoryLedger(),
            plugins=[
                FunctionPlugin(lambda client: [first], "first"),
                FunctionPlugin(lambda client: [second], "second"),
            ],
        )

    assert client.shared() == "first"
    assert "already attached" in caplog.text


def test_capabilities_visible_to_later_plugins():
    seen = []

    def install_b(client):
        seen.append(client.a())

    Client(
        MemoryLedger(),
        plugins=[
            FunctionPlugin(lambda client: [Capability("a", Facade)]),
            FunctionPlugin(install_b),
        ],
    )

    assert isinstance(seen[0], Facade)


def test_reinstall_rejected():
    client = Client(MemoryLedger(), plugins=[])

    with pytest.raises(PluginInstallError):
        client.install([FunctionPlugin(lambda client: None)])


def test_missing_capability():
    client = Client(MemoryLedger(), plugins=[])

    with pytest.raises(AttributeError, match="no capability 'auctions'"):
        client.capability("auctions")
    with pytest.raises(AttributeError):
        client.auctions()
