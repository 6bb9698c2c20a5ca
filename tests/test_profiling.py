"""Tests for operation profiling."""

import pytest

from ledgerkit import Client, MemoryLedger
from ledgerkit.core import OperationCanceledError, Scope, use_operation
from ledgerkit.core.profiling import get_profiler, is_profiling_enabled, profile

leaf = use_operation("Leaf")
failing = use_operation("Failing")


async def leaf_handler(input, client, scope):
    return input


async def failing_handler(input, client, scope):
    raise ValueError("boom")


@pytest.mark.asyncio
async def test_profile_records_nested_operations(client):
    with profile() as profiler:
        await client.nfts().create()
        summary = profiler.summary()

    graph = summary["dependency_graph"]
    assert graph["CreateNftOperation"] == {"FindTokenWithMetadataByMetadataOperation"}
    assert graph["FindTokenWithMetadataByMetadataOperation"] == {"LoadJsonMetadataOperation"}
    assert summary["call_counts"]["CreateNftOperation"] == 1
    assert summary["execution_stats"]["CreateNftOperation"]["count"] == 1
    assert summary["fanout_matrix"]["CreateNftOperation"] == {
        "FindTokenWithMetadataByMetadataOperation": 1.0
    }
    assert not is_profiling_enabled()


@pytest.mark.asyncio
async def test_profile_counts_failures_and_cancellations(bare_client):
    bare_client.operations().register(leaf, leaf_handler)
    bare_client.operations().register(failing, failing_handler)
    canceled = Scope()
    canceled.cancel()

    with profile() as profiler:
        await bare_client.run(leaf(1))
        with pytest.raises(OperationCanceledError):
            await bare_client.run(leaf(2), canceled)
        with pytest.raises(ValueError):
            await bare_client.run(failing(None))

    assert profiler.get_call_counts() == {"Leaf": 2, "Failing": 1}
    assert profiler.get_cancellation_counts() == {"Leaf": 1}
    assert profiler.get_failure_counts() == {"Failing": 1}


def test_client_config_enables_profiling():
    Client(MemoryLedger(), plugins=[], config={"profiling": True})

    assert is_profiling_enabled()
    assert get_profiler() is not None


@pytest.mark.asyncio
async def test_fanout_matrix_averages_nested_calls(bare_client):
    chain = use_operation("Chain")

    async def chain_handler(input, client, scope):
        for value in range(input):
            await client.run(leaf(value), scope)

    bare_client.operations().register(leaf, leaf_handler)
    bare_client.operations().register(chain, chain_handler)

    with profile() as profiler:
        await bare_client.run(chain(1))
        await bare_client.run(chain(3))

    assert profiler.get_fanout_matrix() == {"Chain": {"Leaf": 2.0}}
    assert profiler.get_dependency_graph() == {"Chain": {"Leaf"}}
