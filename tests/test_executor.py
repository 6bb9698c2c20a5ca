"""Tests for operation dispatch through the executor."""

import asyncio

import pytest

from ledgerkit.core import (
    OperationCanceledError,
    Scope,
    ScopeTeardownError,
    UnregisteredOperationError,
    get_current_operation,
    use_operation,
)

double = use_operation("Double", int, int)
chain = use_operation("Chain")
leaf = use_operation("Leaf")


async def double_handler(input, client, scope):
    return input * 2


@pytest.mark.asyncio
async def test_run_resolves_handler(bare_client):
    bare_client.operations().register(double, double_handler)

    assert await bare_client.run(double(21)) == 42


@pytest.mark.asyncio
async def test_run_accepts_sync_handler(bare_client):
    bare_client.operations().register(double, lambda input, client, scope: input * 2)

    assert await bare_client.run(double(21)) == 42


@pytest.mark.asyncio
async def test_task_is_awaitable(bare_client):
    bare_client.operations().register(double, double_handler)
    task = bare_client.task(double(21))

    assert await task == 42
    assert await task.run() == 42


@pytest.mark.asyncio
async def test_unregistered_operation(bare_client):
    with pytest.raises(UnregisteredOperationError) as exc_info:
        await bare_client.run(double(21))

    assert exc_info.value.key == "Double"
    assert len(bare_client.operations()) == 0


@pytest.mark.asyncio
async def test_handler_receives_derived_scope(bare_client):
    seen = []

    async def handler(input, client, scope):
        seen.append((client, scope))
        return None

    bare_client.operations().register(leaf, handler)
    parent = Scope()
    await bare_client.run(leaf(None), parent)

    client, scope = seen[0]
    assert client is bare_client
    assert scope.parent is parent
    assert scope.closed


@pytest.mark.asyncio
async def test_cancel_before_nested_operation_starts(bare_client):
    outer = Scope()
    chain_cleanups = []
    leaf_calls = []
    leaf_errors = []

    async def leaf_handler(input, client, scope):
        leaf_calls.append(input)
        return input

    async def chain_handler(input, client, scope):
        scope.on_cleanup(lambda: chain_cleanups.append("chain"))
        outer.cancel()
        try:
            return await client.run(leaf(input), scope)
        except OperationCanceledError as error:
            leaf_errors.append(error)
            raise

    bare_client.operations().register(chain, chain_handler)
    bare_client.operations().register(leaf, leaf_handler)

    with pytest.raises(OperationCanceledError) as exc_info:
        await bare_client.run(chain("payload"), outer)

    assert exc_info.value is leaf_errors[0]
    assert leaf_calls == []
    assert chain_cleanups == ["chain"]


@pytest.mark.asyncio
async def test_canceled_scope_never_reaches_handler(bare_client):
    calls = []

    async def handler(input, client, scope):
        calls.append(input)
        return input

    bare_client.operations().register(leaf, handler)
    scope = Scope()
    scope.cancel()

    with pytest.raises(OperationCanceledError):
        await bare_client.run(leaf("side effect"), scope)

    assert calls == []


@pytest.mark.asyncio
async def test_cancellation_observed_at_next_check(bare_client):
    started = asyncio.Event()
    cleanups = []

    async def slow_handler(input, client, scope):
        scope.on_cleanup(lambda: cleanups.append("released"))
        started.set()
        await asyncio.sleep(0.01)
        scope.throw_if_canceled()
        return "finished"

    bare_client.operations().register(leaf, slow_handler)
    scope = Scope()
    running = asyncio.ensure_future(bare_client.run(leaf(None), scope))

    await started.wait()
    scope.cancel()

    with pytest.raises(OperationCanceledError):
        await running
    assert cleanups == ["released"]


@pytest.mark.asyncio
async def test_cancellation_is_not_retroactive(bare_client):
    async def handler(input, client, scope):
        scope.throw_if_canceled()
        scope.cancel()
        return "done"

    bare_client.operations().register(leaf, handler)

    assert await bare_client.run(leaf(None)) == "done"


@pytest.mark.asyncio
async def test_handler_error_propagates_after_teardown(bare_client):
    cleanups = []

    async def handler(input, client, scope):
        scope.on_cleanup(lambda: cleanups.append("released"))
        raise ValueError("boom")

    bare_client.operations().register(leaf, handler)

    with pytest.raises(ValueError, match="boom"):
        await bare_client.run(leaf(None))
    assert cleanups == ["released"]


@pytest.mark.asyncio
async def test_teardown_failure_after_success(bare_client):
    async def handler(input, client, scope):
        scope.on_cleanup(lambda: 1 / 0)
        return "done"

    bare_client.operations().register(leaf, handler)

    with pytest.raises(ScopeTeardownError) as exc_info:
        await bare_client.run(leaf(None))
    assert isinstance(exc_info.value.errors[0], ZeroDivisionError)


@pytest.mark.asyncio
async def test_teardown_failure_after_handler_failure(bare_client):
    async def handler(input, client, scope):
        scope.on_cleanup(lambda: 1 / 0)
        raise ValueError("boom")

    bare_client.operations().register(leaf, handler)

    with pytest.raises(ValueError) as exc_info:
        await bare_client.run(leaf(None))
    assert any("ZeroDivisionError" in note for note in exc_info.value.__notes__)


@pytest.mark.asyncio
async def test_concurrent_runs(bare_client):
    bare_client.operations().register(double, double_handler)

    results = await asyncio.gather(*(bare_client.run(double(i)) for i in range(5)))

    assert results == [0, 2, 4, 6, 8]


@pytest.mark.asyncio
async def test_running_operation_is_tracked(bare_client):
    seen = []

    async def leaf_handler(input, client, scope):
        seen.append(get_current_operation())

    async def chain_handler(input, client, scope):
        seen.append(get_current_operation())
        await client.run(leaf(None), scope)
        seen.append(get_current_operation())

    bare_client.operations().register(chain, chain_handler)
    bare_client.operations().register(leaf, leaf_handler)

    await bare_client.run(chain(None))

    assert seen == ["Chain", "Leaf", "Chain"]
    assert get_current_operation() is None
