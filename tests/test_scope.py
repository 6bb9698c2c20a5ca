"""Tests for Scope cancellation and teardown."""

import asyncio

import pytest

from ledgerkit.core import OperationCanceledError, Scope, ScopeTeardownError


def test_cancel_propagates_to_descendants():
    root = Scope()
    child = root.derive()
    grandchild = child.derive()
    sibling = root.derive()

    child.cancel()

    assert child.canceled
    assert grandchild.canceled
    assert not root.canceled
    assert not sibling.canceled

    root.cancel()
    assert sibling.canceled


def test_child_of_canceled_scope_starts_canceled():
    root = Scope()
    root.cancel()

    child = root.derive()

    assert child.canceled
    assert child.parent is root
    with pytest.raises(OperationCanceledError):
        child.throw_if_canceled()


def test_throw_if_canceled():
    scope = Scope()
    scope.throw_if_canceled()

    scope.cancel()
    with pytest.raises(OperationCanceledError, match="canceled"):
        scope.throw_if_canceled()


@pytest.mark.asyncio
async def test_cleanup_runs_once_in_reverse_order():
    scope = Scope()
    calls = []

    scope.on_cleanup(lambda: calls.append("first"))

    @scope.on_cleanup
    async def second():
        calls.append("second")

    assert await scope.close() == ()
    assert await scope.close() == ()
    assert calls == ["second", "first"]
    assert scope.closed


@pytest.mark.asyncio
async def test_cleanup_failures_do_not_stop_other_callbacks():
    scope = Scope()
    calls = []

    def fail():
        raise RuntimeError("release failed")

    scope.on_cleanup(lambda: calls.append("first"))
    scope.on_cleanup(fail)
    scope.on_cleanup(lambda: calls.append("last"))

    errors = await scope.close()

    assert calls == ["last", "first"]
    assert len(errors) == 1
    assert isinstance(errors[0], RuntimeError)
    assert scope.teardown_errors == errors


@pytest.mark.asyncio
async def test_exit_raises_teardown_error_without_primary_error():
    scope = Scope()
    scope.on_cleanup(lambda: 1 / 0)

    with pytest.raises(ScopeTeardownError) as exc_info:
        await scope.exit()

    assert len(exc_info.value.errors) == 1
    assert isinstance(exc_info.value.errors[0], ZeroDivisionError)


@pytest.mark.asyncio
async def test_exit_attaches_teardown_failures_to_primary_error():
    scope = Scope()
    scope.on_cleanup(lambda: 1 / 0)
    primary = ValueError("handler failed")

    await scope.exit(primary)

    assert any("ZeroDivisionError" in note for note in primary.__notes__)


@pytest.mark.asyncio
async def test_register_cleanup_after_close_fails():
    scope = Scope()
    await scope.close()

    with pytest.raises(RuntimeError):
        scope.on_cleanup(lambda: None)


@pytest.mark.asyncio
async def test_async_context_manager_closes_scope():
    calls = []

    async with Scope() as scope:
        scope.on_cleanup(lambda: calls.append("closed"))

    assert calls == ["closed"]
    assert scope.closed


@pytest.mark.asyncio
async def test_cancel_after_delay():
    scope = Scope()
    child = scope.derive()

    scope.cancel_after(0.01)
    assert not child.canceled

    await asyncio.sleep(0.05)
    assert scope.canceled
    assert child.canceled


@pytest.mark.asyncio
async def test_close_stops_pending_cancel_timer():
    scope = Scope()
    scope.cancel_after(0.01)

    await scope.close()
    await asyncio.sleep(0.05)

    assert not scope.canceled


@pytest.mark.asyncio
async def test_cancelled_callback_does_not_stop_other_callbacks():
    parent = Scope()
    scope = parent.derive()
    ran = []

    scope.on_cleanup(lambda: ran.append("first"))

    @scope.on_cleanup
    async def interrupted():
        raise asyncio.CancelledError()

    scope.on_cleanup(lambda: 1 / 0)

    with pytest.raises(asyncio.CancelledError):
        await scope.close()

    assert ran == ["first"]
    assert scope.closed
    assert len(scope.teardown_errors) == 1
    assert isinstance(scope.teardown_errors[0], ZeroDivisionError)
    assert scope not in set(parent._children)
