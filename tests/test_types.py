"""Tests for addresses, amounts and client configuration."""

import pytest

from ledgerkit import ClientConfig
from ledgerkit.types import (
    SOL,
    Amount,
    find_program_address,
    lamports,
    new_address,
    sol,
    token,
)


def test_find_program_address_is_deterministic():
    program = new_address()

    assert find_program_address(program, "seed", 1) == find_program_address(program, "seed", 1)
    assert find_program_address(program, "seed", 1) != find_program_address(program, "seed", 2)
    assert find_program_address(program, "ab", "c") != find_program_address(program, "a", "bc")


def test_sol_amounts():
    assert sol(1.5) == Amount(1_500_000_000, SOL)
    assert sol("6.5") == lamports(6_500_000_000)
    assert sol(1) + sol(2) == sol(3)
    assert sol(3) - sol(1) == sol(2)
    assert str(sol(1.5)) == "SOL 1.500000000"


def test_token_amounts():
    assert token(1) == Amount(1, token(0).currency)
    assert token(2.5, decimals=2).basis_points == 250
    assert str(token(2.5, decimals=2, symbol="USD")) == "USD 2.50"


def test_amounts_in_different_currencies_do_not_mix():
    with pytest.raises(ValueError):
        sol(1) + token(1)


def test_amount_requires_integer_basis_points():
    with pytest.raises(TypeError):
        Amount(1.5, SOL)


def test_client_config():
    assert ClientConfig.create() == ClientConfig()
    assert ClientConfig.create({"commitment": "finalized"}).commitment == "finalized"
    config = ClientConfig(load_json_metadata=False)
    assert ClientConfig.create(config) is config

    with pytest.raises(ValueError, match="Unknown commitment"):
        ClientConfig(commitment="eventually")
