"""Ledger addresses and program-derived address lookup."""

from __future__ import annotations

import hashlib
from typing import NewType
from uuid import uuid4

__all__ = ["Address", "find_program_address", "new_address"]

Address = NewType("Address", str)

_ADDRESS_BYTES = 20


def new_address() -> Address:
    """Generate a fresh random address (keypair stand-in)."""
    return Address((uuid4().hex + uuid4().hex)[: _ADDRESS_BYTES * 2])


def find_program_address(program: Address, *seeds: str | bytes | int) -> Address:
    """Derive a deterministic address from a program and seeds.

    The same program and seeds always produce the same address.
    """
    digest = hashlib.sha256()
    for seed in seeds:
        if isinstance(seed, int):
            seed = seed.to_bytes(16, "little", signed=True)
        elif isinstance(seed, str):
            seed = seed.encode()
        digest.update(len(seed).to_bytes(2, "little"))
        digest.update(seed)
    digest.update(program.encode())
    digest.update(b"ProgramDerivedAddress")
    return Address(digest.hexdigest()[: _ADDRESS_BYTES * 2])
