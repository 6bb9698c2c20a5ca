"""Helpers for the two-phase lazy hydration pattern.

Listing and scan operations return lazy records: frozen dataclasses holding
only addresses and raw values. A hydration handler runs nested operations to
resolve the related entities and builds the full record with ``assemble``,
which copies every field of the lazy record and adds the fetched ones.
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from typing import Any, TypeVar

from .errors import HydrationConflictError

__all__ = ["assemble", "is_lazy", "record_fields"]

F = TypeVar("F")


def record_fields(record: Any) -> dict[str, Any]:
    """Return the init fields of a dataclass record as a dict."""
    if not is_dataclass(record) or isinstance(record, type):
        raise TypeError(f"Expected a dataclass record, got {type(record).__name__}")
    return {f.name: getattr(record, f.name) for f in fields(record) if f.init}


def assemble(full_cls: type[F], lazy: Any, **extra: Any) -> F:
    """Build a full record from a lazy record plus fetched fields.

    The lazy record is never mutated. A fetched field may repeat a lazy field
    only with an equal value.

    Raises:
        HydrationConflictError: If ``extra`` would overwrite a lazy field with
            a different value.
    """
    base = record_fields(lazy)
    for name, value in extra.items():
        if name in base and base[name] != value:
            raise HydrationConflictError(type(lazy).__name__, name, base[name], value)
    return full_cls(**{**base, **extra})


def is_lazy(record: Any) -> bool:
    """True if the record is the lazy form of its entity."""
    return bool(getattr(record, "lazy", False))
