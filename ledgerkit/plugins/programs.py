"""Program registry plugin: known programs and their error resolvers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable

from ..core.plugin import Capability
from ..drivers.errors import TransactionFailedError
from ..types.address import Address

if TYPE_CHECKING:
    from ..core.client import Client

__all__ = ["Program", "ProgramModule", "ProgramRegistry", "program_module"]

ErrorResolver = Callable[[TransactionFailedError], Exception | None]


@dataclass(frozen=True)
class Program:
    """A ledger program the client knows how to talk to.

    Attributes:
        name: Unique program name
        address: Program address
        error_resolver: Turns a failed transaction into a program-specific
            error, or returns None when it does not recognize the failure
    """

    name: str
    address: Address
    error_resolver: ErrorResolver | None = None


class ProgramRegistry:
    """Programs registered by plugins, looked up by name or address."""

    def __init__(self) -> None:
        self._programs: dict[str, Program] = {}

    def register(self, program: Program) -> Program:
        if program.name in self._programs:
            raise ValueError(f"Program '{program.name}' is already registered")
        self._programs[program.name] = program
        return program

    def get(self, name_or_address: str) -> Program:
        program = self._programs.get(name_or_address)
        if program is not None:
            return program
        for program in self._programs.values():
            if program.address == name_or_address:
                return program
        raise LookupError(f"No program registered for '{name_or_address}'")

    def all(self) -> list[Program]:
        return list(self._programs.values())

    def resolve_error(self, error: TransactionFailedError) -> Exception:
        """Return the program-specific error for a failed transaction.

        Falls back to ``error`` itself when no registered program recognizes it.
        """
        for program in self._programs.values():
            if program.address != error.program or program.error_resolver is None:
                continue
            resolved = program.error_resolver(error)
            if resolved is not None:
                return resolved
        return error

    def __contains__(self, name: str) -> bool:
        return name in self._programs


class ProgramModule:
    """Attaches ``client.programs()``."""

    name = "programs"

    def install(self, client: Client) -> Iterable[Capability]:
        registry = ProgramRegistry()
        return [Capability("programs", lambda _client: registry)]


def program_module() -> ProgramModule:
    return ProgramModule()
