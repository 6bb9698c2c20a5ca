"""Client - the shared facade plugins extend."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, TypeVar

from ..config import ClientConfig
from ..drivers.filesystem import FilesystemDriver, LocalFilesystemDriver
from ..drivers.ledger import LedgerDriver
from ..types.address import Address, new_address
from .errors import PluginInstallError
from .executor import Executor
from .operation import Operation
from .plugin import Capability, Plugin, PluginLoader
from .profiling import enable_profiling
from .registry import OperationRegistry
from .scope import Scope
from .task import Task

__all__ = ["Client"]

logger = logging.getLogger(__name__)

O = TypeVar("O")


class Client:
    """Shared client composed of drivers, an operation registry and capabilities.

    Plugins are installed in order when the client is created. Capabilities
    they return are exposed as attributes, so ``client.auctions()`` calls the
    ``auctions`` capability's factory with this client.

    Example:
        client = Client(MemoryLedger())
        house = await client.auctions().create_auction_house(seller_fee_basis_points=200)
        bid = await client.auctions().for_auction_house(house.auction_house).create_bid(
            mint_account=mint, price=sol(1.5)
        )
    """

    def __init__(
        self,
        ledger: LedgerDriver,
        *,
        filesystem: FilesystemDriver | None = None,
        identity: Address | None = None,
        plugins: Iterable[Plugin] | None = None,
        config: ClientConfig | dict[str, Any] | None = None,
    ) -> None:
        self.config = ClientConfig.create(config)
        self._ledger = ledger
        self._filesystem = filesystem or LocalFilesystemDriver()
        self._identity = identity or new_address()
        self._registry = OperationRegistry()
        self._executor = Executor(self, self._registry)
        self._capabilities: dict[str, Capability] = {}
        self._installed = False

        if self.config.profiling:
            enable_profiling()

        if plugins is None:
            from ..plugins import core_plugins

            plugins = core_plugins()
        self.install(plugins)

    def install(self, plugins: Iterable[Plugin]) -> None:
        """Install plugins. Only one installation per client is supported."""
        if self._installed:
            raise PluginInstallError("Plugins have already been installed on this client")
        PluginLoader(plugins).install(self, self._registry, self._capabilities)
        self._installed = True
        logger.debug(
            f"Client ready with {len(self._registry)} operations and "
            f"capabilities {sorted(self._capabilities)}"
        )

    # Drivers

    def ledger(self) -> LedgerDriver:
        return self._ledger

    def filesystem(self) -> FilesystemDriver:
        return self._filesystem

    def identity(self) -> Address:
        """Address acting as the default wallet for this client."""
        return self._identity

    # Operations

    def operations(self) -> OperationRegistry:
        return self._registry

    async def run(self, operation: Operation[Any, O], scope: Scope | None = None) -> O:
        """Run an operation through the executor."""
        return await self._executor.run(operation, scope)

    def task(self, operation: Operation[Any, O]) -> Task[O]:
        """Bind an operation to this client without running it."""
        return Task(operation, self)

    # Capabilities

    @property
    def capabilities(self) -> Mapping[str, Capability]:
        return MappingProxyType(self._capabilities)

    def capability(self, name: str) -> Callable[..., Any]:
        """Get a capability factory bound to this client."""
        try:
            return self._capabilities[name].bind(self)
        except KeyError:
            raise AttributeError(
                f"Client has no capability '{name}'. "
                f"Available: {sorted(self._capabilities)}"
            ) from None

    def __getattr__(self, name: str) -> Callable[..., Any]:
        # Only reached for names that are not regular attributes.
        capabilities = self.__dict__.get("_capabilities")
        if capabilities is None or name not in capabilities:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        return capabilities[name].bind(self)

    def __repr__(self) -> str:
        return (
            f"Client(identity={self._identity}, operations={len(self._registry)}, "
            f"capabilities={sorted(self._capabilities)})"
        )
