"""Plugins and capability extension.

A plugin is installed once, when a client is constructed. It registers
operation handlers on the client's registry and may return capabilities:
named factories the client exposes as methods (``client.auctions()``).
Installation is all or nothing: if any plugin fails, every registration and
capability added by the plugin list is rolled back and construction fails.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Iterable,
    Protocol,
    runtime_checkable,
)

if TYPE_CHECKING:
    from .client import Client
    from .registry import OperationRegistry

__all__ = ["Capability", "FunctionPlugin", "Plugin", "PluginLoader", "plugin_name"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Capability:
    """A named facade a plugin attaches to the client.

    Attributes:
        name: Attribute name on the client (``client.<name>(...)``)
        factory: Called as ``factory(client, *args, **kwargs)``
    """

    name: str
    factory: Callable[..., Any]

    def bind(self, client: Client) -> Callable[..., Any]:
        return functools.partial(self.factory, client)


@runtime_checkable
class Plugin(Protocol):
    """Protocol for client plugins."""

    def install(self, client: Client) -> Iterable[Capability] | None:
        """Register operations and return capabilities to attach."""
        ...


@dataclass(frozen=True)
class FunctionPlugin:
    """Plugin built from a plain install function."""

    fn: Callable[[Client], Iterable[Capability] | None]
    name: str = ""

    def install(self, client: Client) -> Iterable[Capability] | None:
        return self.fn(client)


def plugin_name(plugin: Any) -> str:
    """Human-readable plugin name for logs and errors."""
    name = getattr(plugin, "name", None)
    if isinstance(name, str) and name:
        return name
    return type(plugin).__name__


class PluginLoader:
    """Install an ordered list of plugins into a client."""

    def __init__(self, plugins: Iterable[Plugin]) -> None:
        self._plugins = tuple(plugins)

    @property
    def plugins(self) -> tuple[Plugin, ...]:
        return self._plugins

    def install(
        self,
        client: Client,
        registry: OperationRegistry,
        capabilities: dict[str, Capability],
    ) -> None:
        """Install every plugin in order, rolling everything back on failure."""
        registry_snapshot = registry.snapshot()
        capabilities_snapshot = dict(capabilities)

        try:
            for plugin in self._plugins:
                name = plugin_name(plugin)
                logger.debug(f"Installing plugin {name}")
                for capability in plugin.install(client) or ():
                    self._attach(capabilities, capability, name)
        except BaseException:
            registry.restore(registry_snapshot)
            capabilities.clear()
            capabilities.update(capabilities_snapshot)
            raise

    @staticmethod
    def _attach(
        capabilities: dict[str, Capability], capability: Capability, plugin: str
    ) -> None:
        # First write wins; plugin authors keep capability names unique.
        if capability.name in capabilities:
            logger.warning(
                f"Plugin {plugin} tried to attach capability '{capability.name}' "
                "which is already attached; keeping the existing one"
            )
            return
        capabilities[capability.name] = capability
