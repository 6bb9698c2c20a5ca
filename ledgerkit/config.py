"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

__all__ = ["ClientConfig", "Commitment"]

Commitment = Literal["processed", "confirmed", "finalized"]


@dataclass(frozen=True)
class ClientConfig:
    """Defaults applied by operation handlers when an input leaves them unset.

    Args:
        commitment: Ledger commitment level used for reads and submissions
        load_json_metadata: Whether NFT lookups load off-ledger JSON metadata
        profiling: Enable operation profiling when the client is created

    Example:
        ClientConfig(commitment="finalized")
        ClientConfig.create({"load_json_metadata": False})
    """

    commitment: Commitment = "confirmed"
    load_json_metadata: bool = True
    profiling: bool = False

    def __post_init__(self) -> None:
        if self.commitment not in ("processed", "confirmed", "finalized"):
            raise ValueError(f"Unknown commitment level: {self.commitment!r}")

    @staticmethod
    def create(config: ClientConfig | dict[str, Any] | None = None) -> ClientConfig:
        """Create config from an instance, a dict, or defaults."""
        if isinstance(config, ClientConfig):
            return config
        if isinstance(config, dict):
            return ClientConfig(**config)
        return ClientConfig()
