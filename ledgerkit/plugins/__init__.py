"""Built-in plugins."""

from .auction_house import AuctionHouseModule, auction_house_module
from .nft import NftModule, nft_module
from .programs import Program, ProgramModule, ProgramRegistry, program_module
from .rpc import RpcClient, RpcModule, rpc_module

__all__ = [
    "AuctionHouseModule",
    "NftModule",
    "Program",
    "ProgramModule",
    "ProgramRegistry",
    "RpcClient",
    "RpcModule",
    "auction_house_module",
    "core_plugins",
    "nft_module",
    "program_module",
    "rpc_module",
]


def core_plugins() -> list:
    """Plugins a client installs when none are given, in install order."""
    return [program_module(), rpc_module(), nft_module(), auction_house_module()]
