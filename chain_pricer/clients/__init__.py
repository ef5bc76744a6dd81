"""Client wrappers for the price cache server and EVM nodes."""

from .price_server import PriceServerClient
from .rpc import RpcClient, RpcError

__all__ = ["PriceServerClient", "RpcClient", "RpcError"]
