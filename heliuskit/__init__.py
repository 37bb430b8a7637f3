"""Async client for the Helius Solana RPC, DAS and enhanced transaction APIs."""

__version__ = "0.1.0"

__all__ = [
    "client",
    "config",
    "errors",
    "factory",
    "request_handler",
    "rpc_client",
]