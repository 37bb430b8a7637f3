"""The main entry point for talking to the API."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import httpx

from heliuskit.config import Config, Endpoints
from heliuskit.rpc_client import RpcClient

__all__ = ["Helius"]

_log = logging.getLogger(__name__)


class Helius:
    """Client bound to one API key and one set of endpoints.

    The HTTP client is shared by every request made through this instance.
    Every request method raises a ``HeliusError`` subclass on failure.
    """

    def __init__(
        self,
        api_key: str,
        endpoints: Endpoints,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = Config(api_key, endpoints)
        self.client = http_client if http_client is not None else httpx.AsyncClient()
        self.rpc_client = RpcClient(self.client, self.config)

    def rpc(self) -> RpcClient:
        """The RPC client sharing this instance's HTTP client and configuration."""
        return self.rpc_client

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()

    async def __aenter__(self) -> Helius:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def parse_transactions(self, transactions: Iterable[str]) -> Any:
        """Parse the transactions with the given signatures into enhanced transactions."""
        url = f"{self.config.endpoints.api}v0/transactions?api-key={self.config.api_key}"
        _log.debug("parse transactions via %s", self.config.endpoints.api)
        body = {"transactions": list(transactions)}
        return await self.rpc_client.handler.send("POST", url, body)

    async def parsed_transaction_history(self, address: str, before: str | None = None) -> Any:
        """Get the parsed transaction history of ``address``.

        With ``before``, only transactions before that signature are returned,
        which allows paging through the history.
        """
        url = (
            f"{self.config.endpoints.api}v0/addresses/{address}/transactions"
            f"?api-key={self.config.api_key}"
        )
        if before is not None:
            url = f"{url}&before={before}"
        return await self.rpc_client.handler.send("GET", url)

    async def mint_compressed_nft(self, request: Any) -> Any:
        """Mint a compressed NFT described by ``request`` and return the mint result."""
        return await self.rpc_client.post_rpc_request("mintCompressedNft", request)