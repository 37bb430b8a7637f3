"""JSON-RPC client for the digital asset and priority fee methods."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from heliuskit.config import Config
from heliuskit.errors import SerializationError
from heliuskit.request_handler import RequestHandler

__all__ = ["RpcClient"]

_log = logging.getLogger(__name__)

_JSONRPC_VERSION = "2.0"
_REQUEST_ID = "1"


class RpcClient:
    """Calls RPC methods on the node named by a configuration.

    Every method raises a ``HeliusError`` subclass when the request fails,
    the server answers with a failure status, or the reply cannot be decoded.
    """

    def __init__(self, http_client: httpx.AsyncClient, config: Config) -> None:
        self.handler = RequestHandler(http_client)
        self.config = config

    @property
    def url(self) -> str:
        """The RPC endpoint, with the API key in its query string."""
        return f"{self.config.endpoints.rpc}/?api-key={self.config.api_key}"

    async def post_rpc_request(self, method: str, request: Any) -> Any:
        """Call ``method`` with ``request`` as its parameters and return the result."""
        payload = {
            "jsonrpc": _JSONRPC_VERSION,
            "id": _REQUEST_ID,
            "method": method,
            "params": request,
        }
        _log.debug("rpc request %s", method)
        reply = await self.handler.send("POST", self.url, payload)

        if not isinstance(reply, dict) or "result" not in reply:
            detail = "response has no 'result' field"
            if isinstance(reply, dict) and "error" in reply:
                detail = f"{detail}: {reply['error']}"
            raise SerializationError(ValueError(detail))
        return reply["result"]

    async def get_asset(self, request: Any) -> Any:
        """Get an asset by its ID, or None if no asset matches."""
        return await self.post_rpc_request("getAsset", request)

    async def get_asset_batch(self, request: Any) -> Any:
        """Get several assets by their IDs; missing ones come back as None."""
        return await self.post_rpc_request("getAssetBatch", request)

    async def get_asset_proof(self, request: Any) -> Any:
        """Get the merkle proof of a compressed asset, or None."""
        return await self.post_rpc_request("getAssetProof", request)

    async def get_asset_proof_batch(self, request: Any) -> Any:
        """Get proofs for several assets, keyed by asset ID."""
        return await self.post_rpc_request("getAssetProofBatch", request)

    async def get_assets_by_authority(self, request: Any) -> Any:
        """List the assets managed by an authority."""
        return await self.post_rpc_request("getAssetsByAuthority", request)

    async def get_assets_by_creator(self, request: Any) -> Any:
        """List the assets created by an address."""
        return await self.post_rpc_request("getAssetsByCreator", request)

    async def get_assets_by_group(self, request: Any) -> Any:
        """List the assets matching a group key and value."""
        return await self.post_rpc_request("getAssetsByGroup", request)

    async def get_assets_by_owner(self, request: Any) -> Any:
        """List the assets owned by an address."""
        return await self.post_rpc_request("getAssetsByOwner", request)

    async def search_assets(self, request: Any) -> Any:
        """List the assets matching custom search criteria."""
        return await self.post_rpc_request("searchAssets", request)

    async def get_signatures_for_asset(self, request: Any) -> Any:
        """List the transaction signatures involving an asset."""
        return await self.post_rpc_request("getSignaturesForAsset", request)

    async def get_token_accounts(self, request: Any) -> Any:
        """List the token accounts of a mint or an owner."""
        return await self.post_rpc_request("getTokenAccounts", request)

    async def get_nft_editions(self, request: Any) -> Any:
        """List the editions of a master NFT."""
        return await self.post_rpc_request("getNftEditions", request)

    async def get_priority_fee_estimate(self, request: Any) -> Any:
        """Estimate the priority fees for a transaction or a set of accounts."""
        return await self.post_rpc_request("getPriorityFeeEstimate", [request])

    async def get_rwa_asset(self, request: Any) -> Any:
        """Get a real-world asset by its mint address."""
        return await self.post_rpc_request("getRwaAccountsByMint", request)