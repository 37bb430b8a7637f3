import json

import httpx
import pytest

from heliuskit.client import Helius
from heliuskit.config import Endpoints
from heliuskit.errors import BadRequestError, InvalidInputError, NotFoundError

API_KEY = "placeholder"
ENDPOINTS = Endpoints(api="https://api.example.com/", rpc="https://rpc.example.com")


def _make_client(reply, status=200):
    seen = []

    def handler(request):
        seen.append(request)
        if isinstance(reply, (bytes, str)):
            return httpx.Response(status, content=reply)
        return httpx.Response(status, json=reply)

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return Helius(API_KEY, ENDPOINTS, http_client), seen


def test_empty_api_key_is_rejected():
    with pytest.raises(InvalidInputError) as info:
        Helius("", ENDPOINTS, httpx.AsyncClient())
    assert info.value.message == "API key cannot be empty"


def test_rpc_shares_config_and_client():
    helius, _ = _make_client({})
    rpc = helius.rpc()
    assert rpc is helius.rpc_client
    assert rpc.config is helius.config
    assert rpc.handler.http_client is helius.client
    assert helius.config.api_key == API_KEY
    assert helius.config.endpoints == ENDPOINTS


@pytest.mark.asyncio
async def test_parse_transactions_posts_signatures():
    signature = "2sShYqqcWAcJiGc3oK74iFsYKgLCNiY2DsivMbaJGQT8pRzR8z5iBcdmTMXRobH8cZNZgeV9Ur9VjvLsykfFE2Li"
    parsed = [{"signature": signature, "type": "TRANSFER"}]
    helius, seen = _make_client(parsed)

    result = await helius.parse_transactions([signature])

    assert result == parsed
    assert len(seen) == 1
    request = seen[0]
    assert request.method == "POST"
    assert request.url.host == "api.example.com"
    assert request.url.path == "/v0/transactions"
    assert request.url.params["api-key"] == API_KEY
    assert json.loads(request.content) == {"transactions": [signature]}


@pytest.mark.asyncio
async def test_parsed_transaction_history_without_before():
    address = "2k5AXX4guW9XwRQ1AKCpAuUqgWDpQpwFfpVFh3hnm2Ha"
    helius, seen = _make_client([])

    result = await helius.parsed_transaction_history(address)

    assert result == []
    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == f"/v0/addresses/{address}/transactions"
    assert request.url.params["api-key"] == API_KEY
    assert "before" not in request.url.params
    assert request.content == b""


@pytest.mark.asyncio
async def test_parsed_transaction_history_with_before():
    address = "2k5AXX4guW9XwRQ1AKCpAuUqgWDpQpwFfpVFh3hnm2Ha"
    before = "5sigbefore"
    helius, seen = _make_client([{"signature": "older"}])

    result = await helius.parsed_transaction_history(address, before=before)

    assert result == [{"signature": "older"}]
    assert seen[0].url.params["before"] == before
    assert seen[0].url.params["api-key"] == API_KEY


@pytest.mark.asyncio
async def test_mint_compressed_nft_uses_rpc_method():
    request_body = {
        "name": "Exodia the Forbidden One",
        "symbol": "ETFO",
        "owner": "DCQnfUH6mHA333mzkU22b4hMvyqcejUBociodq8bB5HF",
        "sellerFeeBasisPoints": 6900,
        "confirmTransaction": True,
    }
    minted = {"signature": "sig", "minted": True, "assetId": "asset"}
    helius, seen = _make_client({"jsonrpc": "2.0", "id": "1", "result": minted})

    result = await helius.mint_compressed_nft(request_body)

    assert result == minted
    sent = json.loads(seen[0].content)
    assert sent["method"] == "mintCompressedNft"
    assert sent["params"] == request_body
    assert seen[0].url.host == "rpc.example.com"


@pytest.mark.asyncio
async def test_error_status_is_raised():
    helius, _ = _make_client({"message": "bad request"}, status=400)
    with pytest.raises(BadRequestError) as info:
        await helius.parse_transactions(["abc"])
    assert info.value.text == "bad request"
    assert info.value.path == "/v0/transactions"


@pytest.mark.asyncio
async def test_not_found_with_plain_body():
    helius, _ = _make_client("nothing here", status=404)
    with pytest.raises(NotFoundError) as info:
        await helius.parsed_transaction_history("addr")
    assert info.value.text == "nothing here"


@pytest.mark.asyncio
async def test_async_context_closes_client():
    helius, _ = _make_client([])
    async with helius as entered:
        assert entered is helius
        assert not helius.client.is_closed
    assert helius.client.is_closed