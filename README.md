# heliuskit

An asynchronous Python client for the Helius Solana APIs: the Digital Asset
Standard (DAS) RPC methods, priority fee estimates, enhanced (parsed)
transactions and compressed NFT minting. Requests go over `httpx`, and every
failure is raised as a subclass of `heliuskit.errors.HeliusError`.

## Installation

```
pip install heliuskit
```

## Quick start

A client is built from an API key and an `Endpoints` value holding the two base
URLs of the cluster you want to talk to:

- `api` is the base of the REST API. Paths such as `v0/transactions` are
  appended to it directly, so it should end with `/`.
- `rpc` is the RPC node. `/?api-key=...` is appended to it, so it should not
  end with `/`.

All request methods are coroutines.

```python
import asyncio

import httpx

from heliuskit.client import Helius
from heliuskit.config import Endpoints

ENDPOINTS = Endpoints(
    api="https://api.example.com/",
    rpc="https://rpc.example.com",
)


async def main():
    async with httpx.AsyncClient() as http_client:
        helius = Helius("placeholder", ENDPOINTS, http_client)

        asset = await helius.rpc().get_asset(
            {"id": "81bxPqYCE8j34nQm7Rooqi8Vt3iMHLzgZJ71rUVbQQuz"}
        )
        print(asset)


asyncio.run(main())
```

If no `httpx.AsyncClient` is passed, `Helius` creates its own. The client can
then be closed with `await helius.aclose()`, or by using `Helius` itself as an
async context manager, which closes the HTTP client on exit:

```python
async with Helius("placeholder", ENDPOINTS) as helius:
    proof = await helius.rpc().get_asset_proof({"id": "..."})
```

An empty API key is rejected with `InvalidInputError` as soon as the client is
configured (`heliuskit.config.Config` performs the check).

## RPC methods

`Helius.rpc()` returns the `RpcClient`. Each call wraps the request in a
JSON-RPC 2.0 envelope, posts it to the RPC endpoint and returns the `result`
field of the reply as decoded JSON (dicts, lists and plain values):

| Method | JSON-RPC name |
| --- | --- |
| `get_asset` | `getAsset` |
| `get_asset_batch` | `getAssetBatch` |
| `get_asset_proof` | `getAssetProof` |
| `get_asset_proof_batch` | `getAssetProofBatch` |
| `get_assets_by_authority` | `getAssetsByAuthority` |
| `get_assets_by_creator` | `getAssetsByCreator` |
| `get_assets_by_group` | `getAssetsByGroup` |
| `get_assets_by_owner` | `getAssetsByOwner` |
| `search_assets` | `searchAssets` |
| `get_signatures_for_asset` | `getSignaturesForAsset` |
| `get_token_accounts` | `getTokenAccounts` |
| `get_nft_editions` | `getNftEditions` |
| `get_priority_fee_estimate` | `getPriorityFeeEstimate` |
| `get_rwa_asset` | `getRwaAccountsByMint` |

`get_priority_fee_estimate` sends its request as a one-element list of
parameters; the others send the request as given. Any other method can be
called directly with `RpcClient.post_rpc_request(method, request)`.

```python
fees = await helius.rpc().get_priority_fee_estimate(
    {
        "accountKeys": ["JUP6LkbZbjS1jKKwapdHNy74zcZ3tLUZoi5QNyVTaV4"],
        "options": {"priorityLevel": "High"},
    }
)
```

## Enhanced transactions

```python
parsed = await helius.parse_transactions(
    ["2sShYqqcWAcJiGc3oK74iFsYKgLCNiY2DsivMbaJGQT8pRzR8z5iBcdmTMXRobH8cZNZgeV9Ur9VjvLsykfFE2Li"]
)

history = await helius.parsed_transaction_history(
    "2k5AXX4guW9XwRQ1AKCpAuUqgWDpQpwFfpVFh3hnm2Ha"
)
```

`parse_transactions` posts the signatures to `v0/transactions` on the API
endpoint. `parsed_transaction_history` fetches
`v0/addresses/<address>/transactions`; pass a transaction signature as
`before` to page back through an address's history.

## Minting a compressed NFT

```python
minted = await helius.mint_compressed_nft(
    {
        "name": "Exodia the Forbidden One",
        "symbol": "ETFO",
        "owner": "DCQnfUH6mHA333mzkU22b4hMvyqcejUBociodq8bB5HF",
        "description": "A legendary creature assembled from five parts.",
        "attributes": [{"trait_type": "Type", "value": "Legendary"}],
        "sellerFeeBasisPoints": 6900,
        "confirmTransaction": True,
    }
)
```

This calls the `mintCompressedNft` RPC method and returns its result.

## Several clusters at once

`HeliusFactory` keeps one API key (and optionally one shared `httpx` client)
and produces a `Helius` client for each set of endpoints:

```python
from heliuskit.config import Endpoints
from heliuskit.factory import HeliusFactory

DEVNET_ENDPOINTS = Endpoints(
    api="https://api-devnet.example.com/",
    rpc="https://devnet.example.com",
)
MAINNET_ENDPOINTS = Endpoints(
    api="https://api-mainnet.example.com/",
    rpc="https://mainnet.example.com",
)

factory = HeliusFactory("placeholder").with_client(http_client)

devnet = factory.create(DEVNET_ENDPOINTS)
mainnet = factory.create(MAINNET_ENDPOINTS)
```

Without `with_client`, each created client gets its own `httpx.AsyncClient`.
`create` raises `InvalidInputError` if the API key is empty.

## Errors

Everything raised by the package derives from `heliuskit.errors.HeliusError`.
Non-success HTTP responses are mapped by status code
(`heliuskit.errors.from_response_status`):

| Status | Exception |
| --- | --- |
| 400 | `BadRequestError` |
| 401, 403 | `UnauthorizedError` |
| 404 | `NotFoundError` |
| 429 | `RateLimitExceededError` |
| 500 | `InternalServerError` |
| anything else | `UnknownError` |

When an error body is a JSON object, its `message` field becomes the error
text (or `"Unknown error"` if there is none); otherwise the raw body is used.

`NetworkError` is raised when `httpx` fails to complete the request.
`SerializationError` is raised when a request body cannot be encoded as JSON,
when a successful reply is not valid JSON, or when an RPC reply has no
`result` field.

```python
from heliuskit.errors import HeliusError, RateLimitExceededError

try:
    assets = await helius.rpc().get_assets_by_owner({"ownerAddress": owner})
except RateLimitExceededError:
    ...  # back off and retry
except HeliusError as exc:
    print(exc)
```

Requests and responses are logged at debug level through the standard
`logging` module, under the `heliuskit.*` logger names.

## What the package does not do

- It has no built-in cluster URLs; you always supply an `Endpoints` value.
- It has no typed request or response models: requests are plain JSON-ready
  values and results are returned as decoded JSON.
- It does not build, sign or send Solana transactions, and offers no general
  Solana RPC connection beyond the methods listed above.
- It does not retry requests; rate limits and failures are left to the caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```