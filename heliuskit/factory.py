"""Factory producing consistently configured clients."""

from __future__ import annotations

import httpx

from heliuskit.client import Helius
from heliuskit.config import Config, Endpoints

__all__ = ["HeliusFactory"]


class HeliusFactory:
    """Creates ``Helius`` clients sharing one API key, for any set of endpoints."""

    def __init__(self, api_key: str) -> None:
        self.api_key = api_key
        self._client: httpx.AsyncClient | None = None

    def with_client(self, client: httpx.AsyncClient) -> HeliusFactory:
        """Use ``client`` for every client created from now on."""
        self._client = client
        return self

    def create(self, endpoints: Endpoints) -> Helius:
        """Create a client for ``endpoints``.

        Raises ``InvalidInputError`` if the API key is empty.
        """
        # Validate before creating a fresh HTTP client that would otherwise leak.
        Config(self.api_key, endpoints)
        client = self._client if self._client is not None else httpx.AsyncClient()
        return Helius(self.api_key, endpoints, client)