"""Sending HTTP requests and decoding their JSON responses."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from heliuskit.errors import NetworkError, SerializationError, from_response_status

__all__ = ["RequestHandler"]

_log = logging.getLogger(__name__)


class RequestHandler:
    """Sends requests through a shared async HTTP client."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self.http_client = http_client

    async def send(self, method: str, url: str | httpx.URL, body: Any = None) -> Any:
        """Send a request, with ``body`` as JSON if given, and return the decoded reply.

        Raises a ``HeliusError`` subclass when the request cannot be sent, the
        reply is not valid JSON, or the server answers with a failure status.
        """
        headers: dict[str, str] = {}
        content: bytes | None = None
        if body is not None:
            try:
                content = json.dumps(body).encode("utf-8")
            except (TypeError, ValueError) as exc:
                raise SerializationError(exc) from exc
            headers["content-type"] = "application/json"

        try:
            response = await self.http_client.request(
                str(method), url, content=content, headers=headers
            )
        except httpx.HTTPError as exc:
            raise NetworkError(exc) from exc

        return self._handle_response(response)

    @staticmethod
    def _handle_response(response: httpx.Response) -> Any:
        status = response.status_code
        path = response.url.path
        body_text = response.text
        _log.debug("status=%s path=%s body=%s", status, path, body_text)

        if response.is_success:
            try:
                return json.loads(body_text)
            except ValueError as exc:
                _log.debug("could not decode response body: %s", body_text)
                raise SerializationError(exc) from exc

        try:
            decoded = json.loads(body_text)
        except ValueError:
            raise from_response_status(status, path, body_text) from None

        message = decoded.get("message") if isinstance(decoded, dict) else None
        if not isinstance(message, str):
            message = "Unknown error"
        raise from_response_status(status, path, message)