"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass

from heliuskit.errors import InvalidInputError

__all__ = ["Endpoints", "Config"]


@dataclass(frozen=True)
class Endpoints:
    """Base URLs of the REST API and of the RPC node."""

    api: str
    rpc: str


@dataclass(frozen=True)
class Config:
    """API key and endpoints used to talk to one cluster."""

    api_key: str
    endpoints: Endpoints

    def __post_init__(self) -> None:
        if not self.api_key:
            raise InvalidInputError("API key cannot be empty")