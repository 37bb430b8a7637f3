import dataclasses

import pytest

from heliuskit.config import Config, Endpoints
from heliuskit.errors import HeliusError, InvalidInputError

ENDPOINTS = Endpoints(api="https://api.example.com/", rpc="https://rpc.example.com")


def test_config_keeps_values():
    config = Config(api_key="placeholder", endpoints=ENDPOINTS)
    assert config.api_key == "placeholder"
    assert config.endpoints == ENDPOINTS
    assert config.endpoints.api == "https://api.example.com/"
    assert config.endpoints.rpc == "https://rpc.example.com"


def test_empty_api_key_is_rejected():
    with pytest.raises(InvalidInputError) as info:
        Config(api_key="", endpoints=ENDPOINTS)
    assert info.value.message == "API key cannot be empty"
    assert isinstance(info.value, HeliusError)


def test_config_is_immutable():
    config = Config(api_key="placeholder", endpoints=ENDPOINTS)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.api_key = "token"  # type: ignore[misc]
    assert config.api_key == "placeholder"
    assert config.endpoints == ENDPOINTS


def test_replace_revalidates():
    config = Config(api_key="placeholder", endpoints=ENDPOINTS)
    with pytest.raises(InvalidInputError):
        dataclasses.replace(config, api_key="")


def test_endpoints_equality():
    same = Endpoints(api="https://api.example.com/", rpc="https://rpc.example.com")
    other = Endpoints(api="https://api.example.com/", rpc="https://other.example.com")
    assert same == ENDPOINTS
    assert other != ENDPOINTS