"""Shared fixtures for nft_storage tests."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest
from pytest_metadata.plugin import metadata_key

from nft_storage.client import NftStorageClient
from nft_storage.models.config import ClientConfig

from tests.mocks import FakeNftStorageApi

API_URL = "https://api.nft.storage"
TEST_TOKEN = "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.test-token"


def pytest_configure(config):
    """Add API info to the HTML report Environment table."""
    meta = config.stash.setdefault(metadata_key, {})
    meta["API URL"] = API_URL
    meta["Transport"] = "httpx.MockTransport / local aiohttp server"


def make_test_config(**overrides) -> ClientConfig:
    """Build a ClientConfig suitable for testing."""
    defaults = dict(api_url=API_URL, token=TEST_TOKEN, log_level="debug")
    defaults.update(overrides)
    return ClientConfig(**defaults)


def make_client(
    handler: Callable[[httpx.Request], httpx.Response],
    token: str = TEST_TOKEN,
) -> NftStorageClient:
    """Client whose every request is answered by ``handler``."""
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return NftStorageClient(API_URL, token, http_client=http)


@pytest.fixture
def test_config():
    """Default ClientConfig for tests."""
    return make_test_config()


@pytest.fixture
def fake_api():
    """Empty in-memory NFT.Storage API."""
    return FakeNftStorageApi(TEST_TOKEN)


@pytest.fixture
async def client(fake_api):
    """NftStorageClient wired to the fake API."""
    c = make_client(fake_api.handle)
    yield c
    await c.client.aclose()
