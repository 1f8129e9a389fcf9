"""
Pytest configuration and fixtures for Pinata SDK tests.

This module provides shared fixtures: sample CIDs, a test configuration,
a rate limiter that records calls instead of sleeping and a helper to build
httpx responses.
"""

from typing import Any, AsyncGenerator, Callable, Optional

import httpx
import pytest
import pytest_asyncio

from pinata_sdk.api_client import PinataApiClient
from pinata_sdk.config import PinataConfig


class RecordingRateLimiter:
    """Rate limiter that counts acquisitions and never waits."""

    def __init__(self):
        self.calls = 0

    async def acquire(self) -> None:
        self.calls += 1


@pytest.fixture
def sample_cid() -> str:
    """
    Sample CIDv0 for testing (a valid but non-existent CID).

    Returns:
        Sample CID string
    """
    return "QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG"


@pytest.fixture
def sample_cid_v1() -> str:
    """Sample base32 CIDv1."""
    return "bafkreih5aznjvttude6c3wbvqeebb6rlx5wkbzyppv7garjiubll2ceym4"


@pytest.fixture
def test_config() -> PinataConfig:
    return PinataConfig(
        pinata_jwt="test-jwt",
        pinata_gateway="mygateway.mypinata.cloud",
        pinata_gateway_key="my-gateway-key",
        endpoint_url="https://test.api.com/v3",
        legacy_endpoint_url="https://test.api.com",
    )


@pytest.fixture
def rate_limiter() -> RecordingRateLimiter:
    return RecordingRateLimiter()


@pytest_asyncio.fixture
async def api_client(
    test_config: PinataConfig, rate_limiter: RecordingRateLimiter
) -> AsyncGenerator[PinataApiClient, None]:
    """
    Create an API client with a test configuration and no batch pauses.

    Yields:
        Configured PinataApiClient instance
    """
    client = PinataApiClient(config=test_config, rate_limiter=rate_limiter)

    yield client

    await client.close()


@pytest.fixture
def make_response() -> Callable[..., httpx.Response]:
    """
    Build httpx responses bound to a request, as the API client expects.

    Returns:
        Factory taking status code, method, url and json/text/content/headers
    """

    def factory(
        status_code: int = 200,
        method: str = "GET",
        url: str = "https://test.api.com/v3",
        json: Any = None,
        text: Optional[str] = None,
        content: Optional[bytes] = None,
        headers: Optional[dict] = None,
    ) -> httpx.Response:
        kwargs = {"headers": headers, "request": httpx.Request(method, url)}
        if json is not None:
            kwargs["json"] = json
        elif text is not None:
            kwargs["text"] = text
        elif content is not None:
            kwargs["content"] = content
        return httpx.Response(status_code, **kwargs)

    return factory
