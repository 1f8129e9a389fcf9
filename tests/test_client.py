"""
Tests for the PinataClient facade.
"""

from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio

from pinata_sdk.api_client import BatchItemStatus
from pinata_sdk.client import PinataClient
from pinata_sdk.config import DEFAULT_GATEWAY, PinataConfig
from pinata_sdk.errors import UnresolvedCIDError


@pytest_asyncio.fixture
async def client(test_config, rate_limiter):
    client = PinataClient(config=test_config, rate_limiter=rate_limiter)
    yield client
    await client.close()


class TestConstruction:
    @patch("pinata_sdk.client.load_config")
    def test_builds_config_from_environment(self, mock_load_config):
        mock_load_config.return_value = PinataConfig(pinata_jwt="from-env")

        client = PinataClient(pinata_gateway="gw.mypinata.cloud")

        mock_load_config.assert_called_once_with(
            pinata_jwt=None,
            pinata_gateway="gw.mypinata.cloud",
            pinata_gateway_key=None,
            endpoint_url=None,
        )
        assert client.config.pinata_jwt == "from-env"
        assert client.api_client.config is client.config

    @patch("pinata_sdk.client.load_config")
    def test_explicit_config_skips_environment(self, mock_load_config, test_config):
        client = PinataClient(config=test_config)

        mock_load_config.assert_not_called()
        assert client.config is test_config


@pytest.mark.asyncio
class TestGatewayHelpers:
    async def test_contains_cid(self, client, sample_cid):
        result = client.contains_cid(f"ipfs://{sample_cid}")
        assert result.found
        assert result.cid == sample_cid

    async def test_convert_uses_configured_gateway(self, client, sample_cid):
        converted = client.convert_ipfs_url(f"ipfs://{sample_cid}")

        assert converted == f"https://mygateway.mypinata.cloud/files/{sample_cid}"
        assert "pinataGatewayToken" not in converted

    async def test_convert_explicit_prefix_wins(self, client, sample_cid):
        converted = client.convert_ipfs_url(sample_cid, "https://other.example")
        assert converted == f"https://other.example/files/{sample_cid}"

    async def test_convert_falls_back_to_public_gateway(self, sample_cid):
        client = PinataClient(config=PinataConfig())

        converted = client.convert_ipfs_url(f"https://ipfs.io/ipfs/{sample_cid}")

        assert converted == f"{DEFAULT_GATEWAY}/ipfs/{sample_cid}"
        await client.close()

    async def test_convert_without_cid(self, client):
        with pytest.raises(UnresolvedCIDError):
            client.convert_ipfs_url("https://example.com/nothing-here")


@pytest.mark.asyncio
class TestHeadersAndDelegation:
    async def test_set_new_headers_merges_and_propagates(self, client):
        client.set_new_headers({"X-One": "1"})
        client.set_new_headers({"X-Two": "2"})

        assert client.config.custom_headers == {"X-One": "1", "X-Two": "2"}
        assert client.api_client.config.custom_headers == {"X-One": "1", "X-Two": "2"}
        assert client.config.pinata_jwt == "test-jwt"

    async def test_set_new_headers_leaves_original_config(self, client, test_config):
        client.set_new_headers({"X-One": "1"})
        assert test_config.custom_headers == {}

    async def test_delete_files_delegates(self, client):
        expected = [BatchItemStatus(id="a", status="OK")]

        with patch.object(
            client.api_client, "delete_files", new_callable=AsyncMock
        ) as mock_delete:
            mock_delete.return_value = expected

            result = await client.delete_files(["a"], network="private")

        assert result == expected
        mock_delete.assert_called_once_with(["a"], network="private")

    async def test_create_signed_url_delegates(self, client, sample_cid):
        with patch.object(
            client.api_client, "create_signed_url", new_callable=AsyncMock
        ) as mock_sign:
            mock_sign.return_value = "https://signed"

            result = await client.create_signed_url(sample_cid, 60, date=1)

        assert result == "https://signed"
        mock_sign.assert_called_once_with(
            sample_cid, 60, date=1, gateway=None, image_options=None
        )

    async def test_group_calls_delegate(self, client):
        with patch.object(
            client.api_client, "add_to_group", new_callable=AsyncMock
        ) as mock_add, patch.object(
            client.api_client, "remove_from_group", new_callable=AsyncMock
        ) as mock_remove:
            await client.add_to_group("grp", ["f1"])
            await client.remove_from_group("grp", ["f2"])

        mock_add.assert_called_once_with("grp", ["f1"])
        mock_remove.assert_called_once_with("grp", ["f2"])

    async def test_context_manager_closes_client(self, test_config):
        async with PinataClient(config=test_config) as client:
            http_client = client.api_client._client

        assert http_client.is_closed
