"""
Main client for the Pinata SDK.
"""

from typing import Any, Dict, List, Optional

from pinata_sdk.api_client import (
    BatchItemStatus,
    GetCIDResponse,
    ImageOptions,
    PinataApiClient,
)
from pinata_sdk.config import DEFAULT_GATEWAY, PinataConfig, load_config
from pinata_sdk.gateway_tools import LocateResult, contains_cid, convert_to_desired_gateway


class PinataClient:
    """
    Main client for interacting with Pinata.

    Provides gateway URL helpers and API-based file, key and group management.
    """

    def __init__(
        self,
        config: Optional[PinataConfig] = None,
        pinata_jwt: Optional[str] = None,
        pinata_gateway: Optional[str] = None,
        pinata_gateway_key: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        rate_limiter: Optional[Any] = None,
    ):
        """
        Initialize the Pinata client.

        Args:
            config: Complete configuration (built from the environment if None)
            pinata_jwt: JWT for API authentication (overrides the environment)
            pinata_gateway: Dedicated gateway host, e.g. example.mypinata.cloud
            pinata_gateway_key: Gateway access token for gateway requests
            endpoint_url: API base URL (default: https://api.pinata.cloud/v3)
            rate_limiter: Pacing for batch operations (see PinataApiClient)
        """
        if config is None:
            config = load_config(
                pinata_jwt=pinata_jwt,
                pinata_gateway=pinata_gateway,
                pinata_gateway_key=pinata_gateway_key,
                endpoint_url=endpoint_url,
            )

        self.config = config
        self.api_client = PinataApiClient(config=config, rate_limiter=rate_limiter)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Close the underlying HTTP client."""
        await self.api_client.close()

    def set_new_headers(self, headers: Dict[str, str]) -> None:
        """
        Merge headers into the configuration's custom headers.

        Custom headers replace the default ``Source`` tag on every request.

        Args:
            headers: Headers to add or override
        """
        self.config = self.config.model_copy(
            update={"custom_headers": {**self.config.custom_headers, **headers}}
        )
        self.api_client.update_config(self.config)

    def contains_cid(self, value: str) -> LocateResult:
        """
        Check whether a string is or contains a CID.

        Args:
            value: Bare CID, path or URL

        Returns:
            LocateResult: Whether a CID was found and which one
        """
        return contains_cid(value)

    def convert_ipfs_url(self, url: str, gateway_prefix: Optional[str] = None) -> str:
        """
        Rewrite an IPFS URL so it is served by a gateway.

        The prefix is, in order: ``gateway_prefix``, the configured gateway,
        the public Pinata gateway. The gateway key is never appended.

        Args:
            url: Bare CID, ``ipfs://`` URI or gateway URL
            gateway_prefix: Optional origin of the target gateway

        Returns:
            str: The converted URL

        Raises:
            UnresolvedCIDError: If url contains no CID
            UnsupportedURLPatternError: If the CID is in an unsupported position
        """
        prefix = gateway_prefix or self.config.pinata_gateway or DEFAULT_GATEWAY
        return convert_to_desired_gateway(url, prefix)

    async def test_authentication(self) -> Any:
        """Check that the configured JWT is accepted."""
        return await self.api_client.test_authentication()

    async def create_signed_url(
        self,
        cid: str,
        expires: int,
        date: Optional[int] = None,
        gateway: Optional[str] = None,
        image_options: Optional[ImageOptions] = None,
    ) -> str:
        """Create a time-limited download link for a private file."""
        return await self.api_client.create_signed_url(
            cid, expires, date=date, gateway=gateway, image_options=image_options
        )

    async def get_cid(
        self,
        cid: str,
        gateway_type: str = "files",
        image_options: Optional[ImageOptions] = None,
    ) -> GetCIDResponse:
        """Fetch content through the configured gateway."""
        return await self.api_client.get_cid(
            cid, gateway_type=gateway_type, image_options=image_options
        )

    async def delete_files(
        self, file_ids: List[str], network: str = "public"
    ) -> List[BatchItemStatus]:
        return await self.api_client.delete_files(file_ids, network=network)

    async def revoke_keys(self, keys: List[str]) -> List[BatchItemStatus]:
        return await self.api_client.revoke_keys(keys)

    async def add_to_group(
        self, group_id: str, file_ids: List[str]
    ) -> List[BatchItemStatus]:
        return await self.api_client.add_to_group(group_id, file_ids)

    async def remove_from_group(
        self, group_id: str, file_ids: List[str]
    ) -> List[BatchItemStatus]:
        return await self.api_client.remove_from_group(group_id, file_ids)
