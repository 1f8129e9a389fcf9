"""
Pinata API Client for interacting with the Pinata API.

This module provides an HTTP-based client for the gateway, file, key and
group endpoints, authenticated with a bearer JWT.

API Documentation: https://docs.pinata.cloud/api-reference
"""

import functools
import logging
import time
from typing import Any, Awaitable, Callable, List, Optional, Tuple, Union
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel

from pinata_sdk.config import PinataConfig, ensure_https, get_headers, require_config
from pinata_sdk.errors import (
    AuthenticationError,
    NetworkError,
    PinataError,
    ValidationError,
)
from pinata_sdk.rate_limit import IntervalRateLimiter

logger = logging.getLogger(__name__)

GATEWAY_TYPES = ("ipfs", "files")
NETWORKS = ("public", "private")
SIGNED_FETCH_EXPIRY = 30


class ImageOptions(BaseModel):
    """Image optimizer settings appended to gateway URLs as img-* parameters."""

    width: Optional[int] = None
    height: Optional[int] = None
    dpr: Optional[float] = None
    fit: Optional[str] = None
    gravity: Optional[str] = None
    quality: Optional[int] = None
    format: Optional[str] = None
    animation: Optional[bool] = None
    sharpen: Optional[float] = None
    on_error: Optional[bool] = None
    metadata: Optional[str] = None

    def to_query_params(self) -> List[Tuple[str, str]]:
        params = []
        if self.width:
            params.append(("img-width", str(self.width)))
        if self.height:
            params.append(("img-height", str(self.height)))
        if self.dpr:
            params.append(("img-dpr", str(self.dpr)))
        if self.fit:
            params.append(("img-fit", self.fit))
        if self.gravity:
            params.append(("img-gravity", self.gravity))
        if self.quality:
            params.append(("img-quality", str(self.quality)))
        if self.format:
            params.append(("img-format", self.format))
        if self.animation is not None:
            params.append(("img-anim", str(self.animation).lower()))
        if self.sharpen:
            params.append(("img-sharpen", str(self.sharpen)))
        if self.on_error:
            params.append(("img-onerror", "redirect"))
        if self.metadata:
            params.append(("img-metadata", self.metadata))
        return params


class GetCIDResponse(BaseModel):
    """Content fetched from a gateway."""

    data: Union[dict, list, str, bytes, int, float, bool, None] = None
    content_type: Optional[str] = None


class BatchItemStatus(BaseModel):
    """Outcome of one item of a batch operation."""

    id: str
    status: str


def _raise_for_status(response: httpx.Response) -> None:
    """
    Map a non-success response to an SDK error.

    Raises:
        AuthenticationError: For 401 and 403 responses
        NetworkError: For any other non-2xx response
    """
    if response.is_success:
        return

    error_data = response.text
    request_url = str(response.request.url)

    if response.status_code in (401, 403):
        raise AuthenticationError(
            f"Authentication failed: {error_data}",
            response.status_code,
            {
                "error": error_data,
                "code": "AUTH_ERROR",
                "metadata": {"requestUrl": request_url},
            },
        )
    raise NetworkError(
        f"HTTP error: {error_data}",
        response.status_code,
        {
            "error": error_data,
            "code": "HTTP_ERROR",
            "metadata": {"requestUrl": request_url},
        },
    )


def translate_errors(operation: str):
    """
    Decorator mapping failures of an API call onto the SDK error types.

    SDK errors propagate unchanged, httpx transport failures become
    NetworkError and anything else is wrapped in PinataError. Nothing is retried.

    Args:
        operation: Name used in the error message
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except PinataError:
                raise
            except httpx.HTTPError as e:
                raise NetworkError(f"Network error during {operation}: {e}") from e
            except Exception as e:
                raise PinataError(f"Error processing {operation}: {e}") from e

        return wrapper

    return decorator


def _parse_body(response: httpx.Response) -> GetCIDResponse:
    content_type = response.headers.get("content-type", "").split(";")[0].strip()

    if "application/json" in content_type:
        data = response.json()
    elif "text/" in content_type:
        data = response.text
    else:
        data = response.content

    return GetCIDResponse(data=data, content_type=content_type or None)


class PinataApiClient:
    """
    HTTP API client for the Pinata platform.
    """

    def __init__(
        self,
        config: Optional[PinataConfig] = None,
        rate_limiter: Optional[Any] = None,
    ):
        """
        Initialize the Pinata API client.

        Args:
            config: SDK configuration (JWT, gateway, endpoint overrides)
            rate_limiter: Object with an async ``acquire()`` awaited before each
                batch item (default: IntervalRateLimiter with a 0.3s interval)
        """
        self.config = config
        self._rate_limiter = rate_limiter or IntervalRateLimiter()

        # Initialize httpx client with timeout
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(60.0, connect=10.0),
            follow_redirects=True,
        )

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        """Close the HTTP client."""
        await self._client.aclose()

    def update_config(self, config: PinataConfig) -> None:
        """Replace the configuration used by subsequent calls."""
        self.config = config

    def _gateway_url(
        self,
        base_url: str,
        cid: str,
        gateway_type: str = "files",
        image_options: Optional[ImageOptions] = None,
        gateway_key: Optional[str] = None,
    ) -> str:
        url = f"{base_url}/{gateway_type}/{cid}"

        params = image_options.to_query_params() if image_options else []
        if gateway_key:
            params.append(("pinataGatewayToken", gateway_key))

        if params:
            url += f"?{urlencode(params)}"
        return url

    @translate_errors("testAuthentication")
    async def test_authentication(self) -> Any:
        """
        Check that the configured JWT is accepted.

        Maps to: GET /data/testAuthentication (legacy endpoint)

        Returns:
            Any: The decoded JSON response

        Raises:
            ValidationError: If the configuration is missing
            AuthenticationError: If the JWT is rejected
            NetworkError: If the API request fails
        """
        config = require_config(self.config)
        headers = get_headers(config, "testAuthentication")
        url = f"{config.legacy_api_endpoint}/data/testAuthentication"

        logger.debug(f"GET {url}")
        response = await self._client.get(url, headers=headers)

        _raise_for_status(response)
        return response.json()

    @translate_errors("createSignedURL")
    async def create_signed_url(
        self,
        cid: str,
        expires: int,
        date: Optional[int] = None,
        gateway: Optional[str] = None,
        image_options: Optional[ImageOptions] = None,
    ) -> str:
        """
        Create a time-limited download link for a private file.

        Maps to: POST /files/private/download_link

        Args:
            cid: CID of the file
            expires: Lifetime of the link in seconds
            date: Unix timestamp the lifetime starts at (default: now)
            gateway: Gateway host to sign for (default: configured gateway)
            image_options: Optional image optimizer settings

        Returns:
            str: The signed URL

        Raises:
            ValidationError: If the configuration or a gateway is missing
            AuthenticationError: If the JWT is rejected
            NetworkError: If the API request fails
        """
        config = require_config(self.config)
        base_url = ensure_https(gateway) if gateway else config.pinata_gateway
        if not base_url:
            raise ValidationError("A gateway is required to create a signed URL")

        payload = {
            "url": self._gateway_url(base_url, cid, "files", image_options),
            "date": date if date is not None else int(time.time()),
            "expires": expires,
            "method": "GET",
        }

        url = f"{config.api_endpoint}/files/private/download_link"
        logger.debug(f"POST {url}")
        response = await self._client.post(
            url,
            json=payload,
            headers=get_headers(config, "createSignURL", json_body=True),
        )

        _raise_for_status(response)
        return response.json()["data"]

    @translate_errors("getCid")
    async def get_cid(
        self,
        cid: str,
        gateway_type: str = "files",
        image_options: Optional[ImageOptions] = None,
    ) -> GetCIDResponse:
        """
        Fetch content through the configured gateway.

        ``ipfs`` requests go straight to the gateway. ``files`` requests are
        for private content: a short-lived signed URL is requested first.

        Maps to: GET {gateway}/ipfs/{cid}
                 or POST /files/sign then GET {signed url}

        Args:
            cid: CID of the content
            gateway_type: "ipfs" or "files"
            image_options: Optional image optimizer settings

        Returns:
            GetCIDResponse: Parsed body (JSON, text or bytes) and content type

        Raises:
            ValidationError: If the configuration, gateway or gateway_type is invalid
            AuthenticationError: If the gateway or API rejects the request
            NetworkError: If a request fails
        """
        config = require_config(self.config)
        if gateway_type not in GATEWAY_TYPES:
            raise ValidationError(
                f"gateway_type must be one of {', '.join(GATEWAY_TYPES)}"
            )
        if not config.pinata_gateway:
            raise ValidationError("Pinata gateway is missing from the configuration")

        url = self._gateway_url(
            config.pinata_gateway,
            cid,
            gateway_type,
            image_options,
            config.pinata_gateway_key,
        )

        if gateway_type == "files":
            sign_url = f"{config.api_endpoint}/files/sign"
            logger.debug(f"POST {sign_url}")
            sign_response = await self._client.post(
                sign_url,
                json={
                    "url": url,
                    "date": int(time.time()),
                    "expires": SIGNED_FETCH_EXPIRY,
                    "method": "GET",
                },
                headers=get_headers(config, "getCid", json_body=True),
            )
            _raise_for_status(sign_response)
            url = sign_response.json()["data"]

        logger.debug(f"GET {url}")
        response = await self._client.get(url)

        _raise_for_status(response)
        return _parse_body(response)

    async def _run_batch(
        self,
        items: List[str],
        action: str,
        send: Callable[[str], Awaitable[httpx.Response]],
        status_of: Callable[[httpx.Response], str] = lambda r: r.reason_phrase,
    ) -> List[BatchItemStatus]:
        """
        Send one request per item, recording a status for each.

        A failing item never aborts the batch; its status holds the error
        message instead.

        Args:
            items: IDs, keys or CIDs to process in order
            action: Message template with an {item} field, e.g. "deleting file {item}"
            send: Coroutine function issuing the request for one item
            status_of: Extracts the success status from a response

        Returns:
            List[BatchItemStatus]: One entry per item, in input order
        """
        results = []

        for item in items:
            await self._rate_limiter.acquire()
            try:
                response = await send(item)
                _raise_for_status(response)
                status = status_of(response)
            except PinataError as e:
                logger.warning(f"Failed {action.format(item=item)}: {e}")
                status = e.message
            except Exception as e:
                logger.warning(f"Failed {action.format(item=item)}: {e}")
                status = f"Error {action.format(item=item)}: {e}"

            results.append(BatchItemStatus(id=item, status=status))

        return results

    async def delete_files(
        self,
        file_ids: List[str],
        network: str = "public",
    ) -> List[BatchItemStatus]:
        """
        Delete files, one request per file.

        Maps to: DELETE /files/{network}/{id}

        Args:
            file_ids: IDs of the files to delete
            network: "public" or "private"

        Returns:
            List[BatchItemStatus]: Per-file status (HTTP reason or error message)

        Raises:
            ValidationError: If the configuration or network is invalid
        """
        config = require_config(self.config)
        if network not in NETWORKS:
            raise ValidationError(f"network must be one of {', '.join(NETWORKS)}")
        headers = get_headers(config, "deleteFile")

        async def send(file_id: str) -> httpx.Response:
            url = f"{config.api_endpoint}/files/{network}/{file_id}"
            logger.debug(f"DELETE {url}")
            return await self._client.delete(url, headers=headers)

        return await self._run_batch(file_ids, "deleting file {item}", send)

    async def revoke_keys(self, keys: List[str]) -> List[BatchItemStatus]:
        """
        Revoke API keys, one request per key.

        Maps to: PUT /pinata/keys/{key}

        Args:
            keys: The keys to revoke

        Returns:
            List[BatchItemStatus]: Per-key status (response body or error message)

        Raises:
            ValidationError: If the configuration is missing
        """
        config = require_config(self.config)
        headers = get_headers(config, "revokeKeys", json_body=True)

        async def send(key: str) -> httpx.Response:
            url = f"{config.api_endpoint}/pinata/keys/{key}"
            logger.debug(f"PUT {url}")
            return await self._client.put(url, headers=headers)

        def status_of(response: httpx.Response) -> str:
            body = response.json()
            return body if isinstance(body, str) else str(body)

        return await self._run_batch(keys, "revoking key {item}", send, status_of)

    async def add_to_group(
        self,
        group_id: str,
        file_ids: List[str],
    ) -> List[BatchItemStatus]:
        """
        Add files to a group, one request per file.

        Maps to: PUT /files/groups/{group_id}/ids/{id}

        Args:
            group_id: ID of the group
            file_ids: IDs of the files to add

        Returns:
            List[BatchItemStatus]: Per-file status

        Raises:
            ValidationError: If the configuration is missing
        """
        config = require_config(self.config)
        headers = get_headers(config, "addToGroup", json_body=True)

        async def send(file_id: str) -> httpx.Response:
            url = f"{config.api_endpoint}/files/groups/{group_id}/ids/{file_id}"
            logger.debug(f"PUT {url}")
            return await self._client.put(url, headers=headers)

        return await self._run_batch(file_ids, "adding file {item} to group", send)

    async def remove_from_group(
        self,
        group_id: str,
        file_ids: List[str],
    ) -> List[BatchItemStatus]:
        """
        Remove files from a group, one request per file.

        Maps to: DELETE /files/groups/{group_id}/ids/{id}

        Args:
            group_id: ID of the group
            file_ids: IDs of the files to remove

        Returns:
            List[BatchItemStatus]: Per-file status

        Raises:
            ValidationError: If the configuration is missing
        """
        config = require_config(self.config)
        headers = get_headers(config, "removeFromGroup", json_body=True)

        async def send(file_id: str) -> httpx.Response:
            url = f"{config.api_endpoint}/files/groups/{group_id}/ids/{file_id}"
            logger.debug(f"DELETE {url}")
            return await self._client.delete(url, headers=headers)

        return await self._run_batch(file_ids, "removing file {item} from group", send)
