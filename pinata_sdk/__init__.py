"""
Pinata SDK - Python interface for the Pinata IPFS pinning and gateway service
"""

from pinata_sdk.api_client import (
    BatchItemStatus,
    GetCIDResponse,
    ImageOptions,
    PinataApiClient,
)
from pinata_sdk.client import PinataClient
from pinata_sdk.config import PinataConfig, get_headers, load_config
from pinata_sdk.errors import (
    AuthenticationError,
    NetworkError,
    PinataError,
    UnresolvedCIDError,
    UnsupportedURLPatternError,
    ValidationError,
)
from pinata_sdk.gateway_tools import (
    LocateResult,
    URLShape,
    classify_source_url,
    contains_cid,
    convert_to_desired_gateway,
    is_cid,
)
from pinata_sdk.rate_limit import IntervalRateLimiter, NoopRateLimiter

__version__ = "0.1.0"
__all__ = [
    "PinataClient",
    "PinataApiClient",
    "PinataConfig",
    "load_config",
    "get_headers",
    "contains_cid",
    "convert_to_desired_gateway",
    "classify_source_url",
    "is_cid",
    "LocateResult",
    "URLShape",
    "ImageOptions",
    "GetCIDResponse",
    "BatchItemStatus",
    "IntervalRateLimiter",
    "NoopRateLimiter",
    "PinataError",
    "ValidationError",
    "AuthenticationError",
    "NetworkError",
    "UnresolvedCIDError",
    "UnsupportedURLPatternError",
]
