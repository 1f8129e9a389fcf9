"""
Configuration management for the Pinata SDK.

A configuration is an in-memory PinataConfig value. It can be built directly
or from environment variables (a .env file in the working directory is
honoured through python-dotenv).
"""

import os
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

from pinata_sdk.errors import ValidationError

# Define constants
DEFAULT_ENDPOINT_URL = "https://api.pinata.cloud/v3"
DEFAULT_LEGACY_ENDPOINT_URL = "https://api.pinata.cloud"
DEFAULT_GATEWAY = "https://gateway.pinata.cloud"

ENV_VARS = {
    "pinata_jwt": "PINATA_JWT",
    "pinata_gateway": "PINATA_GATEWAY",
    "pinata_gateway_key": "PINATA_GATEWAY_KEY",
    "endpoint_url": "PINATA_ENDPOINT_URL",
    "legacy_endpoint_url": "PINATA_LEGACY_ENDPOINT_URL",
}


def ensure_https(gateway: str) -> str:
    """Prefix a gateway host with ``https://`` unless it already has it."""
    if gateway.startswith("https://"):
        return gateway
    return f"https://{gateway}"


class PinataConfig(BaseModel):
    """Credentials and endpoints used by every SDK call."""

    pinata_jwt: Optional[str] = None
    pinata_gateway: Optional[str] = None
    pinata_gateway_key: Optional[str] = None
    custom_headers: Dict[str, str] = Field(default_factory=dict)
    endpoint_url: Optional[str] = None
    legacy_endpoint_url: Optional[str] = None

    @field_validator("pinata_gateway")
    @classmethod
    def _format_gateway(cls, value: Optional[str]) -> Optional[str]:
        if value:
            return ensure_https(value)
        return value

    @property
    def api_endpoint(self) -> str:
        return self.endpoint_url or DEFAULT_ENDPOINT_URL

    @property
    def legacy_api_endpoint(self) -> str:
        return self.legacy_endpoint_url or DEFAULT_LEGACY_ENDPOINT_URL


def load_config(use_dotenv: bool = True, **overrides: Any) -> PinataConfig:
    """
    Build a configuration from environment variables.

    Args:
        use_dotenv: Load the nearest .env file from the working directory up
        **overrides: PinataConfig fields that take precedence over the environment

    Returns:
        PinataConfig: The resulting configuration
    """
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    values: Dict[str, Any] = {}
    for field, env_var in ENV_VARS.items():
        env_value = os.getenv(env_var)
        if env_value:
            values[field] = env_value

    values.update({k: v for k, v in overrides.items() if v is not None})
    return PinataConfig(**values)


def require_config(config: Optional[PinataConfig]) -> PinataConfig:
    """
    Make sure a usable configuration is present.

    Raises:
        ValidationError: If the configuration or its JWT is missing
    """
    if config is None:
        raise ValidationError("Pinata configuration is missing")
    if not config.pinata_jwt and not config.custom_headers:
        raise ValidationError("Pinata JWT is missing from the configuration")
    return config


def get_headers(
    config: Optional[PinataConfig],
    source: str,
    json_body: bool = False,
) -> Dict[str, str]:
    """
    Get HTTP headers for a request.

    Custom headers from the configuration replace the default ``Source`` tag
    and may override any other entry, including ``Authorization``. Without a
    JWT no ``Authorization`` header is sent.

    Args:
        config: The SDK configuration
        source: Operation name used for the ``Source: sdk/<source>`` tag
        json_body: Add ``Content-Type: application/json``

    Returns:
        Dict[str, str]: Headers for the request

    Raises:
        ValidationError: If the configuration or its JWT is missing
    """
    config = require_config(config)

    headers = {}
    if config.pinata_jwt:
        headers["Authorization"] = f"Bearer {config.pinata_jwt}"
    if json_body:
        headers["Content-Type"] = "application/json"

    if config.custom_headers:
        headers.update(config.custom_headers)
    else:
        headers["Source"] = f"sdk/{source}"

    return headers
