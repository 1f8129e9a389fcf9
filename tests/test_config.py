"""
Tests for configuration loading and header composition.
"""

import pytest

from pinata_sdk.config import (
    DEFAULT_ENDPOINT_URL,
    DEFAULT_LEGACY_ENDPOINT_URL,
    PinataConfig,
    get_headers,
    load_config,
)
from pinata_sdk.errors import ValidationError


@pytest.fixture
def clean_env(monkeypatch):
    """Remove PINATA_* variables so tests see a known environment."""
    for var in (
        "PINATA_JWT",
        "PINATA_GATEWAY",
        "PINATA_GATEWAY_KEY",
        "PINATA_ENDPOINT_URL",
        "PINATA_LEGACY_ENDPOINT_URL",
    ):
        # setenv first so teardown also removes values loaded from .env files
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    return monkeypatch


class TestPinataConfig:
    def test_gateway_gets_https_prefix(self):
        config = PinataConfig(pinata_gateway="example.mypinata.cloud")
        assert config.pinata_gateway == "https://example.mypinata.cloud"

    def test_https_gateway_unchanged(self):
        config = PinataConfig(pinata_gateway="https://example.mypinata.cloud")
        assert config.pinata_gateway == "https://example.mypinata.cloud"

    def test_default_endpoints(self):
        config = PinataConfig(pinata_jwt="jwt")
        assert config.api_endpoint == DEFAULT_ENDPOINT_URL
        assert config.legacy_api_endpoint == DEFAULT_LEGACY_ENDPOINT_URL

    def test_endpoint_override(self):
        config = PinataConfig(pinata_jwt="jwt", endpoint_url="https://proxy.local/v3")
        assert config.api_endpoint == "https://proxy.local/v3"


class TestLoadConfig:
    def test_reads_environment(self, clean_env):
        clean_env.setenv("PINATA_JWT", "env-jwt")
        clean_env.setenv("PINATA_GATEWAY", "env.mypinata.cloud")

        config = load_config(use_dotenv=False)

        assert config.pinata_jwt == "env-jwt"
        assert config.pinata_gateway == "https://env.mypinata.cloud"
        assert config.pinata_gateway_key is None

    def test_overrides_win(self, clean_env):
        clean_env.setenv("PINATA_JWT", "env-jwt")

        config = load_config(use_dotenv=False, pinata_jwt="explicit", endpoint_url=None)

        assert config.pinata_jwt == "explicit"
        assert config.endpoint_url is None

    def test_loads_dotenv_file(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("PINATA_JWT=dotenv-jwt\n")
        clean_env.chdir(tmp_path)

        config = load_config()

        assert config.pinata_jwt == "dotenv-jwt"


class TestGetHeaders:
    def test_default_headers(self):
        config = PinataConfig(pinata_jwt="jwt")

        headers = get_headers(config, "testAuthentication")

        assert headers == {
            "Authorization": "Bearer jwt",
            "Source": "sdk/testAuthentication",
        }

    def test_json_body_adds_content_type(self):
        headers = get_headers(PinataConfig(pinata_jwt="jwt"), "addToGroup", True)
        assert headers["Content-Type"] == "application/json"

    def test_custom_headers_replace_source(self):
        config = PinataConfig(pinata_jwt="jwt", custom_headers={"X-Trace": "1"})

        headers = get_headers(config, "deleteFile")

        assert headers == {"Authorization": "Bearer jwt", "X-Trace": "1"}

    def test_custom_headers_override_defaults(self):
        config = PinataConfig(
            pinata_jwt="jwt",
            custom_headers={"Source": "my-app", "Authorization": "Bearer other"},
        )

        headers = get_headers(config, "deleteFile")

        assert headers["Source"] == "my-app"
        assert headers["Authorization"] == "Bearer other"

    def test_missing_config(self):
        with pytest.raises(ValidationError, match="configuration is missing"):
            get_headers(None, "deleteFile")

    def test_missing_jwt(self):
        with pytest.raises(ValidationError, match="JWT is missing"):
            get_headers(PinataConfig(), "deleteFile")

    def test_custom_headers_without_jwt_send_no_authorization(self):
        config = PinataConfig(custom_headers={"X-Api-Key": "k"})

        headers = get_headers(config, "deleteFile", json_body=True)

        assert headers == {"Content-Type": "application/json", "X-Api-Key": "k"}
