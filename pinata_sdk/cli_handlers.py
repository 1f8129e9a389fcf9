#!/usr/bin/env python3
"""
Command Line Interface handlers for Pinata SDK.

Each handler takes a PinataClient, prints its result through rich and
returns the process exit code.
"""

from typing import Any, List, Optional

from pinata_sdk.api_client import BatchItemStatus
from pinata_sdk.cli_rich import error, info, log, print_panel, print_table, success
from pinata_sdk.client import PinataClient
from pinata_sdk.config import load_config


def create_client(args: Any) -> PinataClient:
    """Create a PinataClient from the global CLI options and the environment."""
    config = load_config(
        pinata_jwt=args.jwt,
        pinata_gateway=args.gateway,
        pinata_gateway_key=args.gateway_key,
        endpoint_url=args.endpoint_url,
    )
    return PinataClient(config=config)


def handle_contains_cid(client: PinataClient, value: str) -> int:
    """Handle the contains-cid command"""
    result = client.contains_cid(value)

    if result.found:
        success(f"Found CID [bold cyan]{result.cid}[/bold cyan]")
        return 0

    error(f"No CID found in [bold]{value}[/bold]")
    return 1


def handle_convert(
    client: PinataClient, url: str, prefix: Optional[str] = None
) -> int:
    """Handle the convert command"""
    converted = client.convert_ipfs_url(url, prefix)
    log(converted)
    return 0


async def handle_test_auth(client: PinataClient) -> int:
    """Handle the test-auth command"""
    info("Testing authentication...")
    result = await client.test_authentication()
    success("Authentication succeeded")
    if isinstance(result, dict) and result.get("message"):
        log(result["message"])
    return 0


async def handle_sign_url(client: PinataClient, cid: str, expires: int) -> int:
    """Handle the sign-url command"""
    info(f"Creating a {expires}s link for [bold cyan]{cid}[/bold cyan]...")
    signed_url = await client.create_signed_url(cid, expires)
    print_panel(f"[link]{signed_url}[/link]", title="Signed URL")
    return 0


def _print_batch(title: str, results: List[BatchItemStatus]) -> None:
    print_table(title, [r.model_dump() for r in results], ["id", "status"])


async def handle_delete(
    client: PinataClient, file_ids: List[str], network: str = "public"
) -> int:
    """Handle the delete command"""
    info(f"Deleting {len(file_ids)} file(s) from the {network} network...")
    results = await client.delete_files(file_ids, network=network)
    _print_batch("Deleted files", results)
    return 0


async def handle_revoke_keys(client: PinataClient, keys: List[str]) -> int:
    """Handle the revoke-keys command"""
    info(f"Revoking {len(keys)} key(s)...")
    results = await client.revoke_keys(keys)
    _print_batch("Revoked keys", results)
    return 0
