#!/usr/bin/env python3
"""
Command Line Interface argument parser for Pinata SDK.

This module defines all available commands and their arguments.
"""

import argparse
from typing import List, Optional


def add_gateway_commands(subparsers):
    """Add offline gateway URL commands to the parser."""
    contains_parser = subparsers.add_parser(
        "contains-cid", help="Check whether a string or URL contains a CID"
    )
    contains_parser.add_argument("input", help="Bare CID, path or URL to inspect")

    convert_parser = subparsers.add_parser(
        "convert", help="Rewrite an IPFS URL to use a gateway"
    )
    convert_parser.add_argument("url", help="Bare CID, ipfs:// URI or gateway URL")
    convert_parser.add_argument(
        "--prefix",
        help="Target gateway origin (default: --gateway, then the public gateway)",
    )


def add_api_commands(subparsers):
    """Add commands that call the Pinata API."""
    subparsers.add_parser("test-auth", help="Check that the JWT is accepted")

    sign_parser = subparsers.add_parser(
        "sign-url", help="Create a time-limited link to a private file"
    )
    sign_parser.add_argument("cid", help="CID of the file")
    sign_parser.add_argument(
        "--expires",
        type=int,
        default=60,
        help="Lifetime of the link in seconds (default: 60)",
    )

    delete_parser = subparsers.add_parser("delete", help="Delete files by ID")
    delete_parser.add_argument("file_ids", nargs="+", help="IDs of the files")
    delete_parser.add_argument(
        "--network",
        choices=["public", "private"],
        default="public",
        help="Network the files live on (default: public)",
    )

    revoke_parser = subparsers.add_parser("revoke-keys", help="Revoke API keys")
    revoke_parser.add_argument("keys", nargs="+", help="Keys to revoke")


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="pinata-sdk",
        description="Pinata SDK Command Line Interface",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  # Find the CID in a gateway URL
  pinata-sdk contains-cid https://ipfs.io/ipfs/QmHash/file.txt

  # Point an ipfs:// URI at your gateway
  pinata-sdk --gateway example.mypinata.cloud convert ipfs://QmHash

  # Check your credentials (JWT read from PINATA_JWT or .env)
  pinata-sdk test-auth

  # Delete two private files
  pinata-sdk delete FILE_ID_1 FILE_ID_2 --network private
""",
    )

    # Optional arguments for all commands
    parser.add_argument("--jwt", help="Pinata JWT (default: PINATA_JWT)")
    parser.add_argument(
        "--gateway", help="Dedicated gateway host (default: PINATA_GATEWAY)"
    )
    parser.add_argument(
        "--gateway-key", help="Gateway access token (default: PINATA_GATEWAY_KEY)"
    )
    parser.add_argument(
        "--endpoint-url", help="API base URL (default: PINATA_ENDPOINT_URL)"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")
    add_gateway_commands(subparsers)
    add_api_commands(subparsers)

    return parser


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = create_parser()
    return parser.parse_args(argv)
