#!/usr/bin/env python3
"""
Command Line Interface tools for Pinata SDK.

This module provides the ``pinata-sdk`` console script: offline gateway URL
helpers and a few API operations.
"""

import asyncio
import inspect
import logging
import sys
from typing import Callable, List, Optional

from pinata_sdk import cli_handlers
from pinata_sdk.cli_parser import create_parser, parse_arguments
from pinata_sdk.cli_rich import error
from pinata_sdk.errors import PinataError


async def _run_with_client(client, handler_func: Callable, *args, **kwargs) -> int:
    try:
        if inspect.iscoroutinefunction(handler_func):
            return await handler_func(client, *args, **kwargs)
        return handler_func(client, *args, **kwargs)
    finally:
        await client.close()


def run_handler(client, handler_func: Callable, *args, **kwargs) -> int:
    """Run a handler with the client, closing the client afterwards."""
    return asyncio.run(_run_with_client(client, handler_func, *args, **kwargs))


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point for pinata-sdk command."""
    args = parse_arguments(argv)

    if not args.command:
        create_parser().print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    client = cli_handlers.create_client(args)

    try:
        if args.command == "contains-cid":
            return run_handler(client, cli_handlers.handle_contains_cid, args.input)

        elif args.command == "convert":
            return run_handler(
                client, cli_handlers.handle_convert, args.url, args.prefix
            )

        elif args.command == "test-auth":
            return run_handler(client, cli_handlers.handle_test_auth)

        elif args.command == "sign-url":
            return run_handler(
                client, cli_handlers.handle_sign_url, args.cid, args.expires
            )

        elif args.command == "delete":
            return run_handler(
                client,
                cli_handlers.handle_delete,
                args.file_ids,
                network=args.network,
            )

        elif args.command == "revoke-keys":
            return run_handler(client, cli_handlers.handle_revoke_keys, args.keys)

        error(f"Unknown command: {args.command}")
        return 1
    except PinataError as e:
        error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
