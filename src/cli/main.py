"""XamBlob CLI entry points.
This module exposes commands for unpacking and inspecting assembly stores.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from cli.hash_command import add_hash_command, run_hash_command
from cli.inspect_command import add_inspect_command, run_inspect_command
from cli.unpack_command import add_unpack_command, run_unpack_command
from core.config import XamBlobConfig
from core.errors import XamBlobError
from core.logging_config import configure_logging
from extract.sdk_client import XamBlobClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="xamblob", description="Assembly store extraction CLI")
    parser.add_argument("--output-root", help="Override XAMBLOB_OUTPUT_ROOT for this command")
    parser.add_argument("--verbose", action="store_true", help="Log info-level events to stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_unpack_command(subparsers)
    add_inspect_command(subparsers)
    add_hash_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the XamBlob CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    try:
        client = _build_client(args)
        if args.command == "unpack":
            return run_unpack_command(client, args)
        if args.command == "inspect":
            return run_inspect_command(client, args)
        if args.command == "hash":
            return run_hash_command(client, args)
    except XamBlobError as error:
        print(f"error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(args: argparse.Namespace) -> XamBlobClient:
    """Build SDK client with command-line overrides.

    Args:
        args: Parsed CLI args.

    Returns:
        Configured SDK client.
    """
    config = XamBlobConfig.from_env()
    if args.output_root:
        config = replace(config, output_root=Path(args.output_root).expanduser().resolve())
    if getattr(args, "no_report", False):
        config = replace(config, write_report=False)
    return XamBlobClient(config)
