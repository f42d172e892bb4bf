"""CLI command for assembly name hashing."""

from __future__ import annotations

import argparse
from typing import Any

from extract.sdk_client import XamBlobClient


def add_hash_command(subparsers: Any) -> None:
    """Register hash subcommand."""
    parser = subparsers.add_parser(
        "hash",
        help="Print the xxHash32 and xxHash64 digests of an assembly name",
    )
    parser.add_argument("name", help="Assembly name as written in the manifest")


def run_hash_command(client: XamBlobClient, args: argparse.Namespace) -> int:
    """Print name digests as key=value rows."""
    hash32, hash64 = client.hash_name(args.name)
    print(f"hash32={hash32}")
    print(f"hash64={hash64}")
    return 0
