"""Unpack command wiring for XamBlob CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.constants import ARCHITECTURE_BLOB_FILE_NAMES
from extract.sdk_client import XamBlobClient


def add_unpack_command(subparsers: Any) -> None:
    """Register unpack subcommand."""
    parser = subparsers.add_parser(
        "unpack",
        help="Extract assemblies from every store in a directory",
    )
    parser.add_argument("input_dir", help="Directory holding assemblies.blob and the manifest")
    parser.add_argument("--manifest", help="Manifest path, defaults to INPUT_DIR/assemblies.manifest")
    parser.add_argument(
        "--arch",
        choices=sorted(ARCHITECTURE_BLOB_FILE_NAMES),
        help="Only extract the common store and this architecture's store",
    )
    parser.add_argument(
        "--no-report",
        action="store_true",
        help="Skip writing assemblies.json",
    )


def run_unpack_command(client: XamBlobClient, args: argparse.Namespace) -> int:
    """Execute unpack and print run totals.

    Returns:
        Zero when every named payload was extracted, one otherwise.
    """
    summary, report_path = client.unpack(
        args.input_dir,
        manifest_path=args.manifest,
        architecture=args.arch,
    )
    for failure in summary.failures:
        print(f"failed\t{failure.store_id}\t{failure.index}\t{failure.name}\t{failure.reason}")
    print(f"extracted={len(summary.assemblies)}")
    print(f"failed={len(summary.failures)}")
    print(f"report_path={report_path or '-'}")
    return 0 if not summary.failures else 1
