"""CLI command for store inspection."""

from __future__ import annotations

import argparse
from typing import Any

from core.errors import ExtractionError
from extract.sdk_client import XamBlobClient
from store.assembly_store import AssemblyStore
from transforms.block_decompression import is_compressed


def add_inspect_command(subparsers: Any) -> None:
    """Register inspect subcommand."""
    parser = subparsers.add_parser(
        "inspect",
        help="Print the header and directory of one store without extracting",
    )
    parser.add_argument("blob_file", help="Path to an assemblies*.blob file")


def run_inspect_command(client: XamBlobClient, args: argparse.Namespace) -> int:
    """Print header scalars as key=value rows and one row per record."""
    store = client.inspect(args.blob_file)
    header = store.header
    print(f"file_name={store.file_name}")
    print(f"version={header.version}")
    print(f"local_entry_count={header.local_entry_count}")
    print(f"global_entry_count={header.global_entry_count}")
    print(f"store_id={header.store_id}")
    for index, record in enumerate(store.payloads):
        hash32, hash64 = store.hash_records_for(store.key_for(index))
        print(
            f"{index}\t"
            f"{record.data_offset}\t"
            f"{record.data_size}\t"
            f"{_compressed_flag(store, index)}\t"
            f"{hash32.digest if hash32 else '-'}\t"
            f"{hash64.digest if hash64 else '-'}"
        )
    return 0


def _compressed_flag(store: AssemblyStore, index: int) -> str:
    try:
        payload = store.payload_view(index)
    except ExtractionError:
        return "-"
    return "yes" if is_compressed(payload) else "no"
