"""Shared in-memory assembly store builders for tests."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import Sequence

import lz4.frame

HEADER_SIZE = 20
DIRECTORY_STRIDE = 24
HASH_STRIDE = 20


def compressed(data: bytes) -> bytes:
    """Wrap data as a tagged LZ4 compressed block."""
    return b"XALZ" + lz4.frame.compress(data)


def build_store(
    payloads: Sequence[bytes],
    store_id: int = 7,
    version: int = 1,
    global_count: int | None = None,
    magic: bytes = b"XABA",
) -> bytes:
    """Build a store whose payloads follow the tables in order.

    Empty payloads get an all-zero directory record.
    """
    count = len(payloads)
    header = struct.pack(
        "<4sIIII",
        magic,
        version,
        count,
        count if global_count is None else global_count,
        store_id,
    )
    data_offset = HEADER_SIZE + count * (DIRECTORY_STRIDE + 2 * HASH_STRIDE)
    directory = bytearray()
    for payload in payloads:
        if payload:
            directory += struct.pack("<6I", data_offset, len(payload), 0, 0, 0, 0)
            data_offset += len(payload)
        else:
            directory += struct.pack("<6I", 0, 0, 0, 0, 0, 0)
    hash32 = b"".join(
        struct.pack("<I4xIII", 0x1000 + index, index, index, store_id) for index in range(count)
    )
    hash64 = b"".join(
        struct.pack("<QIII", 0xABCD0000_00000000 + index, index, index, store_id)
        for index in range(count)
    )
    return header + bytes(directory) + hash32 + hash64 + b"".join(payloads)


def manifest_text(rows: Sequence[tuple[int, int, str]]) -> str:
    """Render ``(store_id, index, name)`` rows as manifest text."""
    lines = ["Hash 32     Hash 64             Blob ID  Blob idx  Name"]
    for store_id, index, name in rows:
        lines.append(
            f"0x{0x1000 + index:08x}  0x{0xABCD0000_00000000 + index:016x}  "
            f"{store_id:03d}  {index:04d}  {name}"
        )
    return "\n".join(lines) + "\n"


def write_input_dir(
    root: Path,
    blobs: dict[str, bytes],
    rows: Sequence[tuple[int, int, str]],
) -> Path:
    """Write blob files and a manifest into ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    for file_name, raw in blobs.items():
        (root / file_name).write_bytes(raw)
    (root / "assemblies.manifest").write_text(manifest_text(rows), encoding="utf-8")
    return root
