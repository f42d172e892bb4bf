"""Assembly store header decoding.

The header is the first twenty bytes of a store: the magic tag followed
by four little-endian unsigned 32-bit scalars.
"""

from __future__ import annotations

import struct

from core.constants import ASSEMBLY_STORE_FORMAT_VERSION, ASSEMBLY_STORE_MAGIC, HEADER_SIZE
from core.errors import FormatError
from core.types import StoreHeader

_HEADER_STRUCT = struct.Struct("<4sIIII")


def decode_header(buffer: bytes | memoryview) -> StoreHeader:
    """Decode and validate a store header.

    Args:
        buffer: Store bytes starting at the header.

    Returns:
        Decoded header.

    Raises:
        FormatError: If the header is truncated, has a bad magic tag,
            or declares a newer format version.
    """
    if len(buffer) < HEADER_SIZE:
        raise FormatError(
            "truncated header",
            f"expected {HEADER_SIZE} bytes, found {len(buffer)}",
        )
    magic, version, local_count, global_count, store_id = _HEADER_STRUCT.unpack_from(buffer, 0)
    if magic != ASSEMBLY_STORE_MAGIC:
        raise FormatError(
            "bad magic",
            f"expected {ASSEMBLY_STORE_MAGIC!r}, found {magic!r}",
        )
    if version > ASSEMBLY_STORE_FORMAT_VERSION:
        raise FormatError(
            "unsupported version",
            f"store version {version} is newer than supported "
            f"version {ASSEMBLY_STORE_FORMAT_VERSION}",
        )
    return StoreHeader(
        magic=magic,
        version=version,
        local_entry_count=local_count,
        global_entry_count=global_count,
        store_id=store_id,
    )


def encode_header(header: StoreHeader) -> bytes:
    """Encode a header back into its twenty-byte layout."""
    return _HEADER_STRUCT.pack(
        header.magic,
        header.version,
        header.local_entry_count,
        header.global_entry_count,
        header.store_id,
    )
