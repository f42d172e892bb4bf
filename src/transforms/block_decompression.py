"""Compressed-block detection and inflation.

A compressed payload starts with the ``XALZ`` tag followed by a single
LZ4 frame. Anything else is a raw image and passes through untouched.
"""

from __future__ import annotations

import lz4.frame

from core.constants import COMPRESSED_DATA_MAGIC
from core.errors import ExtractionError


def is_compressed(payload: bytes | memoryview) -> bool:
    """Return whether a payload starts with the compressed-block tag."""
    tag_size = len(COMPRESSED_DATA_MAGIC)
    return len(payload) >= tag_size and bytes(payload[:tag_size]) == COMPRESSED_DATA_MAGIC


def decompress_payload(payload: memoryview) -> bytes | memoryview:
    """Inflate a tagged payload or return a raw payload unchanged.

    Args:
        payload: Borrowed payload bytes.

    Returns:
        Inflated bytes for tagged payloads, otherwise the same view.

    Raises:
        ExtractionError: If the LZ4 frame is corrupt, truncated, or
            followed by trailing bytes.
    """
    if not is_compressed(payload):
        return payload
    return _inflate_frame(payload[len(COMPRESSED_DATA_MAGIC):])


def _inflate_frame(frame: memoryview) -> bytes:
    """Inflate one complete LZ4 frame.

    The output grows to whatever length the frame produces.

    Args:
        frame: LZ4 frame bytes following the tag.

    Returns:
        Inflated bytes.

    Raises:
        ExtractionError: If the frame cannot be fully inflated.
    """
    decompressor = lz4.frame.LZ4FrameDecompressor()
    try:
        inflated = decompressor.decompress(bytes(frame))
    except RuntimeError as error:
        raise ExtractionError(
            "decompression failed",
            f"corrupt LZ4 frame of {len(frame)} bytes: {error}",
        ) from error
    if not decompressor.eof:
        raise ExtractionError(
            "decompression failed",
            f"LZ4 frame of {len(frame)} bytes ended before the end mark",
        )
    if decompressor.unused_data:
        raise ExtractionError(
            "decompression failed",
            f"{len(decompressor.unused_data)} trailing bytes after the LZ4 frame",
        )
    return inflated
