"""Bounds-checked payload slicing.

Payload ranges are returned as ``memoryview`` slices of the store buffer,
so locating a payload never copies it.
"""

from __future__ import annotations

from core.constants import UINT32_LIMIT
from core.errors import ExtractionError
from core.types import PayloadRecord


def locate_payload(record: PayloadRecord, buffer: bytes | memoryview) -> memoryview:
    """Return the image bytes referenced by a directory record.

    Args:
        record: Directory record.
        buffer: Whole store buffer.

    Returns:
        Borrowed view of the image bytes.

    Raises:
        ExtractionError: If the record is empty or points past the buffer.
    """
    return locate_range(record.data_offset, record.data_size, buffer)


def locate_range(offset: int, size: int, buffer: bytes | memoryview) -> memoryview:
    """Return ``buffer[offset:offset + size]`` after validating the range.

    Args:
        offset: Absolute start offset.
        size: Range size in bytes.
        buffer: Whole store buffer.

    Returns:
        Borrowed view of the range.

    Raises:
        ExtractionError: If ``size`` is zero or the range ends past the
            buffer or the 32-bit addressable range.
    """
    if size == 0:
        raise ExtractionError("empty payload", f"record at offset {offset} has size 0")
    end = offset + size
    if end > UINT32_LIMIT + 1 or end > len(buffer):
        raise ExtractionError(
            "out of bounds",
            f"range [{offset}, {end}) exceeds buffer length {len(buffer)}",
        )
    return memoryview(buffer)[offset:end]
