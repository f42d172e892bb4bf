"""Unit tests for bounds-checked payload slicing."""

from __future__ import annotations

import pytest

from core.errors import ExtractionError
from core.types import PayloadRecord
from store.payload_locator import locate_payload, locate_range


def test_locate_payload_returns_view_of_range() -> None:
    """A valid record should slice exactly its bytes."""
    buffer = b"\x00" * 16 + b"ABCDE" + b"\x00" * 3

    view = locate_payload(PayloadRecord(data_offset=16, data_size=5), buffer)

    assert bytes(view) == b"ABCDE"


def test_locate_payload_does_not_copy() -> None:
    """Located payloads should share memory with the store buffer."""
    buffer = bytearray(b"xxABCD")

    view = locate_range(2, 4, buffer)
    buffer[2] = ord("Z")

    assert bytes(view) == b"ZBCD"


def test_locate_payload_accepts_range_ending_at_buffer_end() -> None:
    """A payload may end exactly at the end of the buffer."""
    assert bytes(locate_range(3, 2, b"abcde")) == b"de"


def test_locate_payload_rejects_empty_record() -> None:
    """Zero-size records should be reported as empty payloads."""
    with pytest.raises(ExtractionError) as excinfo:
        locate_payload(PayloadRecord(data_offset=0, data_size=0), b"abc")

    assert excinfo.value.reason == "empty payload"


def test_locate_payload_rejects_range_past_buffer() -> None:
    """A range ending past the buffer should be out of bounds."""
    with pytest.raises(ExtractionError) as excinfo:
        locate_range(3, 3, b"abcde")

    assert excinfo.value.reason == "out of bounds"


def test_locate_payload_rejects_overflowing_range() -> None:
    """Offsets plus sizes beyond the 32-bit range should be out of bounds."""
    with pytest.raises(ExtractionError) as excinfo:
        locate_range(0xFFFFFFF0, 0x20, b"abc")

    assert excinfo.value.reason == "out of bounds"
