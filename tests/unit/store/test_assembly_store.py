"""Unit tests for the parsed assembly store."""

from __future__ import annotations

import pytest

from core.errors import ExtractionError, FormatError
from core.types import PayloadKey
from store.assembly_store import AssemblyStore
from tests.blob_builders import build_store


def test_from_bytes_decodes_all_tables() -> None:
    """Every table should hold exactly local-entry-count records."""
    store = AssemblyStore.from_bytes(build_store([b"one", b"two", b"three"]), "assemblies.blob")

    count = store.header.local_entry_count
    assert count == 3
    assert len(store.payloads) == len(store.hash32_records) == len(store.hash64_records) == count


def test_from_bytes_locates_payloads() -> None:
    """Directory records should point at the payload bytes."""
    store = AssemblyStore.from_bytes(build_store([b"one", b"two"]), "assemblies.blob")

    assert bytes(store.payload_view(1)) == b"two"


def test_from_bytes_rejects_truncated_hash_table() -> None:
    """A store cut inside the hash64 table should fail as a whole."""
    raw = build_store([b"one", b"two"])
    cut = 20 + 2 * 24 + 2 * 20 + 10

    with pytest.raises(FormatError) as excinfo:
        AssemblyStore.from_bytes(raw[:cut], "cut.blob")

    assert excinfo.value.reason == "truncated table"


def test_payload_view_rejects_empty_record() -> None:
    """Empty directory slots should surface as empty payload errors."""
    store = AssemblyStore.from_bytes(build_store([b"", b"two"]), "assemblies.blob")

    with pytest.raises(ExtractionError) as excinfo:
        store.payload_view(0)

    assert excinfo.value.reason == "empty payload"


def test_key_for_uses_header_store_id() -> None:
    """Join keys should combine the store id with the directory position."""
    store = AssemblyStore.from_bytes(build_store([b"one"], store_id=3), "assemblies.blob")

    assert store.key_for(0) == PayloadKey(store_id=3, index=0)


def test_hash_records_for_matches_key_not_position() -> None:
    """Hash entries should be joined by store id and local index."""
    raw = bytearray(build_store([b"one", b"two"], store_id=7))
    hash32_offset = 20 + 2 * 24
    # swap the two hash32 rows so table order no longer mirrors the directory
    first = raw[hash32_offset:hash32_offset + 20]
    second = raw[hash32_offset + 20:hash32_offset + 40]
    raw[hash32_offset:hash32_offset + 40] = second + first
    store = AssemblyStore.from_bytes(bytes(raw), "assemblies.blob")

    hash32, hash64 = store.hash_records_for(PayloadKey(7, 0))

    assert hash32 is not None and hash32.value == 0x1000
    assert hash64 is not None and hash64.local_store_index == 0
    assert store.hash_records_for(PayloadKey(8, 0)) == (None, None)


def test_hash_records_for_keeps_first_duplicate_entry() -> None:
    """Two hash rows for the same payload resolve to the first in table order."""
    raw = bytearray(build_store([b"one", b"two"], store_id=7))
    hash64_offset = 20 + 2 * 24 + 2 * 20
    # point the second hash64 row at payload 0 as well
    raw[hash64_offset + 20 + 12:hash64_offset + 20 + 16] = (0).to_bytes(4, "little")
    store = AssemblyStore.from_bytes(bytes(raw), "assemblies.blob")

    _, first = store.hash_records_for(PayloadKey(7, 0))
    _, missing = store.hash_records_for(PayloadKey(7, 1))

    assert first is not None and first.value == 0xABCD0000_00000000
    assert missing is None
