"""Parsed assembly store container.

This module runs the single parse pass over a fully buffered store:
header, directory, hash32 table, then hash64 table. Either every table
decodes or no store is built.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property

from core.constants import HEADER_SIZE
from core.logging_config import get_logger
from core.types import HashRecord, PayloadKey, PayloadRecord, StoreHeader
from store.header_decoder import decode_header
from store.payload_locator import locate_payload
from store.record_table import DIRECTORY_LAYOUT, HASH32_LAYOUT, HASH64_LAYOUT, decode_table

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class AssemblyStore:
    """Immutable view of one parsed store.

    Attributes:
        file_name: Base name of the store file.
        raw: Whole store buffer.
        header: Decoded header.
        payloads: Directory records in positional order.
        hash32_records: 32-bit hash index records in table order.
        hash64_records: 64-bit hash index records in table order.
    """

    file_name: str
    raw: bytes
    header: StoreHeader
    payloads: tuple[PayloadRecord, ...]
    hash32_records: tuple[HashRecord, ...]
    hash64_records: tuple[HashRecord, ...]

    @classmethod
    def from_bytes(cls, raw: bytes, file_name: str) -> "AssemblyStore":
        """Parse a store from an in-memory buffer.

        Args:
            raw: Whole store buffer.
            file_name: Name reported in summaries and errors.

        Returns:
            Parsed store.

        Raises:
            FormatError: If the header or any table is malformed.
        """
        header = decode_header(raw)
        count = header.local_entry_count
        payloads, offset = decode_table(raw, HEADER_SIZE, count, DIRECTORY_LAYOUT)
        hash32_records, offset = decode_table(raw, offset, count, HASH32_LAYOUT)
        hash64_records, offset = decode_table(raw, offset, count, HASH64_LAYOUT)
        _LOGGER.info(
            "store_parsed",
            file_name=file_name,
            version=header.version,
            store_id=header.store_id,
            local_entry_count=count,
            global_entry_count=header.global_entry_count,
            tables_end=offset,
        )
        return cls(
            file_name=file_name,
            raw=raw,
            header=header,
            payloads=payloads,
            hash32_records=hash32_records,
            hash64_records=hash64_records,
        )

    def key_for(self, index: int) -> PayloadKey:
        """Build the join key for a directory position."""
        return PayloadKey(self.header.store_id, index)

    def payload_view(self, index: int) -> memoryview:
        """Return the borrowed image bytes of a directory position.

        Raises:
            ExtractionError: If the record is empty or out of bounds.
        """
        return locate_payload(self.payloads[index], self.raw)

    def hash_records_for(self, key: PayloadKey) -> tuple[HashRecord | None, HashRecord | None]:
        """Find the hash32 and hash64 entries pointing at a payload.

        Entries are matched on store id and local store index, never on
        table position.

        Args:
            key: Payload join key.

        Returns:
            Matching hash32 and hash64 records, None where absent.
        """
        return self._hash32_by_key.get(key), self._hash64_by_key.get(key)

    @cached_property
    def _hash32_by_key(self) -> dict[PayloadKey, HashRecord]:
        return _index_by_key(self.hash32_records)

    @cached_property
    def _hash64_by_key(self) -> dict[PayloadKey, HashRecord]:
        return _index_by_key(self.hash64_records)


def _index_by_key(records: tuple[HashRecord, ...]) -> dict[PayloadKey, HashRecord]:
    index: dict[PayloadKey, HashRecord] = {}
    for record in records:
        index.setdefault(record.key, record)
    return index
