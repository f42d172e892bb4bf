"""Fixed-stride record table decoding.

A table is a contiguous run of equally sized records. The directory and
both hash indexes share this iteration skeleton and differ only in their
``RecordLayout``.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from core.errors import FormatError
from core.types import HashRecord, PayloadRecord


@dataclass(frozen=True)
class RecordLayout:
    """Binary shape of one table record.

    Attributes:
        name: Table name used in error messages.
        codec: Struct codec for one record.
        build: Builds a typed record from unpacked fields.
        flatten: Returns the packable fields of a typed record.
    """

    name: str
    codec: struct.Struct
    build: Callable[[tuple[Any, ...]], Any]
    flatten: Callable[[Any], tuple[int, ...]]

    @property
    def stride(self) -> int:
        """Record size in bytes."""
        return self.codec.size


def _hash_layout(name: str, fmt: str, width: int) -> RecordLayout:
    def build(fields: tuple[Any, ...]) -> HashRecord:
        value, mapping_index, local_store_index, store_id = fields
        return HashRecord(
            value=value,
            width=width,
            mapping_index=mapping_index,
            local_store_index=local_store_index,
            store_id=store_id,
        )

    def flatten(record: HashRecord) -> tuple[int, ...]:
        return (record.value, record.mapping_index, record.local_store_index, record.store_id)

    return RecordLayout(name=name, codec=struct.Struct(fmt), build=build, flatten=flatten)


def _flatten_payload(record: PayloadRecord) -> tuple[int, ...]:
    return (
        record.data_offset,
        record.data_size,
        record.debug_offset,
        record.debug_size,
        record.config_offset,
        record.config_size,
    )


DIRECTORY_LAYOUT = RecordLayout(
    name="directory",
    codec=struct.Struct("<6I"),
    build=lambda fields: PayloadRecord(*fields),
    flatten=_flatten_payload,
)
# bytes 4-8 of a hash32 record are reserved
HASH32_LAYOUT = _hash_layout("hash32", "<I4xIII", width=4)
HASH64_LAYOUT = _hash_layout("hash64", "<QIII", width=8)


def decode_table(
    buffer: bytes | memoryview,
    offset: int,
    count: int,
    layout: RecordLayout,
) -> tuple[tuple[Any, ...], int]:
    """Decode ``count`` records starting at ``offset``.

    Args:
        buffer: Whole store buffer.
        offset: Absolute offset of the first record.
        count: Number of records to decode.
        layout: Record layout of this table.

    Returns:
        Decoded records and the absolute offset following the table.

    Raises:
        FormatError: If the buffer ends before the table does.
    """
    table_size = count * layout.stride
    end_offset = offset + table_size
    if end_offset > len(buffer):
        raise FormatError(
            "truncated table",
            f"{layout.name} table needs {table_size} bytes at offset {offset}, "
            f"buffer holds {max(len(buffer) - offset, 0)}",
        )
    records = tuple(
        layout.build(fields)
        for fields in layout.codec.iter_unpack(buffer[offset:end_offset])
    )
    return records, end_offset


def encode_table(records: Sequence[Any], layout: RecordLayout) -> bytes:
    """Encode typed records back into their table bytes."""
    return b"".join(layout.codec.pack(*layout.flatten(record)) for record in records)
