"""Shared typed models.

This module defines immutable data models used by the store decoder,
manifest reader, extractor, and CLI to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple


class PayloadKey(NamedTuple):
    """Join key between directory records, hash tables, and the manifest.

    Attributes:
        store_id: Identifier of the store that owns the payload.
        index: Positional index of the payload in its store directory.
    """

    store_id: int
    index: int


@dataclass(frozen=True)
class StoreHeader:
    """Decoded fixed-size container header.

    Attributes:
        magic: Four-byte magic tag.
        version: Container format version.
        local_entry_count: Number of records in each table of this store.
        global_entry_count: Entry count across all stores, kept as opaque metadata.
        store_id: Identifier of this store.
    """

    magic: bytes
    version: int
    local_entry_count: int
    global_entry_count: int
    store_id: int


@dataclass(frozen=True)
class PayloadRecord:
    """One directory entry describing an embedded payload.

    Attributes:
        data_offset: Absolute offset of the image bytes.
        data_size: Size of the image bytes.
        debug_offset: Absolute offset of debug data, zero when absent.
        debug_size: Size of debug data, zero when absent.
        config_offset: Absolute offset of config data, zero when absent.
        config_size: Size of config data, zero when absent.
    """

    data_offset: int
    data_size: int
    debug_offset: int = 0
    debug_size: int = 0
    config_offset: int = 0
    config_size: int = 0


@dataclass(frozen=True)
class HashRecord:
    """One hash index entry.

    Attributes:
        value: Numeric hash value.
        width: Hash width in bytes, 4 or 8.
        mapping_index: Runtime mapping index.
        local_store_index: Positional index of the payload in its store.
        store_id: Identifier of the store owning the payload.
    """

    value: int
    width: int
    mapping_index: int
    local_store_index: int
    store_id: int

    @property
    def digest(self) -> str:
        """Fixed-width hexadecimal rendering of the hash value."""
        return format_hash_value(self.value, self.width)

    @property
    def key(self) -> PayloadKey:
        """Payload key this entry points at."""
        return PayloadKey(self.store_id, self.local_store_index)


@dataclass(frozen=True)
class ManifestEntry:
    """Published name record for one payload.

    Attributes:
        name: Assembly name without file suffix.
        hash32: 32-bit name hash as hexadecimal text.
        hash64: 64-bit name hash as hexadecimal text.
        store_id: Identifier of the store owning the payload.
        index: Positional index of the payload in its store.
    """

    name: str
    hash32: str
    hash64: str
    store_id: int
    index: int

    @property
    def key(self) -> PayloadKey:
        """Payload key used to join against store directories."""
        return PayloadKey(self.store_id, self.index)


@dataclass(frozen=True)
class ExtractedAssembly:
    """Metadata for one payload written to disk."""

    name: str
    store_id: int
    index: int
    hash32: str
    hash64: str
    output_path: Path
    compressed: bool
    size: int


@dataclass(frozen=True)
class PayloadFailure:
    """Metadata for one payload that could not be extracted."""

    name: str
    store_id: int
    index: int
    reason: str
    detail: str


@dataclass(frozen=True)
class StoreSummary:
    """Extraction outcome for a single store.

    Attributes:
        file_name: Base name of the store file.
        header: Decoded store header.
        assemblies: Written payloads in directory order.
        failures: Failed payloads in directory order.
    """

    file_name: str
    header: StoreHeader
    assemblies: tuple[ExtractedAssembly, ...]
    failures: tuple[PayloadFailure, ...]


@dataclass(frozen=True)
class ExtractionSummary:
    """Extraction outcome aggregated across stores."""

    stores: tuple[StoreSummary, ...]

    @property
    def assemblies(self) -> tuple[ExtractedAssembly, ...]:
        """All written payloads across stores, in processing order."""
        return tuple(item for store in self.stores for item in store.assemblies)

    @property
    def failures(self) -> tuple[PayloadFailure, ...]:
        """All failed payloads across stores, in processing order."""
        return tuple(item for store in self.stores for item in store.failures)


@dataclass(frozen=True)
class UnpackOptions:
    """Unpack command options.

    Attributes:
        input_dir: Directory holding blob files and the manifest.
        output_dir: Directory receiving extracted assemblies.
        manifest_path: Optional manifest override, defaults to the input directory.
        architecture: Optional architecture selection, None for all present.
        write_report: Whether to write the JSON report.
    """

    input_dir: Path
    output_dir: Path
    manifest_path: Path | None = None
    architecture: str | None = None
    write_report: bool = True


def format_hash_value(value: int, width: int) -> str:
    """Render a hash value as ``0x`` plus ``2 * width`` lowercase hex digits.

    Args:
        value: Unsigned hash value.
        width: Hash width in bytes.

    Returns:
        Fixed-width hexadecimal text.
    """
    return f"0x{value:0{width * 2}x}"
