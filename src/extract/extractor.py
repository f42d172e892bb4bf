"""Per-store payload extraction.

This module walks a store directory in positional order, joins each
record with its manifest entry, and writes the payload bytes to disk.
A failing payload is recorded and never aborts the remaining ones.
"""

from __future__ import annotations

import contextlib
import os
from pathlib import Path

from core.constants import ASSEMBLY_FILE_SUFFIX, PARTIAL_FILE_SUFFIX
from core.errors import ExtractionError, OutputWriteError
from core.logging_config import get_logger
from core.types import (
    ExtractedAssembly,
    ManifestEntry,
    PayloadFailure,
    StoreSummary,
)
from ingest.manifest_reader import ManifestIndex
from store.assembly_store import AssemblyStore
from transforms.block_decompression import decompress_payload, is_compressed

_LOGGER = get_logger(__name__)


class StoreExtractor:
    """Stateful runner extracting every named payload of one store."""

    def __init__(self, store: AssemblyStore, manifest: ManifestIndex, output_dir: Path) -> None:
        self._store = store
        self._manifest = manifest
        self._output_dir = output_dir
        self._assemblies: list[ExtractedAssembly] = []
        self._failures: list[PayloadFailure] = []

    def run(self) -> StoreSummary:
        """Extract all payloads and return the store summary.

        Raises:
            OutputWriteError: If an output file cannot be written.
        """
        for index in range(len(self._store.payloads)):
            entry = self._manifest.lookup(self._store.key_for(index))
            if entry is None:
                _LOGGER.debug(
                    "payload_skipped",
                    file_name=self._store.file_name,
                    index=index,
                    reason="unnamed",
                )
                continue
            self._extract_entry(index, entry)
        summary = StoreSummary(
            file_name=self._store.file_name,
            header=self._store.header,
            assemblies=tuple(self._assemblies),
            failures=tuple(self._failures),
        )
        _LOGGER.info(
            "store_extracted",
            file_name=summary.file_name,
            store_id=summary.header.store_id,
            extracted_count=len(summary.assemblies),
            failed_count=len(summary.failures),
        )
        return summary

    def _extract_entry(self, index: int, entry: ManifestEntry) -> None:
        try:
            payload = self._store.payload_view(index)
            data = decompress_payload(payload)
            output_path = resolve_output_path(self._output_dir, entry.name)
        except ExtractionError as error:
            self._record_failure(index, entry, error)
            return
        write_payload_file(output_path, data)
        extracted = ExtractedAssembly(
            name=entry.name,
            store_id=entry.store_id,
            index=index,
            hash32=entry.hash32,
            hash64=entry.hash64,
            output_path=output_path,
            compressed=is_compressed(payload),
            size=len(data),
        )
        self._assemblies.append(extracted)
        _LOGGER.debug(
            "payload_extracted",
            name=entry.name,
            index=index,
            compressed=extracted.compressed,
            size=extracted.size,
        )

    def _record_failure(self, index: int, entry: ManifestEntry, error: ExtractionError) -> None:
        if error.reason == "empty payload":
            _LOGGER.debug("payload_skipped", name=entry.name, index=index, reason="empty")
            return
        self._failures.append(
            PayloadFailure(
                name=entry.name,
                store_id=entry.store_id,
                index=index,
                reason=error.reason,
                detail=error.detail,
            )
        )
        _LOGGER.warning(
            "payload_failed",
            name=entry.name,
            index=index,
            reason=error.reason,
            detail=error.detail,
        )


def extract_store(store: AssemblyStore, manifest: ManifestIndex, output_dir: Path) -> StoreSummary:
    """Extract every named payload of a store into ``output_dir``.

    Args:
        store: Parsed store.
        manifest: Manifest lookup index.
        output_dir: Directory receiving ``<name>.dll`` files.

    Returns:
        Store summary in directory order.

    Raises:
        OutputWriteError: If an output file cannot be written.
    """
    return StoreExtractor(store, manifest, output_dir).run()


def resolve_output_path(output_dir: Path, name: str) -> Path:
    """Build the output path for an assembly name.

    Args:
        output_dir: Extraction root.
        name: Manifest name, possibly containing subdirectories.

    Returns:
        ``output_dir / (name + ".dll")``.

    Raises:
        ExtractionError: If the name resolves outside ``output_dir``.
    """
    root = output_dir.resolve()
    try:
        candidate = (root / f"{name}{ASSEMBLY_FILE_SUFFIX}").resolve()
    except ValueError as error:
        raise ExtractionError("unsafe name", f"{name!r} is not a valid path: {error}") from error
    if Path(name).is_absolute() or root not in candidate.parents:
        raise ExtractionError("unsafe name", f"'{name}' resolves outside {root}")
    return candidate


def write_payload_file(output_path: Path, data: bytes | memoryview) -> None:
    """Write payload bytes, replacing the target only once fully written.

    Args:
        output_path: Final file path.
        data: Payload bytes.

    Raises:
        OutputWriteError: If the directory or file cannot be written.
    """
    partial_path = output_path.with_name(output_path.name + PARTIAL_FILE_SUFFIX)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        partial_path.write_bytes(data)
        os.replace(partial_path, output_path)
    except OSError as error:
        with contextlib.suppress(OSError):
            partial_path.unlink()
        raise OutputWriteError(
            f"Failed to write assembly to {output_path}: {error.strerror or error}. "
            "Check that the output directory is writable."
        ) from error
