"""Unpack orchestration across stores.

This module coordinates blob resolution, manifest loading, per-store
extraction, and report writes for one unpack run.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import MANIFEST_FILE_NAME
from core.logging_config import get_logger
from core.types import ExtractionSummary, StoreSummary, UnpackOptions
from extract.extractor import extract_store
from extract.report_io import write_report
from ingest.input_reader import load_store, resolve_blob_paths
from ingest.manifest_reader import read_manifest

_LOGGER = get_logger(__name__)


def unpack_assemblies(options: UnpackOptions) -> tuple[ExtractionSummary, Path | None]:
    """Extract every resolved store of an input directory.

    Common-store payloads land directly in the output directory;
    architecture stores write into ``<output>/<arch>/``.

    Args:
        options: Unpack options.

    Returns:
        Aggregated summary and the report path, None when no report was written.

    Raises:
        XamBlobIngestError: If no stores can be resolved or read.
        ManifestError: If the manifest is missing or malformed.
        FormatError: If any store is malformed; stores are all parsed before
            extraction starts, so nothing is extracted.
        OutputWriteError: If an output file cannot be written.
    """
    manifest_path = options.manifest_path or options.input_dir / MANIFEST_FILE_NAME
    manifest = read_manifest(manifest_path)
    stores = [
        (architecture, load_store(blob_path))
        for architecture, blob_path in resolve_blob_paths(options.input_dir, options.architecture)
    ]
    store_summaries: list[StoreSummary] = []
    for architecture, store in stores:
        store_output_dir = options.output_dir / architecture if architecture else options.output_dir
        store_summaries.append(extract_store(store, manifest, store_output_dir))
    summary = ExtractionSummary(stores=tuple(store_summaries))
    report_path = write_report(options.output_dir, summary) if options.write_report else None
    _LOGGER.info(
        "unpack_completed",
        input_dir=str(options.input_dir),
        output_dir=str(options.output_dir),
        store_count=len(summary.stores),
        extracted_count=len(summary.assemblies),
        failed_count=len(summary.failures),
        report_path=str(report_path) if report_path else None,
    )
    return summary, report_path
