"""Extraction report rendering and persistence.

This module isolates the ``assemblies.json`` layout so extraction code
stays focused on payload flow.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.constants import REPORT_FILE_NAME
from core.errors import OutputWriteError
from core.types import ExtractedAssembly, ExtractionSummary, PayloadFailure, StoreSummary


def build_report(summary: ExtractionSummary) -> dict[str, Any]:
    """Render an extraction summary as a JSON-compatible document.

    Args:
        summary: Aggregated extraction summary.

    Returns:
        Report with ``stores``, ``assemblies``, and ``failures`` lists.
    """
    return {
        "stores": [_store_row(store) for store in summary.stores],
        "assemblies": [_assembly_row(item) for item in summary.assemblies],
        "failures": [_failure_row(item) for item in summary.failures],
    }


def write_report(output_dir: Path, summary: ExtractionSummary) -> Path:
    """Write the report into the output directory.

    Args:
        output_dir: Extraction root.
        summary: Aggregated extraction summary.

    Returns:
        Written report path.

    Raises:
        OutputWriteError: If the report cannot be written.
    """
    report_path = output_dir / REPORT_FILE_NAME
    payload = json.dumps(build_report(summary), indent=2) + "\n"
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        report_path.write_text(payload, encoding="utf-8")
    except OSError as error:
        raise OutputWriteError(
            f"Failed to write report to {report_path}: {error.strerror or error}."
        ) from error
    return report_path


def _store_row(store: StoreSummary) -> dict[str, Any]:
    header = {
        "version": store.header.version,
        "lec": store.header.local_entry_count,
        "gec": store.header.global_entry_count,
        "store_id": store.header.store_id,
    }
    return {store.file_name: {"header": header}}


def _assembly_row(item: ExtractedAssembly) -> dict[str, Any]:
    return {
        "name": item.name,
        "store_id": item.store_id,
        "blob_idx": item.index,
        "hash32": item.hash32,
        "hash64": item.hash64,
        "file": str(item.output_path),
        "compressed": item.compressed,
        "size": item.size,
    }


def _failure_row(item: PayloadFailure) -> dict[str, Any]:
    return {
        "name": item.name,
        "store_id": item.store_id,
        "blob_idx": item.index,
        "reason": item.reason,
        "detail": item.detail,
    }
