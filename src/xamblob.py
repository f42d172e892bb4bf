"""Public SDK surface for XamBlob.

This module provides a stable import path for library users.
It re-exports the client, the store decoder, and typed models.
"""

from __future__ import annotations

from core.config import XamBlobConfig
from core.errors import (
    ExtractionError,
    FormatError,
    ManifestError,
    OutputWriteError,
    XamBlobError,
)
from core.types import (
    ExtractedAssembly,
    ExtractionSummary,
    HashRecord,
    ManifestEntry,
    PayloadFailure,
    PayloadKey,
    PayloadRecord,
    StoreHeader,
    StoreSummary,
    UnpackOptions,
)
from extract.extractor import extract_store
from extract.sdk_client import XamBlobClient
from extract.unpack_pipeline import unpack_assemblies
from ingest.manifest_reader import ManifestIndex, read_manifest
from store.assembly_store import AssemblyStore

__all__ = [
    "AssemblyStore",
    "ExtractedAssembly",
    "ExtractionError",
    "ExtractionSummary",
    "FormatError",
    "HashRecord",
    "ManifestEntry",
    "ManifestError",
    "ManifestIndex",
    "OutputWriteError",
    "PayloadFailure",
    "PayloadKey",
    "PayloadRecord",
    "StoreHeader",
    "StoreSummary",
    "UnpackOptions",
    "XamBlobClient",
    "XamBlobConfig",
    "XamBlobError",
    "extract_store",
    "read_manifest",
    "unpack_assemblies",
]
