"""Blob file discovery and loading.

This module resolves which store files of an unpacked application
directory take part in a run and loads each one fully into memory.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import ARCHITECTURE_BLOB_FILE_NAMES, COMMON_BLOB_FILE_NAME
from core.errors import XamBlobIngestError
from store.assembly_store import AssemblyStore


def resolve_blob_paths(input_dir: Path, architecture: str | None) -> list[tuple[str | None, Path]]:
    """Resolve store files to process.

    The common store comes first, followed by architecture stores in a
    stable order.

    Args:
        input_dir: Directory holding blob files.
        architecture: Selected architecture, or None for every present one.

    Returns:
        ``(architecture, path)`` pairs, architecture None for the common store.

    Raises:
        XamBlobIngestError: If the directory is missing or holds no stores.
    """
    if not input_dir.is_dir():
        raise XamBlobIngestError(
            f"Failed to read input at {input_dir}: directory does not exist. "
            "Point unpack at the directory holding assemblies.blob."
        )
    candidates: list[tuple[str | None, Path]] = [(None, input_dir / COMMON_BLOB_FILE_NAME)]
    selected = [architecture] if architecture else sorted(ARCHITECTURE_BLOB_FILE_NAMES)
    for arch in selected:
        candidates.append((arch, input_dir / ARCHITECTURE_BLOB_FILE_NAMES[arch]))
    resolved = [(arch, path) for arch, path in candidates if path.is_file()]
    if not resolved:
        expected = ", ".join(path.name for _, path in candidates)
        raise XamBlobIngestError(
            f"No assembly stores found under {input_dir}. Expected any of: {expected}."
        )
    return resolved


def load_store(path: Path) -> AssemblyStore:
    """Read a store file and parse it.

    Args:
        path: Store file path.

    Returns:
        Parsed store.

    Raises:
        XamBlobIngestError: If the file cannot be read.
        FormatError: If the store is malformed.
    """
    try:
        raw = path.read_bytes()
    except OSError as error:
        raise XamBlobIngestError(
            f"Failed to read assembly store at {path}: {error.strerror or error}."
        ) from error
    return AssemblyStore.from_bytes(raw, path.name)
