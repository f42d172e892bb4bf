"""Unit tests for blob discovery and loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import FormatError, XamBlobIngestError
from ingest.input_reader import load_store, resolve_blob_paths
from tests.blob_builders import build_store


def _touch(root: Path, *names: str) -> None:
    for name in names:
        (root / name).write_bytes(build_store([b"x"]))


def test_resolve_blob_paths_lists_common_then_architectures(tmp_path: Path) -> None:
    """All present stores should resolve with the common store first."""
    _touch(tmp_path, "assemblies.x86.blob", "assemblies.blob", "assemblies.arm64_v8a.blob")

    resolved = resolve_blob_paths(tmp_path, None)

    assert [(arch, path.name) for arch, path in resolved] == [
        (None, "assemblies.blob"),
        ("arm64", "assemblies.arm64_v8a.blob"),
        ("x86", "assemblies.x86.blob"),
    ]


def test_resolve_blob_paths_filters_architecture(tmp_path: Path) -> None:
    """Selecting an architecture should skip other architecture stores."""
    _touch(tmp_path, "assemblies.blob", "assemblies.x86.blob", "assemblies.armeabi_v7a.blob")

    resolved = resolve_blob_paths(tmp_path, "arm")

    assert [path.name for _, path in resolved] == ["assemblies.blob", "assemblies.armeabi_v7a.blob"]


def test_resolve_blob_paths_allows_missing_common_store(tmp_path: Path) -> None:
    """Architecture-only directories are valid input."""
    _touch(tmp_path, "assemblies.x86_64.blob")

    resolved = resolve_blob_paths(tmp_path, None)

    assert resolved == [("x86_64", tmp_path / "assemblies.x86_64.blob")]


def test_resolve_blob_paths_raises_without_stores(tmp_path: Path) -> None:
    """A directory without any store should fail."""
    with pytest.raises(XamBlobIngestError, match="No assembly stores"):
        resolve_blob_paths(tmp_path, None)


def test_resolve_blob_paths_raises_for_missing_directory(tmp_path: Path) -> None:
    """A missing input directory should fail."""
    with pytest.raises(XamBlobIngestError, match="does not exist"):
        resolve_blob_paths(tmp_path / "nope", None)


def test_load_store_parses_file(tmp_path: Path) -> None:
    """Loaded stores should carry the file base name."""
    blob_path = tmp_path / "assemblies.blob"
    blob_path.write_bytes(build_store([b"one", b"two"], store_id=4))

    store = load_store(blob_path)

    assert store.file_name == "assemblies.blob" and store.header.store_id == 4


def test_load_store_propagates_format_errors(tmp_path: Path) -> None:
    """Malformed stores should fail with a format error."""
    blob_path = tmp_path / "assemblies.blob"
    blob_path.write_bytes(b"NOPE" + b"\x00" * 16)

    with pytest.raises(FormatError):
        load_store(blob_path)


def test_load_store_raises_for_unreadable_path(tmp_path: Path) -> None:
    """Unreadable store paths should be ingest errors."""
    with pytest.raises(XamBlobIngestError):
        load_store(tmp_path / "missing.blob")
