"""Assembly manifest reader.

The manifest maps a payload's ``(store id, index)`` key to its published
name and hash digests. Each line holds ``hash32 hash64 store_id index name``
separated by whitespace; blank lines and the ``Hash`` header line are
skipped.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping

from core.constants import MANIFEST_HEADER_PREFIX
from core.errors import ManifestError
from core.logging_config import get_logger
from core.types import ManifestEntry, PayloadKey

_LOGGER = get_logger(__name__)
_FIELD_COUNT = 5


class ManifestIndex:
    """Exact-match lookup of manifest entries by payload key."""

    def __init__(self, entries: Iterable[ManifestEntry]) -> None:
        index: dict[PayloadKey, ManifestEntry] = {}
        for entry in entries:
            index.setdefault(entry.key, entry)
        self._entries: Mapping[PayloadKey, ManifestEntry] = index

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, key: PayloadKey) -> ManifestEntry | None:
        """Return the entry published for ``key``, if any.

        Both the store id and the positional index must match.
        """
        return self._entries.get(key)


def read_manifest(manifest_path: Path) -> ManifestIndex:
    """Load a manifest file into a lookup index.

    Args:
        manifest_path: Path to ``assemblies.manifest``.

    Returns:
        Manifest lookup index.

    Raises:
        ManifestError: If the file is missing or has malformed lines.
    """
    try:
        text = manifest_path.read_text(encoding="utf-8")
    except OSError as error:
        raise ManifestError(
            f"Failed to read manifest at {manifest_path}: {error.strerror or error}. "
            "Pass --manifest with the path to assemblies.manifest."
        ) from error
    entries = parse_manifest_lines(text.splitlines(), source=str(manifest_path))
    index = ManifestIndex(entries)
    _LOGGER.info("manifest_loaded", manifest_path=str(manifest_path), entry_count=len(index))
    return index


def parse_manifest_lines(lines: Iterable[str], source: str = "<manifest>") -> list[ManifestEntry]:
    """Parse manifest text lines into entries.

    Args:
        lines: Raw manifest lines.
        source: Label used in error messages.

    Returns:
        Parsed entries in file order.

    Raises:
        ManifestError: If a line has too few fields or non-numeric ids.
    """
    entries: list[ManifestEntry] = []
    for line_number, line in enumerate(lines, 1):
        stripped = line.strip()
        if not stripped or stripped.startswith(MANIFEST_HEADER_PREFIX):
            continue
        entries.append(_parse_manifest_line(stripped, source, line_number))
    return entries


def _parse_manifest_line(line: str, source: str, line_number: int) -> ManifestEntry:
    fields = line.split(maxsplit=_FIELD_COUNT - 1)
    if len(fields) != _FIELD_COUNT:
        raise ManifestError(
            f"Invalid manifest line at {source} line {line_number}: "
            f"expected {_FIELD_COUNT} fields, found {len(fields)}."
        )
    hash32, hash64, store_id_text, index_text, name = fields
    return ManifestEntry(
        name=name,
        hash32=hash32,
        hash64=hash64,
        store_id=_parse_id(store_id_text, "store id", source, line_number),
        index=_parse_id(index_text, "index", source, line_number),
    )


def _parse_id(raw_value: str, field_name: str, source: str, line_number: int) -> int:
    try:
        value = int(raw_value, 10)
    except ValueError as error:
        raise ManifestError(
            f"Invalid manifest line at {source} line {line_number}: "
            f"{field_name} must be a decimal integer, got '{raw_value}'."
        ) from error
    if value < 0:
        raise ManifestError(
            f"Invalid manifest line at {source} line {line_number}: "
            f"{field_name} must not be negative, got {value}."
        )
    return value
