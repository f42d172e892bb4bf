"""XamBlob exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class XamBlobError(Exception):
    """Base exception for all XamBlob failures."""


class XamBlobConfigError(XamBlobError):
    """Raised for invalid runtime configuration."""


class XamBlobIngestError(XamBlobError):
    """Raised when input directories or blob files cannot be read."""


class ManifestError(XamBlobError):
    """Raised for missing or malformed assembly manifests."""


class FormatError(XamBlobError):
    """Raised when a container is malformed or unsupported.

    Format errors are fatal for the whole container: nothing is extracted.

    Attributes:
        reason: Short failure category, e.g. ``bad magic``.
        detail: Human-readable context for the failure.
    """

    def __init__(self, reason: str, detail: str) -> None:
        self.reason = reason
        self.detail = detail
        super().__init__(f"{reason}: {detail}")


class ExtractionError(XamBlobError):
    """Raised when a single payload cannot be extracted.

    Extraction errors are local to one payload and never abort a run.

    Attributes:
        reason: Short failure category, e.g. ``out of bounds``.
        detail: Human-readable context for the failure.
    """

    def __init__(self, reason: str, detail: str) -> None:
        self.reason = reason
        self.detail = detail
        super().__init__(f"{reason}: {detail}")


class OutputWriteError(XamBlobError):
    """Raised when extracted files or reports cannot be written."""
