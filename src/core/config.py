"""Runtime configuration model for XamBlob.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import ARCHITECTURE_BLOB_FILE_NAMES, DEFAULT_OUTPUT_ROOT
from core.errors import XamBlobConfigError

_TRUE_VALUES = ("1", "true", "yes")
_FALSE_VALUES = ("0", "false", "no")


@dataclass(frozen=True)
class XamBlobConfig:
    """Validated runtime configuration.

    Attributes:
        output_root: Default directory receiving extracted assemblies.
        architecture: Optional default architecture selection.
        write_report: Whether unpack runs write the JSON report.
    """

    output_root: Path
    architecture: str | None
    write_report: bool

    @classmethod
    def from_env(cls) -> "XamBlobConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            XamBlobConfigError: If environment values are invalid.
        """
        output_root_value = os.getenv("XAMBLOB_OUTPUT_ROOT", str(DEFAULT_OUTPUT_ROOT))
        architecture = parse_architecture(os.getenv("XAMBLOB_ARCH") or None)
        write_report = _parse_flag(os.getenv("XAMBLOB_WRITE_REPORT", "1"))
        return cls(
            output_root=Path(output_root_value).expanduser().resolve(),
            architecture=architecture,
            write_report=write_report,
        )


def parse_architecture(raw_value: str | None) -> str | None:
    """Validate an architecture name.

    Args:
        raw_value: Architecture name or None for all architectures.

    Returns:
        The validated architecture name, or None.

    Raises:
        XamBlobConfigError: If the architecture is unknown.
    """
    if raw_value is None:
        return None
    if raw_value not in ARCHITECTURE_BLOB_FILE_NAMES:
        supported = ", ".join(sorted(ARCHITECTURE_BLOB_FILE_NAMES))
        raise XamBlobConfigError(
            f"Unsupported architecture '{raw_value}'. "
            f"Use one of: {supported}."
        )
    return raw_value


def _parse_flag(raw_value: str) -> bool:
    """Parse the report toggle environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed boolean flag.

    Raises:
        XamBlobConfigError: If value is not a recognized boolean.
    """
    normalized = raw_value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise XamBlobConfigError(
        "Invalid XAMBLOB_WRITE_REPORT value: "
        f"expected one of {_TRUE_VALUES + _FALSE_VALUES}, got '{raw_value}'. "
        "Set XAMBLOB_WRITE_REPORT to 1 or 0."
    )
