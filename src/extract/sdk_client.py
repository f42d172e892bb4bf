"""Python SDK for assembly store operations.

This module exposes high-level APIs for unpacking, inspecting, and
hashing backed by the store decoder and extractor.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from core.config import XamBlobConfig
from core.types import ExtractionSummary, UnpackOptions
from extract.unpack_pipeline import unpack_assemblies
from ingest.input_reader import load_store
from store.assembly_store import AssemblyStore
from transforms.name_hashing import hash_assembly_name


class XamBlobClient:
    """Primary SDK entry point for store workflows."""

    def __init__(self, config: XamBlobConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or XamBlobConfig.from_env()

    @property
    def config(self) -> XamBlobConfig:
        """Runtime configuration used by this client."""
        return self._config

    def unpack(
        self,
        input_dir: str | Path,
        manifest_path: str | Path | None = None,
        architecture: str | None = None,
    ) -> tuple[ExtractionSummary, Path | None]:
        """Extract all stores of an input directory into the output root.

        Args:
            input_dir: Directory holding blob files.
            manifest_path: Optional manifest override.
            architecture: Optional architecture, defaults to the configured one.

        Returns:
            Aggregated summary and the report path, if written.

        Raises:
            XamBlobError: If the run fails as a whole.
        """
        options = UnpackOptions(
            input_dir=Path(input_dir).expanduser(),
            output_dir=self._config.output_root,
            manifest_path=Path(manifest_path).expanduser() if manifest_path else None,
            architecture=architecture or self._config.architecture,
            write_report=self._config.write_report,
        )
        return unpack_assemblies(options)

    def inspect(self, blob_path: str | Path) -> AssemblyStore:
        """Parse one store file without extracting it.

        Raises:
            XamBlobIngestError: If the file cannot be read.
            FormatError: If the store is malformed.
        """
        return load_store(Path(blob_path).expanduser())

    def hash_name(self, name: str) -> tuple[str, str]:
        """Compute ``(hash32, hash64)`` digests of an assembly name."""
        return hash_assembly_name(name)

    def with_output_root(self, output_root: str) -> "XamBlobClient":
        """Clone the client with a different output root.

        Args:
            output_root: New output directory.

        Returns:
            New SDK client instance.
        """
        resolved_root = Path(output_root).expanduser().resolve()
        return XamBlobClient(replace(self._config, output_root=resolved_root))
