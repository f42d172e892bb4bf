"""Unit tests for core config parsing."""

from __future__ import annotations

import os

import pytest

from core.config import XamBlobConfig, parse_architecture
from core.errors import XamBlobConfigError


def test_from_env_reads_output_root(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve the output root from environment."""
    monkeypatch.setenv("XAMBLOB_OUTPUT_ROOT", "./.tmp-xamblob")

    config = XamBlobConfig.from_env()

    assert config.output_root.name == ".tmp-xamblob" and config.output_root.is_absolute()


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should default to all architectures and writing the report."""
    monkeypatch.delenv("XAMBLOB_ARCH", raising=False)
    monkeypatch.delenv("XAMBLOB_WRITE_REPORT", raising=False)

    config = XamBlobConfig.from_env()

    assert config.architecture is None and config.write_report is True


def test_from_env_reads_architecture_and_report_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should accept known architectures and boolean flags."""
    monkeypatch.setenv("XAMBLOB_ARCH", "arm64")
    monkeypatch.setenv("XAMBLOB_WRITE_REPORT", "No")

    config = XamBlobConfig.from_env()

    assert config.architecture == "arm64" and config.write_report is False


def test_from_env_raises_for_unknown_architecture(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for an unsupported architecture."""
    monkeypatch.setenv("XAMBLOB_ARCH", "mips")

    with pytest.raises(XamBlobConfigError):
        XamBlobConfig.from_env()

    assert os.getenv("XAMBLOB_ARCH") == "mips"


def test_from_env_raises_for_invalid_report_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a non-boolean report flag."""
    monkeypatch.setenv("XAMBLOB_WRITE_REPORT", "maybe")

    with pytest.raises(XamBlobConfigError, match="XAMBLOB_WRITE_REPORT"):
        XamBlobConfig.from_env()


def test_parse_architecture_passes_none_through() -> None:
    """No architecture means every present architecture."""
    assert parse_architecture(None) is None
