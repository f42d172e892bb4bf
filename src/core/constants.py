"""Core constants used across XamBlob modules.

This module centralizes binary layout values and file naming rules.
Keeping values here avoids magic literals in parsing logic.
"""

from __future__ import annotations

from pathlib import Path

ASSEMBLY_STORE_MAGIC = b"XABA"
ASSEMBLY_STORE_FORMAT_VERSION = 1
COMPRESSED_DATA_MAGIC = b"XALZ"
HEADER_SIZE = 20
DIRECTORY_RECORD_SIZE = 24
HASH_RECORD_SIZE = 20
UINT32_LIMIT = 0xFFFFFFFF

COMMON_BLOB_FILE_NAME = "assemblies.blob"
ARCHITECTURE_BLOB_FILE_NAMES = {
    "arm": "assemblies.armeabi_v7a.blob",
    "arm64": "assemblies.arm64_v8a.blob",
    "x86": "assemblies.x86.blob",
    "x86_64": "assemblies.x86_64.blob",
}
MANIFEST_FILE_NAME = "assemblies.manifest"
MANIFEST_HEADER_PREFIX = "Hash"
REPORT_FILE_NAME = "assemblies.json"
ASSEMBLY_FILE_SUFFIX = ".dll"
PARTIAL_FILE_SUFFIX = ".part"

DEFAULT_OUTPUT_ROOT = Path("out")
