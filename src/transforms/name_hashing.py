"""Assembly name hashing.

Stores index assemblies by xxHash digests of their names. Digests are
rendered with the same fixed-width hex routine as the hash tables.
"""

from __future__ import annotations

import xxhash

from core.types import format_hash_value


def hash_assembly_name(name: str) -> tuple[str, str]:
    """Compute the 32-bit and 64-bit name digests.

    Args:
        name: Assembly name as published in the manifest.

    Returns:
        Hex digests ``(hash32, hash64)``.
    """
    encoded = name.encode("utf-8")
    hash32 = format_hash_value(xxhash.xxh32_intdigest(encoded), 4)
    hash64 = format_hash_value(xxhash.xxh64_intdigest(encoded), 8)
    return hash32, hash64
