"""Hashing helpers for seed derivation."""

from __future__ import annotations

import hashlib


def sha256_digest(data: bytes) -> bytes:
    """Return the raw SHA-256 digest of ``data``."""
    return hashlib.sha256(data).digest()


def seed_material(seed: str) -> int:
    """Turn a seed string into a 256-bit integer for a deterministic PRNG.

    The same string always yields the same integer, on every platform.
    """
    return int.from_bytes(sha256_digest(seed.encode("utf-8")), "big")
