"""Commit hash value type — SHA-1 or SHA-256, width determines the kind.

A ``CommitHash`` is a tagged value: ``kind`` plus the raw digest bytes.
The byte length is the only source of truth for the kind, so a 20-byte
digest is always SHA-1 and a 32-byte digest is always SHA-256.  The
canonical text form is lowercase hex.
"""

from __future__ import annotations

import binascii
from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator


class HashKind(str, Enum):
    """Supported digest widths."""

    SHA1 = "sha1"
    SHA256 = "sha256"

    @property
    def byte_length(self) -> int:
        return _BYTE_LENGTHS[self]


_BYTE_LENGTHS: dict[HashKind, int] = {
    HashKind.SHA1: 20,
    HashKind.SHA256: 32,
}

_KIND_BY_LENGTH: dict[int, HashKind] = {v: k for k, v in _BYTE_LENGTHS.items()}


class HashParseError(ValueError):
    """Base class for hash text that cannot be turned into a ``CommitHash``."""


class HashDecodeError(HashParseError):
    """Raised when hash text is not valid hexadecimal."""


class HashLengthError(HashParseError):
    """Raised when a digest is neither 20 nor 32 bytes long."""


class CommitHash(BaseModel):
    """An immutable SHA-1 or SHA-256 commit digest.

    Equality is byte-exact and kind-sensitive.  Use :meth:`parse` for hex
    text and :meth:`from_bytes` for raw digests.
    """

    model_config = ConfigDict(frozen=True)

    kind: HashKind
    digest: bytes

    @model_validator(mode="after")
    def _check_width(self) -> CommitHash:
        if len(self.digest) != self.kind.byte_length:
            raise ValueError(
                f"{self.kind.value} digest must be {self.kind.byte_length} bytes, "
                f"got {len(self.digest)}"
            )
        return self

    @classmethod
    def from_bytes(cls, data: bytes) -> CommitHash:
        """Build a hash from raw digest bytes, picking the kind by length."""
        kind = _KIND_BY_LENGTH.get(len(data))
        if kind is None:
            raise HashLengthError(
                f"Unexpected digest length {len(data)} bytes, expecting 20 or 32"
            )
        return cls(kind=kind, digest=bytes(data))

    @classmethod
    def parse(cls, text: str) -> CommitHash:
        """Decode a 40 or 64 character hex string."""
        try:
            data = binascii.unhexlify(text)
        except (binascii.Error, ValueError) as exc:
            raise HashDecodeError(f"Could not decode hash from hex {text!r}: {exc}") from exc
        try:
            return cls.from_bytes(data)
        except HashLengthError:
            raise HashLengthError(
                f"Unexpected length of hash {text!r} ({len(text)} chars), "
                "expecting 40/64 hex chars"
            ) from None

    @property
    def raw_bytes(self) -> bytes:
        return self.digest

    def hex(self) -> str:
        return self.digest.hex()

    def short(self, length: int = 12) -> str:
        """Abbreviated hex form for display."""
        return self.hex()[:length]

    def __str__(self) -> str:
        return self.hex()
