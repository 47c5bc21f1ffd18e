"""probcheck data models — all Pydantic v2, all frozen (immutable)."""

from probcheck.models.hashes import (
    CommitHash,
    HashDecodeError,
    HashKind,
    HashLengthError,
    HashParseError,
)
from probcheck.models.status import RepoStatus, ensure_utc

__all__ = [
    # hashes
    "CommitHash",
    "HashKind",
    "HashParseError",
    "HashDecodeError",
    "HashLengthError",
    # status
    "RepoStatus",
    "ensure_utc",
]
