"""Per-resource status record persisted in the status store."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from probcheck.models.hashes import CommitHash


def ensure_utc(value: datetime) -> datetime:
    """Normalise a datetime to UTC; naive values are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class RepoStatus(BaseModel):
    """Last change and last check of one tracked resource.

    ``archived`` was added after the first store format; records written
    without it load as not archived.

    Times must be datetimes or ISO-8601 text and the hash must be hex text
    (or a ``CommitHash``).  Epoch numbers, hash objects spelled out as
    mappings and truthy strings for ``archived`` are rejected.
    """

    model_config = ConfigDict(frozen=True)

    check_time: datetime
    change_time: datetime
    commit_hash: CommitHash
    archived: bool = Field(default=False, strict=True)

    @field_validator("check_time", "change_time", mode="before")
    @classmethod
    def _parse_time(cls, value: object) -> datetime:
        if isinstance(value, datetime):
            return value
        if isinstance(value, str):
            return datetime.fromisoformat(value)
        raise ValueError(f"expected an ISO-8601 timestamp, got {type(value).__name__}")

    @field_validator("check_time", "change_time", mode="after")
    @classmethod
    def _to_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @field_validator("commit_hash", mode="before")
    @classmethod
    def _parse_hash(cls, value: object) -> CommitHash:
        if isinstance(value, CommitHash):
            return value
        if isinstance(value, str):
            return CommitHash.parse(value)
        raise ValueError(f"expected a hex commit hash, got {type(value).__name__}")

    @field_serializer("commit_hash")
    def _hash_to_hex(self, value: CommitHash) -> str:
        return value.hex()
