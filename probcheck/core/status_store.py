"""Status store — resource key to ``RepoStatus``, persisted as one JSON file.

The whole file is read into memory, mutated, and written back in one go.
There is no locking: two processes saving the same file concurrently
resolve as last-write-wins.

File layout::

    {
      "path/to/repo": {
        "archived": false,
        "change_time": "2024-05-01T12:00:00Z",
        "check_time": "2024-05-03T08:30:00Z",
        "commit_hash": "<40 or 64 lowercase hex chars>"
      },
      ...
    }
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from collections.abc import Iterator
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from probcheck.models.hashes import CommitHash
from probcheck.models.status import RepoStatus

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """Base class for status store failures."""


class StoreReadError(StoreError):
    """Raised when the store file exists but cannot be read."""


class StoreFormatError(StoreError):
    """Raised when the store file content is not a valid status mapping."""


class StoreWriteError(StoreError):
    """Raised when the store cannot be serialized or written."""


class StatusStore:
    """In-memory mapping of resource keys to their ``RepoStatus``.

    Parameters
    ----------
    path:
        Default file used by :meth:`save`.  ``None`` for a purely
        in-memory store.
    statuses:
        Initial contents.
    """

    def __init__(
        self,
        path: Path | str | None = None,
        statuses: dict[str, RepoStatus] | None = None,
    ) -> None:
        self.path = Path(path) if path is not None else None
        self._statuses: dict[str, RepoStatus] = dict(statuses or {})

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | str) -> StatusStore:
        """Read the store from ``path``.

        A missing file yields an empty store.  Any other read failure raises
        ``StoreReadError``; malformed content raises ``StoreFormatError``.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("Status file %s not found, starting empty", path)
            return cls(path)
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreReadError(f"Could not read status file {path}: {exc}") from exc

        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StoreFormatError(f"Status file {path} is not valid JSON: {exc}") from exc
        if not isinstance(raw, dict):
            raise StoreFormatError(
                f"Status file {path} must contain a JSON object, got {type(raw).__name__}"
            )

        statuses: dict[str, RepoStatus] = {}
        for key, data in raw.items():
            try:
                statuses[key] = RepoStatus.model_validate(data)
            except ValidationError as exc:
                raise StoreFormatError(
                    f"Invalid status for {key!r} in {path}: {exc}"
                ) from exc

        logger.debug("Loaded %d statuses from %s", len(statuses), path)
        return cls(path, statuses)

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------

    def lookup(self, key: str) -> RepoStatus | None:
        """Exact-match retrieval; ``None`` for an unknown key."""
        return self._statuses.get(key)

    def keys(self) -> list[str]:
        return sorted(self._statuses)

    def items(self) -> list[tuple[str, RepoStatus]]:
        return sorted(self._statuses.items())

    def records(self) -> list[RepoStatus]:
        return [status for _, status in self.items()]

    def __len__(self) -> int:
        return len(self._statuses)

    def __contains__(self, key: object) -> bool:
        return key in self._statuses

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    # ------------------------------------------------------------------
    # Mutate
    # ------------------------------------------------------------------

    def upsert(self, key: str, status: RepoStatus) -> RepoStatus:
        """Insert ``status`` for a new key, or overwrite an existing one.

        For an existing key the check time, change time and commit hash are
        replaced; the archived flag of the stored record is kept.
        """
        existing = self._statuses.get(key)
        if existing is None:
            logger.debug("Inserting status for %s", key)
            stored = status
        else:
            logger.debug("Updating status for %s", key)
            stored = existing.model_copy(
                update={
                    "check_time": status.check_time,
                    "change_time": status.change_time,
                    "commit_hash": status.commit_hash,
                }
            )
        self._statuses[key] = stored
        return stored

    def record_change(
        self,
        key: str,
        commit_time: datetime,
        commit_hash: CommitHash,
        now: datetime | None = None,
    ) -> RepoStatus:
        """Record that ``key`` was just checked and last changed at ``commit_time``."""
        checked_at = now or datetime.now(timezone.utc)
        return self.upsert(
            key,
            RepoStatus(
                check_time=checked_at,
                change_time=commit_time,
                commit_hash=commit_hash,
            ),
        )

    def set_archived(self, key: str, archived: bool = True) -> RepoStatus:
        """Set or clear the archived flag of an existing record."""
        existing = self._statuses.get(key)
        if existing is None:
            raise KeyError(key)
        updated = existing.model_copy(update={"archived": archived})
        self._statuses[key] = updated
        logger.debug("Set archived=%s for %s", archived, key)
        return updated

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------

    def to_json_dict(self) -> dict[str, dict]:
        return {
            key: status.model_dump(mode="json")
            for key, status in self._statuses.items()
        }

    def save(self, path: Path | str | None = None) -> Path:
        """Write the whole store to ``path`` (default: the path it was loaded from).

        The content goes to a temporary file beside the target which then
        replaces it, so a failed write leaves the previous file intact.
        """
        target = Path(path) if path is not None else self.path
        if target is None:
            raise StoreWriteError("No path given for an in-memory status store")

        try:
            payload = json.dumps(self.to_json_dict(), indent=2, sort_keys=True) + "\n"
        except (TypeError, ValueError) as exc:
            raise StoreWriteError(f"Could not serialize status store: {exc}") from exc

        tmp_path: Path | None = None
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=target.parent,
                prefix=f".{target.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_path = Path(handle.name)
                handle.write(payload)
            if target.exists():
                # Keep the permissions of the file being replaced
                os.chmod(tmp_path, stat.S_IMODE(target.stat().st_mode))
            os.replace(tmp_path, target)
        except OSError as exc:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise StoreWriteError(f"Could not write status file {target}: {exc}") from exc

        logger.debug("Wrote %d statuses to %s", len(self._statuses), target)
        return target
