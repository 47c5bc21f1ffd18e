"""Shared test fixtures for probcheck."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

import pytest

from probcheck.core.status_store import StatusStore
from probcheck.models.hashes import CommitHash
from probcheck.models.status import RepoStatus

SHA1_HEX = "da39a3ee5e6b4b0d3255bfef95601890afd80709"
SHA256_HEX = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


@pytest.fixture
def now() -> datetime:
    """A fixed evaluation time."""
    return datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def sha1_hash() -> CommitHash:
    return CommitHash.parse(SHA1_HEX)


@pytest.fixture
def sha256_hash() -> CommitHash:
    return CommitHash.parse(SHA256_HEX)


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Path to a status file that does not exist yet."""
    return tmp_path / "state" / "status.json"


@pytest.fixture
def store(data_file: Path) -> StatusStore:
    """An empty store bound to ``data_file``."""
    return StatusStore.load(data_file)


@pytest.fixture
def make_status(now: datetime, sha1_hash: CommitHash) -> Callable[..., RepoStatus]:
    """Factory fixture: build a RepoStatus aged relative to ``now``."""

    def _factory(
        changed_ago: timedelta = timedelta(days=30),
        checked_ago: timedelta = timedelta(days=1),
        **overrides: Any,
    ) -> RepoStatus:
        defaults: dict[str, Any] = {
            "change_time": now - changed_ago,
            "check_time": now - checked_ago,
            "commit_hash": sha1_hash,
        }
        defaults.update(overrides)
        return RepoStatus(**defaults)

    return _factory
