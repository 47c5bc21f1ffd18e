"""Age summary — histogram of tracked resources by time since change or check.

The summary is a read-only projection over a set of ``RepoStatus`` records.
Every record lands in exactly one of nine fixed buckets, found by a left
bisection over the bucket thresholds (in minutes).  A record whose selected
timestamp lies in the future means the store is corrupt or the clock is
skewed; that aborts the summary instead of being clamped.
"""

from __future__ import annotations

import bisect
import logging
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from probcheck.models.status import RepoStatus, ensure_utc

logger = logging.getLogger(__name__)

# Rough minute counts
HOUR = 60
DAY = HOUR * 24
WEEK = DAY * 7
MONTH = DAY * 30
YEAR = DAY * 365


class FutureTimestampError(RuntimeError):
    """Raised when a record's selected timestamp is later than now."""


class SummaryField(str, Enum):
    """Which timestamp the age is measured from."""

    CHANGE_TIME = "change_time"
    CHECK_TIME = "check_time"


class AgeBucket(BaseModel):
    """One age range.  ``threshold_minutes`` is ``None`` for the overflow bucket."""

    model_config = ConfigDict(frozen=True)

    threshold_minutes: int | None
    label: str


class BucketCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    count: int = 0


class AgeSummary(BaseModel):
    """Frozen, point-in-time bucket counts for one summary field."""

    model_config = ConfigDict(frozen=True)

    field: SummaryField
    generated_at: datetime
    buckets: list[BucketCount] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(b.count for b in self.buckets)

    def as_dict(self) -> dict[str, int]:
        return {b.label: b.count for b in self.buckets}


AGE_BUCKETS: tuple[AgeBucket, ...] = (
    AgeBucket(threshold_minutes=DAY, label="< 1 Day"),
    AgeBucket(threshold_minutes=3 * DAY, label="< 3 Days"),
    AgeBucket(threshold_minutes=WEEK, label="< 1 Week"),
    AgeBucket(threshold_minutes=3 * WEEK, label="< 3 Weeks"),
    AgeBucket(threshold_minutes=3 * MONTH, label="< 3 Months"),
    AgeBucket(threshold_minutes=YEAR, label="< 1 Year"),
    AgeBucket(threshold_minutes=3 * YEAR, label="< 3 Years"),
    AgeBucket(threshold_minutes=10 * YEAR, label="< 10 Years"),
    AgeBucket(threshold_minutes=None, label="10 Years +"),
)

_ONE_MINUTE = timedelta(minutes=1)


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from ``start`` to ``end``, truncated toward zero."""
    return int((end - start) / _ONE_MINUTE)


def bucket_index(elapsed_minutes: int, buckets: tuple[AgeBucket, ...] = AGE_BUCKETS) -> int:
    """Index of the first bucket whose threshold is >= ``elapsed_minutes``."""
    thresholds = [b.threshold_minutes for b in buckets if b.threshold_minutes is not None]
    return bisect.bisect_left(thresholds, elapsed_minutes)


def summarize(
    records: Iterable[RepoStatus] | Iterable[tuple[str, RepoStatus]],
    field: SummaryField,
    *,
    now: datetime | None = None,
    ignore_archived: bool = False,
    buckets: tuple[AgeBucket, ...] = AGE_BUCKETS,
) -> AgeSummary:
    """Count records per age bucket.

    Parameters
    ----------
    records:
        ``RepoStatus`` values, or ``(key, RepoStatus)`` pairs so errors can
        name the offending key.
    field:
        Timestamp to measure the age from.
    now:
        Evaluation time.  Defaults to the current UTC time.
    ignore_archived:
        Skip records flagged as archived.
    buckets:
        Ordered bucket table; the last entry must be the overflow bucket.

    Raises
    ------
    FutureTimestampError
        If any counted record's timestamp is after ``now``.
    """
    evaluated_at = ensure_utc(now) if now is not None else datetime.now(timezone.utc)
    counters = [0] * len(buckets)

    for item in records:
        if isinstance(item, tuple):
            key, status = item
        else:
            key, status = None, item

        if ignore_archived and status.archived:
            continue

        stamp: datetime = getattr(status, field.value)
        elapsed = minutes_between(stamp, evaluated_at)
        if elapsed < 0:
            where = f" for {key!r}" if key is not None else ""
            raise FutureTimestampError(f"Time in future{where}: {stamp.isoformat()}")
        counters[bucket_index(elapsed, buckets)] += 1

    logger.debug("Summarized %d records by %s", sum(counters), field.value)
    return AgeSummary(
        field=field,
        generated_at=evaluated_at,
        buckets=[
            BucketCount(label=bucket.label, count=count)
            for bucket, count in zip(buckets, counters)
        ],
    )
