"""probcheck core — decision engine, random sources, and the status store."""

from probcheck.core.decision import calculate_probability, days_between, should_check_now
from probcheck.core.random_source import RandomSource, SeededRandom, random_source_for
from probcheck.core.status_store import (
    StatusStore,
    StoreError,
    StoreFormatError,
    StoreReadError,
    StoreWriteError,
)

__all__ = [
    "calculate_probability",
    "days_between",
    "should_check_now",
    "RandomSource",
    "SeededRandom",
    "random_source_for",
    "StatusStore",
    "StoreError",
    "StoreFormatError",
    "StoreReadError",
    "StoreWriteError",
]
