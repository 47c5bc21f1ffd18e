"""probcheck monitor — read-only views over the status store.

Modules
-------
summary
    ``summarize`` buckets records by age into an ``AgeSummary``.
renderer
    ``SummaryRenderer`` turns summaries and records into Rich renderables.
"""

from probcheck.monitor.renderer import SummaryRenderer
from probcheck.monitor.summary import (
    AGE_BUCKETS,
    AgeBucket,
    AgeSummary,
    BucketCount,
    FutureTimestampError,
    SummaryField,
    summarize,
)

__all__ = [
    "AGE_BUCKETS",
    "AgeBucket",
    "AgeSummary",
    "BucketCount",
    "FutureTimestampError",
    "SummaryField",
    "SummaryRenderer",
    "summarize",
]
