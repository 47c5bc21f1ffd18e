"""probcheck: probabilistic recheck scheduling for tracked resources.

Instead of checking every repository on a fixed cadence, each invocation
flips a biased coin: resources that were stable for a long time before
their last check are rarely picked, while ones that changed recently or
have not been looked at for a while are picked almost certainly.

  - ``CommitHash`` — SHA-1 / SHA-256 commit digest value type
  - ``RepoStatus`` — last change / last check record per resource
  - ``StatusStore`` — JSON-backed mapping of resource key to status
  - ``should_check_now`` — the probability model and its coin flip
  - ``summarize`` — age histogram over the whole store
"""

__version__ = "0.3.0"
__description__ = "Probabilistic recheck scheduling for tracked resources"

from probcheck.core.decision import calculate_probability, should_check_now
from probcheck.core.status_store import StatusStore
from probcheck.models.hashes import CommitHash, HashKind
from probcheck.models.status import RepoStatus
from probcheck.monitor.summary import SummaryField, summarize

__all__ = [
    "CommitHash",
    "HashKind",
    "RepoStatus",
    "StatusStore",
    "calculate_probability",
    "should_check_now",
    "SummaryField",
    "summarize",
    "__version__",
]
