"""Recheck decision — probability model plus one biased coin flip.

Model
-----
``stable_days`` is the number of whole days a resource had been unchanged
when it was last checked.  The longer it was stable, the lower the base
probability of it needing a recheck::

    base = factor / stable_days            (factor defaults to 3.0)

That base is then scaled linearly by the whole days elapsed since the last
check, so an overdue resource becomes ever more likely to be picked::

    probability = base * elapsed_days

The probability is not clamped.  Values above 1.0 simply always win the
comparison ``draw <= probability``.

Degenerate inputs are not errors:

- ``stable_days <= 0`` (checked within a day of, or before, the change)
  gives probability 1.0.
- ``elapsed_days <= 0`` (checked today, or clock skew) leaves the base
  probability unscaled.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from probcheck.core.random_source import RandomSource, random_source_for

logger = logging.getLogger(__name__)

DEFAULT_RECHECK_FACTOR = 3.0

_ONE_DAY = timedelta(days=1)


def days_between(start: datetime, end: datetime) -> int:
    """Whole days from ``start`` to ``end``, truncated toward zero."""
    return int((end - start) / _ONE_DAY)


def calculate_probability(
    last_change: datetime,
    last_check: datetime,
    now: datetime,
    factor: float = DEFAULT_RECHECK_FACTOR,
) -> float:
    """Probability that a resource should be rechecked at ``now``."""
    stable_days = days_between(last_change, last_check)
    if stable_days <= 0:
        return 1.0
    base = factor / stable_days
    elapsed_days = days_between(last_check, now)
    if elapsed_days <= 0:
        return base
    return base * elapsed_days


def should_check_now(
    last_change: datetime,
    last_check: datetime,
    now: datetime,
    seed: str | None = None,
    *,
    rng: RandomSource | None = None,
    factor: float = DEFAULT_RECHECK_FACTOR,
) -> bool:
    """Decide whether to recheck a resource now.

    Parameters
    ----------
    last_change, last_check, now:
        Timezone-aware timestamps.
    seed:
        Optional seed string.  A non-empty seed makes the draw reproducible;
        ``None`` or ``""`` uses OS entropy.
    rng:
        Explicit random source.  Takes precedence over ``seed``.
    factor:
        Numerator of the base probability.
    """
    probability = calculate_probability(last_change, last_check, now, factor)
    source = rng if rng is not None else random_source_for(seed)
    value = source.uniform()
    logger.debug("target probability: %s, rand value: %s", probability, value)
    return value <= probability
