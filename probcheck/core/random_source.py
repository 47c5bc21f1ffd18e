"""Random sources for the recheck decision.

The decision engine never touches global random state.  It asks an
injected ``RandomSource`` for one uniform draw.  Two constructors cover
real use:

- ``SeededRandom.from_seed(seed)`` — deterministic, derived from a SHA-256
  of the seed string, so a given seed always makes the same decision.
- ``SeededRandom.from_entropy()`` — seeded from OS entropy, different on
  every invocation.

``random_source_for(seed)`` selects between them from the single optional
seed input.
"""

from __future__ import annotations

import logging
import random
from typing import Protocol, runtime_checkable

from probcheck.core.hasher import seed_material

logger = logging.getLogger(__name__)


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can produce a uniform float in [0, 1)."""

    def uniform(self) -> float:
        """Return the next uniform value in [0, 1)."""
        ...


class SeededRandom:
    """``RandomSource`` backed by a private ``random.Random`` instance."""

    def __init__(self, rng: random.Random, *, deterministic: bool) -> None:
        self._rng = rng
        self.deterministic = deterministic

    @classmethod
    def from_seed(cls, seed: str) -> SeededRandom:
        return cls(random.Random(seed_material(seed)), deterministic=True)

    @classmethod
    def from_entropy(cls) -> SeededRandom:
        # random.Random() with no argument seeds itself from os.urandom
        return cls(random.Random(), deterministic=False)

    def uniform(self) -> float:
        return self._rng.random()


def random_source_for(seed: str | None) -> SeededRandom:
    """Deterministic source for a non-empty seed, entropy-seeded otherwise."""
    if seed:
        logger.debug("Using deterministic random source from seed")
        return SeededRandom.from_seed(seed)
    return SeededRandom.from_entropy()
