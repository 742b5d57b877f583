"""Randomness supply for probabilistic edge insertion and successor picks."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import numpy as np

logger = logging.getLogger(__name__)

PROB_CHUNK = 4096


class SupplierOfRandomness:
    """Seedable source of probabilities and uniform indices.

    Usage:
        rnd = SupplierOfRandomness(seed=42)
        probs = rnd.rand_probs(16)      # lazy, values in [0, 1)
        idx = rnd.on_demand(max_value=5)  # int in [0, 5)
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = np.random.default_rng(seed)
        logger.debug("Randomness supplier created (seed=%s)", seed)

    def rand_probs(self, count: int) -> Iterator[float]:
        """Yield ``count`` independent probabilities in ``[0, 1)``.

        Values are drawn in chunks of at most ``PROB_CHUNK`` as the iterator
        is consumed.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return self._probs(count)

    def _probs(self, count: int) -> Iterator[float]:
        remaining = count
        while remaining > 0:
            chunk = self._rng.random(min(remaining, PROB_CHUNK))
            remaining -= len(chunk)
            for value in chunk:
                yield float(value)

    def on_demand(self, max_value: int) -> int:
        """Return a uniformly drawn index in ``[0, max_value)``."""
        if max_value <= 0:
            raise ValueError(f"max_value must be positive, got {max_value}")
        return int(self._rng.integers(0, max_value))
