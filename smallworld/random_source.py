"""Injected random source for the rewiring loop.

All randomness used by the rewirer flows through a RandomSource, which wraps
a numpy Generator. Callers seed it (or hand in their own Generator) so that a
rewiring pass is reproducible and independent of any global state.

Usage:
    rng = RandomSource(seed=42)
    with rng:
        u = rng.uniform01()
        v = rng.integer(n)
"""

from __future__ import annotations
import threading
import numpy as np
from typing import Optional, Union


class RandomSource:
    """Seedable uniform draws with an acquire/release lifecycle.

    Entering the context acquires the source for a batch of draws and
    leaving releases it; a second concurrent batch blocks until the first
    one ends. Integer draws are obtained by scaling a uniform draw, so a
    single stream of uniforms drives every decision of a rewiring pass.

    Attributes:
        generator: Underlying numpy Generator
        n_draws: Number of uniform draws taken so far
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        generator: Optional[np.random.Generator] = None,
    ):
        if generator is not None and seed is not None:
            raise ValueError("pass either seed or generator, not both")
        self.generator = generator if generator is not None else np.random.default_rng(seed)
        self.n_draws = 0
        self._lock = threading.RLock()

    @classmethod
    def coerce(
        cls,
        rng: Union[None, int, np.random.Generator, "RandomSource"],
    ) -> "RandomSource":
        """Build a RandomSource from a seed, a Generator, or pass one through."""
        if isinstance(rng, RandomSource):
            return rng
        if isinstance(rng, np.random.Generator):
            return cls(generator=rng)
        if rng is None or isinstance(rng, (int, np.integer)):
            return cls(seed=rng)
        raise TypeError(f"cannot build a RandomSource from {type(rng).__name__}")

    def acquire(self) -> "RandomSource":
        self._lock.acquire()
        return self

    def release(self) -> None:
        self._lock.release()

    def __enter__(self) -> "RandomSource":
        return self.acquire()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def uniform01(self) -> float:
        """Uniform draw in [0, 1)."""
        self.n_draws += 1
        return float(self.generator.random())

    def integer(self, n: int) -> int:
        """Uniform integer in [0, n-1], by scaling a uniform draw."""
        return min(int(n * self.uniform01()), n - 1)
