"""Weighted random choice."""

from __future__ import annotations

from typing import Callable, Generic, Sequence, TypeVar

T = TypeVar("T")


class WeightedRandomVariable(Generic[T]):
    """Picks one of several possibilities with probability proportional to weight.

    rng must return floats in [0, 1), e.g. random.Random(seed).random.
    """

    def __init__(
        self,
        possibilities: Sequence[T],
        weigh: Callable[[T], float],
        rng: Callable[[], float],
    ):
        if not possibilities:
            raise ValueError("WeightedRandomVariable needs at least one possibility")
        self.rng = rng
        self.total_weight = 0.0
        self._cumulative: list[tuple[T, float]] = []
        for p in possibilities:
            self.total_weight += weigh(p)
            self._cumulative.append((p, self.total_weight))

    def __call__(self) -> T:
        threshold = self.rng() * self.total_weight
        for possibility, cumulative in self._cumulative:
            if cumulative > threshold:
                return possibility
        return self._cumulative[0][0]
