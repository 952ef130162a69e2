"""Weighted random choice over a growable list of entries."""

from __future__ import annotations
import math
import random
from typing import Generic, TypeVar

from lsystem3d.core.errors import InvalidWeightError

T = TypeVar("T")


class WeightedSampler(Generic[T]):
    """
    A list from which entries are drawn with probability proportional
    to their weight.

    Sampling is a linear scan, so keep entry counts small.
    """

    def __init__(self) -> None:
        self._entries: list[T] = []
        self._weights: list[float] = []
        self._total = 0.0

    def add(self, entry: T, weight: float) -> None:
        if not math.isfinite(weight) or weight <= 0:
            raise InvalidWeightError(weight, entry)
        self._entries.append(entry)
        self._weights.append(float(weight))
        self._total += weight

    @property
    def total_weight(self) -> float:
        return self._total

    def entries(self) -> list[tuple[T, float]]:
        return list(zip(self._entries, self._weights))

    def __len__(self) -> int:
        return len(self._entries)

    def sample(self, rng: random.Random) -> T | None:
        """
        Draw one entry using `rng`.

        Returns None when the sampler is empty, or when float rounding
        carries the roll past the last entry.
        """
        roll = rng.random() * self._total
        for entry, weight in zip(self._entries, self._weights):
            # The first entry that takes the roll negative owns that interval.
            roll -= weight
            if roll < 0:
                return entry
        return None
