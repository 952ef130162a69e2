"""Concrete production rules: constant and weighted replacements."""

from __future__ import annotations
import random

from lsystem3d.core.sampler import WeightedSampler
from lsystem3d.rules.base import ProductionRule


class ConstantRule(ProductionRule):
    """`A = A[A]`: always rewrites to the same string."""

    def __init__(self, symbol: str, replacement: str) -> None:
        super().__init__(symbol)
        self.replacement = replacement
        self._encoded = replacement.encode("ascii")

    def sample(self, rng: random.Random) -> bytes:
        return self._encoded

    def replacements(self) -> list[tuple[str, float]]:
        return [(self.replacement, 1.0)]


class WeightedRule(ProductionRule):
    """`A = 20 A[A], 80 M`: picks a replacement proportional to its weight."""

    def __init__(self, symbol: str, candidates: list[tuple[str, float]]) -> None:
        super().__init__(symbol)
        if not candidates:
            raise ValueError(f"Weighted rule for {symbol} needs at least one candidate")
        self._sampler: WeightedSampler[bytes] = WeightedSampler()
        for replacement, weight in candidates:
            self._sampler.add(replacement.encode("ascii"), weight)
        # Rounding can carry a roll past the last entry; fall back to it.
        self._last = candidates[-1][0].encode("ascii")

    def sample(self, rng: random.Random) -> bytes:
        result = self._sampler.sample(rng)
        return self._last if result is None else result

    def replacements(self) -> list[tuple[str, float]]:
        return [(r.decode("ascii"), w) for r, w in self._sampler.entries()]


def identity_rule(symbol: str) -> ConstantRule:
    """The implicit rule for a symbol nobody wrote a rule for."""
    return ConstantRule(symbol, symbol)
