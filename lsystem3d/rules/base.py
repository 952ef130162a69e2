"""Abstract base class for all production rules.

Every rule in the system implements this interface. Rules are:
- Bound to one symbol: the uppercase letter they rewrite
- Sampled once per occurrence: each rewrite pass asks the rule for a
  replacement every time its symbol is met
- Pre-encoded: replacements are stored as ASCII bytes for the buffers
"""

from __future__ import annotations
import random
from abc import ABC, abstractmethod


class ProductionRule(ABC):
    """
    Base class for all production rules.

    Subclasses implement `sample()` and `replacements()`.
    The rewrite engine looks the rule up by symbol and calls `sample()`
    for every occurrence of that symbol in the current generation.
    """

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol

    @abstractmethod
    def sample(self, rng: random.Random) -> bytes:
        """Return the replacement to write for one occurrence of the symbol."""
        ...

    @abstractmethod
    def replacements(self) -> list[tuple[str, float]]:
        """All candidate replacements with their weights."""
        ...

    @property
    def is_identity(self) -> bool:
        return self.replacements() == [(self.symbol, 1.0)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.symbol!r}, {self.replacements()!r})"
