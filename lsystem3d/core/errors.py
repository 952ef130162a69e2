"""Exceptions raised while building or running an L-system."""

from __future__ import annotations


class LSystemError(Exception):
    """Base class for every error the engine raises on purpose."""


class RuleParseError(LSystemError, ValueError):
    """A rule line does not follow the rule grammar."""

    def __init__(self, message: str, line: str, char: str | None = None, position: int | None = None) -> None:
        super().__init__(f"{message} in\n    {line}")
        self.line = line
        self.char = char
        self.position = position


class DuplicateRuleError(LSystemError, ValueError):
    def __init__(self, symbol: str) -> None:
        super().__init__(f"Multiple rules for key {symbol}, this is not allowed.")
        self.symbol = symbol


class InvalidAxiomError(LSystemError, ValueError):
    pass


class InvalidWeightError(LSystemError, ValueError):
    def __init__(self, weight: float, entry: object = None) -> None:
        super().__init__(
            f"Weights must be positive and finite, but got weight {weight} for entry {entry!r}."
        )
        self.weight = weight


class CapacityExceededError(LSystemError):
    """A rewrite pass needs more room than the fixed buffer capacity."""

    def __init__(self, capacity: int, required: int, iteration: int | None = None) -> None:
        where = "the axiom" if iteration is None else f"iteration {iteration}"
        super().__init__(
            f"Buffer capacity {capacity} exceeded by {where} (needs at least {required} symbols)"
        )
        self.capacity = capacity
        self.required = required
        self.iteration = iteration


class StackUnderflowError(LSystemError):
    """A `]` was interpreted with no saved turtle state."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Unmatched ']' at symbol {index}: the turtle state stack is empty")
        self.index = index
