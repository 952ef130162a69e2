"""Double-buffered parallel string rewriting."""

from __future__ import annotations
import logging
import random

from lsystem3d.core.errors import CapacityExceededError, InvalidAxiomError
from lsystem3d.core.registry import RuleTable

logger = logging.getLogger(__name__)

_UPPER_A = ord("A")
_UPPER_Z = ord("Z")


class RewriteEngine:
    """
    Applies a rule table to an axiom for a number of generations.

    Two fixed-size buffers are owned by the engine. Each pass reads one
    and writes the other, then the two are swapped. The capacity is a
    hard ceiling: generation lengths grow exponentially and the caller
    has to bound them on purpose.
    """

    def __init__(self, rules: RuleTable, capacity: int, debug_logging: bool = False) -> None:
        if capacity <= 0:
            raise ValueError(f"Buffer capacity must be positive, got {capacity}")
        self.rules = rules
        self.capacity = capacity
        self.debug_logging = debug_logging
        self._buffer = bytearray(capacity)
        self._double_buffer = bytearray(capacity)
        self._length = 0

    def rewrite(self, axiom: bytes, iterations: int, rng: random.Random) -> bytes:
        """Rewrite `axiom` `iterations` times and return the final symbols."""
        if iterations < 0:
            raise ValueError(f"Iterations must be >= 0, got {iterations}")
        if not axiom:
            raise InvalidAxiomError("The axiom may not be empty.")
        if len(axiom) > self.capacity:
            raise CapacityExceededError(self.capacity, len(axiom))

        self._buffer[:len(axiom)] = axiom
        self._length = len(axiom)

        for i in range(iterations):
            self._length = self._single_pass(i, rng)
            self._buffer, self._double_buffer = self._double_buffer, self._buffer

            if self.debug_logging:
                logger.info(
                    "After iteration %d: %s", i, self._buffer[:self._length].decode("ascii"),
                )

        return bytes(self._buffer[:self._length])

    def _single_pass(self, iteration: int, rng: random.Random) -> int:
        """Rewrite `_buffer` into `_double_buffer`; returns the new length."""
        src = self._buffer
        dst = self._double_buffer
        capacity = self.capacity
        rule_for_byte = self.rules.rule_for_byte
        out = 0

        for code in src[:self._length]:
            if _UPPER_A <= code <= _UPPER_Z:
                replacement = rule_for_byte(code).sample(rng)
                end = out + len(replacement)
                if end > capacity:
                    raise CapacityExceededError(capacity, end, iteration)
                dst[out:end] = replacement
                out = end
            else:
                if out >= capacity:
                    raise CapacityExceededError(capacity, out + 1, iteration)
                dst[out] = code
                out += 1
        return out
