"""Main L-system generator: orchestrates rewriting and interpretation."""

from __future__ import annotations
import logging
import random
from collections.abc import Mapping

from lsystem3d.models import (
    GenerationConfig, GenerationResult, GeneratorParams, Point3D, Quaternion,
)
from lsystem3d.core.errors import InvalidAxiomError
from lsystem3d.core.registry import RuleTable
from lsystem3d.core.rewriter import RewriteEngine
from lsystem3d.core.turtle import TurtleInterpreter

logger = logging.getLogger(__name__)


def make_rng(seed: int | None) -> random.Random:
    """
    Randomness source for one generation.

    A seed of 0 (or None) asks for a non-reproducible, entropy-seeded
    source. Every other value, negative ones included, is reproducible.
    Note that this makes 0 unusable as a reproducible seed.
    """
    if not seed:
        return random.Random()
    return random.Random(seed)


class LSystemGenerator:
    """
    An L-system: an axiom plus rewrite rules, drawn by a 3D turtle.

    Rules are parsed once, here. `generate` may then be called any number
    of times; each call rewrites from the axiom again.

    Instances are not thread safe: they own their rewrite buffers. Use one
    generator per thread.
    """

    def __init__(
        self,
        axiom: str,
        rules: list[str] | str,
        buffer_capacity: int = 1 << 16,
        default_rotation: float = 30.0,
        default_move: float = 1.0,
        debug_logging: bool = False,
    ) -> None:
        if not axiom:
            raise InvalidAxiomError("The axiom may not be empty.")
        if not axiom.isascii():
            raise InvalidAxiomError(f"The axiom may only contain ASCII symbols, got {axiom!r}")

        self.axiom = axiom
        if isinstance(rules, str):
            self.rules = RuleTable.from_text(rules)
        else:
            self.rules = RuleTable.from_lines(rules)

        self.params = GeneratorParams(
            buffer_capacity=buffer_capacity,
            default_rotation=default_rotation,
            default_move=default_move,
            debug_logging=debug_logging,
        )
        params = self.params
        self.engine = RewriteEngine(self.rules, params.buffer_capacity, params.debug_logging)
        self.interpreter = TurtleInterpreter(params.default_rotation, params.default_move)

        logger.info(
            "L-system ready: axiom=%r, %d rule(s), capacity=%d",
            axiom, len(self.rules), params.buffer_capacity,
        )

    @classmethod
    def from_params(
        cls, axiom: str, rules: list[str] | str, params: GeneratorParams | None = None,
    ) -> LSystemGenerator:
        params = params or GeneratorParams()
        return cls(
            axiom,
            rules,
            buffer_capacity=params.buffer_capacity,
            default_rotation=params.default_rotation,
            default_move=params.default_move,
            debug_logging=params.debug_logging,
        )

    def expand(
        self,
        iterations: int,
        seed: int | None = 0,
        parameters: Mapping[str, float] | None = None,
    ) -> str:
        """Rewrite only: the symbol string after `iterations` generations."""
        config = GenerationConfig(
            iterations=iterations, seed=seed, parameters=dict(parameters or {}),
        )
        return self._rewrite(config)

    def generate(
        self,
        iterations: int,
        seed: int | None = 0,
        parameters: Mapping[str, float] | None = None,
        initial_rotation: Quaternion | None = None,
        initial_position: Point3D | None = None,
    ) -> GenerationResult:
        """Rewrite the axiom `iterations` times and draw the result."""
        config = GenerationConfig(
            iterations=iterations,
            seed=seed,
            parameters=dict(parameters or {}),
            initial_rotation=initial_rotation,
            initial_position=initial_position,
        )
        return self.run(config)

    def run(self, config: GenerationConfig) -> GenerationResult:
        symbols = self._rewrite(config)
        return self.interpreter.run(
            symbols,
            config.parameters,
            config.initial_rotation,
            config.initial_position,
        )

    def _rewrite(self, config: GenerationConfig) -> str:
        rng = make_rng(config.seed)
        symbols = self.engine.rewrite(self.axiom.encode("ascii"), config.iterations, rng)
        return symbols.decode("ascii")
