"""High-level L-system service: facade for the API layer."""

from __future__ import annotations
import logging

from lsystem3d.models import GenerationConfig, GenerationResult, GeneratorParams
from lsystem3d.core.generator import LSystemGenerator
from lsystem3d.rules.presets import Preset, get_preset, list_presets

logger = logging.getLogger(__name__)


class UnknownPresetError(KeyError):
    pass


class LSystemService:
    """Builds a generator per request, runs it, and serves the presets."""

    def build(
        self,
        axiom: str,
        rules: list[str] | str,
        params: GeneratorParams | None = None,
    ) -> LSystemGenerator:
        return LSystemGenerator.from_params(axiom, rules, params or GeneratorParams())

    def generate(
        self,
        axiom: str,
        rules: list[str] | str,
        config: GenerationConfig | None = None,
        params: GeneratorParams | None = None,
    ) -> GenerationResult:
        if config is None:
            config = GenerationConfig()

        generator = self.build(axiom, rules, params)
        result = generator.run(config)
        logger.info(
            "Generated %d segment(s), %d leaf/leaves from %d symbol(s) in %d iteration(s)",
            result.stats.segments, result.stats.leaves, result.stats.symbols, config.iterations,
        )
        return result

    def expand(
        self,
        axiom: str,
        rules: list[str] | str,
        config: GenerationConfig | None = None,
        params: GeneratorParams | None = None,
    ) -> str:
        if config is None:
            config = GenerationConfig()
        generator = self.build(axiom, rules, params)
        return generator.expand(config.iterations, config.seed, config.parameters)

    def get_preset(self, name: str) -> Preset:
        preset = get_preset(name)
        if preset is None:
            raise UnknownPresetError(name)
        return preset

    def generate_preset(
        self,
        name: str,
        config: GenerationConfig | None = None,
        buffer_capacity: int | None = None,
    ) -> GenerationResult:
        """Run a preset; without a config, its suggested iteration count is used."""
        preset = self.get_preset(name)
        if config is None:
            config = GenerationConfig(iterations=preset.iterations)
        params = GeneratorParams(
            default_rotation=preset.default_rotation,
            default_move=preset.default_move,
        )
        if buffer_capacity is not None:
            params = params.model_copy(update={"buffer_capacity": buffer_capacity})
        return self.generate(preset.axiom, preset.rules, config, params)

    def list_presets(self) -> list[Preset]:
        return list_presets()
