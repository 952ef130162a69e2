"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, field_validator

from lsystem3d import config
from lsystem3d.models import (
    GenerationConfig, GenerationResult, GeneratorParams, Point3D, Quaternion,
    check_parameter_names,
)
from lsystem3d.rules.presets import Preset


class GeneratorParamsInput(BaseModel):
    """Generator settings as sent by a client; capacity is capped server-side."""
    buffer_capacity: int = Field(config.DEFAULT_BUFFER_CAPACITY, gt=0, le=config.MAX_BUFFER_CAPACITY)
    default_rotation: float = 30.0
    default_move: float = 1.0
    debug_logging: bool = False

    def to_params(self) -> GeneratorParams:
        return GeneratorParams(**self.model_dump())


class RunOptions(BaseModel):
    """Per-run options shared by every generating endpoint."""
    model_config = ConfigDict(allow_inf_nan=False)

    iterations: int = Field(0, ge=0, le=config.MAX_ITERATIONS)
    seed: int | None = 0
    parameters: dict[str, float] = {}
    initial_rotation: Quaternion | None = None
    initial_position: Point3D | None = None

    @field_validator("parameters")
    @classmethod
    def validate_parameter_names(cls, value: dict[str, float]) -> dict[str, float]:
        return check_parameter_names(value)

    def to_config(self) -> GenerationConfig:
        return GenerationConfig(
            iterations=self.iterations,
            seed=self.seed,
            parameters=self.parameters,
            initial_rotation=self.initial_rotation,
            initial_position=self.initial_position,
        )


class GenerateRequest(RunOptions):
    """Request body for the /generate and /expand endpoints."""
    axiom: str = Field(..., min_length=1)
    rules: list[str] | str = []
    params: GeneratorParamsInput = GeneratorParamsInput()


class GenerateResponse(BaseModel):
    """Response from the /generate endpoint."""
    result: GenerationResult
    iterations: int
    seed: int | None


class ExpandResponse(BaseModel):
    symbols: str
    length: int


class PresetInfo(BaseModel):
    name: str
    description: str
    axiom: str
    rules: list[str]
    iterations: int

    @classmethod
    def from_preset(cls, preset: Preset) -> PresetInfo:
        return cls(
            name=preset.name,
            description=preset.description,
            axiom=preset.axiom,
            rules=preset.rules,
            iterations=preset.iterations,
        )
