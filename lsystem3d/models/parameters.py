"""Generator parameters and per-call generation configuration."""

from __future__ import annotations
import string

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .geometry import Point3D, Quaternion


def check_parameter_names(value: dict[str, float]) -> dict[str, float]:
    """Parameter overrides are keyed by single lower case letters."""
    for name in value:
        if len(name) != 1 or name not in string.ascii_lowercase:
            raise ValueError(
                f"Parameter names must be single lower case letters, got {name!r}"
            )
    return value


class GeneratorParams(BaseModel):
    """Construction-time settings for an L-system generator."""
    buffer_capacity: int = Field(1 << 16, gt=0)  # Max symbols per generation
    default_rotation: float = 30.0               # Degrees, for + - ^ v < >
    default_move: float = 1.0                    # Distance, for M and N
    debug_logging: bool = False                  # Log the buffer after each pass


class GenerationConfig(BaseModel):
    """Per-call settings for a single `generate` run."""
    model_config = ConfigDict(allow_inf_nan=False)

    iterations: int = Field(0, ge=0)
    seed: int | None = 0  # 0 or None = non-reproducible, entropy-seeded
    parameters: dict[str, float] = {}
    initial_rotation: Quaternion | None = None
    initial_position: Point3D | None = None

    @field_validator("parameters")
    @classmethod
    def validate_parameter_names(cls, value: dict[str, float]) -> dict[str, float]:
        return check_parameter_names(value)
