"""Named example grammars."""

from __future__ import annotations
from pydantic import BaseModel


class Preset(BaseModel):
    """A ready-made L-system with sensible defaults."""
    name: str
    description: str
    axiom: str
    rules: list[str]
    iterations: int = 4
    default_rotation: float = 30.0
    default_move: float = 1.0


PRESETS: dict[str, Preset] = {
    p.name: p for p in [
        Preset(
            name="bush",
            description="Deterministic bush branching in yaw and pitch",
            axiom="A",
            rules=["A = M[+A][-A][^A][vA]MA"],
            iterations=3,
            default_rotation=25.0,
        ),
        Preset(
            name="stochastic_tree",
            description="Tree whose branches randomly fork, bend, or end in leaves",
            axiom="MA",
            rules=[
                "# Trunk segments fork, bend, or stop with a leaf",
                "A = 40 M[+A][-A]>A, 40 M[^A][vA]<A, 20 ML",
            ],
            iterations=6,
            default_rotation=28.0,
        ),
        Preset(
            name="spiral",
            description="Rolling spiral built from parameterised turns",
            axiom="A",
            rules=["A = M+(a)^(b)>A"],
            iterations=12,
            default_rotation=15.0,
        ),
        Preset(
            name="fern",
            description="Fern frond with leaflets on alternating sides",
            axiom="X",
            rules=[
                "X = M[+XL]M[-XL]+X",
                "M = MM",
            ],
            iterations=4,
            default_rotation=22.5,
            default_move=0.5,
        ),
    ]
}


def get_preset(name: str) -> Preset | None:
    return PRESETS.get(name)


def list_presets() -> list[Preset]:
    return list(PRESETS.values())
