"""Named rules reproducing classic continuous and discrete automata."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable

import numpy as np

from .board import LeniaRule, SimulationBoard
from .kernels import KernelShell
from .mappings import Mapping


@dataclass(frozen=True)
class Preset:
    name: str
    description: str
    rule: LeniaRule
    dx: int
    dt: float
    growth_resolution: int = 100

    def board(self, size: tuple[int, int], *, rng: np.random.Generator | None = None) -> SimulationBoard:
        return SimulationBoard(self.rule, size, self.dx, self.dt, self.growth_resolution, rng=rng)


def _life_core(x: float) -> float:
    # inner quarter counts the cell itself at half weight
    if x < 0.25:
        return 0.5
    if x <= 0.75:
        return 1.0
    return 0.0


def lenia() -> Preset:
    return Preset(
        name="lenia",
        description="Three-ring gaussian kernel with a narrow gaussian growth band",
        rule=LeniaRule(
            KernelShell((0.5, 2.0 / 3.0, 1.0), Mapping.gaussian_core(4.0)),
            Mapping.gaussian_growth(mu=0.14, sigma=0.015),
        ),
        dx=18,
        dt=0.1,
    )


def smoothlife() -> Preset:
    return Preset(
        name="smoothlife",
        description="Single step-core ring with gaussian growth",
        rule=LeniaRule(
            KernelShell((1.0,), Mapping.step_core()),
            Mapping.gaussian_growth(mu=0.31, sigma=0.049),
        ),
        dx=13,
        dt=1.0,
    )


def game_of_life() -> Preset:
    return Preset(
        name="game_of_life",
        description="Discrete-looking life rule with rectangular growth",
        rule=LeniaRule(
            KernelShell((1.0,), Mapping.custom(_life_core, name="life_core")),
            Mapping.step_growth(mu=0.35, sigma=0.07),
        ),
        dx=2,
        dt=1.0,
    )


PRESETS: dict[str, Callable[[], Preset]] = {
    "lenia": lenia,
    "smoothlife": smoothlife,
    "game_of_life": game_of_life,
}


def list_presets() -> list[str]:
    return list(PRESETS)


def get_preset(name: str) -> Preset:
    try:
        factory = PRESETS[name]
    except KeyError:
        raise KeyError(f"unknown preset {name!r}; choose from {', '.join(PRESETS)}") from None
    return factory()
