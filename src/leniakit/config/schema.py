"""Pydantic config schema and loader."""
from pathlib import Path
from typing import Literal, Optional
import numpy as np
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from leniakit.core.rng import make_rng
from leniakit.lenia import KernelShell, LeniaRule, Mapping, SimulationBoard, get_preset

MappingKindName = Literal[
    "gaussian_core",
    "polynomial_core",
    "step_core",
    "gaussian_growth",
    "polynomial_growth",
    "step_growth",
]


class MappingConfig(BaseModel):
    kind: MappingKindName
    alpha: float = 4.0
    mu: float = 0.15
    sigma: float = 0.015

    @field_validator("alpha")
    @classmethod
    def validate_alpha(cls, v: float) -> float:
        if v < 0:
            raise ValueError("alpha must be non-negative")
        return v

    @field_validator("sigma")
    @classmethod
    def validate_sigma(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("sigma must be positive")
        return v


class KernelConfig(BaseModel):
    beta: list[float] = Field(default_factory=lambda: [0.5, 2.0 / 3.0, 1.0])
    core: MappingConfig = Field(default_factory=lambda: MappingConfig(kind="gaussian_core", alpha=4.0))

    @field_validator("beta", mode="before")
    @classmethod
    def validate_lists(cls, v):
        if isinstance(v, tuple):
            return list(v)
        return v

    @field_validator("beta")
    @classmethod
    def validate_beta(cls, v: list[float]) -> list[float]:
        if not v:
            raise ValueError("beta must contain at least one ring weight")
        if any(b < 0 for b in v):
            raise ValueError("ring weights must be non-negative")
        return v


class BoardConfig(BaseModel):
    width: int = 1280
    height: int = 720
    dx: int = 18
    dt: float = 0.1
    growth_resolution: int = 100

    @field_validator("width", "height", "dx")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("grid dimensions and dx must be positive")
        return v

    @field_validator("dt")
    @classmethod
    def validate_dt(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("dt must be positive")
        return v

    @field_validator("growth_resolution")
    @classmethod
    def validate_resolution(cls, v: int) -> int:
        if v < 2:
            raise ValueError("growth_resolution must be at least 2")
        return v


class OutputConfig(BaseModel):
    out_dir: Path = Path("runs")
    kernel_image: str = "kernel.png"
    growth_csv: str = "growth.csv"
    params_file: str = "params.bin"
    preview: bool = True


class ConfigSchema(BaseModel):
    seed: int = 0
    preset: Optional[str] = None
    kernel: KernelConfig = Field(default_factory=KernelConfig)
    growth: MappingConfig = Field(default_factory=lambda: MappingConfig(kind="gaussian_growth", mu=0.14, sigma=0.015))
    board: BoardConfig = Field(default_factory=BoardConfig)
    outputs: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("growth")
    @classmethod
    def validate_growth_kind(cls, v: MappingConfig) -> MappingConfig:
        if not Mapping.from_config(v).is_growth:
            raise ValueError("growth must use a *_growth mapping")
        return v

    @model_validator(mode="after")
    def validate_kernel_fits(self) -> "ConfigSchema":
        try:
            dx, _ = kernel_geometry(self)
        except KeyError as exc:
            raise ValueError(exc.args[0]) from exc
        diameter = 2 * dx + 1
        if diameter > self.board.width or diameter > self.board.height:
            raise ValueError(f"kernel diameter {diameter} exceeds grid {self.board.width}x{self.board.height}")
        return self


def load_config(path: Path) -> ConfigSchema:
    data = yaml.safe_load(Path(path).read_text()) or {}
    return ConfigSchema(**data)


def kernel_geometry(config: ConfigSchema) -> tuple[int, float]:
    """Return the ``(dx, dt)`` the board will use; a preset overrides ``config.board``."""
    if config.preset is not None:
        preset = get_preset(config.preset)
        return preset.dx, preset.dt
    return config.board.dx, config.board.dt


def build_rule(config: ConfigSchema) -> LeniaRule:
    if config.preset is not None:
        return get_preset(config.preset).rule
    shell = KernelShell(tuple(config.kernel.beta), Mapping.from_config(config.kernel.core))
    return LeniaRule(shell, Mapping.from_config(config.growth))


def build_board(config: ConfigSchema, *, rng: np.random.Generator | None = None) -> SimulationBoard:
    """Create the board described by ``config``.

    A preset supplies the rule, radius and timestep; grid size and growth
    resolution always come from ``config.board``.
    """

    rng = rng or make_rng(config.seed)
    size = (config.board.width, config.board.height)
    dx, dt = kernel_geometry(config)
    return SimulationBoard(build_rule(config), size, dx, dt, config.board.growth_resolution, rng=rng)
