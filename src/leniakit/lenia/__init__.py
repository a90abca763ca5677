"""Lenia kernel, growth and parameter model."""
from .mappings import Mapping, MappingKind
from .kernels import KernelShell, KernelRaster
from .growth import GrowthTable
from .params import SimulationParameters, PARAMS_DTYPE, PARAMS_NBYTES
from .board import LeniaRule, SimulationBoard
from .presets import Preset, get_preset, list_presets
from .render import render_preview

__all__ = [
    "Mapping",
    "MappingKind",
    "KernelShell",
    "KernelRaster",
    "GrowthTable",
    "SimulationParameters",
    "PARAMS_DTYPE",
    "PARAMS_NBYTES",
    "LeniaRule",
    "SimulationBoard",
    "Preset",
    "get_preset",
    "list_presets",
    "render_preview",
]
