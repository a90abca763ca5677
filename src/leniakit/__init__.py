"""LeniaKit: kernel, growth table and parameter model for Lenia automata."""
from .lenia import (
    GrowthTable,
    KernelRaster,
    KernelShell,
    LeniaRule,
    Mapping,
    MappingKind,
    SimulationBoard,
    SimulationParameters,
)

__all__ = [
    "GrowthTable",
    "KernelRaster",
    "KernelShell",
    "LeniaRule",
    "Mapping",
    "MappingKind",
    "SimulationBoard",
    "SimulationParameters",
]
