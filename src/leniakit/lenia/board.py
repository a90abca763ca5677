"""Lenia rule and board configuration."""
from __future__ import annotations
from dataclasses import dataclass
import logging
import numpy as np

from leniakit.core.errors import ConfigurationError
from leniakit.core.profiling import timer
from leniakit.core.rng import make_rng, random_scalar
from .growth import GrowthTable
from .kernels import KernelRaster, KernelShell
from .mappings import Mapping
from .params import SimulationParameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeniaRule:
    kernel_shell: KernelShell
    growth: Mapping


class SimulationBoard:
    """Static model data for one Lenia configuration.

    The board validates its geometry, renders the kernel once and samples the
    growth table once. It never touches the live state grid; the external
    update loop reads :meth:`generate_parameters`, :meth:`kernel_raster` and
    :meth:`growth_table` whenever the configuration changes.

    Parameters
    ----------
    rule:
        Kernel shell and growth mapping.
    size:
        Grid ``(width, height)`` in cells.
    dx:
        Kernel radius in cells; the kernel spans ``2 dx + 1`` cells.
    dt:
        Integration timestep.
    growth_resolution:
        Number of growth table samples.
    rng:
        Random source for the per-frame seed; a fresh PCG64DXSM stream if omitted.
    """

    def __init__(
        self,
        rule: LeniaRule,
        size: tuple[int, int],
        dx: int,
        dt: float,
        growth_resolution: int,
        *,
        rng: np.random.Generator | None = None,
    ):
        width, height = size
        if dx < 1:
            raise ConfigurationError(f"dx must be at least 1, got {dx}")
        diameter = 2 * dx + 1
        if diameter > width or diameter > height:
            raise ConfigurationError(
                f"kernel diameter {diameter} exceeds grid {width}x{height}, kernel would overlap itself"
            )
        if not dt > 0:
            raise ConfigurationError(f"dt must be positive, got {dt}")
        self._rule = rule
        self._size = (int(width), int(height))
        self._dx = int(dx)
        self._dt = float(dt)
        self._rng = rng or make_rng()
        with timer("kernel raster"):
            self._kernel_raster = KernelRaster.rasterize(rule.kernel_shell, self._dx, 1.0)
        self._growth_table = GrowthTable.sample(rule.growth, growth_resolution)
        logger.debug(
            "board %dx%d: kernel diameter=%d area=%.4f growth samples=%d",
            width,
            height,
            diameter,
            self._kernel_raster.total_intensity,
            growth_resolution,
        )

    @property
    def rule(self) -> LeniaRule:
        return self._rule

    @property
    def size(self) -> tuple[int, int]:
        return self._size

    @property
    def dx(self) -> int:
        return self._dx

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def growth_resolution(self) -> int:
        return self._growth_table.resolution

    @property
    def kernel_diameter(self) -> int:
        return 2 * self._dx + 1

    def kernel_raster(self) -> KernelRaster:
        return self._kernel_raster

    def growth_table(self) -> GrowthTable:
        return self._growth_table

    def generate_parameters(self) -> SimulationParameters:
        return SimulationParameters.create(
            seed=random_scalar(self._rng),
            kernel_area=self._kernel_raster.total_intensity,
            kernel_resolution=float(self.kernel_diameter),
            dt=self._dt,
            growth_resolution=self.growth_resolution,
        )

    def summary(self) -> dict:
        shell = self._rule.kernel_shell
        return {
            "width": self._size[0],
            "height": self._size[1],
            "dx": self._dx,
            "kernel_diameter": self.kernel_diameter,
            "kernel_area": self._kernel_raster.total_intensity,
            "rings": shell.rings,
            "beta": list(shell.beta),
            "core": shell.core.describe(),
            "growth": self._rule.growth.describe(),
            "growth_resolution": self.growth_resolution,
            "dt": self._dt,
        }
