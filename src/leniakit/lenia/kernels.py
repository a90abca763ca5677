"""Radial kernel shells and their rasterization."""
from __future__ import annotations
from dataclasses import dataclass
import logging
from pathlib import Path
import numpy as np
import imageio.v3 as iio

from leniakit.core.errors import ConfigurationError
from .mappings import Mapping, check_domain

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KernelShell:
    """Multi-ring radial kernel profile.

    Attributes
    ----------
    beta:
        Peak weight of each ring. Ring ``i`` covers normalized distances
        ``[i / n, (i + 1) / n)`` for ``n = len(beta)``.
    core:
        Mapping applied to the position inside a ring, ``K_C : [0, 1] -> [0, 1]``.
    """

    beta: tuple[float, ...]
    core: Mapping

    def __post_init__(self):
        beta = tuple(float(b) for b in self.beta)
        if not beta:
            raise ConfigurationError("beta must contain at least one ring weight")
        if any(not b >= 0 for b in beta):
            raise ConfigurationError(f"ring weights must be non-negative, got {beta}")
        object.__setattr__(self, "beta", beta)

    @property
    def rings(self) -> int:
        return len(self.beta)

    def profile(self, r):
        """Evaluate ``K(r) = beta[floor(r n)] * core(fract(r n))`` for normalized ``r``."""

        arr = np.asarray(r, dtype=np.float32)
        check_domain(arr)
        values = self._profile(arr.reshape(-1)).reshape(arr.shape)
        if arr.ndim == 0:
            return float(values)
        return values

    def _profile(self, dist: np.ndarray) -> np.ndarray:
        n = len(self.beta)
        kr = dist * np.float32(n)
        index = np.floor(kr).astype(np.int64)
        fraction = kr - index.astype(np.float32)
        # r == 1 lands on index n; that ring does not exist and contributes nothing
        valid = index < n
        weights = np.asarray(self.beta, dtype=np.float32)[np.minimum(index, n - 1)]
        return np.where(valid, weights * self.core(fraction), np.float32(0.0)).astype(np.float32)


@dataclass(frozen=True, eq=False)
class KernelRaster:
    """A kernel shell rendered to a square grid.

    ``total_intensity`` is the sum of every pixel and is the divisor the
    convolution step uses so that a fully populated neighbourhood yields a
    potential of 1.
    """

    pixels: np.ndarray
    total_intensity: float
    zoom: float = 1.0

    @classmethod
    def rasterize(cls, shell: KernelShell, radius: int, zoom: float = 1.0) -> "KernelRaster":
        """Render ``shell`` on a ``(2 radius + 1)`` square grid centred on ``(radius, radius)``."""

        if radius < 1:
            raise ConfigurationError(f"kernel radius must be at least 1, got {radius}")
        return cls._render(shell, 2 * radius + 1, float(radius), float(radius), zoom)

    @classmethod
    def with_resolution(cls, shell: KernelShell, resolution: int, zoom: float = 1.0) -> "KernelRaster":
        """Render ``shell`` on an explicit ``resolution`` square grid.

        The kernel is centred on the grid and its unit distance reaches the
        middle of each border, so even sizes are allowed.
        """

        if resolution < 2:
            raise ConfigurationError(f"kernel resolution must be at least 2, got {resolution}")
        half = (resolution - 1) / 2.0
        return cls._render(shell, resolution, half, half, zoom)

    @classmethod
    def _render(cls, shell: KernelShell, side: int, center: float, scale: float, zoom: float) -> "KernelRaster":
        if not zoom > 0:
            raise ConfigurationError(f"zoom must be positive, got {zoom}")
        ys, xs = np.indices((side, side), dtype=np.float32)
        dist = np.hypot(xs - np.float32(center), ys - np.float32(center)) / np.float32(zoom) / np.float32(scale)
        inside = dist <= 1.0
        pixels = np.zeros((side, side), dtype=np.float32)
        pixels[inside] = shell.profile(dist[inside])
        pixels.setflags(write=False)
        total = float(pixels.sum(dtype=np.float64))
        return cls(pixels=pixels, total_intensity=total, zoom=zoom)

    @property
    def side(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def diameter(self) -> int:
        return self.side

    def rgba(self) -> np.ndarray:
        """Pack the raster as ``(side, side, 4)`` float32 with opaque alpha."""

        alpha = np.ones_like(self.pixels)
        return np.dstack((self.pixels, self.pixels, self.pixels, alpha))

    def texture_bytes(self) -> bytes:
        """Raw ``Rgba32Float`` texel data, 16 bytes per pixel, row major."""

        return self.rgba().astype("<f4").tobytes()

    def quantized(self) -> np.ndarray:
        """Fixed-point 16-bit view of the raster, clamped to ``[0, 1]``."""

        return np.round(np.clip(self.pixels, 0.0, 1.0) * 65535.0).astype(np.uint16)

    def export(self, path: Path | str) -> Path:
        """Write the raster as a single-channel 16-bit image for inspection.

        Pillow has no 16-bit RGBA mode, so only the intensity is written. Use
        ``rgba()`` or ``texture_bytes()`` for the 4-channel float packing.
        """

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        iio.imwrite(path, self.quantized())
        logger.info("kernel raster (%dx%d) written to %s", self.side, self.side, path)
        return path
