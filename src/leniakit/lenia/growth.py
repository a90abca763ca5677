"""Discretized growth lookup tables."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator
import numpy as np

from leniakit.core.errors import ConfigurationError
from .mappings import Mapping, check_domain


@dataclass(frozen=True, eq=False)
class GrowthTable:
    """Growth mapping sampled at ``N`` evenly spaced potentials.

    ``values[i] == growth(i / (N - 1))``. The per-cell update looks up
    ``growth(potential)`` here instead of evaluating the mapping.
    """

    values: np.ndarray
    growth: Mapping

    @classmethod
    def sample(cls, growth: Mapping, resolution: int) -> "GrowthTable":
        if resolution < 2:
            raise ConfigurationError(f"growth resolution must be at least 2, got {resolution}")
        xs = sample_points(resolution)
        values = np.asarray(growth(xs), dtype=np.float32)
        values.setflags(write=False)
        return cls(values=values, growth=growth)

    @property
    def resolution(self) -> int:
        return int(self.values.shape[0])

    @property
    def xs(self) -> np.ndarray:
        return sample_points(self.resolution)

    def __len__(self) -> int:
        return self.resolution

    def __getitem__(self, index):
        return self.values[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.values.tolist())

    def lookup(self, potential):
        """Nearest-sample growth for potentials in ``[0, 1]``."""

        arr = np.asarray(potential, dtype=np.float32)
        check_domain(arr)
        index = np.rint(arr * np.float32(self.resolution - 1)).astype(np.int64)
        out = self.values[index]
        if arr.ndim == 0:
            return float(out)
        return out

    def to_bytes(self) -> bytes:
        """Little-endian f32 buffer, uploaded verbatim as a storage buffer."""

        return self.values.astype("<f4").tobytes()


def sample_points(resolution: int) -> np.ndarray:
    return np.arange(resolution, dtype=np.float32) / np.float32(resolution - 1)
