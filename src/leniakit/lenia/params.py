"""Per-frame parameter record consumed by the compute step."""
from __future__ import annotations
from dataclasses import dataclass, replace, asdict
import numpy as np

from leniakit.core.rng import random_scalar

# Field order and widths match the uniform buffer read by the update shader.
PARAMS_DTYPE = np.dtype(
    [
        ("seed", "<f4"),
        ("kernel_area", "<f4"),
        ("kernel_resolution", "<f4"),
        ("delta_time", "<f4"),
        ("dt", "<f4"),
        ("growth_resolution", "<u4"),
    ]
)
PARAMS_NBYTES = PARAMS_DTYPE.itemsize


def _f32(value: float) -> float:
    return float(np.float32(value))


@dataclass(frozen=True)
class SimulationParameters:
    """Compact record uploaded once per frame.

    Float fields are held at float32 precision so a record survives
    ``to_bytes`` / ``from_bytes`` unchanged.

    Attributes
    ----------
    seed:
        Random float in ``[0, 1)``, refreshed per frame.
    kernel_area:
        Kernel raster total intensity, the convolution normalizer.
    kernel_resolution:
        Kernel diameter ``2 dx + 1`` stored as a float.
    delta_time:
        Elapsed time in seconds, written by the external loop.
    dt:
        Integration timestep.
    growth_resolution:
        Number of samples in the growth table.
    """

    seed: float
    kernel_area: float
    kernel_resolution: float
    delta_time: float
    dt: float
    growth_resolution: int

    @classmethod
    def create(
        cls, seed: float, kernel_area: float, kernel_resolution: float, dt: float, growth_resolution: int
    ) -> "SimulationParameters":
        return cls(
            seed=_f32(seed),
            kernel_area=_f32(kernel_area),
            kernel_resolution=_f32(kernel_resolution),
            delta_time=0.0,
            dt=_f32(dt),
            growth_resolution=int(growth_resolution),
        )

    @property
    def kernel_diameter(self) -> int:
        return int(self.kernel_resolution)

    def with_elapsed_time(self, elapsed: float) -> "SimulationParameters":
        return replace(self, delta_time=_f32(elapsed))

    def with_seed(self, seed: float) -> "SimulationParameters":
        return replace(self, seed=_f32(seed))

    def refresh(self, rng: np.random.Generator, elapsed: float) -> "SimulationParameters":
        return replace(self, seed=_f32(random_scalar(rng)), delta_time=_f32(elapsed))

    def as_array(self) -> np.ndarray:
        record = np.zeros((), dtype=PARAMS_DTYPE)
        for name in PARAMS_DTYPE.names:
            record[name] = getattr(self, name)
        return record

    def to_bytes(self) -> bytes:
        return self.as_array().tobytes()

    @classmethod
    def from_bytes(cls, buf: bytes) -> "SimulationParameters":
        if len(buf) != PARAMS_NBYTES:
            raise ValueError(f"expected {PARAMS_NBYTES} bytes, got {len(buf)}")
        record = np.frombuffer(buf, dtype=PARAMS_DTYPE)[0]
        return cls(**{name: record[name].item() for name in PARAMS_DTYPE.names})

    def as_dict(self) -> dict:
        return asdict(self)
