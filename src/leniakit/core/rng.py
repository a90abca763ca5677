"""Central RNG helpers using PCG64DXSM."""
import numpy as np
from numpy.random import Generator, PCG64DXSM


def make_rng(seed: int | None = None) -> Generator:
    return Generator(PCG64DXSM(seed))


def random_scalar(rng: Generator) -> float:
    """Draw a float32 seed in ``[0, 1)``."""
    return float(rng.random(dtype=np.float32))
