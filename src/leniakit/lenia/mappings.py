"""Scalar mappings used as kernel cores and growth functions."""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, TYPE_CHECKING
import numpy as np

from leniakit.core.errors import ConfigurationError, DomainError

if TYPE_CHECKING:  # pragma: no cover
    from leniakit.config.schema import MappingConfig


class MappingKind(str, Enum):
    GAUSSIAN_CORE = "gaussian_core"
    POLYNOMIAL_CORE = "polynomial_core"
    STEP_CORE = "step_core"
    GAUSSIAN_GROWTH = "gaussian_growth"
    POLYNOMIAL_GROWTH = "polynomial_growth"
    STEP_GROWTH = "step_growth"
    CUSTOM = "custom"


_GROWTH_KINDS = {MappingKind.GAUSSIAN_GROWTH, MappingKind.POLYNOMIAL_GROWTH, MappingKind.STEP_GROWTH}
_ALPHA_KINDS = {MappingKind.GAUSSIAN_CORE, MappingKind.POLYNOMIAL_CORE, MappingKind.POLYNOMIAL_GROWTH}


@dataclass(frozen=True)
class Mapping:
    """A pure function ``[0, 1] -> R`` shared by kernel shells and growth tables.

    Predefined variants are selected by ``kind`` and evaluated by a single
    dispatch function; ``CUSTOM`` wraps a caller-supplied callable which must
    not hold mutable state. Every variant rejects inputs outside ``[0, 1]``
    with :class:`DomainError` instead of clamping.

    Attributes
    ----------
    kind:
        Variant tag.
    alpha:
        Shape exponent for the gaussian/polynomial cores and polynomial growth.
    mu, sigma:
        Centre and width of the growth variants.
    fn:
        Callable for ``CUSTOM`` mappings, ``None`` otherwise.
    name:
        Optional label for custom mappings.
    """

    kind: MappingKind
    alpha: float = 0.0
    mu: float = 0.0
    sigma: float = 1.0
    fn: Callable[[float], float] | None = None
    name: str | None = None

    def __post_init__(self):
        if self.kind == MappingKind.CUSTOM:
            if not callable(self.fn):
                raise ConfigurationError("custom mappings require a callable")
            return
        if self.fn is not None:
            raise ConfigurationError(f"{self.kind.value} does not accept a callable")
        if self.kind in _ALPHA_KINDS and not self.alpha >= 0:
            raise ConfigurationError(f"alpha must be non-negative, got {self.alpha}")
        if self.kind in _GROWTH_KINDS and not self.sigma > 0:
            raise ConfigurationError(f"sigma must be positive, got {self.sigma}")

    @classmethod
    def gaussian_core(cls, alpha: float = 4.0) -> "Mapping":
        return cls(MappingKind.GAUSSIAN_CORE, alpha=alpha)

    @classmethod
    def polynomial_core(cls, alpha: float = 4.0) -> "Mapping":
        return cls(MappingKind.POLYNOMIAL_CORE, alpha=alpha)

    @classmethod
    def step_core(cls) -> "Mapping":
        return cls(MappingKind.STEP_CORE)

    @classmethod
    def gaussian_growth(cls, mu: float, sigma: float) -> "Mapping":
        return cls(MappingKind.GAUSSIAN_GROWTH, mu=mu, sigma=sigma)

    @classmethod
    def polynomial_growth(cls, mu: float, sigma: float, alpha: float = 4.0) -> "Mapping":
        return cls(MappingKind.POLYNOMIAL_GROWTH, alpha=alpha, mu=mu, sigma=sigma)

    @classmethod
    def step_growth(cls, mu: float, sigma: float) -> "Mapping":
        return cls(MappingKind.STEP_GROWTH, mu=mu, sigma=sigma)

    @classmethod
    def custom(cls, fn: Callable[[float], float], name: str | None = None) -> "Mapping":
        return cls(MappingKind.CUSTOM, fn=fn, name=name or getattr(fn, "__name__", None))

    @classmethod
    def from_config(cls, config: "MappingConfig") -> "Mapping":
        kind = MappingKind(config.kind)
        if kind in (MappingKind.GAUSSIAN_CORE, MappingKind.POLYNOMIAL_CORE):
            return cls(kind, alpha=config.alpha)
        if kind == MappingKind.STEP_CORE:
            return cls(kind)
        if kind == MappingKind.POLYNOMIAL_GROWTH:
            return cls(kind, alpha=config.alpha, mu=config.mu, sigma=config.sigma)
        if kind in (MappingKind.GAUSSIAN_GROWTH, MappingKind.STEP_GROWTH):
            return cls(kind, mu=config.mu, sigma=config.sigma)
        raise ConfigurationError(f"{kind.value} mappings cannot be built from configuration")

    @property
    def is_growth(self) -> bool:
        return self.kind in _GROWTH_KINDS

    def __call__(self, x):
        arr = np.asarray(x, dtype=np.float32)
        check_domain(arr)
        out = _evaluate(self, arr)
        if arr.ndim == 0:
            return float(out)
        return out

    def signed(self) -> "Mapping":
        """Return ``2 f(x) - 1``, the ``[-1, 1]`` growth convention, as a custom mapping."""

        def signed_fn(x: float) -> float:
            return 2.0 * self(x) - 1.0

        return Mapping.custom(signed_fn, name=f"signed({self.describe()})")

    def describe(self) -> str:
        if self.kind == MappingKind.CUSTOM:
            return f"custom({self.name or 'anonymous'})"
        if self.kind == MappingKind.STEP_CORE:
            return "step_core"
        if self.kind in (MappingKind.GAUSSIAN_CORE, MappingKind.POLYNOMIAL_CORE):
            return f"{self.kind.value}(alpha={self.alpha:g})"
        if self.kind == MappingKind.POLYNOMIAL_GROWTH:
            return f"{self.kind.value}(mu={self.mu:g}, sigma={self.sigma:g}, alpha={self.alpha:g})"
        return f"{self.kind.value}(mu={self.mu:g}, sigma={self.sigma:g})"


def check_domain(arr: np.ndarray) -> None:
    inside = (arr >= 0.0) & (arr <= 1.0)
    if not np.all(inside):
        bad = arr[~inside] if arr.ndim else arr
        raise DomainError(f"{float(np.ravel(bad)[0])} is not within range [0, 1]")


def _evaluate(mapping: Mapping, x: np.ndarray) -> np.ndarray:
    kind = mapping.kind
    alpha = np.float32(mapping.alpha)
    mu = np.float32(mapping.mu)
    sigma = np.float32(mapping.sigma)

    if kind == MappingKind.GAUSSIAN_CORE:
        # exp(alpha - alpha / 0) -> 0 at both edges
        bump = 4.0 * x * (1.0 - x)
        safe = np.where(bump > 0, bump, np.float32(1.0))
        return np.where(bump > 0, np.exp(alpha - alpha / safe), np.float32(0.0)).astype(np.float32)
    if kind == MappingKind.POLYNOMIAL_CORE:
        return np.power(4.0 * x * (1.0 - x), alpha).astype(np.float32)
    if kind == MappingKind.STEP_CORE:
        return ((x >= 0.25) & (x <= 0.75)).astype(np.float32)
    if kind == MappingKind.GAUSSIAN_GROWTH:
        return np.exp(-((x - mu) ** 2) / (2.0 * sigma**2)).astype(np.float32)
    if kind == MappingKind.POLYNOMIAL_GROWTH:
        inside = np.abs(x - mu) <= 3.0 * sigma
        base = np.clip(1.0 - (x - mu) ** 2 / (9.0 * sigma**2), 0.0, None)
        return np.where(inside, np.power(base, alpha), np.float32(0.0)).astype(np.float32)
    if kind == MappingKind.STEP_GROWTH:
        return (np.abs(x - mu) <= sigma).astype(np.float32)
    return np.vectorize(mapping.fn, otypes=[np.float32])(x)
