import math

import numpy as np
import pytest

from leniakit.core.errors import ConfigurationError, DomainError
from leniakit.lenia.mappings import Mapping, MappingKind

PREDEFINED = [
    Mapping.gaussian_core(4.0),
    Mapping.polynomial_core(4.0),
    Mapping.step_core(),
    Mapping.gaussian_growth(mu=0.35, sigma=0.07),
    Mapping.polynomial_growth(mu=0.35, sigma=0.07, alpha=0.5),
    Mapping.step_growth(mu=0.35, sigma=0.07),
]


@pytest.mark.parametrize("mapping", PREDEFINED, ids=lambda m: m.kind.value)
def test_predefined_mappings_are_finite_on_unit_interval(mapping):
    xs = np.linspace(0.0, 1.0, 1001, dtype=np.float32)
    values = mapping(xs)
    assert values.shape == xs.shape
    assert values.dtype == np.float32
    assert np.all(np.isfinite(values))
    assert math.isfinite(mapping(0.0))
    assert math.isfinite(mapping(1.0))


@pytest.mark.parametrize("mapping", PREDEFINED, ids=lambda m: m.kind.value)
@pytest.mark.parametrize("x", [-0.01, 1.01, float("nan")])
def test_predefined_mappings_reject_out_of_domain(mapping, x):
    with pytest.raises(DomainError):
        mapping(x)


def test_out_of_domain_array_fails_instead_of_clamping():
    with pytest.raises(DomainError, match="not within range"):
        Mapping.step_core()(np.array([0.1, 0.5, 1.5], dtype=np.float32))


def test_domain_error_is_value_error():
    with pytest.raises(ValueError):
        Mapping.gaussian_core()(2.0)


def test_gaussian_core_shape():
    core = Mapping.gaussian_core(4.0)
    assert core(0.0) == 0.0
    assert core(1.0) == 0.0
    assert core(0.5) == pytest.approx(1.0)
    assert core(0.25) == pytest.approx(math.exp(4.0 - 4.0 / 0.75), rel=1e-5)


def test_polynomial_core_shape():
    core = Mapping.polynomial_core(4.0)
    assert core(0.0) == 0.0
    assert core(1.0) == 0.0
    assert core(0.5) == pytest.approx(1.0)
    assert core(0.25) == pytest.approx(0.75**4, rel=1e-5)


def test_step_core_band_is_inclusive():
    core = Mapping.step_core()
    assert core(0.25) == 1.0
    assert core(0.5) == 1.0
    assert core(0.75) == 1.0
    assert core(0.24) == 0.0
    assert core(0.76) == 0.0


def test_gaussian_growth_peak_and_range():
    growth = Mapping.gaussian_growth(mu=0.35, sigma=0.07)
    assert growth(0.35) == pytest.approx(1.0)
    values = growth(np.linspace(0.0, 1.0, 101, dtype=np.float32))
    assert np.all(values > 0.0)
    assert np.all(values <= 1.0)


def test_polynomial_growth_is_zero_outside_window():
    growth = Mapping.polynomial_growth(mu=0.5, sigma=0.1, alpha=0.5)
    assert growth(0.5) == pytest.approx(1.0)
    assert growth(0.9) == 0.0
    assert growth(0.1) == 0.0
    assert growth(0.6) == pytest.approx((1.0 - 0.01 / 0.09) ** 0.5, rel=1e-5)


def test_step_growth():
    growth = Mapping.step_growth(mu=0.5, sigma=0.1)
    assert growth(0.5) == 1.0
    assert growth(0.45) == 1.0
    assert growth(0.7) == 0.0


def test_custom_mapping_evaluates_scalars_and_arrays():
    square = Mapping.custom(lambda x: x * x, name="square")
    assert square.kind == MappingKind.CUSTOM
    assert square(0.5) == pytest.approx(0.25)
    np.testing.assert_allclose(square(np.array([0.0, 0.5, 1.0], dtype=np.float32)), [0.0, 0.25, 1.0])
    with pytest.raises(DomainError):
        square(2.0)
    assert square.describe() == "custom(square)"


def test_signed_transform_uses_minus_one_to_one_range():
    signed = Mapping.step_growth(mu=0.5, sigma=0.1).signed()
    assert signed.kind == MappingKind.CUSTOM
    assert signed(0.5) == 1.0
    assert signed(0.9) == -1.0


def test_invalid_parameters_are_configuration_errors():
    with pytest.raises(ConfigurationError):
        Mapping.gaussian_growth(mu=0.3, sigma=0.0)
    with pytest.raises(ConfigurationError):
        Mapping.polynomial_core(alpha=-1.0)
    with pytest.raises(ConfigurationError):
        Mapping(MappingKind.CUSTOM)


def test_mappings_are_immutable_values():
    a = Mapping.gaussian_growth(mu=0.14, sigma=0.015)
    b = Mapping.gaussian_growth(mu=0.14, sigma=0.015)
    assert a == b
    assert hash(a) == hash(b)
    with pytest.raises(AttributeError):
        a.mu = 0.2


def test_is_growth_splits_core_and_growth_kinds():
    assert [m.is_growth for m in PREDEFINED] == [False, False, False, True, True, True]
