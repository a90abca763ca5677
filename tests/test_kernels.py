import numpy as np
import pytest

from leniakit.core.errors import ConfigurationError, DomainError
from leniakit.lenia.kernels import KernelRaster, KernelShell
from leniakit.lenia.mappings import Mapping


def _lenia_shell(beta=(0.5, 2.0 / 3.0, 1.0)) -> KernelShell:
    return KernelShell(beta, Mapping.gaussian_core(4.0))


def test_shell_rejects_empty_and_negative_beta():
    with pytest.raises(ConfigurationError):
        KernelShell((), Mapping.step_core())
    with pytest.raises(ConfigurationError):
        KernelShell((1.0, -0.5), Mapping.step_core())


def test_shell_profile_selects_ring_and_fraction():
    shell = KernelShell((0.5, 1.0), Mapping.polynomial_core(1.0))
    assert shell.rings == 2
    assert shell.profile(0.25) == pytest.approx(0.5)
    assert shell.profile(0.75) == pytest.approx(1.0)
    assert shell.profile(0.0) == 0.0


def test_shell_profile_is_zero_at_exact_unit_distance():
    for beta in ((1.0,), (0.5, 2.0 / 3.0, 1.0)):
        shell = KernelShell(beta, Mapping.step_core())
        assert shell.profile(1.0) == 0.0
        assert shell.profile(np.array([1.0], dtype=np.float32))[0] == 0.0


def test_shell_profile_rejects_out_of_domain():
    with pytest.raises(DomainError):
        _lenia_shell().profile(1.2)


def test_game_of_life_neighbourhood():
    shell = KernelShell((1.0,), Mapping.step_core())
    raster = KernelRaster.rasterize(shell, radius=1, zoom=2.0)
    expected = np.array([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=np.float32)
    np.testing.assert_array_equal(raster.pixels, expected)
    assert raster.total_intensity == 8.0


def test_unit_zoom_puts_orthogonal_neighbours_on_the_boundary():
    shell = KernelShell((1.0,), Mapping.step_core())
    raster = KernelRaster.rasterize(shell, radius=1, zoom=1.0)
    assert raster.side == 3
    # orthogonal neighbours sit at distance exactly 1, diagonals beyond it
    assert np.all(raster.pixels == 0.0)
    assert raster.total_intensity == 0.0


def test_step_kernel_is_binary_and_radially_symmetric():
    shell = KernelShell((1.0,), Mapping.step_core())
    raster = KernelRaster.rasterize(shell, radius=20)
    p = raster.pixels
    assert p.shape == (41, 41)
    assert np.all(np.isclose(p, 0.0, atol=1e-6) | np.isclose(p, 1.0, atol=1e-6))
    np.testing.assert_allclose(p, p.T, atol=1e-6)
    np.testing.assert_allclose(p, p[::-1, :], atol=1e-6)
    np.testing.assert_allclose(p, p[:, ::-1], atol=1e-6)
    assert p[20, 20] == 0.0
    assert p[20, 30] == 1.0
    assert raster.total_intensity == pytest.approx(float(p.sum()))


def test_total_intensity_monotone_in_beta():
    base = (0.5, 2.0 / 3.0, 1.0)
    reference = KernelRaster.rasterize(_lenia_shell(base), radius=12).total_intensity
    assert reference > 0
    for i in range(len(base)):
        bumped = list(base)
        bumped[i] += 0.25
        total = KernelRaster.rasterize(_lenia_shell(tuple(bumped)), radius=12).total_intensity
        assert total >= reference


def test_explicit_resolution_matches_radius():
    shell = _lenia_shell()
    a = KernelRaster.rasterize(shell, radius=20)
    b = KernelRaster.with_resolution(shell, 41)
    np.testing.assert_array_equal(a.pixels, b.pixels)
    assert a.total_intensity == b.total_intensity


def test_even_resolution_is_centred():
    raster = KernelRaster.with_resolution(_lenia_shell(), 40)
    p = raster.pixels
    assert p.shape == (40, 40)
    np.testing.assert_allclose(p, p[::-1, ::-1], atol=1e-6)


def test_invalid_raster_geometry():
    shell = _lenia_shell()
    with pytest.raises(ConfigurationError):
        KernelRaster.rasterize(shell, radius=0)
    with pytest.raises(ConfigurationError):
        KernelRaster.rasterize(shell, radius=4, zoom=0.0)
    with pytest.raises(ConfigurationError):
        KernelRaster.with_resolution(shell, 1)


def test_rgba_and_texture_packing():
    raster = KernelRaster.rasterize(_lenia_shell(), radius=6)
    rgba = raster.rgba()
    assert rgba.shape == (13, 13, 4)
    assert rgba.dtype == np.float32
    np.testing.assert_array_equal(rgba[..., 0], raster.pixels)
    np.testing.assert_array_equal(rgba[..., 2], raster.pixels)
    assert np.all(rgba[..., 3] == 1.0)
    assert len(raster.texture_bytes()) == 13 * 13 * 16


def test_quantized_is_sixteen_bit():
    raster = KernelRaster.rasterize(KernelShell((1.0,), Mapping.step_core()), radius=8)
    q = raster.quantized()
    assert q.dtype == np.uint16
    assert set(np.unique(q).tolist()) <= {0, 65535}


def test_raster_pixels_are_read_only():
    raster = KernelRaster.rasterize(_lenia_shell(), radius=4)
    with pytest.raises(ValueError):
        raster.pixels[0, 0] = 1.0
