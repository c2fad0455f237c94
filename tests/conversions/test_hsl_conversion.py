import numpy as np
import pytest

from nicecolors.conversions.hsl import (
    hue_to_rgb,
    hsl_to_rgb,
    rgb_to_hsl,
    normalize_hue,
    np_hsl_to_rgb,
    np_rgb_to_hsl,
)
from samples import samples_rgb_hsl, grid_rgb


def test_rgb_to_hsl_red():
    hue, saturation, lightness = rgb_to_hsl(255, 0, 0)

    assert hue == 0.0
    assert saturation == 1.0
    assert lightness == 0.5


def test_rgb_to_hsl_periwinkle():
    hue, saturation, lightness = rgb_to_hsl(204, 204, 255)

    assert hue == pytest.approx(240.0)
    assert saturation == pytest.approx(1.0)
    assert lightness == pytest.approx(0.9)


def test_rgb_to_hsl_samples():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h_out, s_out, l_out = rgb_to_hsl(r, g, b)

        assert abs(h_out - h_exp) < 1/2
        assert abs(float(s_out) - s_exp) < 1/255
        assert abs(float(l_out) - l_exp) < 1/255


@pytest.mark.parametrize("value", [0, 1, 17, 128, 200, 255])
def test_rgb_to_hsl_gray_is_achromatic(value):
    hue, saturation, lightness = rgb_to_hsl(value, value, value)

    assert hue == 0.0
    assert saturation == 0.0
    assert lightness == pytest.approx(value / 255)


def test_rgb_to_hsl_ranges():
    for r, g, b in grid_rgb:
        h, s, l = rgb_to_hsl(r, g, b)
        assert 0.0 <= h < 360.0
        assert 0.0 <= s <= 1.0
        assert 0.0 <= l <= 1.0


def test_normalize_hue():
    assert normalize_hue(0) == 0
    assert normalize_hue(360) == 0
    assert normalize_hue(370) == 10
    assert normalize_hue(-30) == 330
    assert normalize_hue(-1e-20) == 0.0


def test_hue_to_rgb_branches():
    m1, m2 = 0.2, 0.8

    # Rising edge: h * 6 < 1
    assert hue_to_rgb(m1, m2, 0.1) == pytest.approx(m1 + (m2 - m1) * 0.6)
    # Plateau: h * 2 < 1
    assert hue_to_rgb(m1, m2, 0.3) == m2
    # Falling edge: h * 3 < 2
    assert hue_to_rgb(m1, m2, 0.6) == pytest.approx(m1 + (m2 - m1) * (2 / 3 - 0.6) * 6)
    # Floor
    assert hue_to_rgb(m1, m2, 0.9) == m1


def test_hue_to_rgb_single_step_wrap():
    m1, m2 = 0.0, 1.0

    assert hue_to_rgb(m1, m2, -0.7) == hue_to_rgb(m1, m2, 0.3)
    assert hue_to_rgb(m1, m2, 1.3) == hue_to_rgb(m1, m2, 0.3)


def test_hsl_to_rgb_primaries():
    assert hsl_to_rgb(0, 1.0, 0.5) == (255, 0, 0)
    assert hsl_to_rgb(120, 1.0, 0.5) == (0, 255, 0)
    assert hsl_to_rgb(240, 1.0, 0.5) == (0, 0, 255)
    assert hsl_to_rgb(360, 1.0, 0.5) == (255, 0, 0)
    assert hsl_to_rgb(-120, 1.0, 0.5) == (0, 0, 255)


def test_hsl_to_rgb_gray():
    assert hsl_to_rgb(0, 0.0, 0.5) == (128, 128, 128)
    assert hsl_to_rgb(200, 0.0, 0.0) == (0, 0, 0)
    assert hsl_to_rgb(200, 0.0, 1.0) == (255, 255, 255)


def test_hsl_round_trip():
    for rgb in grid_rgb:
        assert hsl_to_rgb(*rgb_to_hsl(*rgb)) == rgb


def test_hsl_round_trip_samples():
    for rgb in samples_rgb_hsl:
        assert hsl_to_rgb(*rgb_to_hsl(*rgb)) == rgb


def test_rgb_to_hsl_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys()))
    expected = np.array(list(samples_rgb_hsl.values()))
    hsl = np_rgb_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    assert hsl.shape == (len(samples_rgb_hsl), 3)
    assert np.allclose(hsl[..., 0], expected[..., 0], atol=1/2)
    assert np.allclose(hsl[..., 1], expected[..., 1], atol=1/255)
    assert np.allclose(hsl[..., 2], expected[..., 2], atol=1/255)


def test_rgb_to_hsl_numpy_matches_scalar():
    the_matrix = np.array(grid_rgb)
    result = np_rgb_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    expected = np.array([[float(v) for v in rgb_to_hsl(*rgb)] for rgb in grid_rgb])

    assert np.array_equal(result, expected)


def test_hsl_to_rgb_numpy_matches_scalar():
    hues = np.arange(-360, 720, 15)
    levels = np.linspace(0.0, 1.0, 11)
    h, s, l = np.meshgrid(hues, levels, levels, indexing="ij")

    result = np_hsl_to_rgb(h, s, l)
    expected = np.array([
        hsl_to_rgb(float(hh), float(ss), float(ll))
        for hh, ss, ll in zip(h.ravel(), s.ravel(), l.ravel())
    ]).reshape(h.shape + (3,))

    assert result.dtype == np.uint8
    assert result.shape == h.shape + (3,)
    assert np.array_equal(result, expected)


def test_hsl_to_rgb_numpy_broadcasts_scalars():
    result = np_hsl_to_rgb(np.array([0, 120, 240]), 1.0, 0.5)
    assert result.tolist() == [[255, 0, 0], [0, 255, 0], [0, 0, 255]]
