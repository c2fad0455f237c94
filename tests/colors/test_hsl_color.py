import pickle

import pytest

from nicecolors import Color, HSLColor
from samples import samples_rgb_hsl, grid_rgb


def test_hue_wraps():
    assert HSLColor(370, 0.5, 0.5).hue == 10.0
    assert HSLColor(-30, 0.5, 0.5).hue == 330.0
    assert HSLColor(360, 0.5, 0.5).hue == 0.0
    assert 0.0 <= HSLColor(-1e-20, 0.5, 0.5).hue < 360.0


def test_saturation_and_lightness_clamp():
    hsl = HSLColor(0, 1.5, -0.2)
    assert float(hsl.saturation) == 1.0
    assert float(hsl.lightness) == 0.0


def test_defaults():
    assert tuple(HSLColor()) == (0.0, 0.0, 0.0)
    assert HSLColor().to_color() == Color(0, 0, 0)


def test_immutable():
    hsl = HSLColor(10, 0.5, 0.5)
    with pytest.raises(AttributeError):
        hsl.hue = 20


def test_with_methods():
    hsl = HSLColor(10, 0.5, 0.5)
    assert hsl.with_hue(400).hue == 40.0
    assert float(hsl.with_saturation(2).saturation) == 1.0
    assert float(hsl.with_lightness(0.25).lightness) == 0.25
    assert hsl == HSLColor(10, 0.5, 0.5)


def test_value_semantics():
    assert HSLColor(10, 0.5, 0.5) == HSLColor(370, 0.5, 0.5)
    assert len({HSLColor(10, 0.5, 0.5), HSLColor(370, 0.5, 0.5)}) == 1
    assert HSLColor(10, 0.5, 0.5) != (10.0, 0.5, 0.5)
    assert repr(HSLColor(10, 0.5, 0.25)) == "HSLColor(hue=10.0, saturation=0.5, lightness=0.25)"


def test_pickle():
    hsl = HSLColor(218.5, 0.79, 0.66)
    assert pickle.loads(pickle.dumps(hsl)) == hsl


def test_from_color_samples():
    for rgb, (h, s, l) in samples_rgb_hsl.items():
        hsl = HSLColor.from_color(Color(*rgb))
        assert abs(hsl.hue - h) < 0.01
        assert abs(float(hsl.saturation) - s) < 1e-3
        assert abs(float(hsl.lightness) - l) < 1e-3


def test_to_color():
    assert HSLColor(0, 1, 0.5).to_color() == Color(255, 0, 0)
    assert HSLColor(240, 1, 0.9).to_color() == Color(204, 204, 255)
    assert HSLColor(90, 0, 0.5).to_color() == Color(128, 128, 128)


def test_round_trip():
    for rgb in grid_rgb:
        color = Color(*rgb)
        assert HSLColor.from_color(color).to_color() == color
