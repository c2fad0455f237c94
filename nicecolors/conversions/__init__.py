"""
nicecolors Channel Math and HSL Conversions
===========================================

Scalar helpers for 8-bit channels and the RGB <-> HSL transform, with
vectorized numpy variants for batch work.

Channel Math
------------
    fit_percent(x)
        Clamp a fraction into [0, 1]
    parse_percent(s)
        "50%" -> 0.5, "0.5" -> 0.5, anything else -> None
    float_to_value(x)
        Round half away from zero, then saturate into [0, 255]
    np_float_to_value(arr)
        Vectorized float_to_value

HSL
---
    rgb_to_hsl(r, g, b)
        Bytes -> (hue degrees, saturation, lightness)
    hsl_to_rgb(h, s, l)
        (hue degrees, saturation, lightness) -> bytes
    hue_to_rgb(m1, m2, h)
        CSS hue basis function
    np_rgb_to_hsl(r, g, b) / np_hsl_to_rgb(h, s, l)
        Vectorized variants returning arrays of shape (..., 3)

Examples
--------
>>> from nicecolors.conversions import rgb_to_hsl, hsl_to_rgb
>>> h, s, l = rgb_to_hsl(255, 0, 0)
>>> print(h, float(s), float(l))
0.0 1.0 0.5
>>> hsl_to_rgb(120, 1.0, 0.5)
(0, 255, 0)
"""

from .numbers import (
    remove_suffix,
    fit_percent,
    parse_percent,
    round_half_away,
    float_to_value,
    np_float_to_value,
)

from .hsl import (
    normalize_hue,
    hue_to_rgb,
    hsl_to_rgb,
    rgb_to_hsl,
    np_hsl_to_rgb,
    np_rgb_to_hsl,
)

__all__ = [
    # Channel math
    'remove_suffix',
    'fit_percent',
    'parse_percent',
    'round_half_away',
    'float_to_value',
    'np_float_to_value',

    # HSL
    'normalize_hue',
    'hue_to_rgb',
    'hsl_to_rgb',
    'rgb_to_hsl',
    'np_hsl_to_rgb',
    'np_rgb_to_hsl',
]
