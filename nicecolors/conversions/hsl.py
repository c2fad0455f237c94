import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import UnitFloat

from .numbers import float_to_value, np_float_to_value
from ..types.color_types import MAX_VALUE, RGBTuple
from ..types.format_type import HUE_360


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    h = h % HUE_360
    # tiny negatives wrap to exactly 360.0 in floating point
    return 0.0 if h >= HUE_360 else h


## HSL to RGB conversions

def hue_to_rgb(m1: float, m2: float, h: float) -> float:
    """
    CSS/SVG hue basis function.

    ``h`` is a hue fraction. It is wrapped into [0, 1] by a single step of
    +/-1, so callers must keep it within [-1, 2]. Branches compare ``h * 6 < 1``,
    ``h * 2 < 1`` and ``h * 3 < 2`` (strict).
    """
    if h < 0.0:
        h += 1.0
    elif h > 1.0:
        h -= 1.0

    if h * 6.0 < 1.0:
        return m1 + (m2 - m1) * h * 6.0
    if h * 2.0 < 1.0:
        return m2
    if h * 3.0 < 2.0:
        return m1 + (m2 - m1) * (2.0 / 3.0 - h) * 6.0
    return m1


def hsl_to_rgb(h: float, s: float, l: float) -> RGBTuple:
    """
    Convert HSL to RGB channel bytes.

    Args:
        h: Hue in degrees, any value (wrapped into [0, 360))
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255]
    """
    hue = normalize_hue(h) / HUE_360

    if l <= 0.5:
        m2 = l * (s + 1.0)
    else:
        m2 = l + s - l * s
    m1 = l * 2.0 - m2

    r = float_to_value(hue_to_rgb(m1, m2, hue + 1.0 / 3.0) * MAX_VALUE)
    g = float_to_value(hue_to_rgb(m1, m2, hue) * MAX_VALUE)
    b = float_to_value(hue_to_rgb(m1, m2, hue - 1.0 / 3.0) * MAX_VALUE)
    return r, g, b


def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB channel bytes.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: uint8 array of shape (..., 3)
    """
    h = np.asarray(h, dtype=np.float64)
    s = np.asarray(s, dtype=np.float64)
    l = np.asarray(l, dtype=np.float64)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    hue = np.mod(h, HUE_360) / HUE_360
    m2 = np.where(l <= 0.5, l * (s + 1.0), l + s - l * s)
    m1 = l * 2.0 - m2

    def basis(t: NDArray) -> NDArray:
        t = np.where(t < 0.0, t + 1.0, np.where(t > 1.0, t - 1.0, t))
        return np.select(
            [t * 6.0 < 1.0, t * 2.0 < 1.0, t * 3.0 < 2.0],
            [m1 + (m2 - m1) * t * 6.0, m2, m1 + (m2 - m1) * (2.0 / 3.0 - t) * 6.0],
            default=m1,
        )

    r = basis(hue + 1.0 / 3.0)
    g = basis(hue)
    b = basis(hue - 1.0 / 3.0)

    return np_float_to_value(np.stack([r, g, b], axis=-1) * MAX_VALUE)


## RGB to HSL conversions

def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, UnitFloat, UnitFloat]:
    """
    Convert RGB channel bytes to HSL.

    Gray input (r == g == b) yields hue 0 and saturation 0.

    Args:
        r: Red component in [0, 255]
        g: Green component in [0, 255]
        b: Blue component in [0, 255]

    Returns:
        Tuple[float, UnitFloat, UnitFloat]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = r / MAX_VALUE
    g = g / MAX_VALUE
    b = b / MAX_VALUE

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2.0

    if max_c == min_c:
        return 0.0, UnitFloat(0.0), UnitFloat(lightness)

    diff = max_c - min_c

    if lightness > 0.5:
        saturation = diff / (2.0 - max_c - min_c)
    else:
        saturation = diff / (max_c + min_c)

    if max_c == r:
        hue = (g - b) / diff + (6.0 if g < b else 0.0)
    elif max_c == g:
        hue = (b - r) / diff + 2.0
    else:
        hue = (r - g) / diff + 4.0

    return hue / 6.0 * HUE_360, UnitFloat(saturation), UnitFloat(lightness)


def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB channel bytes to HSL.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=np.float64) / MAX_VALUE
    g = np.asarray(g, dtype=np.float64) / MAX_VALUE
    b = np.asarray(b, dtype=np.float64) / MAX_VALUE

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    lightness = (max_c + min_c) / 2.0

    diff = max_c - min_c
    mask = diff > 0

    saturation = np.zeros(out_shape)
    hue = np.zeros(out_shape)

    high = mask & (lightness > 0.5)
    low = mask & ~(lightness > 0.5)
    saturation[high] = diff[high] / (2.0 - max_c[high] - min_c[high])
    saturation[low] = diff[low] / (max_c[low] + min_c[low])

    # Red wins ties, then green, matching the scalar branch order
    mask_r = mask & (max_c == r)
    mask_g = mask & ~mask_r & (max_c == g)
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = (g[mask_r] - b[mask_r]) / diff[mask_r] + np.where(g[mask_r] < b[mask_r], 6.0, 0.0)
    hue[mask_g] = (b[mask_g] - r[mask_g]) / diff[mask_g] + 2.0
    hue[mask_b] = (r[mask_b] - g[mask_b]) / diff[mask_b] + 4.0

    return np.stack([hue / 6.0 * HUE_360, saturation, lightness], axis=-1)
