import math
import re
from typing import Optional

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import clamp

from ..types.color_types import MAX_VALUE

# ASCII decimal as accepted inside percentages: "50", "-5", "12.5", ".5"
DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
# Bare fraction form: "0.5", "0.", ".25"
FRACTION_PATTERN = re.compile(r"0\.[0-9]*|\.[0-9]+")


def remove_suffix(s: str, suffix: str) -> Optional[str]:
    """Remove ``suffix`` from ``s``. Returns ``None`` when ``s`` does not end with it."""
    if s.endswith(suffix):
        return s[:len(s) - len(suffix)]
    return None


def fit_percent(value: float) -> float:
    """Clamp a fraction into the inclusive range ``[0, 1]``."""
    return float(clamp(value, 0.0, 1.0))


def parse_percent(s: str) -> Optional[float]:
    """
    Parse a percentage or fractional value into ``[0, 1]``.

    Accepts either a number followed by ``%`` (``"50%"`` -> ``0.5``) or a bare
    fraction written with a leading ``0.`` or ``.`` (``"0.5"``, ``".5"``).
    Percentages outside 0-100 are clamped. Anything else returns ``None``.
    """
    s = s.strip()
    body = remove_suffix(s, "%")

    if body is not None:
        if not DECIMAL_PATTERN.fullmatch(body):
            return None
        return fit_percent(float(body) / 100.0)

    if FRACTION_PATTERN.fullmatch(s):
        return fit_percent(float(s))

    return None


def round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero (``2.5 -> 3``, ``-2.5 -> -3``)."""
    magnitude = abs(value)
    floor = math.floor(magnitude)
    if magnitude - floor >= 0.5:
        floor += 1
    return math.copysign(floor, value)


def float_to_value(value: float) -> int:
    """
    Quantize a float to a channel byte.

    Rounds half away from zero and saturates at 0 and 255 instead of wrapping.
    NaN maps to 0.
    """
    value = float(value)
    if math.isnan(value):
        return 0
    return int(round_half_away(clamp(value, 0.0, float(MAX_VALUE))))


def np_float_to_value(values: NDArray) -> NDArray:
    """
    Vectorized: quantize floats to channel bytes.

    Args:
        values: array-like of floats, any shape

    Returns:
        uint8 array of the same shape
    """
    values = np.asarray(values, dtype=np.float64)
    values = np.nan_to_num(values, nan=0.0, posinf=float(MAX_VALUE), neginf=0.0)
    values = np.clip(values, 0.0, float(MAX_VALUE))

    floor = np.floor(values)
    rounded = np.where(values - floor >= 0.5, floor + 1, floor)
    return rounded.astype(np.uint8)
