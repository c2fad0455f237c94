import math
from typing import Iterable

from ..conversions.hsl import normalize_hue
from ..conversions.numbers import fit_percent, round_half_away
from ..types.color_types import Alpha
from ..types.format_type import ALPHA_DECIMALS


def format_hex(channels: Iterable[int]) -> str:
    """Uppercase two-digit hex per channel, no ``#``."""
    return "".join(f"{value:02X}" for value in channels)


def format_rgb(channels: Iterable[int]) -> str:
    r, g, b = channels
    return f"rgb({r},{g},{b})"


def format_alpha(alpha: Alpha) -> str:
    """Clamp into [0, 1] and print with at most three decimals, trailing zeros trimmed."""
    alpha = 0.0 if math.isnan(alpha) else fit_percent(alpha)
    text = f"{alpha:.{ALPHA_DECIMALS}f}".rstrip("0").rstrip(".")
    return text or "0"


def format_rgba(channels: Iterable[int], alpha: Alpha) -> str:
    r, g, b = channels
    return f"rgba({r},{g},{b},{format_alpha(alpha)})"


def format_hsl(hue: float, saturation: float, lightness: float) -> str:
    """``hsl(H,S%,L%)`` with every field rounded to an integer."""
    h = int(normalize_hue(round_half_away(hue)))
    s = int(round_half_away(fit_percent(saturation) * 100))
    l = int(round_half_away(fit_percent(lightness) * 100))
    return f"hsl({h},{s}%,{l}%)"
