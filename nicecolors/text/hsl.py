from typing import Optional, Tuple

from ..conversions.hsl import hsl_to_rgb
from ..conversions.numbers import parse_percent
from ..types.color_types import Alpha, RGBTuple
from .tokens import strip_function_call, split_arguments, parse_signed


def parse_hsl_channels(text: str) -> Optional[Tuple[RGBTuple, Alpha]]:
    """
    Parse ``hsl(H,S,L)`` or ``hsla(H,S,L,A)`` straight into channel bytes.

    Hue is integer degrees and wraps into [0, 360). Saturation, lightness and
    alpha take ``"50%"`` or ``"0.5"``. Alpha defaults to ``1.0``.
    """
    if not isinstance(text, str):
        return None

    call = strip_function_call(text, "hsl")
    if call is None:
        return None
    body, expected = call

    tokens = split_arguments(body)
    if len(tokens) != expected:
        return None

    hue = parse_signed(tokens[0])
    saturation = parse_percent(tokens[1])
    lightness = parse_percent(tokens[2])
    if hue is None or saturation is None or lightness is None:
        return None

    alpha: Optional[Alpha] = 1.0
    if expected == 4:
        alpha = parse_percent(tokens[3])
        if alpha is None:
            return None

    # reduce while still an int; arbitrarily long hues would overflow a float
    return hsl_to_rgb(hue % 360, saturation, lightness), alpha
