from typing import Optional, Tuple

from ..conversions.numbers import parse_percent, float_to_value
from ..types.color_types import Alpha, MAX_VALUE, RGBTuple
from .tokens import strip_function_call, split_arguments, parse_unsigned, parse_float


def parse_channel(token: str) -> Optional[int]:
    """
    Parse one ``rgb()`` channel.

    ``"50%"`` scales into 0-255. Plain integers above 255 keep their low byte
    (``256`` -> ``0``). Negative integers are accepted and become 0, but the
    magnitude must still be a valid integer.
    """
    if token.endswith("%"):
        percent = parse_percent(token)
        if percent is None:
            return None
        return float_to_value(percent * MAX_VALUE)

    if token.startswith("-"):
        if parse_unsigned(token[1:]) is None:
            return None
        return 0

    value = parse_unsigned(token)
    if value is None:
        return None
    return value & 0xFF


def parse_alpha(token: str) -> Optional[Alpha]:
    """An integer 0-255 is divided by 255; anything else must be a float and is kept as is."""
    value = parse_unsigned(token)
    if value is not None and value <= MAX_VALUE:
        return value / MAX_VALUE
    return parse_float(token)


def parse_rgba_channels(text: str) -> Optional[Tuple[RGBTuple, Alpha]]:
    """
    Parse ``rgb(R,G,B)`` or ``rgba(R,G,B,A)``.

    Arguments are separated by commas and/or spaces. The prefix fixes the
    argument count. Alpha defaults to ``1.0`` for ``rgb()``.
    """
    if not isinstance(text, str):
        return None

    call = strip_function_call(text, "rgb")
    if call is None:
        return None
    body, expected = call

    tokens = split_arguments(body)
    if len(tokens) != expected:
        return None

    channels = [parse_channel(token) for token in tokens[:3]]
    if None in channels:
        return None

    alpha: Optional[Alpha] = 1.0
    if expected == 4:
        alpha = parse_alpha(tokens[3])
        if alpha is None:
            return None

    r, g, b = channels
    return (r, g, b), alpha
