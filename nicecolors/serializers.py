"""
String-level encode/decode helpers for plugging :class:`Color` into a
serialization library.

Serializers produce a single string field. Deserializers accept hex, rgb,
hsl and named colors and raise ``ValueError`` so the calling library can map
it onto its own error type. The ``*_option`` variants pass ``None`` through.

>>> from nicecolors import Color
>>> serialize_hex(Color(255, 0, 0))
'#FF0000'
>>> deserialize("rgba(255,0,0,0.5)")
Color(red=255, green=0, blue=0)
"""

from typing import Optional, Tuple

from .colors.color import Color
from .types.color_types import Alpha

ColorAlpha = Tuple[Color, Optional[Alpha]]


def serialize_hex(value: Color) -> str:
    return f"#{value.to_hex_string()}"


def serialize_hex_option(value: Optional[Color]) -> Optional[str]:
    return serialize_hex(value) if value is not None else None


def serialize_rgb(value: Color) -> str:
    return value.to_rgb_string()


def serialize_rgb_option(value: Optional[Color]) -> Optional[str]:
    return serialize_rgb(value) if value is not None else None


def serialize_rgba(value: ColorAlpha) -> str:
    """``rgba(...)`` when an alpha is present, ``rgb(...)`` otherwise."""
    color, alpha = value
    if alpha is None:
        return color.to_rgb_string()
    return color.to_rgba_string(alpha)


def serialize_rgba_option(value: Optional[ColorAlpha]) -> Optional[str]:
    return serialize_rgba(value) if value is not None else None


def deserialize(value: str) -> Color:
    """
    Decode a color string.

    Text starting with ``rgb`` must be a valid ``rgb()``/``rgba()`` value;
    anything else goes through :meth:`Color.from_str`.
    """
    if not isinstance(value, str):
        raise ValueError(f"Expected a color string, got {type(value).__name__}")

    if value.startswith("rgb"):
        color = Color.from_rgb_str(value)
        if color is None:
            raise ValueError(f"Not a valid rgb color string: {value!r}")
        return color

    return Color.from_str(value)


def deserialize_option(value: Optional[str]) -> Optional[Color]:
    return deserialize(value) if value is not None else None


def deserialize_with_alpha(value: str) -> ColorAlpha:
    """Like :func:`deserialize`, keeping the alpha of ``rgb``/``rgba`` input (``None`` otherwise)."""
    if not isinstance(value, str):
        raise ValueError(f"Expected a color string, got {type(value).__name__}")

    if value.startswith("rgb"):
        parsed = Color.from_rgba_str(value)
        if parsed is None:
            raise ValueError(f"Not a valid rgb color string: {value!r}")
        return parsed

    return Color.from_str(value), None


def deserialize_with_alpha_option(value: Optional[str]) -> Optional[ColorAlpha]:
    return deserialize_with_alpha(value) if value is not None else None
