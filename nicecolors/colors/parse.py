"""
Function-style entry points over :class:`Color`.

Each parser returns ``None`` for malformed input instead of raising, so a
caller (or a serialization adapter) can fall through to another format.
"""

from typing import Optional

from .color import Color
from ..text import parse_hex_channels
from ..types.color_types import Alpha, ColorWithAlpha


def parse_hex(text: str, require_hash: bool = False) -> Optional[Color]:
    channels = parse_hex_channels(text, require_hash=require_hash)
    return Color(*channels) if channels is not None else None


def parse_rgba(text: str) -> Optional[ColorWithAlpha]:
    return Color.from_rgba_str(text)


def parse_hsl(text: str) -> Optional[ColorWithAlpha]:
    return Color.from_hsla_str(text)


def parse_any(text: str) -> Optional[Color]:
    """Hex (``#`` required), rgb/rgba, hsl/hsla, then named colors."""
    return Color.try_parse(text)


def to_hex_string(color: Color) -> str:
    return color.to_hex_string()


def to_rgb_string(color: Color) -> str:
    return color.to_rgb_string()


def to_rgba_string(color: Color, alpha: Alpha) -> str:
    return color.to_rgba_string(alpha)
