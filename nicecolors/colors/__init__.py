"""
nicecolors Color Classes
========================

Immutable value types for 8-bit RGB colors and their HSL view.

Scalar Usage
------------
>>> from nicecolors.colors import Color
>>>
>>> red = Color(255, 0, 0)
>>> red.to_hex_string()
'FF0000'
>>> red.blend(Color(0, 0, 255), 0.5)
Color(red=128, green=0, blue=128)
>>>
>>> Color.from_str("hsl(120, 100%, 50%)")
Color(red=0, green=255, blue=0)
>>> Color.from_rgba_str("rgba(255, 0, 0, 0.5)")
(Color(red=255, green=0, blue=0), 0.5)

Color Classes
-------------
    - Color: red, green, blue bytes
    - HSLColor: hue degrees, unit saturation and lightness

Notes
-----
- Instances are frozen; ``with_*`` methods return new values
- Channel inputs are clamped into [0, 255] at construction
- Parsers return ``None`` on malformed input; only ``Color.from_str`` raises
"""

from .color import Color, BLACK, WHITE
from .hsl_color import HSLColor
from .html import color_by_name, name_by_color
from .parse import (
    parse_hex,
    parse_rgba,
    parse_hsl,
    parse_any,
    to_hex_string,
    to_rgb_string,
    to_rgba_string,
)

__all__ = [
    'Color', 'HSLColor', 'BLACK', 'WHITE',
    'color_by_name', 'name_by_color',
    'parse_hex', 'parse_rgba', 'parse_hsl', 'parse_any',
    'to_hex_string', 'to_rgb_string', 'to_rgba_string',
]
