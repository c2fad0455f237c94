"""
nicecolors - Lightweight 8-bit RGB Colors
=========================================

A small Python library for working with RGB colors stored as three bytes.

Key Features
------------
- Immutable, hashable ``Color`` values ordered by (red, green, blue)
- Parsing of ``#RGB``/``#RRGGBB`` hex, ``rgb()``/``rgba()``, ``hsl()``/``hsla()``
  and the CSS named colors
- Canonical hex, rgb, rgba and hsl output
- Packed ``0xRRGGBB`` integer conversion
- Blending, darkening and lightening
- RGB <-> HSL conversion, scalar and vectorized (numpy)

Quick Start
-----------
>>> from nicecolors import Color
>>>
>>> red = Color.from_str("#F00")
>>> red.to_rgb_string()
'rgb(255,0,0)'
>>> red.darken(0.5)
Color(red=128, green=0, blue=0)
>>> Color.from_decimal(0x6495ED).to_name()
'cornflowerblue'
>>>
>>> # Parsers return None instead of raising
>>> Color.try_parse("rgb(1,2)") is None
True

Modules
-------
- colors: Color and HSLColor value types, named colors, function-style parsers
- conversions: channel math and RGB <-> HSL conversion
- text: color string grammars and formatters
- serializers: string encode/decode helpers for serialization libraries
"""

from .colors.color import Color, BLACK, WHITE
from .colors.hsl_color import HSLColor
from .colors.html import color_by_name, name_by_color
from .colors.parse import (
    parse_hex,
    parse_rgba,
    parse_hsl,
    parse_any,
    to_hex_string,
    to_rgb_string,
    to_rgba_string,
)

from .conversions import (
    fit_percent,
    parse_percent,
    float_to_value,
    hue_to_rgb,
    rgb_to_hsl,
    hsl_to_rgb,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
)

from .types.color_types import ColorWithAlpha
from .types.format_type import FormatType

__version__ = "1.0.0"

__all__ = [
    # Color classes
    "Color", "HSLColor", "BLACK", "WHITE",

    # Named colors
    "color_by_name", "name_by_color",

    # Parsing and formatting
    "parse_hex", "parse_rgba", "parse_hsl", "parse_any",
    "to_hex_string", "to_rgb_string", "to_rgba_string",

    # Conversions
    "fit_percent", "parse_percent", "float_to_value",
    "hue_to_rgb", "rgb_to_hsl", "hsl_to_rgb",
    "np_rgb_to_hsl", "np_hsl_to_rgb",

    # Types
    "ColorWithAlpha", "FormatType",

    # Version
    "__version__",
]
