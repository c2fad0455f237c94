"""
Color text grammars.

Parsers return ``None`` for any malformed input and never raise. They work
on plain channel tuples so they can be used without the ``Color`` type.
"""

from .hex import parse_hex_channels
from .rgb import parse_rgba_channels
from .hsl import parse_hsl_channels
from .formatting import format_hex, format_rgb, format_rgba, format_alpha, format_hsl
from .tokens import strip_function_call, split_arguments

__all__ = [
    "parse_hex_channels",
    "parse_rgba_channels",
    "parse_hsl_channels",
    "format_hex",
    "format_rgb",
    "format_rgba",
    "format_alpha",
    "format_hsl",
    "strip_function_call",
    "split_arguments",
]
