from __future__ import annotations
import functools
import warnings
from numbers import Integral
from typing import Callable, Iterator, Optional, Sequence, TYPE_CHECKING

import numpy as np
from boundednumbers.functions import clamp

from ..conversions.numbers import float_to_value
from ..text import (
    parse_hex_channels,
    parse_rgba_channels,
    parse_hsl_channels,
    format_hex,
    format_rgb,
    format_rgba,
    format_hsl,
)
from ..types.color_types import Alpha, ColorWithAlpha, DecimalValue, MAX_VALUE, SLICE_LENGTH
from ..types.format_type import FormatType

if TYPE_CHECKING:
    from .hsl_color import HSLColor


def _to_channel(value) -> int:
    if isinstance(value, Integral):
        return int(clamp(int(value), 0, MAX_VALUE))
    return float_to_value(value)


def _warn_renamed(old: str, new: str) -> None:
    warnings.warn(
        f"Color.{old} is deprecated. Use Color.{new} instead.",
        DeprecationWarning,
        stacklevel=3,
    )


@functools.total_ordering
class Color:
    """
    An RGB color stored as three bytes.

    Instances are immutable and compare, order and hash as the tuple
    ``(red, green, blue)``. Channel inputs are clamped into [0, 255].

    >>> Color(255, 0, 0).to_hex_string()
    'FF0000'
    >>> Color.from_str("rgb(100, 100, 100)")
    Color(red=100, green=100, blue=100)
    """
    __slots__ = ('red', 'green', 'blue')

    red: int
    green: int
    blue: int

    def __init__(self, red: int = 0, green: int = 0, blue: int = 0) -> None:
        super().__setattr__('red', _to_channel(red))
        super().__setattr__('green', _to_channel(green))
        super().__setattr__('blue', _to_channel(blue))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __reduce__(self):
        return (self.__class__, self.to_array())

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[int]:
        return iter(self.to_array())

    def __len__(self) -> int:
        return SLICE_LENGTH

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_array() == other.to_array()

    def __lt__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_array() < other.to_array()

    def __hash__(self) -> int:
        return hash(self.to_array())

    def __int__(self) -> int:
        return self.to_decimal()

    def __repr__(self) -> str:
        return f"Color(red={self.red}, green={self.green}, blue={self.blue})"

    def __str__(self) -> str:
        return self.to_hex_string()

    # ------------------ BUILDERS ------------------
    def with_red(self, red: int) -> Color:
        return self.__class__(red, self.green, self.blue)

    def with_green(self, green: int) -> Color:
        return self.__class__(self.red, green, self.blue)

    def with_blue(self, blue: int) -> Color:
        return self.__class__(self.red, self.green, blue)

    # ------------------ NUMERIC CONVERSIONS ------------------
    @classmethod
    def from_decimal(cls, decimal: DecimalValue) -> Color:
        """
        Unpack a ``0xRRGGBB`` integer. Bits above the low 24 are ignored.

        >>> Color.from_decimal(0x112233)
        Color(red=17, green=34, blue=51)
        """
        decimal = int(decimal) & 0xFFFFFFFF
        return cls((decimal >> 16) & 0xFF, (decimal >> 8) & 0xFF, decimal & 0xFF)

    def to_decimal(self) -> DecimalValue:
        """Pack into ``0xRRGGBB``; the top byte is always 0."""
        return (self.red << 16) | (self.green << 8) | self.blue

    @classmethod
    def from_array(cls, values: Sequence[int]) -> Color:
        if len(values) != SLICE_LENGTH:
            raise ValueError(f"Color expects a {SLICE_LENGTH}-channel sequence, got {len(values)}")
        r, g, b = values
        return cls(r, g, b)

    def to_array(self) -> tuple[int, int, int]:
        return self.red, self.green, self.blue

    def to_numpy(self) -> np.ndarray:
        return np.array(self.to_array(), dtype=np.uint8)

    # ------------------ CHANNEL MATH ------------------
    def map(self, f: Callable[[int], float]) -> Color:
        """Apply ``f`` to each channel. Results are rounded and clamped into a byte."""
        return self.__class__(*(float_to_value(f(v)) for v in self))

    def map_with(self, other: Color, f: Callable[[int, int], float]) -> Color:
        """Apply ``f`` channel-wise between this color and ``other``."""
        return self.__class__(*(float_to_value(f(a, b)) for a, b in zip(self, other)))

    def blend(self, other: Color, amount: float) -> Color:
        """
        Linear interpolation towards ``other``.

        ``amount >= 1`` returns ``other`` and ``amount <= 0`` returns this color
        unchanged; only values in between are computed and rounded.
        """
        if amount >= 1.0:
            return other
        if amount <= 0.0:
            return self
        return self.map_with(other, lambda a, b: a * (1.0 - amount) + b * amount)

    def darken(self, amount: float) -> Color:
        return self.blend(BLACK, amount)

    def lighten(self, amount: float) -> Color:
        return self.blend(WHITE, amount)

    # ------------------ HSL ------------------
    def to_hsl(self) -> HSLColor:
        from .hsl_color import HSLColor  # local import to avoid cycles
        return HSLColor.from_color(self)

    @classmethod
    def from_hsl(cls, hsl: HSLColor) -> Color:
        return cls(*hsl.to_color())

    # ------------------ PARSING ------------------
    @classmethod
    def from_hex_str(cls, text: str) -> Optional[Color]:
        """
        Parse a hex color. The ``#`` is optional here, unlike in :meth:`from_str`.

        >>> Color.from_hex_str("F00")
        Color(red=255, green=0, blue=0)
        """
        channels = parse_hex_channels(text, require_hash=False)
        return cls(*channels) if channels is not None else None

    @classmethod
    def from_rgb_str(cls, text: str) -> Optional[Color]:
        """Parse ``rgb()`` or ``rgba()``, dropping the alpha."""
        parsed = parse_rgba_channels(text)
        return cls(*parsed[0]) if parsed is not None else None

    @classmethod
    def from_rgba_str(cls, text: str) -> Optional[ColorWithAlpha]:
        """Parse ``rgb()`` or ``rgba()``. Alpha is ``1.0`` when absent."""
        parsed = parse_rgba_channels(text)
        if parsed is None:
            return None
        channels, alpha = parsed
        return cls(*channels), alpha

    @classmethod
    def from_hsl_str(cls, text: str) -> Optional[Color]:
        parsed = parse_hsl_channels(text)
        return cls(*parsed[0]) if parsed is not None else None

    @classmethod
    def from_hsla_str(cls, text: str) -> Optional[ColorWithAlpha]:
        parsed = parse_hsl_channels(text)
        if parsed is None:
            return None
        channels, alpha = parsed
        return cls(*channels), alpha

    @classmethod
    def from_name(cls, name: str) -> Optional[Color]:
        from .html import color_by_name
        return color_by_name(name)

    @classmethod
    def try_parse(cls, text: str) -> Optional[Color]:
        """
        Parse any supported color text.

        Tries, in order: ``#``-prefixed hex, ``rgb()``/``rgba()``,
        ``hsl()``/``hsla()``, then named colors. Hex without ``#`` is not
        accepted here so that a bare ``"FF0000"`` is never guessed at.
        """
        channels = parse_hex_channels(text, require_hash=True)
        if channels is not None:
            return cls(*channels)

        color = cls.from_rgb_str(text)
        if color is not None:
            return color

        color = cls.from_hsl_str(text)
        if color is not None:
            return color

        return cls.from_name(text)

    @classmethod
    def from_str(cls, text: str) -> Color:
        """Like :meth:`try_parse` but raises ``ValueError`` on failure."""
        color = cls.try_parse(text)
        if color is None:
            raise ValueError(f"Not a valid color string: {text!r}")
        return color

    # ------------------ FORMATTING ------------------
    def to_hex_string(self) -> str:
        """Uppercase ``RRGGBB`` without ``#``."""
        return format_hex(self)

    def to_rgb_string(self) -> str:
        return format_rgb(self)

    def to_rgba_string(self, alpha: Alpha) -> str:
        """``rgba(R,G,B,A)`` with alpha clamped into [0, 1]."""
        return format_rgba(self, alpha)

    def to_hsl_string(self) -> str:
        return format_hsl(*self.to_hsl())

    def to_name(self) -> Optional[str]:
        from .html import name_by_color
        return name_by_color(self)

    def format(self, fmt: FormatType = FormatType.HEX, alpha: Alpha = 1.0) -> str:
        """
        Render in the given text form.

        ``HEX`` includes the ``#`` so the result parses back through
        :meth:`from_str`. ``NAME`` falls back to ``HEX`` for unnamed colors.
        """
        fmt = FormatType(fmt)
        if fmt == FormatType.RGB:
            return self.to_rgb_string()
        if fmt == FormatType.RGBA:
            return self.to_rgba_string(alpha)
        if fmt == FormatType.HSL:
            return self.to_hsl_string()
        if fmt == FormatType.NAME:
            name = self.to_name()
            if name is not None:
                return name
        return f"#{self.to_hex_string()}"

    # ------------------ DEPRECATED ALIASES ------------------
    @classmethod
    def from_hex(cls, text: str) -> Optional[Color]:
        _warn_renamed("from_hex", "from_hex_str")
        return cls.from_hex_str(text)

    @classmethod
    def from_rgb(cls, text: str) -> Optional[Color]:
        _warn_renamed("from_rgb", "from_rgb_str")
        return cls.from_rgb_str(text)

    @classmethod
    def from_rgba(cls, text: str) -> Optional[ColorWithAlpha]:
        _warn_renamed("from_rgba", "from_rgba_str")
        return cls.from_rgba_str(text)

    def to_hex(self) -> str:
        _warn_renamed("to_hex", "to_hex_string")
        return self.to_hex_string()

    def to_rgb(self) -> str:
        _warn_renamed("to_rgb", "to_rgb_string")
        return self.to_rgb_string()

    def to_rgba(self, alpha: Alpha) -> str:
        _warn_renamed("to_rgba", "to_rgba_string")
        return self.to_rgba_string(alpha)


BLACK = Color(0, 0, 0)
WHITE = Color(MAX_VALUE, MAX_VALUE, MAX_VALUE)
