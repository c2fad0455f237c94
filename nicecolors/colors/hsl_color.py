from __future__ import annotations
from typing import Iterator

from boundednumbers import UnitFloat

from ..conversions.hsl import hsl_to_rgb, normalize_hue, rgb_to_hsl
from .color import Color


class HSLColor:
    """
    Hue in degrees [0, 360), saturation and lightness in [0, 1].

    Hue wraps around the color wheel; saturation and lightness are clamped.
    Like :class:`Color`, instances are immutable and the ``with_*`` methods
    return new values.
    """
    __slots__ = ('hue', 'saturation', 'lightness')

    hue: float
    saturation: UnitFloat
    lightness: UnitFloat

    def __init__(self, hue: float = 0.0, saturation: float = 0.0, lightness: float = 0.0) -> None:
        super().__setattr__('hue', normalize_hue(float(hue)))
        super().__setattr__('saturation', UnitFloat(saturation))
        super().__setattr__('lightness', UnitFloat(lightness))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __reduce__(self):
        return (self.__class__, tuple(self))

    def __iter__(self) -> Iterator[float]:
        return iter((self.hue, float(self.saturation), float(self.lightness)))

    def __eq__(self, other) -> bool:
        if not isinstance(other, HSLColor):
            return NotImplemented
        return tuple(self) == tuple(other)

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return (
            f"HSLColor(hue={self.hue!r}, saturation={float(self.saturation)!r}, "
            f"lightness={float(self.lightness)!r})"
        )

    def with_hue(self, hue: float) -> HSLColor:
        return self.__class__(hue, self.saturation, self.lightness)

    def with_saturation(self, saturation: float) -> HSLColor:
        return self.__class__(self.hue, saturation, self.lightness)

    def with_lightness(self, lightness: float) -> HSLColor:
        return self.__class__(self.hue, self.saturation, lightness)

    @classmethod
    def from_color(cls, color: Color) -> HSLColor:
        return cls(*rgb_to_hsl(*color))

    def to_color(self) -> Color:
        return Color(*hsl_to_rgb(self.hue, float(self.saturation), float(self.lightness)))
