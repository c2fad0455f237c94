from __future__ import annotations
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from ..colors.color import Color

Value = int
Alpha = float
DecimalValue = int
RGBTuple = Tuple[int, int, int]
ColorWithAlpha = Tuple["Color", Alpha]

SLICE_LENGTH = 3
MAX_VALUE = 255
MAX_DECIMAL = 0xFFFFFFFF
