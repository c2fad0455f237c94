from .color_types import Value, Alpha, DecimalValue, RGBTuple, ColorWithAlpha, SLICE_LENGTH, MAX_VALUE
from .format_type import FormatType

__all__ = [
    "Value", "Alpha", "DecimalValue", "RGBTuple", "ColorWithAlpha",
    "SLICE_LENGTH", "MAX_VALUE", "FormatType",
]
