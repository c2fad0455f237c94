# No dependencies
from enum import Enum


class FormatType(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    NAME = "name"


HUE_360 = 360.0
ALPHA_DECIMALS = 3
