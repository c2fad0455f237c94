import re
from typing import Optional

from ..types.color_types import RGBTuple

HEX_DIGITS = re.compile(r"[0-9A-Fa-f]+")
VALID_LENGTHS = (3, 4, 6, 8)


def parse_hex_channels(text: str, require_hash: bool = False) -> Optional[RGBTuple]:
    """
    Parse ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA`` into channel bytes.

    The hash is optional unless ``require_hash`` is set. Short forms duplicate
    each digit (``F00`` -> ``FF0000``). An alpha component must be valid hex
    but is dropped from the result.
    """
    if not isinstance(text, str):
        return None

    if text.startswith("#"):
        text = text[1:]
    elif require_hash:
        return None

    length = len(text)
    if length not in VALID_LENGTHS or not HEX_DIGITS.fullmatch(text):
        return None

    if length in (3, 4):
        return (
            int(text[0], 16) * 0x11,
            int(text[1], 16) * 0x11,
            int(text[2], 16) * 0x11,
        )

    return (
        int(text[0:2], 16),
        int(text[2:4], 16),
        int(text[4:6], 16),
    )
