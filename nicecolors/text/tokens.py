import math
import re
from typing import List, Optional, Tuple

from ..types.color_types import MAX_DECIMAL

ARGUMENT_SEPARATORS = re.compile(r"[, ]")
UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")
SIGNED_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def strip_function_call(text: str, name: str) -> Optional[Tuple[str, int]]:
    """
    Split ``name(...)`` / ``namea(...)`` into its argument body and the number
    of arguments the prefix expects (3, or 4 for the alpha form).

    Returns ``None`` when the prefix or the closing parenthesis is missing.
    """
    if text.startswith(f"{name}("):
        body, expected = text[len(name) + 1:], 3
    elif text.startswith(f"{name}a("):
        body, expected = text[len(name) + 2:], 4
    else:
        return None

    if not body.endswith(")"):
        return None
    return body[:-1], expected


def split_arguments(body: str) -> List[str]:
    """Split on commas and spaces, trimming tokens and dropping empty ones."""
    tokens = (token.strip() for token in ARGUMENT_SEPARATORS.split(body))
    return [token for token in tokens if token]


def parse_unsigned(token: str) -> Optional[int]:
    """Parse a base-10 unsigned 32-bit integer (a leading ``+`` is allowed)."""
    if not UNSIGNED_PATTERN.fullmatch(token):
        return None
    value = int(token)
    if value > MAX_DECIMAL:
        return None
    return value


def parse_signed(token: str) -> Optional[int]:
    if not SIGNED_PATTERN.fullmatch(token):
        return None
    return int(token)


def parse_float(token: str) -> Optional[float]:
    """Parse a plain ASCII decimal, optionally with an exponent. Non-finite results are rejected."""
    if not FLOAT_PATTERN.fullmatch(token):
        return None
    value = float(token)
    if not math.isfinite(value):
        return None
    return value
