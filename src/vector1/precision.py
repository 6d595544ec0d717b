"""
Single-precision helpers.

The ScalarVector component is an IEEE-754 binary32 value, while Python only
has binary64 floats. Everything that stores or prints a component goes
through this module:

    to_single      round a real number to the nearest binary32 value
    format_single  shortest binary32 string, general-format style

Python arithmetic on two binary32 values followed by to_single() gives the
same result as native binary32 arithmetic for + - * /, so callers only have
to narrow the result.
"""

from __future__ import annotations

import math
import struct


_SINGLE = struct.Struct("<f")

# Shortest round-trip representation of any binary32 value needs at most 9
# significant digits.
_MAX_SINGLE_DIGITS = 9

# Decimal exponents printed in fixed notation: 1E-05 and 1E+07 switch to
# scientific notation.
_FIXED_MIN_EXPONENT = -4
_FIXED_MAX_EXPONENT = 6


def to_single(value: float) -> float:
    """
    Round a real number to the nearest binary32 value.

    Values beyond the binary32 range become infinity with the same sign.
    NaN and infinities pass through unchanged.

    Args:
        value: int, float or any object float() accepts

    Returns:
        The binary32 value widened back to a Python float
    """
    try:
        value = float(value)
        return _SINGLE.unpack(_SINGLE.pack(value))[0]
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _shortest_digits(value: float) -> int:
    for digits in range(1, _MAX_SINGLE_DIGITS):
        if to_single(float(f"{value:.{digits}g}")) == value:
            return digits
    return _MAX_SINGLE_DIGITS


def format_single(value: float) -> str:
    """
    Render a binary32 value the way the component is printed.

    Examples:
        3.0          -> "3"
        0.5          -> "0.5"
        -0.0         -> "-0"
        1e-05        -> "1E-05"
        3.4028235e38 -> "3.4028235E+38"
        nan          -> "NaN"
    """
    value = to_single(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    digits = _shortest_digits(value)
    mantissa, _, exponent_str = f"{value:.{digits - 1}e}".partition("e")
    exponent = int(exponent_str)

    if _FIXED_MIN_EXPONENT <= exponent <= _FIXED_MAX_EXPONENT:
        decimals = max(digits - 1 - exponent, 0)
        return f"{value:.{decimals}f}"

    sign = "+" if exponent >= 0 else "-"
    return f"{mantissa}E{sign}{abs(exponent):02d}"
