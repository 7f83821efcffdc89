"""Decimal rendering of double-precision numbers in tool output.

Clients of the original server saw numbers formatted the way JavaScript's
``String(number)`` does, so ``5.0`` renders as ``5`` and ``1e-7`` keeps its
exponent form. ``format_number`` reproduces that output from Python floats.
"""

import math
from decimal import Decimal
from typing import Union

Number = Union[int, float]


def to_double(value: Number) -> float:
    """Coerce a JSON number to an IEEE-754 double."""
    try:
        return float(value)
    except OverflowError:
        # ints beyond the double range saturate, as they would when parsed
        return math.inf if value > 0 else -math.inf


def format_number(value: Number) -> str:
    """Shortest round-trip decimal string for a double.

    Args:
        value: Number to render. ints are converted to doubles first.

    Returns:
        String such as ``"5"``, ``"0.30000000000000004"``, ``"1e+21"``,
        ``"NaN"`` or ``"-Infinity"``
    """
    x = to_double(value)

    if math.isnan(x):
        return "NaN"
    if x == 0:
        return "0"
    if x < 0:
        return "-" + format_number(-x)
    if math.isinf(x):
        return "Infinity"

    _, digit_tuple, exponent = Decimal(repr(x)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).lstrip("0")
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    k = len(digits)
    n = exponent + k

    if k <= n <= 21:
        return digits + "0" * (n - k)
    if 0 < n <= 21:
        return digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return "0." + "0" * (-n) + digits

    e = n - 1
    sign = "+" if e >= 0 else "-"
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{mantissa}e{sign}{abs(e)}"
