"""Fixed-width checked integer arithmetic.

Each helper checks its result against the width the program computes in and
raises instead of wrapping.
"""

from __future__ import annotations

from quarry_mine.config import U64_MAX, U128_MAX, U192_MAX
from quarry_mine.errors import ArithmeticOverflow

_WIDTHS = {
    64: U64_MAX,
    128: U128_MAX,
    192: U192_MAX,
}


def fit(value: int, bits: int, what: str = "value") -> int:
    """Return ``value`` if it fits in an unsigned ``bits``-wide integer."""
    limit = _WIDTHS[bits]
    if value < 0 or value > limit:
        raise ArithmeticOverflow(f"{what} does not fit in u{bits}: {value}")
    return value


def mul(a: int, b: int, bits: int = 192) -> int:
    return fit(a * b, bits, f"{a} * {b}")


def add(a: int, b: int, bits: int = 128) -> int:
    return fit(a + b, bits, f"{a} + {b}")


def sub(a: int, b: int, bits: int = 64) -> int:
    return fit(a - b, bits, f"{a} - {b}")


def div(a: int, b: int) -> int:
    if b == 0:
        raise ArithmeticOverflow(f"division by zero: {a} / 0")
    return a // b
