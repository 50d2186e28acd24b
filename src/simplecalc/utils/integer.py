#  This file is part of SimpleCalc.
#
#  SPDX-FileCopyrightText: 2025 SimpleCalc Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides helpers to emulate signed 32-bit integer arithmetic.

Python integers have arbitrary precision, whereas the calculator works on
two's-complement 32-bit values.  Results are therefore computed exactly and
afterwards mapped back into the 32-bit range.
"""

from __future__ import annotations

from typing import Final


INT32_BITS: Final[int] = 32
INT32_MIN: Final[int] = -(2 ** (INT32_BITS - 1))
INT32_MAX: Final[int] = 2 ** (INT32_BITS - 1) - 1

_MODULUS: Final[int] = 2**INT32_BITS


def wrap_int32(value: int) -> int:
    """Maps an integer into the signed 32-bit range using two's complement.

    Args:
        value: An arbitrary integer

    Returns:
        The value the 32-bit register would hold
    """
    return (value - INT32_MIN) % _MODULUS + INT32_MIN


def truncating_division(dividend: int, divisor: int) -> int:
    """Divides two integers and rounds the quotient toward zero.

    Python's ``//`` rounds toward negative infinity, so the quotient is computed on
    the absolute values and the sign is applied afterwards.

    Args:
        dividend: The dividend
        divisor: The divisor, must not be zero

    Returns:
        The quotient truncated toward zero
    """
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient


def overflow_direction(value: int) -> str | None:
    """Checks whether a value leaves the signed 32-bit range.

    Args:
        value: The exact result of an operation

    Returns:
        ``"overflow"`` if the value is too large, ``"underflow"`` if it is too
        small, ``None`` otherwise
    """
    if value > INT32_MAX:
        return "overflow"
    if value < INT32_MIN:
        return "underflow"
    return None
