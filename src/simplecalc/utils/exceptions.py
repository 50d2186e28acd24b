#  This file is part of SimpleCalc.
#
#  SPDX-FileCopyrightText: 2025 SimpleCalc Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides custom exception types."""


class InvalidArgumentError(ValueError):
    """Raised if an operation receives an argument it cannot work with.

    This is the case for a zero divisor and for a negative number of history
    entries to retrieve.
    """


class ArithmeticOverflowError(OverflowError):
    """Raised if a result leaves the 32-bit integer range while overflow checks are on."""

    def __init__(self, direction: str, operation: str) -> None:
        """Create a new arithmetic overflow error.

        Args:
            direction: Either ``"overflow"`` or ``"underflow"``
            operation: The name of the operation, e.g., ``"addition"``
        """
        super().__init__(f"Integer {direction} in {operation}")
        self.direction = direction
        self.operation = operation
