#  This file is part of SimpleCalc.
#
#  SPDX-FileCopyrightText: 2025 SimpleCalc Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides the calculator and its interface.

A calculator performs binary operations on signed 32-bit integers.  After each
successful operation it records a log entry of the form ``"a op b = result"`` in
the history it is currently bound to.
"""

from __future__ import annotations

import logging

from abc import ABC
from abc import abstractmethod
from typing import TYPE_CHECKING

import simplecalc.configuration as config

from simplecalc.utils.exceptions import ArithmeticOverflowError
from simplecalc.utils.exceptions import InvalidArgumentError
from simplecalc.utils.integer import overflow_direction
from simplecalc.utils.integer import truncating_division
from simplecalc.utils.integer import wrap_int32


if TYPE_CHECKING:
    from simplecalc.history import AbstractHistory

_LOGGER = logging.getLogger(__name__)


class AbstractCalculator(ABC):
    """Provides an interface for a calculator that logs into a history."""

    @abstractmethod
    def set_history(self, history: AbstractHistory) -> None:
        """Binds the history that receives the entries of subsequent operations.

        Args:
            history: The new history
        """

    @abstractmethod
    def add(self, a: int, b: int) -> int:
        """Adds two integers.

        Args:
            a: The first summand
            b: The second summand

        Returns:
            The sum
        """

    @abstractmethod
    def subtract(self, a: int, b: int) -> int:
        """Subtracts two integers.

        Args:
            a: The minuend
            b: The subtrahend

        Returns:
            The difference
        """

    @abstractmethod
    def multiply(self, a: int, b: int) -> int:
        """Multiplies two integers.

        Args:
            a: The first factor
            b: The second factor

        Returns:
            The product
        """

    @abstractmethod
    def divide(self, a: int, b: int) -> int:
        """Divides two integers.

        Args:
            a: The dividend
            b: The divisor

        Returns:
            The quotient
        """


class SimpleCalculator(AbstractCalculator):
    """A calculator with native 32-bit semantics.

    Operands are taken as 32-bit values, i.e., larger integers wrap around first.
    Results of additions, subtractions, and multiplications wrap around unless
    ``check_overflow`` is enabled in the configuration.  Divisions truncate
    toward zero.
    """

    def __init__(self, history: AbstractHistory) -> None:
        """Creates a new calculator.

        Args:
            history: The history to record the operations in
        """
        self._history = history

    @property
    def history(self) -> AbstractHistory:
        """Provides the history the calculator currently records into.

        Returns:
            The bound history
        """
        return self._history

    @history.setter
    def history(self, history: AbstractHistory) -> None:
        self.set_history(history)

    def set_history(self, history: AbstractHistory) -> None:  # noqa: D102
        self._history = history

    def add(self, a: int, b: int) -> int:  # noqa: D102
        a, b = wrap_int32(a), wrap_int32(b)
        result = self._fit(a + b, "addition")
        self._log_operation(a, "+", b, result)
        return result

    def subtract(self, a: int, b: int) -> int:  # noqa: D102
        a, b = wrap_int32(a), wrap_int32(b)
        result = self._fit(a - b, "subtraction")
        self._log_operation(a, "-", b, result)
        return result

    def multiply(self, a: int, b: int) -> int:  # noqa: D102
        a, b = wrap_int32(a), wrap_int32(b)
        result = self._fit(a * b, "multiplication")
        self._log_operation(a, "*", b, result)
        return result

    def divide(self, a: int, b: int) -> int:
        """Divides two integers, truncating the quotient toward zero.

        Args:
            a: The dividend
            b: The divisor

        Returns:
            The quotient

        Raises:
            InvalidArgumentError: If the divisor is zero as a 32-bit value
        """
        a, b = wrap_int32(a), wrap_int32(b)
        if b == 0:
            _LOGGER.debug("Rejected division of %d by zero", a)
            raise InvalidArgumentError("Division by zero")
        # INT32_MIN / -1 is the only quotient outside the range; it wraps.
        result = wrap_int32(truncating_division(a, b))
        self._log_operation(a, "/", b, result)
        return result

    @staticmethod
    def _fit(value: int, operation: str) -> int:
        if config.configuration.calculator.check_overflow:
            direction = overflow_direction(value)
            if direction is not None:
                _LOGGER.debug("Integer %s in %s: %d", direction, operation, value)
                raise ArithmeticOverflowError(direction, operation)
        return wrap_int32(value)

    def _log_operation(self, a: int, op: str, b: int, result: int) -> None:
        entry = f"{a} {op} {b} = {result}"
        _LOGGER.debug("Recording %r", entry)
        self._history.record(entry)
