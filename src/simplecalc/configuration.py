#  This file is part of SimpleCalc.
#
#  SPDX-FileCopyrightText: 2025 SimpleCalc Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides a configuration interface for the calculator."""

import dataclasses


@dataclasses.dataclass
class CalculatorConfiguration:
    """Configuration related to the arithmetic operations."""

    check_overflow: bool = False
    """Raise an error if the result of an addition, subtraction, or multiplication
    does not fit into a signed 32-bit integer.  By default such results silently
    wrap around, like native two's-complement arithmetic does."""


@dataclasses.dataclass
class Configuration:
    """General configuration for SimpleCalc."""

    calculator: CalculatorConfiguration = dataclasses.field(
        default_factory=CalculatorConfiguration
    )
    """Calculator configuration."""


# Singleton instance of the configuration.
configuration = Configuration()
