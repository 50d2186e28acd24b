#  This file is part of SimpleCalc.
#
#  SPDX-FileCopyrightText: 2025 SimpleCalc Contributors
#
#  SPDX-License-Identifier: MIT
#
"""SimpleCalc is a basic integer calculator that keeps a history of its operations."""

import simplecalc.configuration as config

from simplecalc.__version__ import __version__
from simplecalc.calculator import AbstractCalculator
from simplecalc.calculator import SimpleCalculator
from simplecalc.history import AbstractHistory
from simplecalc.history import InMemoryHistory
from simplecalc.utils.exceptions import ArithmeticOverflowError
from simplecalc.utils.exceptions import InvalidArgumentError


Configuration = config.Configuration
CalculatorConfiguration = config.CalculatorConfiguration

__all__ = [
    "AbstractCalculator",
    "AbstractHistory",
    "ArithmeticOverflowError",
    "CalculatorConfiguration",
    "Configuration",
    "InMemoryHistory",
    "InvalidArgumentError",
    "SimpleCalculator",
    "__version__",
]
