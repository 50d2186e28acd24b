#  This file is part of SimpleCalc.
#
#  SPDX-FileCopyrightText: 2025 SimpleCalc Contributors
#
#  SPDX-License-Identifier: MIT
#
from unittest.mock import MagicMock

import pytest

import simplecalc.configuration as config

from simplecalc.calculator import SimpleCalculator
from simplecalc.history import AbstractHistory
from simplecalc.history import InMemoryHistory


@pytest.fixture(autouse=True)
def reset_configuration():
    """Automatically reset the configuration singleton."""
    config.configuration = config.Configuration()


@pytest.fixture
def history_mock():
    return MagicMock(AbstractHistory)


@pytest.fixture
def calculator(history_mock):
    return SimpleCalculator(history_mock)


@pytest.fixture
def history():
    return InMemoryHistory()
