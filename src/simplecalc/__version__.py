#  This file is part of SimpleCalc.
#
#  SPDX-FileCopyrightText: 2025 SimpleCalc Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides the version of SimpleCalc."""

__version__ = "0.1.0"
