#  This file is part of SimpleCalc.
#
#  SPDX-FileCopyrightText: 2025 SimpleCalc Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides the history that stores the log entries of a calculator."""

from __future__ import annotations

from abc import ABC
from abc import abstractmethod

from simplecalc.utils.exceptions import InvalidArgumentError


class AbstractHistory(ABC):
    """An ordered store of log entries supporting most-recent retrieval."""

    @abstractmethod
    def record(self, entry: str) -> None:
        """Appends an entry to the history.

        Args:
            entry: The formatted log entry, e.g., ``"2 + 2 = 4"``
        """

    @abstractmethod
    def get_last(self, count: int) -> list[str]:
        """Provides the most recent entries.

        Args:
            count: The maximum number of entries to return

        Returns:
            The last ``min(count, len(self))`` entries, oldest first
        """


class InMemoryHistory(AbstractHistory):
    """A history that keeps all entries in a list, without any size limit."""

    def __init__(self) -> None:  # noqa: D107
        self._entries: list[str] = []

    def record(self, entry: str) -> None:  # noqa: D102
        self._entries.append(entry)

    def get_last(self, count: int) -> list[str]:
        """Provides the most recent entries.

        Args:
            count: The maximum number of entries to return, must not be negative

        Returns:
            A copy of the last ``min(count, len(self))`` entries, oldest first

        Raises:
            InvalidArgumentError: If the count is negative
        """
        if count < 0:
            raise InvalidArgumentError(f"Cannot retrieve a negative number of entries: {count}")
        if count == 0:
            return []
        return self._entries[-count:]

    def __len__(self) -> int:
        return len(self._entries)
