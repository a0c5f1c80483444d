# costbasis/errors.py
"""Exceptions raised while turning a trade log into positions."""

from typing import Any


class CostBasisError(Exception):
    """Base class for all cost-basis errors."""


class InvalidInput(CostBasisError):
    """Input has the wrong shape (unequal columns, missing columns, bad config)."""


class InvalidTrade(CostBasisError):
    """A single trade row could not be coerced into a valid trade."""

    def __init__(self, index: int, field: str, value: Any):
        self.index = index
        self.field = field
        self.value = value
        super().__init__(f"Row {index}: {field} is not a finite number: {value!r}")
