# costbasis/domain/models.py
"""Domain value objects."""

import collections
from dataclasses import dataclass
from decimal import Decimal
from typing import Deque, List, OrderedDict, Union


@dataclass(frozen=True)
class Trade:
    """One normalized row of the trade log."""
    index: int  # Position in the input log
    security: str
    action: str
    quantity: Decimal
    price: Decimal


@dataclass
class Lot:
    """Represents an open lot (for FIFO matching)."""
    remaining_quantity: Decimal
    unit_cost: Decimal


# security -> open lots, oldest first
Ledger = OrderedDict[str, Deque[Lot]]


def new_ledger() -> Ledger:
    return collections.OrderedDict()


@dataclass(frozen=True)
class PositionSummary:
    """Open position of one security, derived from its surviving lots."""
    security: str
    total_quantity: Decimal
    average_cost: Decimal
    cost_basis: Decimal = Decimal("0")

    def as_row(self) -> List[Union[str, float]]:
        """Output row: [security, total quantity, average cost]."""
        return [self.security, float(self.total_quantity), float(self.average_cost)]
