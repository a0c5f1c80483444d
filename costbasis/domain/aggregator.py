# costbasis/domain/aggregator.py
"""Reduce each security's open lots to a single position row."""

from decimal import Decimal
from typing import List

from costbasis.domain.models import Ledger, PositionSummary


class PositionAggregator:
    """Read-only projection of a ledger into position summaries."""

    @staticmethod
    def summarize(ledger: Ledger) -> List[PositionSummary]:
        """
        One summary per security, in first-seen acquisition order.

        Average cost is cost-weighted over the remaining quantity of each
        surviving lot, and 0 when nothing remains.
        """
        summaries = []
        for security, lots in ledger.items():
            total_quantity = Decimal(0)
            total_cost = Decimal(0)
            for lot in lots:
                total_quantity += lot.remaining_quantity
                total_cost += lot.remaining_quantity * lot.unit_cost

            average_cost = total_cost / total_quantity if total_quantity > 0 else Decimal(0)

            summaries.append(
                PositionSummary(
                    security=security,
                    total_quantity=total_quantity,
                    average_cost=average_cost,
                    cost_basis=total_cost,
                )
            )
        return summaries
