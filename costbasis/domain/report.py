# costbasis/domain/report.py
"""Tabular views of position summaries for display and export."""

from decimal import Decimal
from typing import Dict, List

import pandas as pd

from costbasis.domain.models import PositionSummary

POSITION_COLUMNS = ["security", "quantity", "average_cost", "cost_basis"]


class PositionReport:
    """Turn position summaries into DataFrames and headline numbers."""

    @staticmethod
    def positions_frame(summaries: List[PositionSummary]) -> pd.DataFrame:
        """
        Build the positions table.

        Returns DataFrame with columns: security, quantity, average_cost, cost_basis
        """
        if not summaries:
            return pd.DataFrame(columns=POSITION_COLUMNS)

        rows = []
        for summary in summaries:
            rows.append(
                {
                    "security": summary.security,
                    "quantity": float(summary.total_quantity),
                    "average_cost": float(summary.average_cost),
                    "cost_basis": float(summary.cost_basis),
                }
            )
        return pd.DataFrame(rows, columns=POSITION_COLUMNS)

    @staticmethod
    def portfolio_totals(summaries: List[PositionSummary]) -> Dict:
        """Number of open positions and their combined cost basis."""
        total_cost = sum((s.cost_basis for s in summaries), Decimal(0))
        return {
            "positions": len(summaries),
            "cost_basis": total_cost,
        }
