# costbasis/io/trade_log.py
"""
Trade log reader.
Loads a CSV export of the trade sheet into the four columns the pipeline takes.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

import pandas as pd

from costbasis.errors import InvalidInput

logger = logging.getLogger(__name__)


@dataclass
class TradeLogColumns:
    """Header names of the trade-log columns."""
    security: str = "Security"
    action: str = "Action"
    quantity: str = "Quantity"
    price: str = "Price"


@dataclass
class TradeColumns:
    """Parallel columns of a trade log, in file order."""
    securities: List[Any] = field(default_factory=list)
    actions: List[Any] = field(default_factory=list)
    quantities: List[Any] = field(default_factory=list)
    prices: List[Any] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.securities)


DEFAULT_COLUMNS = TradeLogColumns()


class TradeLogReader:
    """Parse trade-log exports."""

    @staticmethod
    def read_csv(source: Any, columns: TradeLogColumns = DEFAULT_COLUMNS) -> TradeColumns:
        """
        Read a trade-log CSV.

        Args:
            source: Path, buffer or uploaded file accepted by pandas.read_csv
            columns: Header names to look for (matched case-insensitively)

        Returns:
            TradeColumns with raw cell text; numeric coercion is left to the normalizer
        """
        # Keep every cell as text so "1e-8" or "" reach the normalizer untouched
        df = pd.read_csv(source, dtype=str, keep_default_na=False, skipinitialspace=True)
        return TradeLogReader.from_frame(df, columns)

    @staticmethod
    def from_frame(df: pd.DataFrame, columns: TradeLogColumns = DEFAULT_COLUMNS) -> TradeColumns:
        """Extract trade columns from a DataFrame, dropping fully blank rows."""
        header = TradeLogReader._resolve_headers(df, columns)

        frame = df[[header["security"], header["action"], header["quantity"], header["price"]]]
        frame = frame.fillna("")

        blank = pd.Series(True, index=frame.index)
        for col in frame.columns:
            blank &= frame[col].astype(str).str.strip() == ""
        if blank.any():
            logger.debug(f"Dropping {int(blank.sum())} blank rows from trade log")
        frame = frame[~blank]

        result = TradeColumns(
            securities=frame[header["security"]].tolist(),
            actions=frame[header["action"]].tolist(),
            quantities=frame[header["quantity"]].tolist(),
            prices=frame[header["price"]].tolist(),
        )
        logger.info(f"Read {len(result)} trade rows")
        return result

    @staticmethod
    def _resolve_headers(df: pd.DataFrame, columns: TradeLogColumns) -> Dict[str, Union[str, Any]]:
        by_name = {str(c).strip().lower(): c for c in df.columns}

        header = {}
        missing = []
        for key in ("security", "action", "quantity", "price"):
            wanted = getattr(columns, key)
            actual = by_name.get(wanted.strip().lower())
            if actual is None:
                missing.append(wanted)
            else:
                header[key] = actual

        if missing:
            raise InvalidInput(f"Trade log is missing column(s): {', '.join(missing)}")
        return header
