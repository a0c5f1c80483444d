# costbasis/domain/normalizer.py
"""
Trade normalization.
Turns the four parallel columns of a trade log into typed Trade records.
"""

import logging
import math
from decimal import Decimal, InvalidOperation
from typing import Any, List, Sequence

from costbasis.domain.models import Trade
from costbasis.errors import InvalidInput, InvalidTrade

logger = logging.getLogger(__name__)


class TradeNormalizer:
    """Builds Trade records from raw column values."""

    @staticmethod
    def normalize(
        securities: Sequence[Any],
        actions: Sequence[Any],
        quantities: Sequence[Any],
        prices: Sequence[Any],
    ) -> List[Trade]:
        """
        Zip the trade-log columns into Trade records, preserving order.

        Args:
            securities: Ticker / coin symbol per row
            actions: Action per row (Buy, Sell, DRIP, REWARD, ...)
            quantities: Units per row
            prices: Unit price per row

        Returns:
            List of Trade objects, one per input row

        Raises:
            InvalidInput: if the columns differ in length
            InvalidTrade: if a quantity or price is not a finite number
        """
        lengths = [len(securities), len(actions), len(quantities), len(prices)]
        if len(set(lengths)) != 1:
            raise InvalidInput(
                "Trade log columns must have equal length "
                f"(securities={lengths[0]}, actions={lengths[1]}, "
                f"quantities={lengths[2]}, prices={lengths[3]})"
            )

        trades = []
        for i in range(lengths[0]):
            trades.append(
                Trade(
                    index=i,
                    security=TradeNormalizer.to_text(securities[i]),
                    action=TradeNormalizer.to_text(actions[i]),
                    quantity=TradeNormalizer.to_decimal(quantities[i], index=i, field="quantity"),
                    price=TradeNormalizer.to_decimal(prices[i], index=i, field="price"),
                )
            )

        logger.debug(f"Normalized {len(trades)} trades")
        return trades

    @staticmethod
    def to_text(value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @staticmethod
    def to_decimal(value: Any, index: int, field: str) -> Decimal:
        """Coerce a cell to Decimal. Blank cells read as zero."""
        if value is None:
            return Decimal("0")
        if isinstance(value, bool):
            raise InvalidTrade(index, field, value)

        if isinstance(value, Decimal):
            number = value
        elif isinstance(value, (int, float)):
            # str() keeps 0.1 as 0.1 instead of its binary expansion
            number = Decimal(str(value))
        else:
            text = str(value).strip()
            if not text:
                return Decimal("0")
            if "_" in text:
                # Digit grouping is not a number in a trade log
                raise InvalidTrade(index, field, value)
            try:
                number = Decimal(text)
            except InvalidOperation:
                raise InvalidTrade(index, field, value) from None

        if not number.is_finite():
            raise InvalidTrade(index, field, value)
        if math.isinf(float(number)):
            # Beyond the float range, e.g. "1e400"
            raise InvalidTrade(index, field, value)
        return number
