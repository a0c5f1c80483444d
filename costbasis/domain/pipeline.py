# costbasis/domain/pipeline.py
"""
Position pipeline: normalize -> FIFO ledger -> aggregate.
Each call allocates its own ledger; nothing is shared between calls.
"""

from typing import Any, List, Optional, Sequence, Union

from costbasis.config import CRYPTO, EQUITY, LedgerConfig
from costbasis.domain.aggregator import PositionAggregator
from costbasis.domain.ledger import FifoLedgerEngine
from costbasis.domain.models import PositionSummary
from costbasis.domain.normalizer import TradeNormalizer

Row = List[Union[str, float]]


def compute_positions(
    securities: Sequence[Any],
    actions: Sequence[Any],
    quantities: Sequence[Any],
    prices: Sequence[Any],
    config: Optional[LedgerConfig] = None,
) -> List[PositionSummary]:
    """Run the full pipeline and return one summary per open position."""
    trades = TradeNormalizer.normalize(securities, actions, quantities, prices)
    ledger = FifoLedgerEngine(config or EQUITY).build(trades)
    return PositionAggregator.summarize(ledger)


def equity_positions(
    securities: Sequence[Any],
    actions: Sequence[Any],
    quantities: Sequence[Any],
    prices: Sequence[Any],
) -> List[Row]:
    """Stock positions as [ticker, shares, average cost] rows."""
    summaries = compute_positions(securities, actions, quantities, prices, config=EQUITY)
    return [summary.as_row() for summary in summaries]


def crypto_positions(
    securities: Sequence[Any],
    actions: Sequence[Any],
    quantities: Sequence[Any],
    prices: Sequence[Any],
) -> List[Row]:
    """Crypto positions as [symbol, coins, average buy price] rows."""
    summaries = compute_positions(securities, actions, quantities, prices, config=CRYPTO)
    return [summary.as_row() for summary in summaries]
