# costbasis/domain/ledger.py
"""
FIFO ledger engine.
Folds a chronological trade sequence into per-security queues of open lots,
consuming the oldest lots first on every sale.
"""

import logging
from collections import deque
from decimal import ROUND_HALF_UP, Context, Decimal, localcontext
from typing import Deque, Iterable, Optional

from costbasis.config import EQUITY, LedgerConfig
from costbasis.domain.models import Ledger, Lot, Trade, new_ledger

logger = logging.getLogger(__name__)

# Integer digits of the largest finite quantity the normalizer lets through
MAX_INTEGER_DIGITS = 310


class FifoLedgerEngine:
    """Maintains open lots per security using FIFO matching."""

    def __init__(self, config: LedgerConfig = EQUITY):
        self.config = config
        self._quantum = Decimal(1).scaleb(-config.precision)
        # Wide enough that rounding and subtraction stay exact at this precision
        self._context = Context(prec=MAX_INTEGER_DIGITS + config.precision, rounding=ROUND_HALF_UP)

    def build(self, trades: Iterable[Trade]) -> Ledger:
        """
        Process trades strictly in input order into a fresh ledger.

        The engine never sorts: chronological order is the caller's job.
        """
        ledger = new_ledger()
        count = 0
        for trade in trades:
            self.apply(ledger, trade)
            count += 1

        logger.info(
            f"[{self.config.name}] processed {count} trades, "
            f"{len(ledger)} securities with open lots"
        )
        return ledger

    def apply(self, ledger: Ledger, trade: Trade) -> None:
        """Apply a single trade to the ledger."""
        if self.config.is_acquisition(trade.action):
            if trade.quantity <= 0:
                logger.debug(f"Row {trade.index}: ignoring {trade.action} of {trade.quantity} {trade.security}")
                return
            self._acquire(ledger, trade)

        elif self.config.is_disposal(trade.action):
            if trade.quantity <= 0:
                logger.debug(f"Row {trade.index}: ignoring {trade.action} of {trade.quantity} {trade.security}")
                return
            self._dispose(ledger, trade)

        else:
            logger.debug(f"Row {trade.index}: unrecognized action {trade.action!r}, skipped")

    def round_quantity(self, value: Decimal) -> Decimal:
        """Round to the configured number of decimals."""
        with localcontext(self._context):
            return value.quantize(self._quantum)

    def _acquire(self, ledger: Ledger, trade: Trade) -> None:
        lots = ledger.get(trade.security)
        if lots is None:
            lots = deque()
            ledger[trade.security] = lots
        lots.append(Lot(remaining_quantity=trade.quantity, unit_cost=trade.price))
        logger.debug(f"Row {trade.index}: new lot {trade.quantity} {trade.security} @ {trade.price}")

    def _dispose(self, ledger: Ledger, trade: Trade) -> None:
        lots = ledger.get(trade.security)
        if lots is None:
            logger.warning(f"Row {trade.index}: sell of {trade.quantity} {trade.security} with no open lots, ignored")
            return

        unsold = self._consume(lots, trade.quantity)
        if unsold > 0:
            # Short sale or missing history: the excess is dropped
            logger.warning(
                f"Row {trade.index}: insufficient lots for sale of {trade.security}, "
                f"discarding {unsold} unmatched units"
            )

        if not lots:
            del ledger[trade.security]
            logger.debug(f"Row {trade.index}: {trade.security} fully liquidated")

    def _consume(self, lots: Deque[Lot], quantity: Decimal) -> Decimal:
        """
        Take quantity from the head of the queue, oldest lot first.

        Both sides are re-rounded to the configured precision on every pass.

        Returns:
            Quantity that could not be matched (0 unless the queue ran dry)
        """
        with localcontext(self._context):
            return self._consume_exact(lots, quantity)

    def _consume_exact(self, lots: Deque[Lot], quantity: Decimal) -> Decimal:
        to_sell = self.round_quantity(quantity)

        while to_sell > 0 and lots:
            lot = lots[0]
            lot.remaining_quantity = self.round_quantity(lot.remaining_quantity)

            if lot.remaining_quantity == to_sell:
                # Exact match: sell the entire oldest lot
                lots.popleft()
                to_sell = Decimal(0)
            elif lot.remaining_quantity < to_sell:
                # Oldest lot is not enough: sell it all and move on
                to_sell = self.round_quantity(to_sell - lot.remaining_quantity)
                lots.popleft()
            else:
                lot.remaining_quantity -= to_sell
                to_sell = Decimal(0)

        return to_sell


def build_ledger(trades: Iterable[Trade], config: Optional[LedgerConfig] = None) -> Ledger:
    """Build a ledger with a one-off engine."""
    return FifoLedgerEngine(config or EQUITY).build(trades)
