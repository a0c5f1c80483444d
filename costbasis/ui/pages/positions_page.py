# costbasis/ui/pages/positions_page.py
"""Positions page - upload a trade log and show open FIFO lots."""

import plotly.express as px
import streamlit as st

from costbasis.config import LedgerConfig
from costbasis.domain.aggregator import PositionAggregator
from costbasis.domain.ledger import FifoLedgerEngine
from costbasis.domain.normalizer import TradeNormalizer
from costbasis.domain.report import PositionReport
from costbasis.errors import CostBasisError
from costbasis.io.trade_log import TradeLogReader


def render(config: LedgerConfig):
    """Render positions page."""
    st.subheader("📥 Trade Log")

    uploaded_file = st.file_uploader(
        "Upload trade log CSV (Security, Action, Quantity, Price)",
        type=["csv"],
        accept_multiple_files=False,
    )
    if not uploaded_file:
        st.info("Upload a trade log to compute positions.")
        return

    try:
        columns = TradeLogReader.read_csv(uploaded_file)
        trades = TradeNormalizer.normalize(
            columns.securities, columns.actions, columns.quantities, columns.prices
        )
    except CostBasisError as e:
        st.error(str(e))
        return

    st.info(f"Parsed {len(trades)} trades from file")

    with st.expander("Preview Trades"):
        for trade in trades[:10]:
            st.write(f"{trade.index} | {trade.security} {trade.action} {trade.quantity} @ {trade.price}")

    ledger = FifoLedgerEngine(config).build(trades)
    summaries = PositionAggregator.summarize(ledger)

    render_positions(summaries)


def render_positions(summaries):
    """Positions table, totals and cost-basis chart."""
    st.subheader("Open Positions")

    totals = PositionReport.portfolio_totals(summaries)
    col1, col2 = st.columns(2)
    col1.metric("Open Positions", totals["positions"])
    col2.metric("Total Cost Basis", f"${float(totals['cost_basis']):,.2f}")

    df = PositionReport.positions_frame(summaries)
    if df.empty:
        st.info("No open positions.")
        return

    st.dataframe(df, use_container_width=True, hide_index=True)

    fig = px.bar(
        df,
        x="security",
        y="cost_basis",
        title="Cost Basis by Security",
        labels={"security": "Security", "cost_basis": "Cost Basis"},
    )
    st.plotly_chart(fig, use_container_width=True)
