"""Test trade-log CSV reader."""

import io

import pandas as pd
import pytest

from costbasis.domain.pipeline import equity_positions
from costbasis.errors import InvalidInput
from costbasis.io.trade_log import TradeLogColumns, TradeLogReader


def test_read_valid_csv(sample_csv):
    columns = TradeLogReader.read_csv(io.StringIO(sample_csv))

    # The fully blank row is dropped
    assert len(columns) == 6
    assert columns.securities[0] == "AAPL"
    assert columns.actions[3] == "Sell"
    assert columns.quantities[5] == "0.12345"
    assert columns.prices[2] == "320.10"


def test_csv_to_positions(sample_csv):
    columns = TradeLogReader.read_csv(io.StringIO(sample_csv))

    rows = equity_positions(columns.securities, columns.actions, columns.quantities, columns.prices)

    assert rows == [
        ["AAPL", 3.0, 120.0],
        ["MSFT", 4.0, 320.1],
        ["KO", 0.12345, 61.2],
    ]


def test_headers_match_case_insensitively():
    csv = "security , ACTION,quantity,PRICE\nBTC,Buy,0.5,40000\n"

    columns = TradeLogReader.read_csv(io.StringIO(csv))

    assert columns.securities == ["BTC"]
    assert columns.quantities == ["0.5"]


def test_custom_column_names():
    df = pd.DataFrame(
        {
            "Ticker": ["AAPL"],
            "Type": ["Buy"],
            "Shares": [10],
            "Cost": [150.0],
        }
    )

    columns = TradeLogReader.from_frame(
        df, TradeLogColumns(security="Ticker", action="Type", quantity="Shares", price="Cost")
    )

    assert columns.actions == ["Buy"]
    assert columns.quantities == [10]


def test_missing_column_rejected():
    csv = "Security,Action,Quantity\nAAPL,Buy,10\n"

    with pytest.raises(InvalidInput) as exc_info:
        TradeLogReader.read_csv(io.StringIO(csv))

    assert "Price" in str(exc_info.value)


def test_header_only_csv():
    columns = TradeLogReader.read_csv(io.StringIO("Security,Action,Quantity,Price\n"))

    assert len(columns) == 0
