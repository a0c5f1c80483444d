# tests/conftest.py
"""Test configuration and fixtures."""

import pytest

from costbasis.config import CRYPTO, EQUITY
from costbasis.domain.ledger import FifoLedgerEngine


@pytest.fixture(name="equity_engine")
def equity_engine_fixture():
    """FIFO engine with the equity vocabulary (5 decimals)."""
    return FifoLedgerEngine(EQUITY)


@pytest.fixture(name="crypto_engine")
def crypto_engine_fixture():
    """FIFO engine with the crypto vocabulary (8 decimals)."""
    return FifoLedgerEngine(CRYPTO)


@pytest.fixture(name="sample_csv")
def sample_csv_fixture():
    """Provide a sample trade-log CSV export."""
    return """Date,Security,Action,Quantity,Price,Notes
2025-01-02,AAPL,Buy,10,100,
2025-01-03,AAPL,Buy,5,120,
2025-01-10,MSFT,Buy,4,320.10,
2025-01-15,AAPL,Sell,12,150,partial
2025-02-01,MSFT,Transfer,4,0,moved to other broker
,,,,,
2025-02-03,KO,DRIP,0.12345,61.2,
"""


@pytest.fixture(name="custom_yaml")
def custom_yaml_fixture(tmp_path):
    """Write a custom ledger config to a temp file."""
    path = tmp_path / "broker.yaml"
    path.write_text(
        """name: broker
precision: 6
disposal_action: SELL
acquisitions:
  - BUY
  - action: Stake
    case_insensitive: true
""",
        encoding="utf-8",
    )
    return path
