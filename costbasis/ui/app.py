# costbasis/ui/app.py
"""Main Streamlit application."""

import streamlit as st

from costbasis.config import PRESETS, configure_logging, parse_config
from costbasis.errors import CostBasisError
from costbasis.ui.pages import positions_page


def init_session_state():
    """Initialize Streamlit session state."""
    if "ledger_config" not in st.session_state:
        st.session_state.ledger_config = PRESETS["equity"]


def sidebar():
    """Render ledger settings."""
    with st.sidebar:
        st.title("⚙️ Settings")

        name = st.selectbox(
            "Asset class",
            list(PRESETS),
            format_func=lambda n: n.capitalize(),
        )
        st.session_state.ledger_config = PRESETS[name]

        # Custom vocabulary / precision overrides the preset
        custom = st.file_uploader("Custom ledger config (YAML)", type=["yaml", "yml"])
        if custom:
            try:
                st.session_state.ledger_config = parse_config(custom.read().decode("utf-8"))
            except CostBasisError as e:
                st.error(str(e))

        config = st.session_state.ledger_config
        st.caption(
            f"Acquisitions: {', '.join(rule.action for rule in config.acquisitions)} · "
            f"Disposal: {config.disposal_action} · Precision: {config.precision}"
        )


def main_app():
    """Render main application."""
    st.title("FIFO Positions")
    sidebar()
    positions_page.render(st.session_state.ledger_config)


def run():
    """Entry point; Streamlit calls this on every rerun."""
    st.set_page_config(
        page_title="FIFO Positions",
        page_icon="📊",
        layout="wide",
        initial_sidebar_state="expanded",
    )
    configure_logging()
    init_session_state()
    main_app()
