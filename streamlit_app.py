# streamlit_app.py
"""Main entry point for Streamlit app."""

import sys
from pathlib import Path

# Make the costbasis package importable without installing it
sys.path.insert(0, str(Path(__file__).parent))

from costbasis.ui import app

app.run()
