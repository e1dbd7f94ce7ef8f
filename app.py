# app.py
from pathlib import Path
import sys
import importlib
import streamlit as st

# ==== Paths & sys.path ====
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.config import load_settings
from core.log_utils import setup_logging

# ==== Streamlit ====
st.set_page_config(
    page_title="Safe Password Generator",
    page_icon="🔐",
    layout="wide",
)

# ==== Settings & logging ====
try:
    SETTINGS = load_settings()
except ValueError as e:
    st.error(f"Configuration error: {e}")
    st.stop()
setup_logging(SETTINGS.log_level, SETTINGS.log_file)

# ==== Pages ====
required_modules = {
    "mainwindow_page": "🏠 Home",
    "generator_page":  "🔐 Generator",
}

PAGES = {}
errors = []

for mod_name, label in required_modules.items():
    try:
        mod = importlib.import_module(f"ui.{mod_name}")
        render_fn = getattr(mod, "render", None)
        if callable(render_fn):
            PAGES[label] = render_fn
        else:
            errors.append(f"Module 'ui.{mod_name}' has no render() function.")
    except ImportError as e:
        errors.append(f"Cannot import 'ui.{mod_name}': {e}")

# Show import errors but keep the pages that loaded
for msg in errors:
    st.error(msg)
if not PAGES:
    st.stop()

# ==== Sidebar ====
choice = st.sidebar.radio(" ", list(PAGES.keys()), index=len(PAGES) - 1, key="spg-page")
# every page takes the loaded settings
PAGES[choice](SETTINGS)
