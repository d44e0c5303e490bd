# config.py
import os
from typing import Optional

try:
    import streamlit as st
    _secrets = getattr(st, "secrets", {})
except Exception:
    _secrets = {}

DEFAULTS = {
    "DATABASE_URL": "sqlite:///doneo.db",
    "LOG_LEVEL": "INFO",
}


def get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    """st.secrets first, then the environment, then built-in defaults."""
    try:
        value = _secrets.get(name)
    except Exception:
        # st.secrets raises when no secrets.toml exists
        value = None
    return value or os.getenv(name) or default or DEFAULTS.get(name)
