import streamlit as st

# Central registry for session-state keys used across the app.
SESSION_DEFAULTS = {
    "top_nav": None,
    "sign_in_flow": None,
    "debug_mode": False,
    "current_path": "/",
}


def init_state(debug_mode: bool = False):
    """Initialize session state with defaults."""
    for k, v in SESSION_DEFAULTS.items():
        if k not in st.session_state:
            st.session_state[k] = v

    if debug_mode:
        st.session_state["debug_mode"] = True
