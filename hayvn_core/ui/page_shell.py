# =============================================================================
# hayvn_core/ui/page_shell.py
# Shared page setup: config, logging, session gate and header
# =============================================================================
from __future__ import annotations
import asyncio
import logging
import streamlit as st

from hayvn_core.auth.authentication import require_session
from hayvn_core.auth.service import SupabaseAuthService
from hayvn_core.auth.sign_in import SignInFlow
from hayvn_core.config import load_settings
from hayvn_core.data import get_session_supabase_client
from hayvn_core.errors import ConfigurationError, handle_error
from hayvn_core.logging import get_logger, setup_logging
from hayvn_core.state import init_state
from hayvn_core.ui.router import StreamlitRouter
from hayvn_core.ui.theme import apply_css, hero_card
from hayvn_core.ui.top_nav import render_top_nav

logger = get_logger(__name__)


@st.cache_resource
def _init_logging(debug_mode: bool) -> bool:
    setup_logging(level=logging.DEBUG if debug_mode else logging.INFO)
    return True


def configure_page(title: str, path: str):
    """
    Call first on every page: page config, logging, session defaults, theme.
    Stops the script with an error if secrets are missing.
    """
    st.set_page_config(
        page_title=f"Hayvn-RE · {title}",
        page_icon="🏡",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    try:
        settings = load_settings()
    except ConfigurationError as e:
        _init_logging(False)
        handle_error(e)
        st.stop()

    _init_logging(settings.debug_mode)
    init_state(debug_mode=settings.debug_mode)
    st.session_state["current_path"] = path
    apply_css()
    return settings


def complete_pending_sign_in(flow: SignInFlow) -> bool:
    """
    Exchange the ?code= a magic-link or OAuth redirect left in the URL.

    The code is single-use, so it is removed from the URL whether or not
    the exchange succeeds.

    Returns:
        bool: True if a session was established
    """
    auth_code = st.query_params.get("code")
    if not auth_code:
        return False

    signed_in = asyncio.run(flow.complete_from_redirect(auth_code))
    st.query_params.pop("code", None)
    if not signed_in:
        logger.warning(f"Auth code exchange did not produce a session: {flow.error_message}")
    return signed_in


def require_authentication(sign_in_path: str = "/sign-in"):
    """
    Page guard: finish any pending redirect sign-in, then send the agent
    to sign-in unless a session exists.
    """
    placeholder = st.empty()
    placeholder.caption("Checking session…")

    auth = SupabaseAuthService(get_session_supabase_client())
    complete_pending_sign_in(SignInFlow(auth))

    allowed = asyncio.run(require_session(auth, StreamlitRouter(), sign_in_path))
    if not allowed:
        st.stop()

    placeholder.empty()


def render_agent_page(path: str, title: str, description: str):
    """Gated agent page with the top navigation and a section header."""
    settings = configure_page(title, path)
    render_top_nav(path)
    require_authentication(settings.sign_in_path)
    hero_card(title, description)
