# =============================================================================
# hayvn_core/ui/router.py
# Path-based navigation on top of Streamlit multipage apps
# =============================================================================
from __future__ import annotations
from typing import Dict, Optional
import streamlit as st
from streamlit.runtime.scriptrunner import get_script_run_ctx

from hayvn_core.errors import RouteNotFoundError
from hayvn_core.logging import get_logger

logger = get_logger(__name__)

# Destination path -> page script (relative to the entrypoint)
ROUTES: Dict[str, str] = {
    "/": "Home.py",
    "/sign-in": "pages/00_Sign_In.py",
    "/dashboard": "pages/01_Dashboard.py",
    "/search": "pages/02_Search.py",
    "/clients": "pages/03_Clients.py",
    "/properties": "pages/04_Properties.py",
    "/pipeline": "pages/05_Pipeline.py",
    "/tours": "pages/06_Tours.py",
    "/offers": "pages/07_Offers.py",
    "/market-radar": "pages/08_Market_Radar.py",
    "/analytics": "pages/09_Analytics.py",
    "/settings": "pages/10_Settings.py",
}


class StreamlitRouter:
    """
    Router that maps destination paths to page scripts and switches to them.

    st.switch_page stops the current script run, so navigate() does not
    return when it succeeds inside a running app.

    Auth events can arrive on supabase's refresh-timer thread, where there is
    no script run to switch. Those requests are parked as `pending_path` and
    carried out by resume_pending() on the next run.
    """

    def __init__(self, routes: Optional[Dict[str, str]] = None):
        self.routes = dict(ROUTES if routes is None else routes)
        self.pending_path: Optional[str] = None

    def page_for(self, path: str) -> str:
        normalized = path if path == "/" else path.rstrip("/")
        try:
            return self.routes[normalized]
        except KeyError:
            raise RouteNotFoundError(f"No page registered for {path}", path=path) from None

    def navigate(self, path: str) -> None:
        page = self.page_for(path)

        if get_script_run_ctx(suppress_warning=True) is None:
            logger.info(f"Deferring navigation to {path} until the next run")
            self.pending_path = path
            return

        logger.info(f"Navigating to {path} ({page})")
        self.pending_path = None
        st.session_state["current_path"] = path
        st.switch_page(page)

    def resume_pending(self) -> None:
        """Carry out a navigation that was requested off the script thread."""
        path, self.pending_path = self.pending_path, None
        if path is not None:
            self.navigate(path)
