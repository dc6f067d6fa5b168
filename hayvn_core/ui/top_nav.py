# =============================================================================
# hayvn_core/ui/top_nav.py
# Streamlit rendering for the session-gated top navigation
# =============================================================================
from __future__ import annotations
import asyncio
from typing import Optional
import streamlit as st

from hayvn_core.auth.navigation import NavView, TopNavController, should_render_top_nav
from hayvn_core.auth.service import SupabaseAuthService
from hayvn_core.config import load_settings
from hayvn_core.data import get_session_supabase_client
from hayvn_core.ui.router import StreamlitRouter
from hayvn_core.ui.theme import MOBILE_BREAKPOINT_PX, DANGER_COLOR, BORDER_COLOR

NAV_STATE_KEY = "top_nav"


def get_navigation_css() -> str:
    """Return CSS that switches between the link bar and the hamburger by width."""
    return f"""
<style>
.st-key-hayvn-topnav {{
    border-bottom: 1px solid {BORDER_COLOR};
    padding-bottom: .5rem;
    margin-bottom: 1rem;
}}
.st-key-hayvn-nav-links div[data-testid="stButton"] > button,
.st-key-hayvn-drawer div[data-testid="stButton"] > button {{
    background: transparent;
    border: none;
    white-space: nowrap;
    font-size: .85rem;
}}
.st-key-hayvn-nav-links div[data-testid="stButton"] > button:hover,
.st-key-hayvn-drawer div[data-testid="stButton"] > button:hover {{
    background: rgba(255,255,255,0.06);
}}
.st-key-hayvn-logout button, .st-key-hayvn-drawer-logout button {{
    color: {DANGER_COLOR} !important;
}}

/* Desktop: full link bar, no hamburger, no drawer */
@media (min-width: {MOBILE_BREAKPOINT_PX}px) {{
    .st-key-hayvn-nav-hamburger, .st-key-hayvn-drawer, .st-key-hayvn-backdrop {{ display: none; }}
}}

/* Mobile: hamburger + slide-in drawer over a dimmed backdrop */
@media (max-width: {MOBILE_BREAKPOINT_PX - 1}px) {{
    .st-key-hayvn-nav-links {{ display: none; }}
    .st-key-hayvn-backdrop button {{
        position: fixed;
        inset: 0;
        z-index: 40;
        width: 100vw;
        height: 100vh;
        border: none;
        border-radius: 0;
        background: rgba(0,0,0,0.3);
        color: transparent;
    }}
    .st-key-hayvn-drawer {{
        position: fixed;
        top: 0;
        right: 0;
        z-index: 50;
        width: 16rem;
        height: 100vh;
        overflow-y: auto;
        background: #0F172A;
        border-left: 1px solid {BORDER_COLOR};
        padding: .75rem;
    }}
}}
</style>
"""


def get_top_nav() -> TopNavController:
    """
    Get the mounted navigation controller for this browser session,
    creating and mounting it on first use.
    """
    nav = st.session_state.get(NAV_STATE_KEY)
    if nav is None:
        settings = load_settings()
        nav = TopNavController(
            SupabaseAuthService(get_session_supabase_client()),
            StreamlitRouter(),
            home_path=settings.home_path,
            sign_in_path=settings.sign_in_path,
        )
        st.session_state[NAV_STATE_KEY] = nav

    if not nav.is_mounted:
        asyncio.run(nav.mount())
    return nav


def teardown_top_nav():
    """Unmount and forget the controller (e.g. when entering the client portal)."""
    nav = st.session_state.get(NAV_STATE_KEY)
    if nav is not None:
        nav.unmount()
        st.session_state[NAV_STATE_KEY] = None


def render_top_nav(current_path: str) -> Optional[NavView]:
    """
    Render the header for the current page.

    Args:
        current_path: Destination path of the page being rendered

    Returns:
        The view that was drawn, or None when nothing was shown
    """
    if not should_render_top_nav(current_path):
        teardown_top_nav()
        return None

    nav = get_top_nav()

    # A sign-out seen on the refresh thread redirects here
    if isinstance(nav.router, StreamlitRouter):
        nav.router.resume_pending()

    view = nav.render()
    if view is None:
        return None

    st.markdown(get_navigation_css(), unsafe_allow_html=True)

    with st.container(key="hayvn-topnav"):
        brand_col, links_col, burger_col = st.columns([2, 9, 1], vertical_alignment="center")

        with brand_col:
            if st.button(f"**{view.brand}** {view.brand_suffix}", key="hayvn-brand"):
                nav.activate_link(view.home_href)

        with links_col:
            with st.container(key="hayvn-nav-links"):
                cols = st.columns(len(view.links) + 1)
                for col, link in zip(cols, view.links):
                    with col:
                        if st.button(link.label, key=f"nav_{link.href}",
                                     disabled=link.href == current_path):
                            nav.activate_link(link.href)
                with cols[-1]:
                    if st.button(view.logout_label, key="hayvn-logout"):
                        asyncio.run(nav.logout())

        with burger_col:
            with st.container(key="hayvn-nav-hamburger"):
                if st.button("☰", key="hayvn-toggle", help=view.toggle_label):
                    nav.toggle_drawer()
                    st.rerun()

    if view.drawer is not None:
        _render_drawer(nav, view, current_path)

    return view


def _render_drawer(nav: TopNavController, view: NavView, current_path: str):
    drawer = view.drawer

    with st.container(key="hayvn-backdrop"):
        if st.button(drawer.close_label, key="hayvn-backdrop-dismiss"):
            nav.dismiss_backdrop()
            st.rerun()

    with st.container(key="hayvn-drawer"):
        head_col, close_col = st.columns([3, 1], vertical_alignment="center")
        with head_col:
            st.markdown(f"**{drawer.title}**")
        with close_col:
            if st.button(drawer.close_label, key="hayvn-drawer-close"):
                nav.close_drawer()
                st.rerun()

        for link in drawer.links:
            if st.button(link.label, key=f"drawer_{link.href}", use_container_width=True,
                         disabled=link.href == current_path):
                nav.activate_link(link.href)

        if st.button(drawer.logout_label, key="hayvn-drawer-logout", use_container_width=True):
            asyncio.run(nav.logout())
