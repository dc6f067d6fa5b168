from __future__ import annotations
import streamlit as st

from hayvn_core.ui.page_shell import configure_page
from hayvn_core.ui.theme import hero_card, status_pill
from hayvn_core.ui.top_nav import render_top_nav
from hayvn_core.ui.router import StreamlitRouter

# ============================================================================
# PAGE CONFIGURATION
# ============================================================================
configure_page("Home", "/")
render_top_nav("/")

router = StreamlitRouter()

# ============================================================================
# HERO
# ============================================================================
status_pill("Hayvn-RE · Private Beta")

hero_card(
    "A modern command center for your real estate business.",
    "Track clients, tours, offers, messages, and everything else in one place. "
    "Built for agents who run their business on their phone, not inside a 2004 MLS interface.",
)

col1, col2, _ = st.columns([1, 1, 3])
with col1:
    if st.button("Open Dashboard", type="primary", use_container_width=True):
        router.navigate("/dashboard")
with col2:
    if st.button("Agent Sign In", use_container_width=True):
        router.navigate("/sign-in")
