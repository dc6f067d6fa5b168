# =============================================================================
# hayvn_core/ui/sign_in_page.py
# Agent sign-in page: Google OAuth, email magic link, redirect completion
# =============================================================================
from __future__ import annotations
import asyncio
import streamlit as st

from hayvn_core.auth.service import SupabaseAuthService
from hayvn_core.auth.sign_in import SignInFlow, SignInStatus
from hayvn_core.data import get_session_supabase_client
from hayvn_core.errors import ErrorContext
from hayvn_core.ui.page_shell import complete_pending_sign_in, configure_page
from hayvn_core.ui.router import StreamlitRouter
from hayvn_core.ui.theme import status_pill
from hayvn_core.ui.top_nav import render_top_nav

FLOW_STATE_KEY = "sign_in_flow"


def get_sign_in_flow(redirect_to: str) -> SignInFlow:
    """Get this browser session's sign-in flow, creating it on first use."""
    flow = st.session_state.get(FLOW_STATE_KEY)
    if flow is None:
        flow = SignInFlow(
            SupabaseAuthService(get_session_supabase_client()),
            redirect_to=redirect_to,
        )
        st.session_state[FLOW_STATE_KEY] = flow
    return flow


def render_sign_in_page():
    settings = configure_page("Sign in", "/sign-in")
    render_top_nav("/sign-in")
    router = StreamlitRouter()

    # Providers send the agent back here with ?code=, where the flow
    # (and the PKCE verifier in its client) lives
    flow = get_sign_in_flow(settings.redirect_url(settings.sign_in_path))

    if complete_pending_sign_in(flow):
        router.navigate(settings.home_path)

    _, center, _ = st.columns([1, 2, 1])
    with center:
        status_pill("Hayvn-RE Agent Portal")
        st.title("Sign in")
        st.caption("Use your Google account or request a secure magic link by email.")

        if st.button("Continue with Google", key="google-sign-in",
                     use_container_width=True, disabled=flow.is_loading):
            url = asyncio.run(flow.start_google_sign_in())
            if url:
                st.link_button("Open Google sign-in", url, use_container_width=True)

        st.divider()

        with st.form("magic_link"):
            email = st.text_input("Work email", placeholder="you@example.com")
            st.caption("We'll email you a one-time sign-in link. No passwords to remember.")
            submitted = st.form_submit_button("Send magic link", use_container_width=True)

        if submitted:
            with ErrorContext("Sending magic link"):
                asyncio.run(flow.request_magic_link(email))

        if flow.status == SignInStatus.SENT:
            st.success(
                "Check your email for a sign-in link. Open it in this browser "
                "and you'll be signed in and taken to your dashboard."
            )
        elif flow.status == SignInStatus.ERROR and flow.error_message:
            st.error(flow.error_message)

        if st.button("Skip for now and go to dashboard", key="skip-sign-in", type="tertiary"):
            router.navigate(settings.home_path)
