# =============================================================================
# hayvn_core/data/supabase_client.py
# Supabase Client Configuration for the Hayvn-RE agent workspace
# =============================================================================

from __future__ import annotations
from typing import Optional
import streamlit as st
from supabase import Client, ClientOptions, create_client

from hayvn_core.config import AppSettings, load_settings
from hayvn_core.errors import ConfigurationError
from hayvn_core.logging import get_logger

logger = get_logger(__name__)

SESSION_CLIENT_KEY = "_supabase_client"


def get_supabase_client(settings: Optional[AppSettings] = None) -> Client:
    """
    Create a Supabase client from settings.

    PKCE flow is used so magic-link and OAuth redirects come back as a
    ?code= query parameter Streamlit can read.

    Raises:
        ConfigurationError: If credentials are missing or rejected by the client
    """
    settings = settings or load_settings()
    try:
        return create_client(
            settings.supabase_url,
            settings.supabase_key,
            options=ClientOptions(flow_type="pkce"),
        )
    except Exception as e:
        raise ConfigurationError(
            f"Failed to initialize Supabase client: {e}",
            config_key="supabase",
        ) from e


def get_session_supabase_client() -> Client:
    """
    Get the Supabase client for the current browser session.

    The client carries the agent's auth session, so it must not be shared
    across sessions through st.cache_resource.
    """
    client = st.session_state.get(SESSION_CLIENT_KEY)
    if client is None:
        client = get_supabase_client()
        st.session_state[SESSION_CLIENT_KEY] = client
        logger.info("Supabase client created for new browser session")
    return client
