# =============================================================================
# hayvn_core/config/settings.py
# Application settings loaded from Streamlit secrets
# =============================================================================

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional
import streamlit as st

from hayvn_core.errors import ConfigurationError
from hayvn_core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SITE_URL = "http://localhost:8501"
DEFAULT_SIGN_IN_PATH = "/sign-in"
DEFAULT_HOME_PATH = "/dashboard"


@dataclass(frozen=True)
class AppSettings:
    """Resolved configuration for one app process."""
    supabase_url: str
    supabase_key: str
    site_url: str = DEFAULT_SITE_URL
    sign_in_path: str = DEFAULT_SIGN_IN_PATH
    home_path: str = DEFAULT_HOME_PATH
    debug_mode: bool = False

    def redirect_url(self, path: str) -> str:
        """Absolute URL the auth provider should send the agent back to."""
        return f"{self.site_url.rstrip('/')}/{path.lstrip('/')}"


def load_settings(secrets: Optional[Mapping[str, Any]] = None) -> AppSettings:
    """
    Build AppSettings from Streamlit secrets.

    Expected secrets.toml format:
        [supabase]
        url = "https://your-project.supabase.co"
        key = "your-anon-key"

        [app]
        site_url = "http://localhost:8501"
        sign_in_path = "/sign-in"
        home_path = "/dashboard"
        debug_mode = false

    Args:
        secrets: Mapping to read instead of st.secrets (used by tests and scripts)

    Raises:
        ConfigurationError: If the Supabase credentials are missing
    """
    if secrets is None:
        secrets = st.secrets

    try:
        has_supabase = "supabase" in secrets
    except Exception as e:
        # st.secrets raises when no secrets.toml exists at all
        raise ConfigurationError(
            "No .streamlit/secrets.toml found",
            config_key="supabase",
        ) from e

    if not has_supabase:
        raise ConfigurationError(
            "Supabase credentials not found in .streamlit/secrets.toml",
            config_key="supabase",
        )

    supabase = secrets["supabase"]
    for key in ("url", "key"):
        if not supabase.get(key):
            raise ConfigurationError(
                f"Missing Supabase setting '{key}'",
                config_key=f"supabase.{key}",
                expected_type="str",
            )

    app = secrets.get("app", {})
    settings = AppSettings(
        supabase_url=supabase["url"],
        supabase_key=supabase["key"],
        site_url=app.get("site_url", DEFAULT_SITE_URL),
        sign_in_path=app.get("sign_in_path", DEFAULT_SIGN_IN_PATH),
        home_path=app.get("home_path", DEFAULT_HOME_PATH),
        debug_mode=bool(app.get("debug_mode", False)),
    )
    logger.debug(f"Settings loaded for {settings.supabase_url}")
    return settings
