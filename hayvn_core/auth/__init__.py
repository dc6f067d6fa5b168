"""
Authentication and session-gated navigation for the Hayvn-RE agent workspace.

Sessions live in Supabase Auth; everything here reads them through the
AuthService interface so pages and tests can swap the provider.
"""

from .service import (
    AuthChangeEvent,
    AuthService,
    SupabaseAuthService,
)
from .navigation import (
    NAV_LINKS,
    NavLink,
    NavView,
    TopNavController,
    should_render_top_nav,
)
from .authentication import (
    check_session,
    require_session,
)
from .sign_in import (
    SignInFlow,
    SignInStatus,
)

__all__ = [
    "AuthChangeEvent",
    "AuthService",
    "SupabaseAuthService",
    "NAV_LINKS",
    "NavLink",
    "NavView",
    "TopNavController",
    "should_render_top_nav",
    "check_session",
    "require_session",
    "SignInFlow",
    "SignInStatus",
]
