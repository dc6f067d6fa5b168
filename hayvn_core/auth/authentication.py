"""
Session gate for agent pages.

Every agent page checks for a Supabase session before rendering. Without one
the agent is redirected to sign-in; a failed session query is treated the
same as no session.
"""

from __future__ import annotations
from typing import Any, Optional

from hayvn_core.auth.navigation import Router, SIGN_IN_PATH
from hayvn_core.auth.service import AuthService
from hayvn_core.logging import get_logger

logger = get_logger(__name__)


async def check_session(auth: AuthService) -> Optional[Any]:
    """
    Return the current session, or None when absent or unreadable.
    """
    try:
        return await auth.get_current_session()
    except Exception as e:
        logger.warning(f"Session check failed: {e}", exc_info=True)
        return None


async def require_session(
    auth: AuthService,
    router: Router,
    sign_in_path: str = SIGN_IN_PATH,
) -> bool:
    """
    Gate a page on the presence of a session.

    Args:
        auth: Auth provider to query
        router: Router used for the sign-in redirect
        sign_in_path: Destination when no session is found

    Returns:
        bool: True if the page may render, False if a redirect was issued
    """
    session = await check_session(auth)
    if session is None:
        logger.info(f"No session, redirecting to {sign_in_path}")
        router.navigate(sign_in_path)
        return False
    return True
