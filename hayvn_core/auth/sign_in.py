"""
Agent sign-in flow: email magic link or Google OAuth.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Optional

from hayvn_core.errors import HayvnError, SignInError
from hayvn_core.logging import get_logger

logger = get_logger(__name__)


class SignInStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SENT = "sent"
    ERROR = "error"


class SignInFlow:
    """
    Status machine behind the sign-in page.

    idle -> loading -> sent   (magic link emailed)
    idle -> loading -> error  (provider rejected the request)

    Args:
        auth: SupabaseAuthService (or anything with the same sign-in methods)
        redirect_to: Absolute URL the provider should return the agent to
    """

    def __init__(self, auth: Any, redirect_to: Optional[str] = None):
        self.auth = auth
        self.redirect_to = redirect_to
        self.status = SignInStatus.IDLE
        self.error_message: Optional[str] = None
        self.oauth_url: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.status == SignInStatus.LOADING

    def _start(self) -> None:
        self.status = SignInStatus.LOADING
        self.error_message = None

    def _fail(self, error: HayvnError) -> None:
        logger.error(f"Sign-in failed: {error}")
        self.status = SignInStatus.ERROR
        self.error_message = error.message

    async def request_magic_link(self, email: str) -> SignInStatus:
        email = (email or "").strip()
        if not email:
            self._fail(SignInError("Enter your work email first.", method="magic_link"))
            return self.status

        self._start()
        try:
            await self.auth.send_magic_link(email, redirect_to=self.redirect_to)
        except HayvnError as e:
            self._fail(e)
            return self.status

        self.status = SignInStatus.SENT
        return self.status

    async def start_google_sign_in(self) -> Optional[str]:
        """Return the Google consent URL, or None if the provider refused."""
        self._start()
        try:
            self.oauth_url = await self.auth.google_sign_in_url(redirect_to=self.redirect_to)
        except HayvnError as e:
            self._fail(e)
            return None

        self.status = SignInStatus.IDLE
        return self.oauth_url

    async def complete_from_redirect(self, auth_code: str) -> bool:
        """Exchange the ?code= query parameter for a session."""
        self._start()
        try:
            session = await self.auth.exchange_code(auth_code)
        except HayvnError as e:
            self._fail(e)
            return False

        self.status = SignInStatus.IDLE
        return session is not None
