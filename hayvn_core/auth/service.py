# =============================================================================
# hayvn_core/auth/service.py
# Auth Service contract and its Supabase implementation
# =============================================================================

from __future__ import annotations
import inspect
from enum import Enum
from typing import Any, Callable, Optional, Protocol

from hayvn_core.errors import AuthServiceError, SignInError
from hayvn_core.logging import LogContext, get_logger

logger = get_logger(__name__)


class AuthChangeEvent(str, Enum):
    """Event kinds emitted by Supabase Auth on session transitions."""
    INITIAL_SESSION = "INITIAL_SESSION"
    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"
    TOKEN_REFRESHED = "TOKEN_REFRESHED"
    USER_UPDATED = "USER_UPDATED"
    PASSWORD_RECOVERY = "PASSWORD_RECOVERY"
    MFA_CHALLENGE_VERIFIED = "MFA_CHALLENGE_VERIFIED"


AuthChangeHandler = Callable[[str, Optional[Any]], None]


class Subscription(Protocol):
    def unsubscribe(self) -> None: ...


class AuthService(Protocol):
    """
    Narrow view of the auth provider used by the navigation controller
    and the session gate. Sessions are opaque.
    """

    async def get_current_session(self) -> Optional[Any]: ...

    def on_auth_state_change(self, handler: AuthChangeHandler) -> Subscription: ...

    async def sign_out(self) -> None: ...


async def _resolve(result: Any) -> Any:
    """Await results from the async Supabase client, pass sync ones through."""
    if inspect.isawaitable(result):
        return await result
    return result


class SupabaseAuthService:
    """
    AuthService backed by a supabase-py client (sync or async flavour).

    Usage:
        service = SupabaseAuthService(get_session_supabase_client())
        session = await service.get_current_session()
    """

    def __init__(self, client: Any):
        self.client = client

    @property
    def auth(self) -> Any:
        return self.client.auth

    async def get_current_session(self) -> Optional[Any]:
        try:
            return await _resolve(self.auth.get_session())
        except Exception as e:
            raise AuthServiceError(
                f"Failed to read current session: {e}",
                operation="get_session",
            ) from e

    def on_auth_state_change(self, handler: AuthChangeHandler) -> Subscription:
        try:
            return self.auth.on_auth_state_change(handler)
        except Exception as e:
            raise AuthServiceError(
                f"Failed to subscribe to auth changes: {e}",
                operation="on_auth_state_change",
            ) from e

    async def sign_out(self) -> None:
        try:
            await _resolve(self.auth.sign_out())
        except Exception as e:
            raise AuthServiceError(
                f"Sign-out failed: {e}",
                operation="sign_out",
            ) from e

    # ==================== SIGN-IN ====================

    async def send_magic_link(self, email: str, redirect_to: Optional[str] = None) -> None:
        """Email a one-time sign-in link to the agent."""
        credentials = {"email": email}
        if redirect_to:
            credentials["options"] = {"email_redirect_to": redirect_to}
        try:
            await _resolve(self.auth.sign_in_with_otp(credentials))
        except Exception as e:
            raise SignInError(str(e), method="magic_link", email=email) from e
        logger.info(f"Magic link requested for {email}")

    async def google_sign_in_url(self, redirect_to: Optional[str] = None) -> str:
        """Start a Google OAuth sign-in and return the provider URL to open."""
        credentials = {"provider": "google"}
        if redirect_to:
            credentials["options"] = {"redirect_to": redirect_to}
        try:
            response = await _resolve(self.auth.sign_in_with_oauth(credentials))
        except Exception as e:
            raise SignInError(str(e), method="google") from e
        return response.url

    async def exchange_code(self, auth_code: str) -> Optional[Any]:
        """Complete a PKCE redirect by trading the ?code= parameter for a session."""
        try:
            with LogContext(logger, "Exchanging auth code"):
                response = await _resolve(
                    self.auth.exchange_code_for_session({"auth_code": auth_code})
                )
        except Exception as e:
            raise SignInError(str(e), method="code_exchange") from e
        return getattr(response, "session", None)
