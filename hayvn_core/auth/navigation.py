"""
Session-gated top navigation.

TopNavController owns the two pieces of local UI state behind the agent
workspace header: whether an auth session is present and whether the mobile
drawer is open. It subscribes to the auth provider on mount, renders nothing
while logged out, and routes every link, close and logout action through one
place so the drawer never outlives the session.

The controller is framework-free. Streamlit rendering lives in
hayvn_core.ui.top_nav; the auth provider and the router are injected.
"""

from __future__ import annotations
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Optional, Protocol, Tuple

from hayvn_core.auth.service import AuthChangeEvent, AuthService, Subscription
from hayvn_core.logging import get_logger

logger = get_logger(__name__)


# ==================== STATIC NAVIGATION CONFIG ====================

@dataclass(frozen=True)
class NavLink:
    href: str
    label: str


NAV_LINKS: Tuple[NavLink, ...] = (
    NavLink("/dashboard", "Dashboard"),
    NavLink("/search", "Search"),
    NavLink("/clients", "Clients"),
    NavLink("/properties", "Properties"),
    NavLink("/pipeline", "Pipeline"),
    NavLink("/tours", "Tours"),
    NavLink("/offers", "Offers"),
    NavLink("/market-radar", "Market Radar"),
    NavLink("/analytics", "Analytics"),
    NavLink("/settings", "Settings"),
)

BRAND_NAME = "Hayvn"
BRAND_SUFFIX = "Real Estate"
HOME_PATH = "/dashboard"
SIGN_IN_PATH = "/sign-in"
PORTAL_PREFIX = "/portal"


def should_render_top_nav(path: str) -> bool:
    """The agent nav is never shown inside the client portal."""
    return not (path == PORTAL_PREFIX or path.startswith(PORTAL_PREFIX + "/"))


class Router(Protocol):
    def navigate(self, path: str) -> None: ...


# ==================== VIEW MODEL ====================

@dataclass(frozen=True)
class DrawerView:
    title: str
    links: Tuple[NavLink, ...]
    close_label: str = "Close"
    logout_label: str = "Logout"


@dataclass(frozen=True)
class NavView:
    """What the header should show for one render pass."""
    brand: str
    brand_suffix: str
    home_href: str
    links: Tuple[NavLink, ...]
    logout_label: str = "Logout"
    toggle_label: str = "Toggle navigation"
    drawer: Optional[DrawerView] = None

    @property
    def drawer_open(self) -> bool:
        return self.drawer is not None


# ==================== CONTROLLER ====================

class TopNavController:
    """
    Two-state machine (LoggedOut -> LoggedIn -> LoggedOut ...) driven by the
    auth provider, plus the drawer flag.

    Usage:
        nav = TopNavController(auth_service, router)
        async with nav.mounted():
            view = nav.render()
    """

    def __init__(
        self,
        auth: AuthService,
        router: Router,
        links: Tuple[NavLink, ...] = NAV_LINKS,
        home_path: str = HOME_PATH,
        sign_in_path: str = SIGN_IN_PATH,
    ):
        self.auth = auth
        self.router = router
        self.links = tuple(links)
        self.home_path = home_path
        self.sign_in_path = sign_in_path

        self._session_present = False
        self._drawer_open = False
        self._subscription: Optional[Subscription] = None
        self._mounted = False
        self._event_received = False
        self._signing_out = False

    # ---------- state ----------

    @property
    def session_present(self) -> bool:
        return self._session_present

    @property
    def drawer_open(self) -> bool:
        return self._drawer_open

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    def _set_session_present(self, present: bool) -> None:
        if present != self._session_present:
            logger.info(f"Navigation {'shown' if present else 'hidden'}")
        self._session_present = present
        if not present:
            self._drawer_open = False

    # ---------- lifecycle ----------

    async def mount(self) -> None:
        """
        Subscribe to auth changes, then resolve the current session once.

        A failed session query is logged and leaves the nav hidden. If the
        query is cancelled the subscription is released before re-raising.
        """
        if self._mounted:
            logger.debug("TopNavController.mount called twice; ignoring")
            return

        self._event_received = False
        self._subscription = self.auth.on_auth_state_change(self._on_auth_change)
        self._mounted = True

        try:
            session = await self.auth.get_current_session()
        except Exception as e:
            logger.warning(f"Initial session query failed: {e}", exc_info=True)
            return
        except BaseException:
            self.unmount()
            raise

        # A change event that landed while the query was in flight is newer
        if self._mounted and not self._event_received:
            self._set_session_present(session is not None)

    def unmount(self) -> None:
        """Release the auth subscription. Safe to call more than once."""
        if not self._mounted:
            return
        self._mounted = False
        subscription, self._subscription = self._subscription, None
        if subscription is not None:
            subscription.unsubscribe()
            logger.debug("Auth subscription released")

    @asynccontextmanager
    async def mounted(self) -> AsyncIterator[TopNavController]:
        await self.mount()
        try:
            yield self
        finally:
            self.unmount()

    def _on_auth_change(self, event: Any, session: Optional[Any]) -> None:
        if not self._mounted:
            return

        self._event_received = True
        self._set_session_present(session is not None)

        kind = getattr(event, "value", event)
        logger.debug(f"Auth event {kind} (session={'yes' if session else 'no'})")

        # logout() issues its own redirect
        if kind == AuthChangeEvent.SIGNED_OUT.value and not self._signing_out:
            self.router.navigate(self.sign_in_path)

    # ---------- user actions ----------

    def toggle_drawer(self) -> None:
        if not self._session_present:
            return
        self._drawer_open = not self._drawer_open

    def close_drawer(self) -> None:
        self._drawer_open = False

    def dismiss_backdrop(self, inside_panel: bool = False) -> None:
        """Taps on the overlay close the drawer; taps on the panel itself do not."""
        if not inside_panel:
            self.close_drawer()

    def activate_link(self, href: str) -> None:
        self.close_drawer()
        self.router.navigate(href)

    async def logout(self) -> None:
        """
        End the session and send the agent to sign-in.

        The redirect happens exactly once whether sign-out succeeds, fails
        or is cancelled.
        """
        self.close_drawer()
        self._signing_out = True
        try:
            await self.auth.sign_out()
        except Exception as e:
            logger.warning(f"Sign-out failed, redirecting anyway: {e}", exc_info=True)
        finally:
            # Cancellation counts as an outcome too
            self._signing_out = False
            self.router.navigate(self.sign_in_path)

    # ---------- render ----------

    def render(self) -> Optional[NavView]:
        if not self._session_present:
            return None

        drawer = None
        if self._drawer_open:
            drawer = DrawerView(title="Navigation", links=self.links)

        return NavView(
            brand=BRAND_NAME,
            brand_suffix=BRAND_SUFFIX,
            home_href=self.home_path,
            links=self.links,
            drawer=drawer,
        )
