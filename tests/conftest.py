# =============================================================================
# tests/conftest.py
# Pytest Configuration and Fixtures
# =============================================================================

import asyncio
import pytest
from typing import Any, List, Optional
from unittest.mock import MagicMock


# =============================================================================
# FAKE COLLABORATORS
# =============================================================================

class FakeSubscription:
    """Subscription handle that counts releases"""

    def __init__(self, service, handler):
        self.service = service
        self.handler = handler
        self.unsubscribe_calls = 0

    def unsubscribe(self):
        self.unsubscribe_calls += 1
        if self.handler in self.service.handlers:
            self.service.handlers.remove(self.handler)


class FakeAuthService:
    """
    In-memory stand-in for Supabase Auth.

    Events are delivered synchronously to every registered handler, in order.
    Set `keep_delivering_after_unsubscribe` to mimic a provider that keeps
    calling a released handler.
    """

    def __init__(self, session: Optional[Any] = None):
        self.session = session
        self.handlers: List[Any] = []
        self.subscriptions: List[FakeSubscription] = []
        self.query_error: Optional[Exception] = None
        self.sign_out_error: Optional[Exception] = None
        self.query_gate: Optional[asyncio.Event] = None
        self.sign_out_gate: Optional[asyncio.Event] = None
        self.exchange_error: Optional[Exception] = None
        self.exchanged_codes: List[str] = []
        self.magic_links: List[Any] = []
        self.sign_out_calls = 0
        self.query_calls = 0
        self.keep_delivering_after_unsubscribe = False

    async def get_current_session(self):
        self.query_calls += 1
        if self.query_gate is not None:
            await self.query_gate.wait()
        if self.query_error is not None:
            raise self.query_error
        return self.session

    def on_auth_state_change(self, handler):
        self.handlers.append(handler)
        subscription = FakeSubscription(self, handler)
        self.subscriptions.append(subscription)
        return subscription

    async def sign_out(self):
        self.sign_out_calls += 1
        if self.sign_out_gate is not None:
            await self.sign_out_gate.wait()
        self.session = None
        self.emit("SIGNED_OUT", None)
        if self.sign_out_error is not None:
            raise self.sign_out_error

    async def exchange_code(self, auth_code: str):
        self.exchanged_codes.append(auth_code)
        if self.exchange_error is not None:
            raise self.exchange_error
        self.session = {"access_token": f"from-{auth_code}"}
        self.emit("SIGNED_IN", self.session)
        return self.session

    async def send_magic_link(self, email: str, redirect_to: Optional[str] = None):
        self.magic_links.append((email, redirect_to))

    def emit(self, event: str, session: Optional[Any]):
        targets = list(self.handlers)
        if self.keep_delivering_after_unsubscribe:
            targets = [s.handler for s in self.subscriptions]
        for handler in targets:
            handler(event, session)


class RecordingRouter:
    """Router that records every navigation"""

    def __init__(self):
        self.paths: List[str] = []

    def navigate(self, path: str) -> None:
        self.paths.append(path)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def fake_session():
    """Opaque session object"""
    return {"access_token": "token-abc", "user": {"email": "agent@hayvn.re"}}


@pytest.fixture
def auth_service():
    """Auth service with no session"""
    return FakeAuthService()


@pytest.fixture
def router():
    return RecordingRouter()


@pytest.fixture
def nav(auth_service, router):
    """Unmounted navigation controller wired to the fakes"""
    from hayvn_core.auth.navigation import TopNavController

    return TopNavController(auth_service, router)


@pytest.fixture
def mock_streamlit():
    """Mock Streamlit for testing"""
    mock_st = MagicMock()
    mock_st.session_state = {}
    mock_st.query_params = {}
    mock_st.button.return_value = False
    mock_st.form_submit_button.return_value = False
    mock_st.columns.side_effect = lambda layout, **kwargs: [
        MagicMock() for _ in range(layout if isinstance(layout, int) else len(layout))
    ]
    mock_st.secrets = {}
    mock_st.cache_data = lambda f: f
    mock_st.cache_resource = lambda f: f
    return mock_st


@pytest.fixture
def supabase_secrets():
    return {
        "supabase": {"url": "https://demo.supabase.co", "key": "anon-key"},
        "app": {"site_url": "https://crm.hayvn.re/"},
    }


@pytest.fixture
def press_button(mock_streamlit):
    """Make st.button report a click for the given widget key only"""
    def press(key):
        mock_streamlit.button.side_effect = lambda label, **kwargs: kwargs.get("key") == key
    return press
