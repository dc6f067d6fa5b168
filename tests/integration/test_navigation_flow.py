# =============================================================================
# tests/integration/test_navigation_flow.py
# Integration Tests: auth provider -> navigation controller -> router
# =============================================================================

import asyncio
import random
import pytest

from hayvn_core.auth.authentication import require_session
from hayvn_core.auth.navigation import NAV_LINKS, TopNavController
from hayvn_core.ui import top_nav as top_nav_module


class TestSignInSignOutScenario:
    """Full logged-out -> logged-in -> signed-out walk"""

    def test_scenario(self, nav, auth_service, router, fake_session):
        # Initial query finds no session
        asyncio.run(nav.mount())
        assert nav.render() is None

        # Agent signs in elsewhere (magic link tab)
        auth_service.emit("SIGNED_IN", fake_session)
        view = nav.render()
        assert view is not None
        assert [link.label for link in view.links] == [link.label for link in NAV_LINKS]

        # Session ends
        auth_service.emit("SIGNED_OUT", None)
        assert nav.render() is None
        assert router.paths == ["/sign-in"]

    def test_gate_and_nav_agree(self, auth_service, router, fake_session):
        """A page that passes the gate also shows the nav"""
        auth_service.session = fake_session
        nav = TopNavController(auth_service, router)

        async def page_load():
            async with nav.mounted():
                allowed = await require_session(auth_service, router)
                return allowed, nav.render()

        allowed, view = asyncio.run(page_load())

        assert allowed
        assert view is not None
        assert router.paths == []


class TestEventSequences:
    """Visibility always tracks the most recent event"""

    EVENTS = ["SIGNED_IN", "TOKEN_REFRESHED", "USER_UPDATED", "SIGNED_OUT", "INITIAL_SESSION"]

    @pytest.mark.parametrize("seed", range(20))
    def test_visibility_matches_last_event(self, nav, auth_service, router, fake_session, seed):
        rng = random.Random(seed)
        auth_service.session = fake_session if rng.random() < 0.5 else None
        asyncio.run(nav.mount())

        expected = auth_service.session is not None
        sign_outs = 0
        for _ in range(rng.randint(0, 30)):
            event = rng.choice(self.EVENTS)
            session = None if event == "SIGNED_OUT" or rng.random() < 0.3 else fake_session
            if rng.random() < 0.3:
                nav.toggle_drawer()
            auth_service.emit(event, session)
            expected = session is not None
            sign_outs += event == "SIGNED_OUT"

            assert (nav.render() is not None) is expected
            if not expected:
                assert not nav.drawer_open

        assert router.paths == ["/sign-in"] * sign_outs


class TestStreamlitTopNav:
    """Rendering paths that draw nothing"""

    @pytest.fixture
    def patched_st(self, monkeypatch, mock_streamlit):
        monkeypatch.setattr(top_nav_module, "st", mock_streamlit)
        return mock_streamlit

    def test_logged_out_draws_nothing(self, patched_st, nav):
        asyncio.run(nav.mount())
        patched_st.session_state["top_nav"] = nav

        assert top_nav_module.render_top_nav("/dashboard") is None
        patched_st.markdown.assert_not_called()

    def test_unmounted_controller_is_mounted_on_render(self, patched_st, nav, auth_service):
        patched_st.session_state["top_nav"] = nav

        top_nav_module.render_top_nav("/dashboard")

        assert nav.is_mounted
        assert len(auth_service.subscriptions) == 1

    def test_portal_tears_down_controller(self, patched_st, nav, auth_service):
        asyncio.run(nav.mount())
        patched_st.session_state["top_nav"] = nav

        assert top_nav_module.render_top_nav("/portal/tours") is None

        assert not nav.is_mounted
        assert patched_st.session_state["top_nav"] is None
        assert auth_service.subscriptions[0].unsubscribe_calls == 1
