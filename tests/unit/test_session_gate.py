# =============================================================================
# tests/unit/test_session_gate.py
# Unit Tests for the page session gate
# =============================================================================

import asyncio

from hayvn_core.auth.authentication import check_session, require_session


class TestRequireSession:
    """Test redirect behaviour of the page guard"""

    def test_no_session_redirects_to_sign_in(self, auth_service, router):
        allowed = asyncio.run(require_session(auth_service, router))

        assert not allowed
        assert router.paths == ["/sign-in"]

    def test_session_allows_page(self, auth_service, router, fake_session):
        auth_service.session = fake_session

        allowed = asyncio.run(require_session(auth_service, router))

        assert allowed
        assert router.paths == []

    def test_query_failure_is_treated_as_no_session(self, auth_service, router, fake_session):
        auth_service.session = fake_session
        auth_service.query_error = RuntimeError("timeout")

        allowed = asyncio.run(require_session(auth_service, router))

        assert not allowed
        assert router.paths == ["/sign-in"]

    def test_custom_sign_in_path(self, auth_service, router):
        asyncio.run(require_session(auth_service, router, sign_in_path="/portal/sign-in"))

        assert router.paths == ["/portal/sign-in"]


class TestCheckSession:

    def test_returns_session(self, auth_service, fake_session):
        auth_service.session = fake_session
        assert asyncio.run(check_session(auth_service)) == fake_session

    def test_swallows_errors(self, auth_service):
        auth_service.query_error = RuntimeError("boom")
        assert asyncio.run(check_session(auth_service)) is None
