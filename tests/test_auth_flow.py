"""
Unit tests for the registration/login flow
"""

import asyncio
import logging
import threading

import pytest
from fastapi import HTTPException

from campus_profiles.core.navigation import View
from campus_profiles.modules.auth.flow import AuthFlow
from campus_profiles.modules.auth.schemas import AuthMode, AuthSession, Credentials, FlowState


SIGNUP = Credentials(email="a@x.com", password="secret1", name="Ann", college="MIT")
LOGIN = Credentials(email="a@x.com", password="secret1")


class TestSignupFlow:
    """Test signup: create identity, then insert the profile row"""

    @pytest.mark.asyncio
    async def test_signup_inserts_profile_and_navigates_to_login(self, auth_service, profile_service):
        auth_service.register.return_value = AuthSession(user_id="u1", access_token="tok-u1")
        flow = AuthFlow(AuthMode.SIGNUP, auth_service, profile_service)

        outcome = await flow.submit(SIGNUP)

        auth_service.register.assert_called_once_with(SIGNUP)
        profile_service.create_profile.assert_called_once()
        inserted = profile_service.create_profile.call_args.args[0]
        assert inserted.model_dump() == {"id": "u1", "name": "Ann", "college": "MIT"}
        assert outcome.navigate_to == View.LOGIN
        # The insert is sent with the new user's own token
        assert profile_service.create_profile.call_args.args[1] == "tok-u1"
        assert outcome.error is None
        assert outcome.session is None
        assert flow.state == FlowState.NAVIGATED

    @pytest.mark.asyncio
    async def test_identity_failure_skips_insert(self, auth_service, profile_service):
        auth_service.register.side_effect = HTTPException(status_code=400, detail="User already registered")
        flow = AuthFlow(AuthMode.SIGNUP, auth_service, profile_service)

        outcome = await flow.submit(SIGNUP)

        profile_service.create_profile.assert_not_called()
        assert outcome.navigate_to is None
        assert outcome.error == "User already registered"
        assert flow.state == FlowState.IDLE
        assert flow.error == "User already registered"

    @pytest.mark.asyncio
    async def test_insert_failure_is_surfaced_without_rollback(self, auth_service, profile_service):
        auth_service.register.return_value = AuthSession(user_id="u1", access_token="tok-u1")
        profile_service.create_profile.side_effect = HTTPException(
            status_code=500, detail='duplicate key value violates unique constraint "profiles_pkey"'
        )
        flow = AuthFlow(AuthMode.SIGNUP, auth_service, profile_service)

        outcome = await flow.submit(SIGNUP)

        assert outcome.error == 'duplicate key value violates unique constraint "profiles_pkey"'
        assert outcome.navigate_to is None
        # Only the identity call was made; nothing undoes it
        assert [call[0] for call in auth_service.method_calls] == ["register"]

    @pytest.mark.asyncio
    async def test_missing_college_makes_no_remote_call(self, auth_service, profile_service):
        flow = AuthFlow(AuthMode.SIGNUP, auth_service, profile_service)

        outcome = await flow.submit(Credentials(email="a@x.com", password="secret1", name="Ann"))

        assert outcome.error == "College is required"
        auth_service.register.assert_not_called()
        assert flow.state == FlowState.IDLE

    @pytest.mark.asyncio
    async def test_unexpected_error_message_is_shown(self, auth_service, profile_service):
        auth_service.register.side_effect = RuntimeError("connection refused")
        flow = AuthFlow(AuthMode.SIGNUP, auth_service, profile_service)

        outcome = await flow.submit(SIGNUP)

        assert outcome.error == "connection refused"


class TestLoginFlow:
    """Test login against Supabase Auth"""

    @pytest.mark.asyncio
    async def test_login_navigates_to_dashboard_once(self, auth_service, profile_service):
        session = AuthSession(user_id="u1", access_token="tok", refresh_token="ref")
        auth_service.login.return_value = session
        flow = AuthFlow(AuthMode.LOGIN, auth_service, profile_service)

        outcome = await flow.submit(LOGIN)
        again = await flow.submit(LOGIN)

        assert outcome.navigate_to == View.DASHBOARD
        assert outcome.session == session
        assert again.ignored is True
        assert auth_service.login.call_count == 1
        profile_service.create_profile.assert_not_called()

    @pytest.mark.asyncio
    async def test_wrong_password_stays_with_error(self, auth_service, profile_service):
        auth_service.login.side_effect = HTTPException(status_code=400, detail="Invalid login credentials")
        flow = AuthFlow(AuthMode.LOGIN, auth_service, profile_service)

        outcome = await flow.submit(LOGIN)

        assert outcome.navigate_to is None
        assert outcome.error == "Invalid login credentials"
        assert flow.state == FlowState.IDLE

    @pytest.mark.asyncio
    async def test_retry_after_failure_is_allowed(self, auth_service, profile_service):
        auth_service.login.side_effect = [
            HTTPException(status_code=400, detail="Invalid login credentials"),
            AuthSession(user_id="u1", access_token="tok"),
        ]
        flow = AuthFlow(AuthMode.LOGIN, auth_service, profile_service)

        first = await flow.submit(LOGIN)
        second = await flow.submit(LOGIN)

        assert first.error == "Invalid login credentials"
        assert second.navigate_to == View.DASHBOARD
        assert flow.error is None

    @pytest.mark.asyncio
    async def test_login_does_not_require_name_or_college(self, auth_service, profile_service):
        auth_service.login.return_value = AuthSession(user_id="u1", access_token="tok")
        flow = AuthFlow(AuthMode.LOGIN, auth_service, profile_service)

        outcome = await flow.submit(LOGIN)

        assert outcome.error is None

    @pytest.mark.asyncio
    async def test_missing_password(self, auth_service, profile_service):
        flow = AuthFlow(AuthMode.LOGIN, auth_service, profile_service)

        outcome = await flow.submit(Credentials(email="a@x.com"))

        assert outcome.error == "Password is required"
        auth_service.login.assert_not_called()

    @pytest.mark.asyncio
    async def test_resubmit_while_pending_is_ignored(self, auth_service, profile_service):
        release = threading.Event()

        def slow_login(credentials):
            release.wait(timeout=5)
            return AuthSession(user_id="u1", access_token="tok")

        auth_service.login.side_effect = slow_login
        flow = AuthFlow(AuthMode.LOGIN, auth_service, profile_service)

        first = asyncio.create_task(flow.submit(LOGIN))
        while not flow.busy:
            await asyncio.sleep(0)
        second = await flow.submit(LOGIN)
        release.set()
        result = await first

        assert second.ignored is True
        assert result.navigate_to == View.DASHBOARD
        assert auth_service.login.call_count == 1

    @pytest.mark.asyncio
    async def test_failure_log_omits_email(self, auth_service, profile_service, caplog):
        auth_service.login.side_effect = HTTPException(status_code=400, detail="Invalid login credentials")
        flow = AuthFlow(AuthMode.LOGIN, auth_service, profile_service)

        with caplog.at_level(logging.WARNING, logger="campus_profiles.modules.auth.flow"):
            await flow.submit(LOGIN)

        assert "login failed: Invalid login credentials" in caplog.text
        assert "a@x.com" not in caplog.text
