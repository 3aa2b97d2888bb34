"""
Registration/login flow for a single form instance.

Each submission is at most two sequential remote calls (create identity,
then insert the profile row). The blocking Supabase SDK calls run in the
threadpool so other requests keep being served while one is pending.
"""

import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from campus_profiles.core.errors import error_message
from campus_profiles.core.navigation import View
from campus_profiles.modules.auth.schemas import AuthMode, Credentials, FlowState, Outcome
from campus_profiles.modules.auth.service import AuthService
from campus_profiles.modules.profiles.schemas import ProfileCreate
from campus_profiles.modules.profiles.service import ProfileService

logger = logging.getLogger(__name__)


class AuthFlow:
    """State of one login or signup form: Idle -> Submitting -> Navigated, or back to Idle with an error."""

    def __init__(self, mode: AuthMode, auth_service: AuthService, profile_service: ProfileService):
        self.mode = AuthMode(mode)
        self.auth_service = auth_service
        self.profile_service = profile_service
        self.state = FlowState.IDLE
        self.error: Optional[str] = None

    @property
    def busy(self) -> bool:
        return self.state == FlowState.SUBMITTING

    async def submit(self, credentials: Credentials) -> Outcome:
        """Run the flow once; re-entrant calls while one is pending are ignored."""
        if self.state != FlowState.IDLE:
            return Outcome(ignored=True)

        missing = credentials.missing_fields(self.mode)
        if missing:
            return self._fail(f"{missing[0]} is required")

        self.state = FlowState.SUBMITTING
        self.error = None
        try:
            if self.mode == AuthMode.SIGNUP:
                outcome = await self._sign_up(credentials)
            else:
                outcome = await self._sign_in(credentials)
        except Exception as e:
            message = error_message(e)
            logger.warning("%s failed: %s", self.mode.value, message)
            return self._fail(message)

        self.state = FlowState.NAVIGATED
        return outcome

    async def _sign_up(self, credentials: Credentials) -> Outcome:
        session = await run_in_threadpool(self.auth_service.register, credentials)

        # No rollback of the identity if this insert fails
        profile_data = ProfileCreate(id=session.user_id, name=credentials.name, college=credentials.college)
        try:
            await run_in_threadpool(self.profile_service.create_profile, profile_data, session.access_token or None)
        except Exception:
            logger.warning("User %s registered without a profile row", session.user_id)
            raise

        logger.info("Registered user %s", session.user_id)
        return Outcome(navigate_to=View.LOGIN)

    async def _sign_in(self, credentials: Credentials) -> Outcome:
        session = await run_in_threadpool(self.auth_service.login, credentials)
        logger.info("User %s signed in", session.user_id)
        return Outcome(navigate_to=View.DASHBOARD, session=session)

    def _fail(self, message: str) -> Outcome:
        self.state = FlowState.IDLE
        self.error = message
        return Outcome(error=message)
