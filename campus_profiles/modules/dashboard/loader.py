import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from campus_profiles.core.errors import error_message
from campus_profiles.core.navigation import View
from campus_profiles.modules.auth.schemas import Outcome
from campus_profiles.modules.auth.service import AuthService
from campus_profiles.modules.profiles.service import ProfileService

logger = logging.getLogger(__name__)


class SessionGuard:
    """Resolve the session, then load that user's profile. Runs on every dashboard visit."""

    def __init__(self, auth_service: AuthService, profile_service: ProfileService):
        self.auth_service = auth_service
        self.profile_service = profile_service

    async def load(self, access_token: Optional[str]) -> Outcome:
        try:
            session = await run_in_threadpool(self.auth_service.get_current_session, access_token)
        except Exception as e:
            logger.warning("Error resolving session: %s", error_message(e))
            return Outcome(navigate_to=View.LOGIN, error=error_message(e))

        if session is None:
            return Outcome(navigate_to=View.LOGIN)

        try:
            profile = await run_in_threadpool(self.profile_service.get_profile, session.user_id, session.access_token)
        except Exception as e:
            logger.error("Error fetching profile for %s: %s", session.user_id, error_message(e))
            return Outcome(navigate_to=View.LOGIN, error=error_message(e))

        if profile is None:
            logger.warning("No profile row for user %s", session.user_id)
            return Outcome(navigate_to=View.LOGIN, error="Profile not found")

        return Outcome(session=session, profile=profile)


async def sign_out(auth_service: AuthService, access_token: Optional[str]) -> View:
    """Invalidate the session and go to login whatever the result."""
    await run_in_threadpool(auth_service.logout, access_token)
    return View.LOGIN
