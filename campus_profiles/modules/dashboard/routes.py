from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from campus_profiles.config import settings
from campus_profiles.core.dependencies import get_auth_service, get_profile_service
from campus_profiles.core.navigation import navigate
from campus_profiles.core.session_cookies import clear_session_cookies, get_access_token
from campus_profiles.core.templating import render_page
from campus_profiles.modules.auth.service import AuthService
from campus_profiles.modules.dashboard.loader import SessionGuard, sign_out
from campus_profiles.modules.profiles.service import ProfileService

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_class=HTMLResponse)
async def dashboard(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
    profile_service: ProfileService = Depends(get_profile_service)
):
    """Profile dashboard; redirects to login without a session or profile"""
    outcome = await SessionGuard(auth_service, profile_service).load(get_access_token(request))
    if outcome.navigate_to is not None:
        response = navigate(outcome.navigate_to)
        clear_session_cookies(response)
        return response

    return await render_page("dashboard.html", {
        "app_name": settings.app_name,
        "profile": outcome.profile,
        "member_since": outcome.profile.member_since,
    })


@router.post("/logout")
async def logout(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service)
):
    """Sign out and return to the sign-in form"""
    response = navigate(await sign_out(auth_service, get_access_token(request)))
    clear_session_cookies(response)
    return response
