from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, Response

from campus_profiles.config import settings
from campus_profiles.core.dependencies import get_auth_service, get_form_registry, get_profile_service
from campus_profiles.core.navigation import navigate
from campus_profiles.core.rate_limit import limiter
from campus_profiles.core.session_cookies import set_session_cookies
from campus_profiles.core.templating import render_page
from campus_profiles.modules.auth.flow import AuthFlow
from campus_profiles.modules.auth.forms import FormRegistry
from campus_profiles.modules.auth.schemas import AuthMode, Credentials
from campus_profiles.modules.auth.service import AuthService
from campus_profiles.modules.profiles.service import ProfileService

router = APIRouter(tags=["auth"])


async def _render_form(
    mode: AuthMode,
    form_id: str,
    credentials: Credentials = None,
    error: str = None,
    busy: bool = False,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    values = credentials.model_dump(exclude={"password"}) if credentials else {}
    return await render_page("auth_form.html", {
        "app_name": settings.app_name,
        "mode": mode.value,
        "form_id": form_id,
        "values": values,
        "error": error,
        "busy": busy,
    }, status_code=status_code)


async def _show_form(
    mode: AuthMode,
    auth_service: AuthService,
    profile_service: ProfileService,
    registry: FormRegistry,
) -> HTMLResponse:
    form_id = registry.open(AuthFlow(mode, auth_service, profile_service))
    return await _render_form(mode, form_id)


async def _submit_form(
    mode: AuthMode,
    form_id: str,
    credentials: Credentials,
    auth_service: AuthService,
    profile_service: ProfileService,
    registry: FormRegistry,
) -> Response:
    flow = registry.get(form_id, mode) if form_id else None
    if flow is None:
        flow = AuthFlow(mode, auth_service, profile_service)
        form_id = registry.open(flow)

    outcome = await flow.submit(credentials)

    if outcome.ignored:
        return await _render_form(mode, form_id, credentials, busy=True, status_code=status.HTTP_409_CONFLICT)
    if outcome.navigate_to is None:
        return await _render_form(mode, form_id, credentials, error=outcome.error, status_code=status.HTTP_400_BAD_REQUEST)

    registry.discard(form_id)
    response = navigate(outcome.navigate_to)
    if outcome.session:
        set_session_cookies(response, outcome.session)
    return response


@router.get("/login", response_class=HTMLResponse)
async def login_form(
    auth_service: AuthService = Depends(get_auth_service),
    profile_service: ProfileService = Depends(get_profile_service),
    registry: FormRegistry = Depends(get_form_registry)
):
    """Show the sign-in form"""
    return await _show_form(AuthMode.LOGIN, auth_service, profile_service, registry)


@router.post("/login")
@limiter.limit(settings.auth_rate_limit)
async def login(
    request: Request,
    form_id: str = Form(""),
    email: str = Form(""),
    password: str = Form(""),
    auth_service: AuthService = Depends(get_auth_service),
    profile_service: ProfileService = Depends(get_profile_service),
    registry: FormRegistry = Depends(get_form_registry)
):
    """Sign in and go to the dashboard"""
    credentials = Credentials(email=email, password=password)
    return await _submit_form(AuthMode.LOGIN, form_id, credentials, auth_service, profile_service, registry)


@router.get("/signup", response_class=HTMLResponse)
async def signup_form(
    auth_service: AuthService = Depends(get_auth_service),
    profile_service: ProfileService = Depends(get_profile_service),
    registry: FormRegistry = Depends(get_form_registry)
):
    """Show the registration form"""
    return await _show_form(AuthMode.SIGNUP, auth_service, profile_service, registry)


@router.post("/signup")
@limiter.limit(settings.auth_rate_limit)
async def signup(
    request: Request,
    form_id: str = Form(""),
    email: str = Form(""),
    password: str = Form(""),
    name: str = Form(""),
    college: str = Form(""),
    auth_service: AuthService = Depends(get_auth_service),
    profile_service: ProfileService = Depends(get_profile_service),
    registry: FormRegistry = Depends(get_form_registry)
):
    """Register, create the profile row and go to the sign-in form"""
    credentials = Credentials(email=email, password=password, name=name, college=college)
    return await _submit_form(AuthMode.SIGNUP, form_id, credentials, auth_service, profile_service, registry)
