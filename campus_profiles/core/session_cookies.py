"""
Hand the tokens issued by Supabase Auth to the browser and read them back.
"""

from typing import Optional

from fastapi import Request, Response

from campus_profiles.config import settings
from campus_profiles.modules.auth.schemas import AuthSession


def set_session_cookies(response: Response, session: AuthSession) -> None:
    """Attach the access and refresh tokens as HTTP-only cookies."""
    response.set_cookie(
        key=settings.access_cookie_name,
        value=session.access_token,
        max_age=settings.session_cookie_max_age,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    if session.refresh_token:
        response.set_cookie(
            key=settings.refresh_cookie_name,
            value=session.refresh_token,
            max_age=settings.session_cookie_max_age,
            httponly=True,
            secure=settings.is_production,
            samesite="lax",
        )


def clear_session_cookies(response: Response) -> None:
    response.delete_cookie(settings.access_cookie_name)
    response.delete_cookie(settings.refresh_cookie_name)


def get_access_token(request: Request) -> Optional[str]:
    return request.cookies.get(settings.access_cookie_name) or None
