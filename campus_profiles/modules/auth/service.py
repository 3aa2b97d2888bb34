import logging
from supabase import Client
from campus_profiles.core.errors import error_message
from campus_profiles.modules.auth.schemas import Credentials, AuthSession
from fastapi import HTTPException
from typing import Optional

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def register(self, credentials: Credentials) -> AuthSession:
        """Register a new user using Supabase Auth; the access token is empty until the email is confirmed"""
        try:
            auth_response = self.supabase.auth.sign_up({
                "email": credentials.email,
                "password": credentials.password,
                "options": {
                    "data": {
                        "name": credentials.name,
                        "college": credentials.college
                    }
                }
            })
        except Exception as e:
            raise HTTPException(status_code=getattr(e, "status", None) or 400, detail=error_message(e))

        if not auth_response.user:
            raise HTTPException(status_code=400, detail="Failed to register user")

        session = auth_response.session
        return AuthSession(
            user_id=auth_response.user.id,
            email=auth_response.user.email or credentials.email,
            access_token=session.access_token if session else "",
            refresh_token=session.refresh_token if session else None
        )

    def login(self, credentials: Credentials) -> AuthSession:
        """Authenticate user using Supabase Auth"""
        try:
            auth_response = self.supabase.auth.sign_in_with_password({
                "email": credentials.email,
                "password": credentials.password
            })
        except Exception as e:
            raise HTTPException(status_code=getattr(e, "status", None) or 401, detail=error_message(e))

        if not auth_response.user or not auth_response.session:
            raise HTTPException(status_code=401, detail="Invalid login credentials")

        return AuthSession(
            user_id=auth_response.user.id,
            email=auth_response.user.email or credentials.email,
            access_token=auth_response.session.access_token,
            refresh_token=auth_response.session.refresh_token
        )

    def get_current_session(self, token: Optional[str]) -> Optional[AuthSession]:
        """Resolve the session behind an access token; None when there is none"""
        if not token:
            return None
        try:
            user_response = self.supabase.auth.get_user(jwt=token)
        except Exception as e:
            raise HTTPException(status_code=401, detail=error_message(e))

        if not user_response or not user_response.user:
            return None

        user = user_response.user
        return AuthSession(user_id=user.id, email=user.email, access_token=token)

    def logout(self, token: Optional[str]) -> bool:
        """Invalidate the session behind the token; failures are reported, not raised"""
        if not token:
            return False
        try:
            self.supabase.auth.admin.sign_out(token)
            return True
        except Exception as e:
            logger.info("Sign-out failed: %s", error_message(e))
            return False
