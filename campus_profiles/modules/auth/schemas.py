from enum import Enum
from pydantic import BaseModel
from typing import List, Optional

from campus_profiles.core.navigation import View
from campus_profiles.modules.profiles.schemas import Profile


class AuthMode(str, Enum):
    LOGIN = "login"
    SIGNUP = "signup"


# Form field -> label shown in the "is required" message, in form order
SIGNUP_FIELDS = {"name": "Full Name", "college": "College", "email": "Email address", "password": "Password"}
LOGIN_FIELDS = {"email": "Email address", "password": "Password"}


class Credentials(BaseModel):
    email: str = ""
    password: str = ""
    name: str = ""
    college: str = ""

    def missing_fields(self, mode: AuthMode) -> List[str]:
        """Labels of the required fields left empty for this mode"""
        fields = SIGNUP_FIELDS if mode == AuthMode.SIGNUP else LOGIN_FIELDS
        return [label for field, label in fields.items() if not getattr(self, field)]


class AuthSession(BaseModel):
    user_id: str
    email: Optional[str] = None
    access_token: str = ""
    refresh_token: Optional[str] = None


class FlowState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    NAVIGATED = "navigated"


class Outcome(BaseModel):
    navigate_to: Optional[View] = None
    error: Optional[str] = None
    ignored: bool = False
    session: Optional[AuthSession] = None
    profile: Optional[Profile] = None
