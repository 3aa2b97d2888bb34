from enum import Enum

from fastapi import status
from fastapi.responses import RedirectResponse


class View(str, Enum):
    LOGIN = "login"
    SIGNUP = "signup"
    DASHBOARD = "dashboard"

    @property
    def path(self) -> str:
        return f"/{self.value}"


def navigate(view: View) -> RedirectResponse:
    """Redirect the browser to a view; 303 so a POST is followed by a GET."""
    return RedirectResponse(url=view.path, status_code=status.HTTP_303_SEE_OTHER)
