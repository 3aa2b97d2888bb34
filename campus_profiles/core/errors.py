"""
Conversion of remote failures into the single message shown to the user
"""

from fastapi import HTTPException

DEFAULT_ERROR_MESSAGE = "An error occurred"


def error_message(exc: BaseException) -> str:
    """Return the human-readable message carried by a Supabase or HTTP error."""
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    if isinstance(exc, HTTPException) and exc.detail:
        return str(exc.detail)
    return str(exc) or DEFAULT_ERROR_MESSAGE
