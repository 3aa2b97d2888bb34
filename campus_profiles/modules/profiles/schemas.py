from pydantic import BaseModel
from datetime import datetime

from campus_profiles.config import settings


class ProfileCreate(BaseModel):
    id: str
    name: str
    college: str


class Profile(BaseModel):
    id: str
    name: str
    college: str
    created_at: datetime

    class Config:
        from_attributes = True

    @property
    def member_since(self) -> str:
        return format_member_since(self.created_at)


def format_member_since(created_at: datetime, fmt: str = None) -> str:
    """Short calendar date without zero padding, e.g. 1/1/2024.

    The date is taken in created_at's own timezone (UTC from Supabase),
    not the viewer's local zone.
    """
    fmt = fmt or settings.date_format
    return fmt.format(month=created_at.month, day=created_at.day, year=created_at.year)
