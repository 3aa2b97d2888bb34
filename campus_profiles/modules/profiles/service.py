from supabase import Client
from campus_profiles.config import settings
from campus_profiles.core.errors import error_message
from campus_profiles.modules.profiles.schemas import ProfileCreate, Profile
from typing import Callable, Optional
from fastapi import HTTPException


class ProfileService:
    def __init__(self, client_for: Callable[[Optional[str]], Client], table: str = None):
        # client_for(access_token) -> client acting for that user
        self.client_for = client_for
        self.table = table or settings.profiles_table

    def create_profile(self, profile_data: ProfileCreate, access_token: Optional[str] = None) -> None:
        """Insert the single profile row for a newly registered user"""
        try:
            self.client_for(access_token).table(self.table)\
                .insert(profile_data.model_dump())\
                .execute()
        except Exception as e:
            raise HTTPException(status_code=500, detail=error_message(e))

    def get_profile(self, user_id: str, access_token: Optional[str] = None) -> Optional[Profile]:
        """Get profile by user ID; None when no row exists"""
        try:
            result = self.client_for(access_token).table(self.table)\
                .select("*")\
                .eq("id", user_id)\
                .maybe_single()\
                .execute()
        except Exception as e:
            raise HTTPException(status_code=500, detail=error_message(e))

        if result is None or not result.data:
            return None
        return Profile(**result.data)
