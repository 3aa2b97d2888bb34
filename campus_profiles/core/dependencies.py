"""
Core dependencies shared by the view routes
"""

from fastapi import Depends
from supabase import Client

from campus_profiles.database.supabase_client import SupabaseClient, get_supabase
from campus_profiles.modules.auth.forms import FormRegistry, form_registry
from campus_profiles.modules.auth.service import AuthService
from campus_profiles.modules.profiles.service import ProfileService


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(supabase)


def get_profile_service() -> ProfileService:
    return ProfileService(SupabaseClient.get_table_client)


def get_form_registry() -> FormRegistry:
    return form_registry
