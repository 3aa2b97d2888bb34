from typing import Optional

from supabase import create_client, Client
from supabase.client import ClientOptions
from campus_profiles.config import settings


def _stateless_options() -> ClientOptions:
    # Sessions belong to the browser cookie, never to a shared client
    return ClientOptions(persist_session=False, auto_refresh_token=False)


class SupabaseClient:
    _client: Client = None
    _service_client: Client = None

    @classmethod
    def get_client(cls) -> Client:
        """Anon client for Supabase Auth calls only; never used for table access."""
        if cls._client is None:
            cls._client = create_client(
                settings.supabase_url, settings.supabase_key, options=_stateless_options()
            )
        return cls._client

    @classmethod
    def get_service_client(cls) -> Optional[Client]:
        """Client with service_role key; bypasses RLS. None when no service key is configured."""
        if cls._service_client is None and settings.supabase_service_role_key:
            cls._service_client = create_client(
                settings.supabase_url, settings.supabase_service_role_key, options=_stateless_options()
            )
        return cls._service_client

    @classmethod
    def get_table_client(cls, access_token: Optional[str] = None) -> Client:
        """Client for the profiles table.

        Uses the service_role client when configured. Otherwise builds a fresh
        anon client per call that sends the requesting user's own JWT, so RLS
        sees that user and no other request's session leaks in.
        """
        service_client = cls.get_service_client()
        if service_client is not None:
            return service_client
        client = create_client(settings.supabase_url, settings.supabase_key, options=_stateless_options())
        if access_token:
            client.postgrest.auth(access_token)
        return client


def get_supabase() -> Client:
    return SupabaseClient.get_client()
