from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_role_key: Optional[str] = None  # Used for the profiles table when set
    profiles_table: str = "profiles"

    # Session cookies
    access_cookie_name: str = "sb-access-token"
    refresh_cookie_name: str = "sb-refresh-token"
    session_cookie_max_age: int = 7 * 24 * 60 * 60  # 7 days

    # Forms
    max_open_forms: int = 1000
    date_format: str = "{month}/{day}/{year}"

    # App
    app_name: str = "campus-profiles"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"
    auth_rate_limit: str = "20/minute"  # login and signup submissions

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore"
    )


settings = Settings()
