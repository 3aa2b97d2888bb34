from campus_profiles.config.settings import settings

__all__ = ["settings"]
