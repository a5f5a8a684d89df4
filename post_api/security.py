from fastapi import Depends

from post_api.errors import AuthoringDisabledError
from post_api.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def require_authoring_enabled(current_settings: Settings = Depends(get_settings)):
    """Authoring writes into the content tree, so it is refused in production."""
    if current_settings.is_production:
        raise AuthoringDisabledError("Not available in production")
    return current_settings
