"""
Client library for the EV Service Center platform.
"""
from evservice.client import ApiClient
from evservice.config import Settings, get_settings
from evservice.errors import ApiError, AuthError, EVServiceError
from evservice.resources import EVServiceAPI
from evservice.session import AuthSession

__version__ = "1.0.0"


def connect(settings=None, **kwargs) -> EVServiceAPI:
    """Build an API facade from settings (environment by default)."""
    return EVServiceAPI(ApiClient(settings=settings, **kwargs))


__all__ = [
    "ApiClient", "Settings", "get_settings",
    "ApiError", "AuthError", "EVServiceError",
    "EVServiceAPI", "AuthSession", "connect",
]
