"""OAuth models."""

from trakt_api.core.entities.common import TraktModel


class DeviceCode(TraktModel):
    """Answer of POST /oauth/device/code."""

    device_code: str
    user_code: str
    verification_url: str
    expires_in: int
    interval: int


class AccessToken(TraktModel):
    access_token: str
    token_type: str
    expires_in: int
    refresh_token: str
    scope: str
    created_at: int
