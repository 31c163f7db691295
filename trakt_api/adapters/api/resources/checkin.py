"""Endpoints check-in / checkout."""

from trakt_api.adapters.api.requests import CheckinRequest
from trakt_api.adapters.api.resources.base import ResourceMixin
from trakt_api.utils import api_path


class CheckinMixin(ResourceMixin):
    def checkin(self) -> CheckinRequest:
        return CheckinRequest(self)

    def checkout(self, access_token: str):
        """Annule le check-in en cours (204, retourne None)."""
        return self.auth_delete(api_path("checkin"), access_token)
