"""
Endpoints OAuth : code d'autorisation et device code.

Les echanges de token exigent le client_secret ; son absence leve
ClientSecretNeededError avant tout appel reseau.
"""

from typing import Optional
from urllib.parse import urlencode

from trakt_api.adapters.api.resources.base import ResourceMixin
from trakt_api.core.entities import AccessToken, DeviceCode
from trakt_api.utils import clean_params

AUTHORIZATION_CODE = "authorization_code"
REFRESH_TOKEN = "refresh_token"


class AuthenticationMixin(ResourceMixin):
    def oauth_authorize_url(self, redirect_uri: str, state: Optional[str] = None) -> str:
        """
        URL de la page d'autorisation a ouvrir dans un navigateur.

        Aucun appel reseau : la valeur est retournee directement, y compris
        sur le client async.
        """
        params = clean_params(
            {
                "response_type": "code",
                "client_id": self.client_id,
                "redirect_uri": redirect_uri,
                "state": state,
            }
        )
        return f"{self.site_url}/oauth/authorize?{urlencode(params)}"

    def oauth_get_token(self, code: str, redirect_uri: str):
        """Echange un code d'autorisation contre un AccessToken."""
        secret = self.require_secret("oauth_get_token")
        body = {
            "code": code,
            "client_id": self.client_id,
            "client_secret": secret,
            "redirect_uri": redirect_uri,
            "grant_type": AUTHORIZATION_CODE,
        }
        return self.post("/oauth/token", body, AccessToken)

    def oauth_refresh_token(self, refresh_token: str, redirect_uri: str):
        """Obtient un nouvel AccessToken a partir d'un refresh token."""
        secret = self.require_secret("oauth_refresh_token")
        body = {
            "refresh_token": refresh_token,
            "client_id": self.client_id,
            "client_secret": secret,
            "redirect_uri": redirect_uri,
            "grant_type": REFRESH_TOKEN,
        }
        return self.post("/oauth/token", body, AccessToken)

    def oauth_revoke_token(self, token: str):
        secret = self.require_secret("oauth_revoke_token")
        body = {"token": token, "client_id": self.client_id, "client_secret": secret}
        return self.post("/oauth/revoke", body)

    def oauth_device_code(self):
        """Demarre le flux device : code a saisir par l'utilisateur."""
        return self.post("/oauth/device/code", {"client_id": self.client_id}, DeviceCode)

    def oauth_device_token(self, device_code: str):
        """
        Interroge Trakt pour le token du flux device.

        Tant que l'utilisateur n'a pas valide, Trakt repond 400 (leve
        TraktResponseError) ; 429 signifie que l'intervalle est trop court.
        """
        secret = self.require_secret("oauth_device_token")
        body = {"code": device_code, "client_id": self.client_id, "client_secret": secret}
        return self.post("/oauth/device/token", body, AccessToken)
