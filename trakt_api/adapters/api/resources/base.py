"""Socle commun des mixins d'endpoints."""

from typing import Any, Optional, Union

# Identifiant Trakt, slug ou IMDb ID
ItemId = Union[int, str]


class ResourceMixin:
    """
    Base des mixins de resources.

    Les mixins n'utilisent que les verbes du client (get, auth_get, ...)
    et restent donc valables pour les variantes sync et async.
    """

    def _get_as(
        self,
        path: str,
        model: Any,
        access_token: Optional[str] = None,
        params: Optional[dict[str, Any]] = None,
    ):
        """GET authentifie si un token est fourni, anonyme sinon."""
        if access_token:
            return self.auth_get(path, access_token, model, params=params)
        return self.get(path, model, params=params)
