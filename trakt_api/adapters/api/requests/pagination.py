"""
Builder de requetes GET paginees.

Un PaginatedRequest accumule page, limit et niveau de detail (extended)
puis les envoie via le client qui l'a cree. Sur AsyncTraktClient,
execute() retourne une coroutine.

Usage:
    client.movies_popular().page(2).limit(20).full().execute()
"""

from typing import Any, Optional

from trakt_api.core.value_objects import ExtendedInfo


class PaginatedRequest:
    """
    Requete GET avec pagination et niveau de detail.

    Args:
        client: Client Trakt (sync ou async) qui executera la requete
        path: Chemin de l'endpoint
        model: Modele de reponse par defaut (type d'un element si paginee)
        full_model: Modele utilise quand extended=full est demande
        access_token: Token OAuth optionnel (header Authorization)
        paginated: Decode la reponse en PaginatedList si True
        params: Parametres de query initiaux
    """

    def __init__(
        self,
        client,
        path: str,
        model: Any,
        full_model: Any = None,
        access_token: Optional[str] = None,
        paginated: bool = True,
        params: Optional[dict[str, Any]] = None,
    ) -> None:
        self._client = client
        self._path = path
        self._model = model
        self._full_model = full_model
        self._access_token = access_token
        self._paginated = paginated
        self._params: dict[str, Any] = dict(params or {})
        self._extended: tuple[ExtendedInfo, ...] = ()

    def page(self, page: int) -> "PaginatedRequest":
        if page < 1:
            raise ValueError("page starts at 1")
        self._params["page"] = page
        return self

    def limit(self, limit: int) -> "PaginatedRequest":
        if limit < 1:
            raise ValueError("limit must be positive")
        self._params["limit"] = limit
        return self

    def extended(self, *infos: ExtendedInfo) -> "PaginatedRequest":
        self._extended = tuple(infos)
        return self

    def full(self) -> "PaginatedRequest":
        return self.extended(ExtendedInfo.FULL)

    def metadata(self) -> "PaginatedRequest":
        return self.extended(ExtendedInfo.METADATA)

    def none(self) -> "PaginatedRequest":
        """Retire le parametre extended (modele de base)."""
        return self.extended()

    def auth(self, access_token: str) -> "PaginatedRequest":
        self._access_token = access_token
        return self

    @property
    def response_model(self) -> Any:
        if ExtendedInfo.FULL in self._extended and self._full_model is not None:
            return self._full_model
        return self._model

    def build_path(self) -> str:
        return self._path

    def build_params(self) -> dict[str, Any]:
        params = dict(self._params)
        if self._extended:
            params["extended"] = self._extended
        return params

    def execute(self):
        """Envoie la requete et decode la reponse."""
        return self._client._request(
            "GET",
            self.build_path(),
            self.response_model,
            params=self.build_params(),
            access_token=self._access_token,
            paginated=self._paginated,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.build_path()!r}, params={self.build_params()!r})"
