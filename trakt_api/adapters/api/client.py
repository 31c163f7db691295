"""
Clients HTTP pour l'API Trakt v2.

Deux variantes partagent toutes les definitions d'endpoints (mixins de
resources/) et ne different que par le transport:
- TraktClient : bloquant, base sur httpx.Client
- AsyncTraktClient : non bloquant, base sur httpx.AsyncClient ; chaque
  methode d'endpoint retourne alors un awaitable

Usage:
    with TraktClient(client_id="xxx") as client:
        movies = client.movies_trending().page(2).limit(10).execute()

    async with AsyncTraktClient(client_id="xxx") as client:
        movie = await client.movie("the-dark-knight-2008")
"""

from functools import lru_cache
from typing import Any, Optional

import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from trakt_api.adapters.api.errors import (
    ClientSecretNeededError,
    TraktDeserializationError,
)
from trakt_api.adapters.api.resources import TraktResources
from trakt_api.adapters.api.retry import async_request_with_retry, request_with_retry
from trakt_api.core.entities import PaginatedList
from trakt_api.utils import API_URL, API_VERSION, SITE_URL, STAGING_API_URL, STAGING_SITE_URL, clean_params
from trakt_api.utils.constants import (
    HEADER_API_KEY,
    HEADER_API_VERSION,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
)


@lru_cache(maxsize=None)
def _adapter(model: Any) -> TypeAdapter:
    """TypeAdapter mis en cache par type (la construction est couteuse)."""
    return TypeAdapter(model)


class BaseTraktClient:
    """
    Etat et verbes HTTP communs aux clients Trakt.

    Les verbes get/post/put/delete (et leurs variantes auth_*) delegent a
    _request, implemente par chaque client selon son transport.

    Attributes:
        client_id: Cle d'API de l'application (header trakt-api-key)
        client_secret: Secret de l'application, requis pour les echanges OAuth
        base_url: URL de l'API (production ou staging)
        site_url: URL du site, utilisee pour la page d'autorisation OAuth
        timeout: Timeout des requetes en secondes
        max_attempts: Tentatives sur 429 (1 = pas de retry)
    """

    def __init__(
        self,
        client_id: str,
        client_secret: Optional[str] = None,
        base_url: str = API_URL,
        site_url: Optional[str] = None,
        timeout: float = 30.0,
        max_attempts: int = 1,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.base_url = base_url.rstrip("/")
        if site_url is None:
            site_url = STAGING_SITE_URL if self.base_url == STAGING_API_URL else SITE_URL
        self.site_url = site_url.rstrip("/")
        self.timeout = timeout
        self.max_attempts = max_attempts

    @classmethod
    def staging(cls, client_id: str, client_secret: Optional[str] = None, **kwargs):
        """Client pointant sur l'environnement de staging de Trakt."""
        return cls(
            client_id,
            client_secret,
            base_url=STAGING_API_URL,
            site_url=STAGING_SITE_URL,
            **kwargs,
        )

    @classmethod
    def from_settings(cls, settings):
        """Construit un client a partir d'une instance Settings."""
        return cls(
            settings.client_id,
            settings.client_secret,
            base_url=settings.api_url,
            site_url=settings.site_url,
            timeout=settings.timeout,
            max_attempts=settings.max_attempts,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseTraktClient):
            return NotImplemented
        return (
            self.client_id == other.client_id
            and self.client_secret == other.client_secret
            and self.base_url == other.base_url
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(client_id={self.client_id!r}, base_url={self.base_url!r})"

    def require_secret(self, operation: str) -> str:
        """
        Retourne le client_secret ou leve ClientSecretNeededError.

        Appele avant toute entree/sortie par les operations OAuth.
        """
        if not self.client_secret:
            raise ClientSecretNeededError(operation)
        return self.client_secret

    def _headers(self, access_token: Optional[str] = None) -> dict[str, str]:
        headers = {
            HEADER_CONTENT_TYPE: JSON_CONTENT_TYPE,
            HEADER_API_VERSION: API_VERSION,
            HEADER_API_KEY: self.client_id,
        }
        if access_token:
            headers[HEADER_AUTHORIZATION] = f"Bearer {access_token}"
        return headers

    def _request_kwargs(
        self,
        params: Optional[dict[str, Any]],
        body: Any,
        access_token: Optional[str],
    ) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"headers": self._headers(access_token)}
        query = clean_params(params)
        if query:
            kwargs["params"] = query
        if body is not None:
            kwargs["json"] = body
        return kwargs

    def _decode(self, response: httpx.Response, model: Any, paginated: bool = False) -> Any:
        """
        Convertit une reponse 2xx en instance du modele attendu.

        Retourne None pour un 204, un corps vide ou un modele None.

        Raises:
            TraktDeserializationError: JSON invalide ou non conforme au modele
        """
        if model is None or response.status_code == 204 or not response.content:
            return None
        try:
            data = response.json()
        except ValueError as exc:
            raise TraktDeserializationError(
                f"Invalid JSON from {response.request.url.path}"
            ) from exc
        try:
            if paginated:
                items = _adapter(list[model]).validate_python(data)
                return PaginatedList.from_headers(items, response.headers)
            return _adapter(model).validate_python(data)
        except ValidationError as exc:
            raise TraktDeserializationError(
                f"Unexpected payload from {response.request.url.path}: {exc}"
            ) from exc

    def _request(
        self,
        method: str,
        path: str,
        model: Any = None,
        params: Optional[dict[str, Any]] = None,
        body: Any = None,
        access_token: Optional[str] = None,
        paginated: bool = False,
    ) -> Any:
        raise NotImplementedError

    # Verbes generiques

    def get(self, path: str, model: Any = None, params: Optional[dict[str, Any]] = None, paginated: bool = False):
        return self._request("GET", path, model, params=params, paginated=paginated)

    def auth_get(
        self,
        path: str,
        access_token: str,
        model: Any = None,
        params: Optional[dict[str, Any]] = None,
        paginated: bool = False,
    ):
        return self._request(
            "GET", path, model, params=params, access_token=access_token, paginated=paginated
        )

    def post(self, path: str, body: Any = None, model: Any = None):
        return self._request("POST", path, model, body=body)

    def auth_post(self, path: str, access_token: str, body: Any = None, model: Any = None):
        return self._request("POST", path, model, body=body, access_token=access_token)

    def put(self, path: str, body: Any = None, model: Any = None):
        return self._request("PUT", path, model, body=body)

    def auth_put(self, path: str, access_token: str, body: Any = None, model: Any = None):
        return self._request("PUT", path, model, body=body, access_token=access_token)

    def delete(self, path: str, model: Any = None):
        return self._request("DELETE", path, model)

    def auth_delete(self, path: str, access_token: str, model: Any = None):
        return self._request("DELETE", path, model, access_token=access_token)


class TraktClient(TraktResources, BaseTraktClient):
    """
    Client bloquant de l'API Trakt.

    Le client HTTP est cree au premier appel (lazy init) et ferme par
    close() ou en sortie de bloc with.

    Example:
        client = TraktClient(client_id="xxx", client_secret="yyy")
        url = client.oauth_authorize_url("urn:ietf:wg:oauth:2.0:oob")
        token = client.oauth_get_token(code, "urn:ietf:wg:oauth:2.0:oob")
        client.close()
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._client: Optional[httpx.Client] = None

    def _get_client(self) -> httpx.Client:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(base_url=self.base_url, timeout=self.timeout)
        return self._client

    def _request(
        self,
        method: str,
        path: str,
        model: Any = None,
        params: Optional[dict[str, Any]] = None,
        body: Any = None,
        access_token: Optional[str] = None,
        paginated: bool = False,
    ) -> Any:
        logger.debug("Trakt {} {}", method, path)
        response = request_with_retry(
            self._get_client(),
            method,
            path,
            max_attempts=self.max_attempts,
            **self._request_kwargs(params, body, access_token),
        )
        return self._decode(response, model, paginated)

    def into_async(self) -> "AsyncTraktClient":
        """Client async avec les memes identifiants et URLs."""
        return AsyncTraktClient(
            self.client_id,
            self.client_secret,
            base_url=self.base_url,
            site_url=self.site_url,
            timeout=self.timeout,
            max_attempts=self.max_attempts,
        )

    def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "TraktClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class AsyncTraktClient(TraktResources, BaseTraktClient):
    """
    Client async de l'API Trakt.

    Memes methodes que TraktClient ; chacune retourne une coroutine.

    Example:
        async with AsyncTraktClient(client_id="xxx") as client:
            results = await client.search(SearchType.movie(), "tron").execute()
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout)
        return self._client

    async def _request(
        self,
        method: str,
        path: str,
        model: Any = None,
        params: Optional[dict[str, Any]] = None,
        body: Any = None,
        access_token: Optional[str] = None,
        paginated: bool = False,
    ) -> Any:
        logger.debug("Trakt {} {}", method, path)
        response = await async_request_with_retry(
            self._get_client(),
            method,
            path,
            max_attempts=self.max_attempts,
            **self._request_kwargs(params, body, access_token),
        )
        return self._decode(response, model, paginated)

    def into_sync(self) -> TraktClient:
        """Client bloquant avec les memes identifiants et URLs."""
        return TraktClient(
            self.client_id,
            self.client_secret,
            base_url=self.base_url,
            site_url=self.site_url,
            timeout=self.timeout,
            max_attempts=self.max_attempts,
        )

    async def aclose(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AsyncTraktClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
