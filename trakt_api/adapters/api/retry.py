"""
Mecanisme de retry avec backoff exponentiel pour l'API Trakt.

Convertit les reponses 429 (rate limiting) en RateLimitError et relance
les requetes avec un delai croissant et du jitter aleatoire. Les autres
statuts d'erreur deviennent des TraktResponseError sans retry.

Usage:
    # Avec le decorateur
    @with_retry(max_attempts=5, max_wait=60)
    def my_api_call():
        ...

    # Avec les fonctions helper
    response = request_with_retry(client, "GET", "/movies/trending")
    response = await async_request_with_retry(client, "GET", "/movies/trending")
"""

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from trakt_api.adapters.api.errors import (
    RateLimitError,
    TraktConnectionError,
    TraktResponseError,
)


def with_retry(max_attempts: int = 5, max_wait: int = 60):
    """
    Decorateur pour relancer sur RateLimitError avec backoff exponentiel.

    Utilise wait_random_exponential pour ajouter du jitter. Fonctionne
    sur les fonctions synchrones comme sur les coroutines.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        max_wait: Delai maximum entre les tentatives en secondes (defaut: 60)

    Returns:
        Decorateur tenacity
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_random_exponential(multiplier=1, min=1, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        reraise=True,
    )


def check_response(response: httpx.Response) -> httpx.Response:
    """
    Leve l'exception adaptee si le statut n'est pas 2xx.

    Raises:
        RateLimitError: Sur 429
        TraktResponseError: Sur tout autre statut hors 2xx
    """
    if response.status_code == 429:
        error = RateLimitError(response)
        logger.warning("Trakt rate limit atteint (retry_after={})", error.retry_after)
        raise error
    if not response.is_success:
        logger.warning(
            "Trakt {} {} -> {}",
            response.request.method,
            response.request.url.path,
            response.status_code,
        )
        raise TraktResponseError(response)
    return response


def request_with_retry(
    client: httpx.Client,
    method: str,
    url: str,
    max_attempts: int = 1,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP bloquante avec retry sur 429.

    Args:
        client: Client httpx a utiliser
        method: Methode HTTP (GET, POST, etc.)
        url: Chemin ou URL a appeler
        max_attempts: Nombre maximum de tentatives (1 = pas de retry)
        **kwargs: Arguments supplementaires passes a client.request()

    Returns:
        httpx.Response en cas de succes

    Raises:
        RateLimitError: Si 429 apres epuisement des tentatives
        TraktResponseError: Pour les autres erreurs HTTP
        TraktConnectionError: Si la requete n'a pas pu etre envoyee
    """

    @with_retry(max_attempts=max_attempts)
    def _do_request() -> httpx.Response:
        try:
            response = client.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            logger.warning("Trakt {} {} echec reseau: {}", method, url, exc)
            raise TraktConnectionError(str(exc)) from exc
        return check_response(response)

    return _do_request()


async def async_request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 1,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP async avec retry sur 429.

    Meme contrat que request_with_retry.
    """

    @with_retry(max_attempts=max_attempts)
    async def _do_request() -> httpx.Response:
        try:
            response = await client.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            logger.warning("Trakt {} {} echec reseau: {}", method, url, exc)
            raise TraktConnectionError(str(exc)) from exc
        return check_response(response)

    return await _do_request()
