"""
Exceptions levees par les clients trakt-api.

Hierarchie:
    TraktError
    +-- TraktResponseError      (statut HTTP hors 2xx)
    |   +-- RateLimitError      (429 Too Many Requests)
    +-- TraktConnectionError    (echec reseau, timeout)
    +-- TraktDeserializationError (JSON invalide ou non conforme au modele)
    +-- ClientSecretNeededError (operation OAuth sans client_secret)
"""

from typing import Optional

import httpx


class TraktError(Exception):
    """Erreur de base de la librairie."""


class TraktResponseError(TraktError):
    """
    L'API a repondu avec un statut d'erreur.

    Attributes:
        response: Reponse httpx complete (statut, headers, corps)
        status_code: Code HTTP de la reponse
    """

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.status_code = response.status_code
        super().__init__(
            f"{response.request.method} {response.request.url.path} "
            f"returned {response.status_code}"
        )


class RateLimitError(TraktResponseError):
    """
    Exception levee quand l'API retourne 429 Too Many Requests.

    Attributes:
        retry_after: Nombre de secondes a attendre (depuis le header Retry-After),
                     ou None si non specifie.
    """

    def __init__(self, response: httpx.Response) -> None:
        super().__init__(response)
        self.retry_after = _parse_retry_after(response.headers.get("Retry-After"))


class TraktConnectionError(TraktError):
    """La requete n'a pas pu aboutir (DNS, connexion refusee, timeout)."""


class TraktDeserializationError(TraktError):
    """Le corps de la reponse ne correspond pas au modele attendu."""


class ClientSecretNeededError(TraktError):
    """L'operation exige un client_secret qui n'a pas ete fourni."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} requires a client_secret")


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None
