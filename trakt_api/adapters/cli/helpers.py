"""
Utilitaires partages pour les commandes CLI de trakt-api.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- async_command : decorateur transformant une fonction async en commande sync
- require_client_id : arret propre si TRAKT_CLIENT_ID n'est pas configure
- poll_device_token : attente de la validation du flux device OAuth
"""

import asyncio
import inspect
import time
from contextlib import contextmanager
from functools import wraps
from typing import Callable

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from trakt_api.adapters.api.errors import TraktResponseError
from trakt_api.core.entities import AccessToken, DeviceCode
from trakt_api.utils.constants import DEVICE_PENDING_STATUS, DEVICE_SLOW_DOWN_STATUS

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("trakt_api")
    try:
        yield
    finally:
        loguru_logger.enable("trakt_api")


def async_command(func):
    """
    Transforme une fonction async en commande sync via asyncio.run().

    Preserve les annotations Typer pour que les options/arguments soient
    correctement interpretes.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        return asyncio.run(func(*args, **kwargs))
    wrapper.__signature__ = inspect.signature(func)
    wrapper.__annotations__ = func.__annotations__
    return wrapper


def require_client_id(settings) -> None:
    """Quitte avec un message si aucun client_id n'est configure."""
    if not settings.client_id:
        console.print("[red]Erreur: TRAKT_CLIENT_ID n'est pas defini[/red]")
        raise typer.Exit(1)


def poll_device_token(
    client,
    device: DeviceCode,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> AccessToken:
    """
    Interroge /oauth/device/token jusqu'a validation par l'utilisateur.

    Un 400 signifie "en attente", un 429 demande de ralentir (l'intervalle
    augmente d'une seconde). Les autres erreurs sont propagees.

    Raises:
        TimeoutError: Si le code expire avant validation
        TraktResponseError: Code invalide, deja utilise ou refuse
    """
    interval = device.interval
    deadline = clock() + device.expires_in
    while clock() < deadline:
        try:
            return client.oauth_device_token(device.device_code)
        except TraktResponseError as exc:
            if exc.status_code == DEVICE_SLOW_DOWN_STATUS:
                interval += 1
            elif exc.status_code != DEVICE_PENDING_STATUS:
                raise
        loguru_logger.debug("Device code en attente, nouvel essai dans {}s", interval)
        sleep(interval)
    raise TimeoutError("device code expired before approval")
