"""
Container d'injection de dependances via dependency-injector.

Fournit la configuration et les clients Trakt aux commandes CLI.
"""

from dependency_injector import containers, providers

from .adapters.api.client import AsyncTraktClient, TraktClient
from .config import Settings


class Container(containers.DeclarativeContainer):
    """Container DI de trakt-api.

    Utilisation :
        container = Container()
        client = container.client()
        async with container.async_client() as client:
            ...
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Client bloquant - Singleton, partage sa connexion HTTP
    client = providers.Singleton(TraktClient.from_settings, settings=config)

    # Client async - Factory car lie a la boucle d'evenements qui l'utilise
    async_client = providers.Factory(AsyncTraktClient.from_settings, settings=config)
