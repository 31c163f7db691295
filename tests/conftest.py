"""
Fixtures pytest partagees pour les tests trakt-api.

Ce module contient les fixtures communes utilisees dans les tests:
- Clients Trakt (bloquant et async) pointant sur l'API de production
- Settings de test avec fichier de log temporaire
- Helpers pour inspecter les requetes capturees par respx
"""

import json
from pathlib import Path
from typing import Any, AsyncIterator, Iterator

import httpx
import pytest
import pytest_asyncio

from trakt_api.adapters.api.client import AsyncTraktClient, TraktClient
from trakt_api.config import Settings

CLIENT_ID = "test-client-id"
CLIENT_SECRET = "test-client-secret"
ACCESS_TOKEN = "test-access-token"


@pytest.fixture
def client() -> Iterator[TraktClient]:
    """TraktClient with id and secret, closed after the test."""
    trakt = TraktClient(CLIENT_ID, CLIENT_SECRET)
    yield trakt
    trakt.close()


@pytest.fixture
def public_client() -> Iterator[TraktClient]:
    """TraktClient without client_secret."""
    trakt = TraktClient(CLIENT_ID)
    yield trakt
    trakt.close()


@pytest_asyncio.fixture
async def async_client() -> AsyncIterator[AsyncTraktClient]:
    """AsyncTraktClient with id and secret, closed after the test."""
    trakt = AsyncTraktClient(CLIENT_ID, CLIENT_SECRET)
    yield trakt
    await trakt.aclose()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test isolees de l'environnement."""
    return Settings(
        _env_file=None,
        client_id=CLIENT_ID,
        client_secret=CLIENT_SECRET,
        log_file=tmp_path / "test.log",
    )


def body_of(request: httpx.Request) -> Any:
    """Decode the JSON body of a captured request."""
    return json.loads(request.content)
