"""
Builder des requetes d'ecriture /sync (collection, historique, notes, watchlist).

Les elements sont accumules par type puis envoyes en un seul POST
authentifie.

Example:
    client.sync_history_add().movie(
        MovieSelector().imdb("tt0372784").watched_at(now)
    ).episode(EpisodeSelector().trakt(1061)).execute(access_token)
"""

from typing import Any

from trakt_api.adapters.api.requests.selectors import (
    EpisodeSelector,
    MovieSelector,
    SeasonSelector,
    SelectorInput,
    ShowSelector,
    build_item,
)


class SyncRequest:
    """
    Requete POST vers un endpoint de sync.

    Args:
        client: Client Trakt
        path: Chemin de l'endpoint (/sync/collection, /sync/history/remove...)
        model: Modele de la reponse (SyncAddResponse ou SyncRemoveResponse)
    """

    def __init__(self, client, path: str, model: Any) -> None:
        self._client = client
        self._path = path
        self._model = model
        self._items: dict[str, list[dict[str, Any]]] = {
            "movies": [],
            "shows": [],
            "seasons": [],
            "episodes": [],
        }

    def movie(self, movie: SelectorInput) -> "SyncRequest":
        self._items["movies"].append(build_item(movie, MovieSelector))
        return self

    def show(self, show: SelectorInput) -> "SyncRequest":
        self._items["shows"].append(build_item(show, ShowSelector))
        return self

    def season(self, season: SelectorInput) -> "SyncRequest":
        self._items["seasons"].append(build_item(season, SeasonSelector))
        return self

    def episode(self, episode: SelectorInput) -> "SyncRequest":
        self._items["episodes"].append(build_item(episode, EpisodeSelector))
        return self

    def movies(self, *movies: SelectorInput) -> "SyncRequest":
        for movie in movies:
            self.movie(movie)
        return self

    def shows(self, *shows: SelectorInput) -> "SyncRequest":
        for show in shows:
            self.show(show)
        return self

    def episodes(self, *episodes: SelectorInput) -> "SyncRequest":
        for episode in episodes:
            self.episode(episode)
        return self

    def is_empty(self) -> bool:
        return not any(self._items.values())

    def build_body(self) -> dict[str, list[dict[str, Any]]]:
        return {key: list(items) for key, items in self._items.items()}

    def execute(self, access_token: str):
        return self._client.auth_post(self._path, access_token, self.build_body(), self._model)
