"""
Builder du check-in (POST /checkin).

Un check-in porte sur un film, ou sur un episode (eventuellement avec
sa serie pour un episode designe par numero).
"""

from datetime import date
from typing import Any, Optional

from trakt_api.adapters.api.requests.selectors import (
    EpisodeSelector,
    MovieSelector,
    SelectorInput,
    ShowSelector,
    build_item,
)
from trakt_api.core.entities import CheckinResponse
from trakt_api.utils import api_path


class CheckinRequest:
    """
    Check-in sur un film ou un episode.

    Example:
        client.checkin().movie(MovieSelector().slug("guardians-of-the-galaxy-2014")) \\
            .message("Popcorn time").twitter().execute(access_token)
    """

    def __init__(self, client) -> None:
        self._client = client
        self._body: dict[str, Any] = {}
        self._sharing: dict[str, bool] = {"twitter": False, "tumblr": False, "facebook": False}

    def movie(self, movie: SelectorInput) -> "CheckinRequest":
        self._body.pop("episode", None)
        self._body.pop("show", None)
        self._body["movie"] = build_item(movie, MovieSelector)
        return self

    def episode(
        self, episode: SelectorInput, show: Optional[SelectorInput] = None
    ) -> "CheckinRequest":
        self._body.pop("movie", None)
        self._body["episode"] = build_item(episode, EpisodeSelector)
        if show is not None:
            self._body["show"] = build_item(show, ShowSelector)
        return self

    def message(self, message: str) -> "CheckinRequest":
        self._body["message"] = message
        return self

    def app_version(self, version: str) -> "CheckinRequest":
        self._body["app_version"] = version
        return self

    def app_date(self, when: date) -> "CheckinRequest":
        self._body["app_date"] = when.isoformat()
        return self

    def twitter(self, enabled: bool = True) -> "CheckinRequest":
        self._sharing["twitter"] = enabled
        return self

    def tumblr(self, enabled: bool = True) -> "CheckinRequest":
        self._sharing["tumblr"] = enabled
        return self

    def facebook(self, enabled: bool = True) -> "CheckinRequest":
        self._sharing["facebook"] = enabled
        return self

    def build_body(self) -> dict[str, Any]:
        if "movie" not in self._body and "episode" not in self._body:
            raise ValueError("a check-in needs a movie or an episode")
        body = dict(self._body)
        body["sharing"] = dict(self._sharing)
        return body

    def execute(self, access_token: str):
        return self._client.auth_post(
            api_path("checkin"), access_token, self.build_body(), CheckinResponse
        )
