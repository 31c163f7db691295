"""
Selecteurs d'elements pour les corps de requetes (sync, check-in, commentaires).

Un selecteur construit l'objet JSON qui designe un film, une serie, une
saison, un episode, une liste ou un utilisateur : identifiants (ids),
cle naturelle (titre, numero) et donnees associees (watched_at, rating...).

Usage:
    MovieSelector().imdb("tt0372784").watched_at(now).build()
    # -> {"ids": {"imdb": "tt0372784"}, "watched_at": "2024-01-01T20:00:00.000Z"}

    ShowSelector().slug("the-expanse").season(SeasonSelector().number(1).episode(3))
"""

import copy
from datetime import datetime
from typing import Any, Mapping, Optional, Union

from trakt_api.core.entities import TraktModel
from trakt_api.utils.helpers import format_datetime

SelectorInput = Union["Selector", TraktModel, Mapping[str, Any]]


class Selector:
    """
    Base des selecteurs : dictionnaire JSON construit par setters chaines.

    Args:
        item: Selecteur, modele pydantic ou mapping a fusionner
    """

    # Cles qui identifient l'element sans ids
    natural_keys: tuple[str, ...] = ()

    def __init__(self, item: Optional[SelectorInput] = None) -> None:
        self._data: dict[str, Any] = {}
        if item is not None:
            self.update(item)

    def update(self, item: SelectorInput) -> "Selector":
        """Fusionne un selecteur, un modele ou un mapping dans l'element."""
        if isinstance(item, Selector):
            values = copy.deepcopy(item._data)
        elif isinstance(item, TraktModel):
            values = item.to_payload()
        elif isinstance(item, Mapping):
            values = copy.deepcopy(dict(item))
        else:
            raise TypeError(f"cannot select from {type(item).__name__}")
        ids = values.pop("ids", None)
        self._data.update(values)
        if ids:
            self._ids().update(ids)
        return self

    def set(self, key: str, value: Any) -> "Selector":
        self._data[key] = value
        return self

    def _ids(self) -> dict[str, Any]:
        return self._data.setdefault("ids", {})

    def _set_id(self, key: str, value: Any) -> "Selector":
        self._ids()[key] = value
        return self

    # Identifiants

    def trakt(self, trakt_id: int) -> "Selector":
        return self._set_id("trakt", trakt_id)

    def slug(self, slug: str) -> "Selector":
        return self._set_id("slug", slug)

    def imdb(self, imdb_id: str) -> "Selector":
        return self._set_id("imdb", imdb_id)

    def tmdb(self, tmdb_id: int) -> "Selector":
        return self._set_id("tmdb", tmdb_id)

    def tvdb(self, tvdb_id: int) -> "Selector":
        return self._set_id("tvdb", tvdb_id)

    def tvrage(self, tvrage_id: int) -> "Selector":
        return self._set_id("tvrage", tvrage_id)

    # Donnees associees

    def rated_at(self, when: datetime) -> "Selector":
        return self.set("rated_at", format_datetime(when))

    def collected_at(self, when: datetime) -> "Selector":
        return self.set("collected_at", format_datetime(when))

    def watched_at(self, when: datetime) -> "Selector":
        return self.set("watched_at", format_datetime(when))

    def rating(self, rating: int) -> "Selector":
        if not 1 <= rating <= 10:
            raise ValueError("rating must be between 1 and 10")
        return self.set("rating", rating)

    def is_identified(self) -> bool:
        if self._data.get("ids"):
            return True
        return any(self._data.get(key) is not None for key in self.natural_keys)

    def build(self) -> dict[str, Any]:
        """
        Retourne l'objet JSON de l'element.

        Raises:
            ValueError: Si l'element n'a ni ids ni cle naturelle
        """
        if not self.is_identified():
            raise ValueError(f"{type(self).__name__} needs at least one identifier")
        data = copy.deepcopy(self._data)
        if not data.get("ids"):
            data.pop("ids", None)
        return data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Selector):
            return NotImplemented
        return type(self) is type(other) and self._data == other._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


class MovieSelector(Selector):
    natural_keys = ("title",)

    def title(self, title: str) -> "MovieSelector":
        return self.set("title", title)

    def year(self, year: int) -> "MovieSelector":
        return self.set("year", year)


class EpisodeSelector(Selector):
    natural_keys = ("number",)

    def number(self, number: int) -> "EpisodeSelector":
        return self.set("number", number)

    def season(self, season: int) -> "EpisodeSelector":
        return self.set("season", season)


class SeasonSelector(Selector):
    natural_keys = ("number",)

    def number(self, number: int) -> "SeasonSelector":
        return self.set("number", number)

    def episode(self, episode: Union[int, SelectorInput]) -> "SeasonSelector":
        """Ajoute un episode (numero ou selecteur) a la saison."""
        self._data.setdefault("episodes", []).append(
            build_item(episode, EpisodeSelector, number_key="number")
        )
        return self


class ShowSelector(Selector):
    natural_keys = ("title",)

    def title(self, title: str) -> "ShowSelector":
        return self.set("title", title)

    def year(self, year: int) -> "ShowSelector":
        return self.set("year", year)

    def season(self, season: Union[int, SelectorInput]) -> "ShowSelector":
        """Ajoute une saison (numero ou selecteur) a la serie."""
        self._data.setdefault("seasons", []).append(
            build_item(season, SeasonSelector, number_key="number")
        )
        return self


class ListSelector(Selector):
    natural_keys = ("name",)

    def name(self, name: str) -> "ListSelector":
        return self.set("name", name)

    def user(self, user: Union[str, SelectorInput]) -> "ListSelector":
        """Proprietaire de la liste (username ou selecteur)."""
        return self.set("user", build_item(user, UserSelector, number_key="username"))


class UserSelector(Selector):
    natural_keys = ("username",)

    def username(self, username: str) -> "UserSelector":
        return self.set("username", username)


def build_item(
    item: Union[int, str, SelectorInput],
    selector_cls: type[Selector],
    number_key: Optional[str] = None,
) -> dict[str, Any]:
    """
    Convertit un element (selecteur, modele, mapping ou cle simple) en JSON.

    Un entier ou une chaine est affecte a number_key (numero de saison,
    d'episode, username).
    """
    if isinstance(item, (int, str)) and not isinstance(item, bool):
        if number_key is None:
            raise TypeError(f"{selector_cls.__name__} needs a selector, model or mapping")
        return selector_cls().set(number_key, item).build()
    if isinstance(item, selector_cls):
        return item.build()
    return selector_cls(item).build()
