"""
Shared Trakt data-transfer models.

Every response model derives from TraktModel, which ignores unknown JSON keys
so that additions on the API side never break deserialization.

Exports:
- TraktModel: base class (pydantic BaseModel)
- Ids: identifier set shared by movies, shows, seasons, episodes, people, lists
- Alias, Translation, Country, Language, Genre, Network: localization/metadata
- Certification, Certifications: content ratings per country
- Ratings, MediaStats: community statistics of an item
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer


class TraktModel(BaseModel):
    """Base class for all Trakt JSON models."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_payload(self) -> dict[str, Any]:
        """Serialize for a request body (wire names, unset fields dropped)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Ids(TraktModel):
    """
    Identifiers of an item across Trakt and third-party databases.

    Unset identifiers are left out of every serialization.

    Attributes:
        trakt: Trakt numeric ID
        slug: Trakt URL slug
        tvdb: TheTVDB ID
        imdb: IMDb ID (ttXXXXXXX / nmXXXXXXX)
        tmdb: The Movie Database ID
        tvrage: TVRage ID (legacy)
    """

    trakt: Optional[int] = None
    slug: Optional[str] = None
    tvdb: Optional[int] = None
    imdb: Optional[str] = None
    tmdb: Optional[int] = None
    tvrage: Optional[int] = None

    @model_serializer(mode="wrap")
    def _drop_unset(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return {key: value for key, value in handler(self).items() if value is not None}

    def is_empty(self) -> bool:
        return not self.to_payload()

    def merge(self, other: "Ids") -> "Ids":
        """Return a copy where fields missing here are taken from other."""
        values = other.model_dump(exclude_none=True)
        values.update(self.model_dump(exclude_none=True))
        return Ids(**values)


class Alias(TraktModel):
    title: str
    country: str


class Translation(TraktModel):
    title: Optional[str] = None
    overview: Optional[str] = None
    tagline: Optional[str] = None
    language: str
    country: Optional[str] = None


class Country(TraktModel):
    name: str
    code: str


class Language(TraktModel):
    name: str
    code: str


class Genre(TraktModel):
    name: str
    slug: str


class Network(TraktModel):
    name: str
    country: Optional[str] = None


class Certification(TraktModel):
    name: str
    slug: str
    description: str


class Certifications(TraktModel):
    """Certifications grouped by country code (Trakt only exposes "us")."""

    us: list[Certification] = Field(default_factory=list)


class Ratings(TraktModel):
    """
    Community rating of an item.

    distribution maps each score ("1".."10") to its number of votes.
    """

    rating: float
    votes: int
    distribution: dict[str, int] = Field(default_factory=dict)


class MediaStats(TraktModel):
    watchers: int = 0
    plays: int = 0
    collectors: int = 0
    collected_episodes: Optional[int] = None
    comments: int = 0
    lists: int = 0
    votes: int = 0
    favorited: Optional[int] = None
    recommended: Optional[int] = None
