"""
Sync models: last activities, playback, collection, watched, history,
ratings, watchlist and the summaries returned by add/remove calls.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from trakt_api.core.entities.common import Ids, TraktModel
from trakt_api.core.entities.episode import Episode, FullEpisode
from trakt_api.core.entities.movie import FullMovie, Movie
from trakt_api.core.entities.season import Season
from trakt_api.core.entities.show import FullShow, Show


class ActivityDates(TraktModel):
    """Timestamps of one activity group; keys vary by group."""

    watched_at: Optional[datetime] = None
    collected_at: Optional[datetime] = None
    rated_at: Optional[datetime] = None
    watchlisted_at: Optional[datetime] = None
    recommendations_at: Optional[datetime] = None
    commented_at: Optional[datetime] = None
    paused_at: Optional[datetime] = None
    hidden_at: Optional[datetime] = None
    liked_at: Optional[datetime] = None
    blocked_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    settings_at: Optional[datetime] = None
    followed_at: Optional[datetime] = None
    following_at: Optional[datetime] = None
    pending_at: Optional[datetime] = None
    requested_at: Optional[datetime] = None


class LastActivities(TraktModel):
    all: datetime
    movies: ActivityDates = Field(default_factory=ActivityDates)
    episodes: ActivityDates = Field(default_factory=ActivityDates)
    shows: ActivityDates = Field(default_factory=ActivityDates)
    seasons: ActivityDates = Field(default_factory=ActivityDates)
    comments: ActivityDates = Field(default_factory=ActivityDates)
    lists: ActivityDates = Field(default_factory=ActivityDates)
    watchlist: Optional[ActivityDates] = None
    favorites: Optional[ActivityDates] = None
    account: Optional[ActivityDates] = None
    saved_filters: Optional[ActivityDates] = None
    notes: Optional[ActivityDates] = None


class Playback(TraktModel):
    id: int
    progress: float
    paused_at: datetime
    item_type: str = Field(alias="type")
    movie: Optional[Movie] = None
    episode: Optional[Episode] = None
    show: Optional[Show] = None


class CollectionMovie(TraktModel):
    collected_at: datetime
    updated_at: Optional[datetime] = None
    movie: Movie


class FullCollectionMovie(CollectionMovie):
    movie: FullMovie


class CollectionEpisode(TraktModel):
    number: int
    collected_at: datetime


class CollectionSeason(TraktModel):
    number: int
    episodes: list[CollectionEpisode] = Field(default_factory=list)


class CollectionShow(TraktModel):
    last_collected_at: datetime
    last_updated_at: Optional[datetime] = None
    show: Show
    seasons: list[CollectionSeason] = Field(default_factory=list)


class FullCollectionShow(CollectionShow):
    show: FullShow


class WatchedEpisode(TraktModel):
    number: int
    plays: int
    last_watched_at: datetime


class WatchedSeason(TraktModel):
    number: int
    episodes: list[WatchedEpisode] = Field(default_factory=list)


class WatchedEntry(TraktModel):
    """Watched movie or show (the latter with its seasons)."""

    plays: int
    last_watched_at: datetime
    last_updated_at: Optional[datetime] = None
    reset_at: Optional[datetime] = None
    movie: Optional[Movie] = None
    show: Optional[Show] = None
    seasons: Optional[list[WatchedSeason]] = None


class HistoryItem(TraktModel):
    id: int
    watched_at: datetime
    action: str
    item_type: str = Field(alias="type")
    movie: Optional[Movie] = None
    episode: Optional[Episode] = None
    show: Optional[Show] = None


class FullHistoryItem(HistoryItem):
    movie: Optional[FullMovie] = None
    episode: Optional[FullEpisode] = None
    show: Optional[FullShow] = None


class RatingEntry(TraktModel):
    rated_at: datetime
    rating: int
    item_type: str = Field(alias="type")
    movie: Optional[Movie] = None
    show: Optional[Show] = None
    season: Optional[Season] = None
    episode: Optional[Episode] = None


class WatchlistEntry(TraktModel):
    rank: Optional[int] = None
    id: Optional[int] = None
    listed_at: datetime
    notes: Optional[str] = None
    item_type: str = Field(alias="type")
    movie: Optional[Movie] = None
    show: Optional[Show] = None
    season: Optional[Season] = None
    episode: Optional[Episode] = None


class SyncCounts(TraktModel):
    movies: int = 0
    shows: Optional[int] = None
    seasons: Optional[int] = None
    episodes: int = 0


class NotFoundItem(TraktModel):
    """Reference echoed back by Trakt when it could not be matched."""

    ids: Optional[Ids] = None
    title: Optional[str] = None
    year: Optional[int] = None
    number: Optional[int] = None
    season: Optional[int] = None


class SyncNotFound(TraktModel):
    movies: list[NotFoundItem] = Field(default_factory=list)
    shows: list[NotFoundItem] = Field(default_factory=list)
    seasons: list[NotFoundItem] = Field(default_factory=list)
    episodes: list[NotFoundItem] = Field(default_factory=list)
    people: list[NotFoundItem] = Field(default_factory=list)
    ids: list[int] = Field(default_factory=list)


class SyncAddResponse(TraktModel):
    added: SyncCounts = Field(default_factory=SyncCounts)
    updated: Optional[SyncCounts] = None
    existing: Optional[SyncCounts] = None
    not_found: SyncNotFound = Field(default_factory=SyncNotFound)


class SyncRemoveResponse(TraktModel):
    deleted: SyncCounts = Field(default_factory=SyncCounts)
    not_found: SyncNotFound = Field(default_factory=SyncNotFound)
