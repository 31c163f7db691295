"""
Show models.

FullShow.status is parsed leniently: an unknown status string (Trakt adds
new ones from time to time) becomes None instead of failing the response.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from trakt_api.core.entities.common import Ids, TraktModel
from trakt_api.core.value_objects import ShowStatus


class Show(TraktModel):
    title: str
    year: Optional[int] = None
    ids: Ids = Field(default_factory=Ids)


class Airing(TraktModel):
    day: Optional[str] = None
    time: Optional[str] = None
    timezone: Optional[str] = None


class FullShow(Show):
    overview: Optional[str] = None
    first_aired: Optional[datetime] = None
    airs: Optional[Airing] = None
    runtime: Optional[int] = None
    certification: Optional[str] = None
    network: Optional[str] = None
    country: Optional[str] = None
    trailer: Optional[str] = None
    homepage: Optional[str] = None
    status: Optional[ShowStatus] = None
    rating: Optional[float] = None
    votes: Optional[int] = None
    comment_count: Optional[int] = None
    updated_at: Optional[datetime] = None
    language: Optional[str] = None
    available_translations: list[str] = Field(default_factory=list)
    genres: list[str] = Field(default_factory=list)
    aired_episodes: Optional[int] = None

    @field_validator("status", mode="before")
    @classmethod
    def lenient_status(cls, value: Any) -> Optional[ShowStatus]:
        if value is None or isinstance(value, ShowStatus):
            return value
        try:
            return ShowStatus(value)
        except ValueError:
            return None


class TrendingShow(TraktModel):
    watchers: int
    show: Show


class FullTrendingShow(TrendingShow):
    show: FullShow


class WatchedShow(TraktModel):
    watcher_count: int
    play_count: int
    collected_count: int
    collector_count: Optional[int] = None
    show: Show


class FullWatchedShow(WatchedShow):
    show: FullShow


class AnticipatedShow(TraktModel):
    list_count: int
    show: Show


class FullAnticipatedShow(AnticipatedShow):
    show: FullShow


class UpdatedShow(TraktModel):
    updated_at: datetime
    show: Show


class FullUpdatedShow(UpdatedShow):
    show: FullShow
