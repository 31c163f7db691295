"""Episode models."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from trakt_api.core.entities.common import Ids, TraktModel


class Episode(TraktModel):
    season: int
    number: int
    title: Optional[str] = None
    ids: Ids = Field(default_factory=Ids)


class FullEpisode(Episode):
    number_abs: Optional[int] = None
    overview: Optional[str] = None
    rating: Optional[float] = None
    votes: Optional[int] = None
    comment_count: Optional[int] = None
    first_aired: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    available_translations: list[str] = Field(default_factory=list)
    runtime: Optional[int] = None
    episode_type: Optional[str] = None
