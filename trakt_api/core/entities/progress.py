"""Show progress models (collection and watched)."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from trakt_api.core.entities.common import TraktModel
from trakt_api.core.entities.episode import Episode


class ProgressEpisode(TraktModel):
    number: int
    completed: bool
    collected_at: Optional[datetime] = None
    last_watched_at: Optional[datetime] = None


class ProgressSeason(TraktModel):
    number: int
    title: Optional[str] = None
    aired: int
    completed: int
    episodes: list[ProgressEpisode] = Field(default_factory=list)


class ShowProgress(TraktModel):
    """
    Progress of a user on a show.

    last_collected_at is set for collection progress, last_watched_at and
    reset_at for watched progress.
    """

    aired: int
    completed: int
    last_collected_at: Optional[datetime] = None
    last_watched_at: Optional[datetime] = None
    reset_at: Optional[datetime] = None
    seasons: list[ProgressSeason] = Field(default_factory=list)
    hidden_seasons: list[dict] = Field(default_factory=list)
    next_episode: Optional[Episode] = None
    last_episode: Optional[Episode] = None
