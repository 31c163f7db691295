"""Season models."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from trakt_api.core.entities.common import Ids, TraktModel
from trakt_api.core.entities.episode import Episode, FullEpisode


class Season(TraktModel):
    number: int
    ids: Ids = Field(default_factory=Ids)
    # Present with ?extended=episodes
    episodes: Optional[list[Episode]] = None


class FullSeason(Season):
    rating: Optional[float] = None
    votes: Optional[int] = None
    episode_count: Optional[int] = None
    aired_episodes: Optional[int] = None
    title: Optional[str] = None
    overview: Optional[str] = None
    first_aired: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    network: Optional[str] = None
    episodes: Optional[list[FullEpisode]] = None
