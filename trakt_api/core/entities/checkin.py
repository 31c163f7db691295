"""Check-in answer model."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from trakt_api.core.entities.common import TraktModel
from trakt_api.core.entities.episode import Episode
from trakt_api.core.entities.movie import Movie
from trakt_api.core.entities.show import Show


class CheckinSharing(TraktModel):
    twitter: bool = False
    tumblr: bool = False
    facebook: bool = False
    mastodon: bool = False


class CheckinResponse(TraktModel):
    id: int
    watched_at: datetime
    sharing: CheckinSharing = Field(default_factory=CheckinSharing)
    movie: Optional[Movie] = None
    episode: Optional[Episode] = None
    show: Optional[Show] = None
