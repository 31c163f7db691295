"""Custom list models."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from trakt_api.core.entities.common import Ids, TraktModel
from trakt_api.core.entities.episode import Episode
from trakt_api.core.entities.movie import Movie
from trakt_api.core.entities.person import Person
from trakt_api.core.entities.season import Season
from trakt_api.core.entities.show import Show
from trakt_api.core.entities.user import User
from trakt_api.core.value_objects import ListItemType


class TraktList(TraktModel):
    name: str
    description: Optional[str] = None
    privacy: Optional[str] = None
    share_link: Optional[str] = None
    list_type: Optional[str] = Field(default=None, alias="type")
    display_numbers: Optional[bool] = None
    allow_comments: Optional[bool] = None
    sort_by: Optional[str] = None
    sort_how: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    item_count: Optional[int] = None
    comment_count: Optional[int] = None
    likes: Optional[int] = None
    ids: Ids = Field(default_factory=Ids)
    user: Optional[User] = None


class ListInfo(TraktModel):
    """Entry of the trending / popular list listings."""

    like_count: int
    comment_count: int
    list: TraktList


class ListItem(TraktModel):
    rank: Optional[int] = None
    id: Optional[int] = None
    listed_at: Optional[datetime] = None
    notes: Optional[str] = None
    item_type: ListItemType = Field(alias="type")
    movie: Optional[Movie] = None
    show: Optional[Show] = None
    season: Optional[Season] = None
    episode: Optional[Episode] = None
    person: Optional[Person] = None
