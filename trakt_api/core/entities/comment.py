"""Comment models."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from trakt_api.core.entities.common import TraktModel
from trakt_api.core.entities.episode import Episode
from trakt_api.core.entities.lists import TraktList
from trakt_api.core.entities.movie import Movie
from trakt_api.core.entities.season import Season
from trakt_api.core.entities.show import Show
from trakt_api.core.entities.user import FullUser, User
from trakt_api.core.value_objects import CommentableItemType


class UserStatsOnComment(TraktModel):
    rating: Optional[int] = None
    play_count: Optional[int] = None
    completed_count: Optional[int] = None


class Comment(TraktModel):
    id: int
    parent_id: Optional[int] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    comment: str
    spoiler: bool = False
    review: bool = False
    replies: int = 0
    likes: int = 0
    user_rating: Optional[int] = None
    user_stats: Optional[UserStatsOnComment] = None
    user: User


class FullComment(Comment):
    user: FullUser


class CommentItem(TraktModel):
    """The media a comment is attached to (GET /comments/{id}/item)."""

    item_type: CommentableItemType = Field(alias="type")
    movie: Optional[Movie] = None
    show: Optional[Show] = None
    season: Optional[Season] = None
    episode: Optional[Episode] = None
    list: Optional[TraktList] = None


class CommentAndItem(CommentItem):
    """Entry of the trending / recent / updated comment listings."""

    comment: Comment


class FullCommentAndItem(CommentAndItem):
    comment: FullComment


class Like(TraktModel):
    liked_at: datetime
    user: User
