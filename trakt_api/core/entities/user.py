"""
User models: profiles, settings, social graph and statistics.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from trakt_api.core.entities.common import Ids, TraktModel


class User(TraktModel):
    username: str
    private: bool = False
    name: Optional[str] = None
    vip: Optional[bool] = None
    vip_ep: Optional[bool] = None
    ids: Ids = Field(default_factory=Ids)


class Image(TraktModel):
    full: Optional[str] = None


class UserImages(TraktModel):
    avatar: Image = Field(default_factory=Image)


class FullUser(User):
    joined_at: Optional[datetime] = None
    location: Optional[str] = None
    about: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[int] = None
    images: Optional[UserImages] = None
    vip_og: Optional[bool] = None
    vip_years: Optional[int] = None


class Account(TraktModel):
    timezone: Optional[str] = None
    date_format: Optional[str] = None
    time_24hr: Optional[bool] = None
    cover_image: Optional[str] = None


class Connections(TraktModel):
    facebook: bool = False
    twitter: bool = False
    google: bool = False
    tumblr: bool = False
    medium: bool = False
    slack: bool = False


class SharingText(TraktModel):
    watching: Optional[str] = None
    watched: Optional[str] = None
    rated: Optional[str] = None


class UserSettings(TraktModel):
    """Settings of the authenticated user (GET /users/settings)."""

    user: FullUser
    account: Account = Field(default_factory=Account)
    connections: Connections = Field(default_factory=Connections)
    sharing_text: SharingText = Field(default_factory=SharingText)


class FollowRequest(TraktModel):
    id: int
    requested_at: datetime
    user: User


class FollowedUser(TraktModel):
    """Follower / following entry and answer of a follow or approve call."""

    followed_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None
    user: User


class Friend(TraktModel):
    friends_at: datetime
    user: User


class UserLike(TraktModel):
    liked_at: datetime
    item_type: str = Field(alias="type")
    comment: Optional[dict[str, Any]] = None
    list: Optional[dict[str, Any]] = None


class UserWatching(TraktModel):
    """What a user is watching right now (200) ; nothing is a 204."""

    expires_at: datetime
    started_at: datetime
    action: str
    item_type: str = Field(alias="type")
    movie: Optional[dict[str, Any]] = None
    episode: Optional[dict[str, Any]] = None
    show: Optional[dict[str, Any]] = None


class MediaUserStats(TraktModel):
    plays: int = 0
    watched: int = 0
    minutes: int = 0
    collected: int = 0
    ratings: int = 0
    comments: int = 0


class ShowUserStats(TraktModel):
    watched: int = 0
    collected: int = 0
    ratings: int = 0
    comments: int = 0


class SeasonUserStats(TraktModel):
    ratings: int = 0
    comments: int = 0


class NetworkUserStats(TraktModel):
    friends: int = 0
    followers: int = 0
    following: int = 0


class RatingsUserStats(TraktModel):
    total: int = 0
    distribution: dict[str, int] = Field(default_factory=dict)


class UserStats(TraktModel):
    movies: MediaUserStats = Field(default_factory=MediaUserStats)
    shows: ShowUserStats = Field(default_factory=ShowUserStats)
    seasons: SeasonUserStats = Field(default_factory=SeasonUserStats)
    episodes: MediaUserStats = Field(default_factory=MediaUserStats)
    network: NetworkUserStats = Field(default_factory=NetworkUserStats)
    ratings: RatingsUserStats = Field(default_factory=RatingsUserStats)
