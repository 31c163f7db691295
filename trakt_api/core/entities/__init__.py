"""
Pydantic models mirroring the JSON documents of the Trakt API.

Models ignore unknown keys. "Full" variants extend their base model with the
fields returned when ?extended=full is requested.
"""

from trakt_api.core.entities.auth import AccessToken, DeviceCode
from trakt_api.core.entities.calendar import (
    CalendarMovie,
    CalendarShow,
    FullCalendarMovie,
    FullCalendarShow,
)
from trakt_api.core.entities.checkin import CheckinResponse, CheckinSharing
from trakt_api.core.entities.comment import (
    Comment,
    CommentAndItem,
    CommentItem,
    FullComment,
    FullCommentAndItem,
    Like,
)
from trakt_api.core.entities.common import (
    Alias,
    Certification,
    Certifications,
    Country,
    Genre,
    Ids,
    Language,
    MediaStats,
    Network,
    Ratings,
    TraktModel,
    Translation,
)
from trakt_api.core.entities.episode import Episode, FullEpisode
from trakt_api.core.entities.lists import ListInfo, ListItem, TraktList
from trakt_api.core.entities.movie import (
    AnticipatedMovie,
    BoxOfficeMovie,
    FullAnticipatedMovie,
    FullBoxOfficeMovie,
    FullMovie,
    FullTrendingMovie,
    FullUpdatedMovie,
    FullWatchedMovie,
    Movie,
    TrendingMovie,
    UpdatedMovie,
    WatchedMovie,
)
from trakt_api.core.entities.page import PaginatedList
from trakt_api.core.entities.person import (
    CastPerson,
    Character,
    Credits,
    CrewMember,
    CrewPerson,
    FullPerson,
    People,
    Person,
)
from trakt_api.core.entities.progress import ProgressEpisode, ProgressSeason, ShowProgress
from trakt_api.core.entities.search import SearchResult
from trakt_api.core.entities.season import FullSeason, Season
from trakt_api.core.entities.show import (
    AnticipatedShow,
    FullAnticipatedShow,
    FullShow,
    FullTrendingShow,
    FullUpdatedShow,
    FullWatchedShow,
    Show,
    TrendingShow,
    UpdatedShow,
    WatchedShow,
)
from trakt_api.core.entities.sync import (
    CollectionMovie,
    CollectionShow,
    FullCollectionMovie,
    FullCollectionShow,
    FullHistoryItem,
    HistoryItem,
    LastActivities,
    Playback,
    RatingEntry,
    SyncAddResponse,
    SyncRemoveResponse,
    WatchedEntry,
    WatchlistEntry,
)
from trakt_api.core.entities.user import (
    FollowedUser,
    FollowRequest,
    Friend,
    FullUser,
    User,
    UserLike,
    UserSettings,
    UserStats,
    UserWatching,
)

__all__ = [
    "AccessToken",
    "Alias",
    "AnticipatedMovie",
    "AnticipatedShow",
    "BoxOfficeMovie",
    "CalendarMovie",
    "CalendarShow",
    "CastPerson",
    "Certification",
    "Certifications",
    "Character",
    "CheckinResponse",
    "CheckinSharing",
    "CollectionMovie",
    "CollectionShow",
    "Comment",
    "CommentAndItem",
    "CommentItem",
    "Country",
    "Credits",
    "CrewMember",
    "CrewPerson",
    "DeviceCode",
    "Episode",
    "FollowedUser",
    "FollowRequest",
    "Friend",
    "FullAnticipatedMovie",
    "FullAnticipatedShow",
    "FullBoxOfficeMovie",
    "FullCalendarMovie",
    "FullCalendarShow",
    "FullCollectionMovie",
    "FullCollectionShow",
    "FullComment",
    "FullCommentAndItem",
    "FullEpisode",
    "FullHistoryItem",
    "FullMovie",
    "FullPerson",
    "FullSeason",
    "FullShow",
    "FullTrendingMovie",
    "FullTrendingShow",
    "FullUpdatedMovie",
    "FullUpdatedShow",
    "FullUser",
    "FullWatchedMovie",
    "FullWatchedShow",
    "Genre",
    "HistoryItem",
    "Ids",
    "Language",
    "LastActivities",
    "Like",
    "ListInfo",
    "ListItem",
    "MediaStats",
    "Movie",
    "Network",
    "PaginatedList",
    "People",
    "Person",
    "Playback",
    "ProgressEpisode",
    "ProgressSeason",
    "RatingEntry",
    "Ratings",
    "SearchResult",
    "Season",
    "Show",
    "ShowProgress",
    "SyncAddResponse",
    "SyncRemoveResponse",
    "TraktList",
    "TraktModel",
    "Translation",
    "TrendingMovie",
    "TrendingShow",
    "UpdatedMovie",
    "UpdatedShow",
    "User",
    "UserLike",
    "UserSettings",
    "UserStats",
    "UserWatching",
    "WatchedEntry",
    "WatchedMovie",
    "WatchedShow",
    "WatchlistEntry",
]
