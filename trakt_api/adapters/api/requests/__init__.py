"""
Builders fluides des requetes Trakt.

Chaque builder accumule ses parametres par des setters chaines puis
s'execute via le client qui l'a cree (execute()).
"""

from trakt_api.adapters.api.requests.calendar import CalendarRequest
from trakt_api.adapters.api.requests.checkin import CheckinRequest
from trakt_api.adapters.api.requests.comments import (
    CommentCreateRequest,
    CommentPostRequest,
    CommentsRequest,
)
from trakt_api.adapters.api.requests.filters import FiltersMixin
from trakt_api.adapters.api.requests.listing import ListingRequest
from trakt_api.adapters.api.requests.pagination import PaginatedRequest
from trakt_api.adapters.api.requests.selectors import (
    EpisodeSelector,
    ListSelector,
    MovieSelector,
    SeasonSelector,
    Selector,
    ShowSelector,
    UserSelector,
    build_item,
)
from trakt_api.adapters.api.requests.sync import SyncRequest

__all__ = [
    "CalendarRequest",
    "CheckinRequest",
    "CommentCreateRequest",
    "CommentPostRequest",
    "CommentsRequest",
    "EpisodeSelector",
    "FiltersMixin",
    "ListingRequest",
    "ListSelector",
    "MovieSelector",
    "PaginatedRequest",
    "SeasonSelector",
    "Selector",
    "ShowSelector",
    "SyncRequest",
    "UserSelector",
    "build_item",
]
