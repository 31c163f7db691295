"""
trakt-api : client type de l'API Trakt v2 (variantes bloquante et async).

Usage:
    from trakt_api import TraktClient, SearchType

    with TraktClient(client_id="xxx") as client:
        for result in client.search(SearchType.movie(), "tron").execute():
            print(result.movie.title)

Les logs de la librairie (loguru) sont desactives par defaut ;
configure_logging() les reactive.
"""

from loguru import logger

from trakt_api.adapters.api import (
    AsyncTraktClient,
    ClientSecretNeededError,
    RateLimitError,
    TraktClient,
    TraktConnectionError,
    TraktDeserializationError,
    TraktError,
    TraktResponseError,
)
from trakt_api.adapters.api.requests import (
    EpisodeSelector,
    ListSelector,
    MovieSelector,
    SeasonSelector,
    ShowSelector,
    UserSelector,
)
from trakt_api.core.entities import Ids, PaginatedList
from trakt_api.core.value_objects import (
    AllCommentableItemType,
    AllItemType,
    CertificationsType,
    CommentableItemType,
    CommentType,
    ExtendedInfo,
    IdType,
    ItemType,
    LikeableType,
    ListFilter,
    ListItemType,
    ListSort,
    MediaType,
    SearchItemType,
    SearchType,
    ShowStatus,
    TimePeriod,
    WatchableType,
)
from trakt_api.logging_config import configure_logging

__version__ = "0.1.0"

logger.disable("trakt_api")

__all__ = [
    "AllCommentableItemType",
    "AllItemType",
    "AsyncTraktClient",
    "CertificationsType",
    "ClientSecretNeededError",
    "CommentableItemType",
    "CommentType",
    "EpisodeSelector",
    "ExtendedInfo",
    "IdType",
    "Ids",
    "ItemType",
    "LikeableType",
    "ListFilter",
    "ListItemType",
    "ListSelector",
    "ListSort",
    "MediaType",
    "MovieSelector",
    "PaginatedList",
    "RateLimitError",
    "SearchItemType",
    "SearchType",
    "SeasonSelector",
    "ShowSelector",
    "ShowStatus",
    "TimePeriod",
    "TraktClient",
    "TraktConnectionError",
    "TraktDeserializationError",
    "TraktError",
    "TraktResponseError",
    "UserSelector",
    "WatchableType",
    "configure_logging",
    "__version__",
]
