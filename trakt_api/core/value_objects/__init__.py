"""
Objets valeur immutables utilises pour composer les requetes.

Exports :
- Enums de types d'elements (TimePeriod, MediaType, ItemType, ...)
- ExtendedInfo : niveau de detail des reponses
- SearchType : ensemble de types pour la recherche textuelle
"""

from trakt_api.core.value_objects.item_types import (
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
    ShowStatus,
    TimePeriod,
    WatchableType,
)
from trakt_api.core.value_objects.search_type import SearchType

__all__ = [
    "AllCommentableItemType",
    "AllItemType",
    "CertificationsType",
    "CommentableItemType",
    "CommentType",
    "ExtendedInfo",
    "IdType",
    "ItemType",
    "LikeableType",
    "ListFilter",
    "ListItemType",
    "ListSort",
    "MediaType",
    "SearchItemType",
    "SearchType",
    "ShowStatus",
    "TimePeriod",
    "WatchableType",
]
