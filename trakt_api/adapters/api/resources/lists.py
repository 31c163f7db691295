"""Endpoints listes publiques."""

from typing import Optional

from trakt_api.adapters.api.requests import PaginatedRequest
from trakt_api.adapters.api.resources.base import ItemId, ResourceMixin
from trakt_api.core.entities import ListInfo, ListItem, TraktList
from trakt_api.core.value_objects import ListItemType
from trakt_api.utils import api_path


class ListsMixin(ResourceMixin):
    def lists_trending(self) -> PaginatedRequest:
        return PaginatedRequest(self, api_path("lists", "trending"), ListInfo)

    def lists_popular(self) -> PaginatedRequest:
        return PaginatedRequest(self, api_path("lists", "popular"), ListInfo)

    def list_items(
        self, list_id: ItemId, item_type: Optional[ListItemType] = None
    ) -> PaginatedRequest:
        """Elements d'une liste, eventuellement restreints a un type."""
        return PaginatedRequest(self, api_path("lists", list_id, "items", item_type), ListItem)

    def list(self, list_id: ItemId):
        return self.get(api_path("lists", list_id), TraktList)
