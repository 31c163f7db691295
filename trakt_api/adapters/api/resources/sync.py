"""
Endpoints /sync : donnees de l'utilisateur du token.

Lectures : derniere activite, lectures en pause, collection, vus,
historique, notes, watchlist. Ecritures : SyncRequest (ajout/retrait).
"""

from datetime import datetime
from typing import Optional

from trakt_api.adapters.api.requests import PaginatedRequest, SyncRequest
from trakt_api.adapters.api.resources.base import ItemId, ResourceMixin
from trakt_api.core.entities import (
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
from trakt_api.core.value_objects import AllItemType, ItemType, MediaType, WatchableType
from trakt_api.utils import api_path


class SyncMixin(ResourceMixin):
    def sync_last_activities(self, access_token: str):
        return self.auth_get(api_path("sync", "last_activities"), access_token, LastActivities)

    def sync_playback(self, access_token: str, item_type: Optional[WatchableType] = None):
        return self.auth_get(api_path("sync", "playback", item_type), access_token, list[Playback])

    def sync_playback_delete(self, playback_id: int, access_token: str):
        return self.auth_delete(api_path("sync", "playback", playback_id), access_token)

    def sync_collection_movies(self, access_token: str) -> PaginatedRequest:
        return PaginatedRequest(
            self,
            api_path("sync", "collection", "movies"),
            list[CollectionMovie],
            list[FullCollectionMovie],
            access_token=access_token,
            paginated=False,
        )

    def sync_collection_shows(self, access_token: str) -> PaginatedRequest:
        return PaginatedRequest(
            self,
            api_path("sync", "collection", "shows"),
            list[CollectionShow],
            list[FullCollectionShow],
            access_token=access_token,
            paginated=False,
        )

    def sync_collection_add(self) -> SyncRequest:
        return SyncRequest(self, api_path("sync", "collection"), SyncAddResponse)

    def sync_collection_remove(self) -> SyncRequest:
        return SyncRequest(self, api_path("sync", "collection", "remove"), SyncRemoveResponse)

    def sync_watched(self, media_type: MediaType, access_token: str) -> PaginatedRequest:
        """Films ou series vus ; extended(ExtendedInfo.NOSEASONS) omet les saisons."""
        return PaginatedRequest(
            self,
            api_path("sync", "watched", media_type),
            list[WatchedEntry],
            access_token=access_token,
            paginated=False,
        )

    def sync_history(
        self,
        access_token: str,
        item_type: Optional[ItemType] = None,
        item_id: Optional[ItemId] = None,
        start_at: Optional[datetime] = None,
        end_at: Optional[datetime] = None,
    ) -> PaginatedRequest:
        """
        Historique de visionnage, filtrable par type, element et periode.

        item_id n'est pris en compte qu'avec item_type.
        """
        if item_type is None:
            item_id = None
        return PaginatedRequest(
            self,
            api_path("sync", "history", item_type, item_id),
            HistoryItem,
            FullHistoryItem,
            access_token=access_token,
            params={"start_at": start_at, "end_at": end_at},
        )

    def sync_history_add(self) -> SyncRequest:
        return SyncRequest(self, api_path("sync", "history"), SyncAddResponse)

    def sync_history_remove(self) -> SyncRequest:
        return SyncRequest(self, api_path("sync", "history", "remove"), SyncRemoveResponse)

    def sync_ratings(
        self,
        access_token: str,
        item_type: AllItemType = AllItemType.ALL,
        rating: Optional[int] = None,
    ) -> PaginatedRequest:
        return PaginatedRequest(
            self,
            api_path("sync", "ratings", item_type, rating),
            list[RatingEntry],
            access_token=access_token,
            paginated=False,
        )

    def sync_ratings_add(self) -> SyncRequest:
        return SyncRequest(self, api_path("sync", "ratings"), SyncAddResponse)

    def sync_ratings_remove(self) -> SyncRequest:
        return SyncRequest(self, api_path("sync", "ratings", "remove"), SyncRemoveResponse)

    def sync_watchlist(
        self, access_token: str, item_type: Optional[ItemType] = None
    ) -> PaginatedRequest:
        return PaginatedRequest(
            self,
            api_path("sync", "watchlist", item_type),
            list[WatchlistEntry],
            access_token=access_token,
            paginated=False,
        )

    def sync_watchlist_add(self) -> SyncRequest:
        return SyncRequest(self, api_path("sync", "watchlist"), SyncAddResponse)

    def sync_watchlist_remove(self) -> SyncRequest:
        return SyncRequest(self, api_path("sync", "watchlist", "remove"), SyncRemoveResponse)
