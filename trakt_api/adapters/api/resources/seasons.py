"""Endpoints saisons (sous /shows/{id}/seasons)."""

from typing import Optional

from trakt_api.adapters.api.requests import PaginatedRequest
from trakt_api.adapters.api.resources.base import ItemId, ResourceMixin
from trakt_api.core.entities import (
    Comment,
    Episode,
    FullEpisode,
    FullSeason,
    MediaStats,
    Ratings,
    Season,
    TraktList,
    User,
)
from trakt_api.core.value_objects import ListFilter, ListSort
from trakt_api.utils import api_path


class SeasonsMixin(ResourceMixin):
    def seasons(self, show_id: ItemId) -> PaginatedRequest:
        """Toutes les saisons ; extended(ExtendedInfo.EPISODES) inclut les episodes."""
        return PaginatedRequest(
            self,
            api_path("shows", show_id, "seasons"),
            list[Season],
            list[FullSeason],
            paginated=False,
        )

    def season(self, show_id: ItemId, season: int) -> PaginatedRequest:
        """Episodes d'une saison."""
        return PaginatedRequest(
            self,
            api_path("shows", show_id, "seasons", season),
            list[Episode],
            list[FullEpisode],
            paginated=False,
        )

    def season_comments(
        self, show_id: ItemId, season: int, sort: Optional[str] = None
    ) -> PaginatedRequest:
        return PaginatedRequest(
            self, api_path("shows", show_id, "seasons", season, "comments", sort), Comment
        )

    def season_lists(
        self,
        show_id: ItemId,
        season: int,
        list_filter: ListFilter = ListFilter.PERSONAL,
        sort: ListSort = ListSort.POPULAR,
    ) -> PaginatedRequest:
        return PaginatedRequest(
            self,
            api_path("shows", show_id, "seasons", season, "lists", list_filter, sort),
            TraktList,
        )

    def season_ratings(self, show_id: ItemId, season: int):
        return self.get(api_path("shows", show_id, "seasons", season, "ratings"), Ratings)

    def season_stats(self, show_id: ItemId, season: int):
        return self.get(api_path("shows", show_id, "seasons", season, "stats"), MediaStats)

    def season_watching(self, show_id: ItemId, season: int):
        return self.get(api_path("shows", show_id, "seasons", season, "watching"), list[User])
