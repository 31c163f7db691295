"""
Endpoints series.

show_next_episode et show_last_episode retournent None quand Trakt
repond 204 (serie terminee ou pas encore diffusee).
"""

from datetime import date
from typing import Optional

from trakt_api.adapters.api.requests import ListingRequest, PaginatedRequest
from trakt_api.adapters.api.resources.base import ItemId, ResourceMixin
from trakt_api.core.entities import (
    Alias,
    AnticipatedShow,
    Comment,
    Episode,
    FullAnticipatedShow,
    FullShow,
    FullTrendingShow,
    FullUpdatedShow,
    FullWatchedShow,
    MediaStats,
    People,
    Ratings,
    Show,
    ShowProgress,
    TraktList,
    TrendingShow,
    Translation,
    UpdatedShow,
    User,
    WatchedShow,
)
from trakt_api.core.value_objects import ExtendedInfo, ListFilter, ListSort, TimePeriod
from trakt_api.utils import api_path


class ShowsMixin(ResourceMixin):
    def shows_trending(self) -> ListingRequest:
        return ListingRequest(self, api_path("shows", "trending"), TrendingShow, FullTrendingShow)

    def shows_popular(self) -> ListingRequest:
        return ListingRequest(self, api_path("shows", "popular"), Show, FullShow)

    def shows_played(self, period: TimePeriod = TimePeriod.WEEKLY) -> ListingRequest:
        return ListingRequest(
            self, api_path("shows", "played", period), WatchedShow, FullWatchedShow
        )

    def shows_watched(self, period: TimePeriod = TimePeriod.WEEKLY) -> ListingRequest:
        return ListingRequest(
            self, api_path("shows", "watched", period), WatchedShow, FullWatchedShow
        )

    def shows_collected(self, period: TimePeriod = TimePeriod.WEEKLY) -> ListingRequest:
        return ListingRequest(
            self, api_path("shows", "collected", period), WatchedShow, FullWatchedShow
        )

    def shows_anticipated(self) -> ListingRequest:
        return ListingRequest(
            self, api_path("shows", "anticipated"), AnticipatedShow, FullAnticipatedShow
        )

    def shows_updates(self, start_date: Optional[date] = None) -> PaginatedRequest:
        return PaginatedRequest(
            self, api_path("shows", "updates", start_date), UpdatedShow, FullUpdatedShow
        )

    def show(self, show_id: ItemId):
        return self.get(api_path("shows", show_id), Show)

    def show_full(self, show_id: ItemId):
        return self.get(
            api_path("shows", show_id), FullShow, params={"extended": ExtendedInfo.FULL}
        )

    def show_aliases(self, show_id: ItemId):
        return self.get(api_path("shows", show_id, "aliases"), list[Alias])

    def show_translations(self, show_id: ItemId, language: Optional[str] = None):
        return self.get(api_path("shows", show_id, "translations", language), list[Translation])

    def show_comments(self, show_id: ItemId, sort: Optional[str] = None) -> PaginatedRequest:
        return PaginatedRequest(self, api_path("shows", show_id, "comments", sort), Comment)

    def show_lists(
        self,
        show_id: ItemId,
        list_filter: ListFilter = ListFilter.PERSONAL,
        sort: ListSort = ListSort.POPULAR,
    ) -> PaginatedRequest:
        return PaginatedRequest(
            self, api_path("shows", show_id, "lists", list_filter, sort), TraktList
        )

    def show_progress_collection(
        self,
        show_id: ItemId,
        access_token: str,
        hidden: bool = False,
        specials: bool = False,
        count_specials: bool = True,
    ):
        """Progression de collection de l'utilisateur du token."""
        params = {"hidden": hidden, "specials": specials, "count_specials": count_specials}
        return self.auth_get(
            api_path("shows", show_id, "progress", "collection"),
            access_token,
            ShowProgress,
            params=params,
        )

    def show_progress_watched(
        self,
        show_id: ItemId,
        access_token: str,
        hidden: bool = False,
        specials: bool = False,
        count_specials: bool = True,
    ):
        """Progression de visionnage de l'utilisateur du token."""
        params = {"hidden": hidden, "specials": specials, "count_specials": count_specials}
        return self.auth_get(
            api_path("shows", show_id, "progress", "watched"),
            access_token,
            ShowProgress,
            params=params,
        )

    def show_people(self, show_id: ItemId):
        return self.get(api_path("shows", show_id, "people"), People)

    def show_ratings(self, show_id: ItemId):
        return self.get(api_path("shows", show_id, "ratings"), Ratings)

    def show_related(self, show_id: ItemId) -> PaginatedRequest:
        return PaginatedRequest(self, api_path("shows", show_id, "related"), Show, FullShow)

    def show_stats(self, show_id: ItemId):
        return self.get(api_path("shows", show_id, "stats"), MediaStats)

    def show_watching(self, show_id: ItemId):
        return self.get(api_path("shows", show_id, "watching"), list[User])

    def show_next_episode(self, show_id: ItemId):
        return self.get(api_path("shows", show_id, "next_episode"), Optional[Episode])

    def show_last_episode(self, show_id: ItemId):
        return self.get(api_path("shows", show_id, "last_episode"), Optional[Episode])
