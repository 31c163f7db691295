"""
Endpoints films.

Les listings retournent un ListingRequest (pagination, extended, filtres) ;
les endpoints d'un film donne retournent directement le resultat.
"""

from datetime import date
from typing import Optional

from trakt_api.adapters.api.requests import ListingRequest, PaginatedRequest
from trakt_api.adapters.api.resources.base import ItemId, ResourceMixin
from trakt_api.core.entities import (
    Alias,
    AnticipatedMovie,
    BoxOfficeMovie,
    Comment,
    FullAnticipatedMovie,
    FullBoxOfficeMovie,
    FullMovie,
    FullTrendingMovie,
    FullUpdatedMovie,
    FullWatchedMovie,
    MediaStats,
    Movie,
    People,
    Ratings,
    TraktList,
    TrendingMovie,
    Translation,
    UpdatedMovie,
    User,
    WatchedMovie,
)
from trakt_api.core.value_objects import ExtendedInfo, ListFilter, ListSort, TimePeriod
from trakt_api.utils import api_path


class MoviesMixin(ResourceMixin):
    def movies_trending(self) -> ListingRequest:
        return ListingRequest(self, api_path("movies", "trending"), TrendingMovie, FullTrendingMovie)

    def movies_popular(self) -> ListingRequest:
        return ListingRequest(self, api_path("movies", "popular"), Movie, FullMovie)

    def movies_played(self, period: TimePeriod = TimePeriod.WEEKLY) -> ListingRequest:
        return ListingRequest(
            self, api_path("movies", "played", period), WatchedMovie, FullWatchedMovie
        )

    def movies_watched(self, period: TimePeriod = TimePeriod.WEEKLY) -> ListingRequest:
        return ListingRequest(
            self, api_path("movies", "watched", period), WatchedMovie, FullWatchedMovie
        )

    def movies_collected(self, period: TimePeriod = TimePeriod.WEEKLY) -> ListingRequest:
        return ListingRequest(
            self, api_path("movies", "collected", period), WatchedMovie, FullWatchedMovie
        )

    def movies_anticipated(self) -> ListingRequest:
        return ListingRequest(
            self, api_path("movies", "anticipated"), AnticipatedMovie, FullAnticipatedMovie
        )

    def movies_boxoffice(self) -> PaginatedRequest:
        """Top 10 du box-office du week-end (non pagine)."""
        return PaginatedRequest(
            self,
            api_path("movies", "boxoffice"),
            list[BoxOfficeMovie],
            list[FullBoxOfficeMovie],
            paginated=False,
        )

    def movies_updates(self, start_date: Optional[date] = None) -> PaginatedRequest:
        return PaginatedRequest(
            self, api_path("movies", "updates", start_date), UpdatedMovie, FullUpdatedMovie
        )

    def movie(self, movie_id: ItemId):
        return self.get(api_path("movies", movie_id), Movie)

    def movie_full(self, movie_id: ItemId):
        return self.get(
            api_path("movies", movie_id), FullMovie, params={"extended": ExtendedInfo.FULL}
        )

    def movie_aliases(self, movie_id: ItemId):
        return self.get(api_path("movies", movie_id, "aliases"), list[Alias])

    def movie_translations(self, movie_id: ItemId, language: Optional[str] = None):
        """Traductions du film, toutes ou pour un code langue (ex. "fr")."""
        return self.get(api_path("movies", movie_id, "translations", language), list[Translation])

    def movie_comments(self, movie_id: ItemId, sort: Optional[str] = None) -> PaginatedRequest:
        """Commentaires ; sort parmi newest, oldest, likes, replies, highest, lowest, plays."""
        return PaginatedRequest(self, api_path("movies", movie_id, "comments", sort), Comment)

    def movie_lists(
        self,
        movie_id: ItemId,
        list_filter: ListFilter = ListFilter.PERSONAL,
        sort: ListSort = ListSort.POPULAR,
    ) -> PaginatedRequest:
        return PaginatedRequest(
            self, api_path("movies", movie_id, "lists", list_filter, sort), TraktList
        )

    def movie_people(self, movie_id: ItemId):
        return self.get(api_path("movies", movie_id, "people"), People)

    def movie_ratings(self, movie_id: ItemId):
        return self.get(api_path("movies", movie_id, "ratings"), Ratings)

    def movie_related(self, movie_id: ItemId) -> PaginatedRequest:
        return PaginatedRequest(self, api_path("movies", movie_id, "related"), Movie, FullMovie)

    def movie_stats(self, movie_id: ItemId):
        return self.get(api_path("movies", movie_id, "stats"), MediaStats)

    def movie_watching(self, movie_id: ItemId):
        return self.get(api_path("movies", movie_id, "watching"), list[User])
