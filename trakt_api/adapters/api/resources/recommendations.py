"""Recommandations personnalisees (token requis)."""

from trakt_api.adapters.api.requests import PaginatedRequest
from trakt_api.adapters.api.resources.base import ItemId, ResourceMixin
from trakt_api.core.entities import FullMovie, FullShow, Movie, Show
from trakt_api.utils import api_path


class RecommendationsMixin(ResourceMixin):
    def recommendations_movies(
        self, access_token: str, ignore_collected: bool = False
    ) -> PaginatedRequest:
        return PaginatedRequest(
            self,
            api_path("recommendations", "movies"),
            list[Movie],
            list[FullMovie],
            access_token=access_token,
            paginated=False,
            params={"ignore_collected": ignore_collected},
        )

    def recommendations_movie_hide(self, movie_id: ItemId, access_token: str):
        return self.auth_delete(api_path("recommendations", "movies", movie_id), access_token)

    def recommendations_shows(
        self, access_token: str, ignore_collected: bool = False
    ) -> PaginatedRequest:
        return PaginatedRequest(
            self,
            api_path("recommendations", "shows"),
            list[Show],
            list[FullShow],
            access_token=access_token,
            paginated=False,
            params={"ignore_collected": ignore_collected},
        )

    def recommendations_show_hide(self, show_id: ItemId, access_token: str):
        return self.auth_delete(api_path("recommendations", "shows", show_id), access_token)
