"""Endpoints episodes (sous /shows/{id}/seasons/{season}/episodes)."""

from typing import Optional

from trakt_api.adapters.api.requests import PaginatedRequest
from trakt_api.adapters.api.resources.base import ItemId, ResourceMixin
from trakt_api.core.entities import (
    Comment,
    Episode,
    FullEpisode,
    FullUser,
    MediaStats,
    Ratings,
    TraktList,
    Translation,
    User,
)
from trakt_api.core.value_objects import ExtendedInfo, ListFilter, ListSort
from trakt_api.utils import api_path


def _episode_path(show_id: ItemId, season: int, episode: int, *rest) -> str:
    return api_path("shows", show_id, "seasons", season, "episodes", episode, *rest)


class EpisodesMixin(ResourceMixin):
    def episode(self, show_id: ItemId, season: int, episode: int):
        return self.get(_episode_path(show_id, season, episode), Episode)

    def episode_full(self, show_id: ItemId, season: int, episode: int):
        return self.get(
            _episode_path(show_id, season, episode),
            FullEpisode,
            params={"extended": ExtendedInfo.FULL},
        )

    def episode_translations(
        self, show_id: ItemId, season: int, episode: int, language: Optional[str] = None
    ):
        return self.get(
            _episode_path(show_id, season, episode, "translations", language), list[Translation]
        )

    def episode_comments(
        self, show_id: ItemId, season: int, episode: int, sort: Optional[str] = None
    ) -> PaginatedRequest:
        return PaginatedRequest(
            self, _episode_path(show_id, season, episode, "comments", sort), Comment
        )

    def episode_lists(
        self,
        show_id: ItemId,
        season: int,
        episode: int,
        list_filter: ListFilter = ListFilter.PERSONAL,
        sort: ListSort = ListSort.POPULAR,
    ) -> PaginatedRequest:
        return PaginatedRequest(
            self, _episode_path(show_id, season, episode, "lists", list_filter, sort), TraktList
        )

    def episode_ratings(self, show_id: ItemId, season: int, episode: int):
        return self.get(_episode_path(show_id, season, episode, "ratings"), Ratings)

    def episode_stats(self, show_id: ItemId, season: int, episode: int):
        return self.get(_episode_path(show_id, season, episode, "stats"), MediaStats)

    def episode_watching(self, show_id: ItemId, season: int, episode: int):
        return self.get(_episode_path(show_id, season, episode, "watching"), list[User])

    def episode_watching_full(self, show_id: ItemId, season: int, episode: int):
        return self.get(
            _episode_path(show_id, season, episode, "watching"),
            list[FullUser],
            params={"extended": ExtendedInfo.FULL},
        )
