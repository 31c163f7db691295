"""
Endpoints utilisateurs.

Les endpoints de profil acceptent un access_token optionnel : il est
necessaire pour lire les donnees d'un profil prive.
"""

from typing import Optional

from trakt_api.adapters.api.requests import CommentsRequest, PaginatedRequest
from trakt_api.adapters.api.resources.base import ItemId, ResourceMixin
from trakt_api.core.entities import (
    CollectionMovie,
    CollectionShow,
    CommentAndItem,
    FollowedUser,
    FollowRequest,
    Friend,
    FullCommentAndItem,
    FullUser,
    ListItem,
    TraktList,
    User,
    UserLike,
    UserSettings,
    UserStats,
    UserWatching,
    WatchedEntry,
)
from trakt_api.core.value_objects import ExtendedInfo, LikeableType, ListItemType, MediaType
from trakt_api.utils import api_path


class UsersMixin(ResourceMixin):
    def user_settings(self, access_token: str):
        return self.auth_get(api_path("users", "settings"), access_token, UserSettings)

    def user_requests(self, access_token: str):
        """Demandes de suivi en attente."""
        return self.auth_get(api_path("users", "requests"), access_token, list[FollowRequest])

    def user_request_approve(self, request_id: int, access_token: str):
        return self.auth_post(
            api_path("users", "requests", request_id), access_token, model=FollowedUser
        )

    def user_request_deny(self, request_id: int, access_token: str):
        return self.auth_delete(api_path("users", "requests", request_id), access_token)

    def user_likes(
        self, access_token: str, likeable_type: Optional[LikeableType] = None
    ) -> PaginatedRequest:
        return PaginatedRequest(
            self, api_path("users", "likes", likeable_type), UserLike, access_token=access_token
        )

    def user_profile(self, slug: str, access_token: Optional[str] = None):
        return self._get_as(api_path("users", slug), User, access_token)

    def user_profile_full(self, slug: str, access_token: Optional[str] = None):
        return self._get_as(
            api_path("users", slug), FullUser, access_token, params={"extended": ExtendedInfo.FULL}
        )

    def user_collection_movies(self, slug: str, access_token: Optional[str] = None):
        return self._get_as(
            api_path("users", slug, "collection", "movies"), list[CollectionMovie], access_token
        )

    def user_collection_shows(self, slug: str, access_token: Optional[str] = None):
        return self._get_as(
            api_path("users", slug, "collection", "shows"), list[CollectionShow], access_token
        )

    def user_comments(self, slug: str, access_token: Optional[str] = None) -> CommentsRequest:
        return CommentsRequest(
            self,
            ("users", slug, "comments"),
            CommentAndItem,
            FullCommentAndItem,
            access_token=access_token,
        )

    def user_stats(self, slug: str, access_token: Optional[str] = None):
        return self._get_as(api_path("users", slug, "stats"), UserStats, access_token)

    def user_watched(self, slug: str, media_type: MediaType, access_token: Optional[str] = None):
        return self._get_as(
            api_path("users", slug, "watched", media_type), list[WatchedEntry], access_token
        )

    def user_lists(self, slug: str, access_token: Optional[str] = None):
        return self._get_as(api_path("users", slug, "lists"), list[TraktList], access_token)

    def user_list(self, slug: str, list_id: ItemId, access_token: Optional[str] = None):
        return self._get_as(api_path("users", slug, "lists", list_id), TraktList, access_token)

    def user_list_items(
        self,
        slug: str,
        list_id: ItemId,
        item_type: Optional[ListItemType] = None,
        access_token: Optional[str] = None,
    ) -> PaginatedRequest:
        return PaginatedRequest(
            self,
            api_path("users", slug, "lists", list_id, "items", item_type),
            ListItem,
            access_token=access_token,
        )

    def user_followers(self, slug: str, access_token: Optional[str] = None):
        return self._get_as(api_path("users", slug, "followers"), list[FollowedUser], access_token)

    def user_following(self, slug: str, access_token: Optional[str] = None):
        return self._get_as(api_path("users", slug, "following"), list[FollowedUser], access_token)

    def user_friends(self, slug: str, access_token: Optional[str] = None):
        return self._get_as(api_path("users", slug, "friends"), list[Friend], access_token)

    def user_follow(self, slug: str, access_token: str):
        """Suit un utilisateur ; approved_at est vide si la demande est en attente."""
        return self.auth_post(api_path("users", slug, "follow"), access_token, model=FollowedUser)

    def user_unfollow(self, slug: str, access_token: str):
        return self.auth_delete(api_path("users", slug, "follow"), access_token)

    def user_watching(self, slug: str, access_token: Optional[str] = None):
        """Ce que regarde l'utilisateur, None s'il ne regarde rien (204)."""
        return self._get_as(
            api_path("users", slug, "watching"), Optional[UserWatching], access_token
        )
