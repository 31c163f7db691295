"""Endpoints commentaires."""

from trakt_api.adapters.api.requests import (
    CommentCreateRequest,
    CommentPostRequest,
    CommentsRequest,
    PaginatedRequest,
)
from trakt_api.adapters.api.resources.base import ResourceMixin
from trakt_api.core.entities import (
    Comment,
    CommentAndItem,
    CommentItem,
    FullComment,
    FullCommentAndItem,
    Like,
)
from trakt_api.utils import api_path


class CommentsMixin(ResourceMixin):
    def comment_create(self, comment: str) -> CommentCreateRequest:
        return CommentCreateRequest(self, comment)

    def comment(self, comment_id: int):
        return self.get(api_path("comments", comment_id), Comment)

    def comment_update(self, comment_id: int, comment: str) -> CommentPostRequest:
        return CommentPostRequest(self, comment_id, comment, update=True)

    def comment_delete(self, comment_id: int, access_token: str):
        return self.auth_delete(api_path("comments", comment_id), access_token)

    def comment_replies(self, comment_id: int) -> PaginatedRequest:
        return PaginatedRequest(
            self, api_path("comments", comment_id, "replies"), Comment, FullComment
        )

    def comment_reply(self, comment_id: int, comment: str) -> CommentPostRequest:
        return CommentPostRequest(self, comment_id, comment, update=False)

    def comment_item(self, comment_id: int):
        return self.get(api_path("comments", comment_id, "item"), CommentItem)

    def comment_likes(self, comment_id: int) -> PaginatedRequest:
        return PaginatedRequest(self, api_path("comments", comment_id, "likes"), Like)

    def comment_like(self, comment_id: int, access_token: str):
        return self.auth_post(api_path("comments", comment_id, "like"), access_token)

    def comment_unlike(self, comment_id: int, access_token: str):
        return self.auth_delete(api_path("comments", comment_id, "like"), access_token)

    def comments_trending(self) -> CommentsRequest:
        return CommentsRequest(
            self, ("comments", "trending"), CommentAndItem, FullCommentAndItem
        )

    def comments_recent(self) -> CommentsRequest:
        return CommentsRequest(self, ("comments", "recent"), CommentAndItem, FullCommentAndItem)

    def comments_updates(self) -> CommentsRequest:
        return CommentsRequest(self, ("comments", "updates"), CommentAndItem, FullCommentAndItem)
