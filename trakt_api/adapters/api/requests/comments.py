"""
Builders lies aux commentaires.

- CommentsRequest : listings /comments/{trending|recent|updates} et
  /users/{slug}/comments, filtres par type de commentaire et d'element
- CommentCreateRequest : POST /comments sur un film, une serie, une
  saison, un episode ou une liste
- CommentPostRequest : modification (PUT /comments/{id}) ou reponse
  (POST /comments/{id}/replies)
"""

from typing import Any, Optional, Union

from trakt_api.adapters.api.requests.pagination import PaginatedRequest
from trakt_api.adapters.api.requests.selectors import (
    EpisodeSelector,
    ListSelector,
    MovieSelector,
    SeasonSelector,
    SelectorInput,
    ShowSelector,
    build_item,
)
from trakt_api.core.entities import Comment
from trakt_api.core.value_objects import AllCommentableItemType, CommentType
from trakt_api.utils import api_path


class CommentsRequest(PaginatedRequest):
    """
    Listing de commentaires.

    Le type de commentaire et le type d'element sont des segments de
    chemin ajoutes apres prefix ("all"/"all" par defaut).
    """

    def __init__(
        self,
        client,
        prefix: tuple[Any, ...],
        model: Any,
        full_model: Any = None,
        access_token: Optional[str] = None,
    ) -> None:
        super().__init__(
            client, api_path(*prefix), model, full_model=full_model, access_token=access_token
        )
        self._prefix = prefix
        self._comment_type = CommentType.ALL
        self._item_type = AllCommentableItemType.ALL

    def comment_type(self, comment_type: CommentType) -> "CommentsRequest":
        self._comment_type = comment_type
        return self

    def shouts(self) -> "CommentsRequest":
        return self.comment_type(CommentType.SHOUTS)

    def reviews(self) -> "CommentsRequest":
        return self.comment_type(CommentType.REVIEWS)

    def all_types(self) -> "CommentsRequest":
        return self.comment_type(CommentType.ALL)

    def item_type(self, item_type: AllCommentableItemType) -> "CommentsRequest":
        self._item_type = item_type
        return self

    def movies(self) -> "CommentsRequest":
        return self.item_type(AllCommentableItemType.MOVIES)

    def shows(self) -> "CommentsRequest":
        return self.item_type(AllCommentableItemType.SHOWS)

    def seasons(self) -> "CommentsRequest":
        return self.item_type(AllCommentableItemType.SEASONS)

    def episodes(self) -> "CommentsRequest":
        return self.item_type(AllCommentableItemType.EPISODES)

    def lists(self) -> "CommentsRequest":
        return self.item_type(AllCommentableItemType.LISTS)

    def include_replies(self, include: bool = True) -> "CommentsRequest":
        self._params["include_replies"] = include
        return self

    def build_path(self) -> str:
        return api_path(*self._prefix, self._comment_type, self._item_type)


class CommentCreateRequest:
    """
    Creation d'un commentaire (POST /comments).

    Example:
        client.comment_create("Great movie!").movie(
            MovieSelector().slug("tron-legacy-2010")
        ).spoiler().execute(access_token)
    """

    TARGETS = ("movie", "show", "season", "episode", "list")

    def __init__(self, client, comment: str) -> None:
        self._client = client
        self._body: dict[str, Any] = {"comment": comment, "spoiler": False}
        self._sharing: dict[str, bool] = {}

    def spoiler(self, spoiler: bool = True) -> "CommentCreateRequest":
        self._body["spoiler"] = spoiler
        return self

    def sharing(self, network: str, enabled: bool = True) -> "CommentCreateRequest":
        self._sharing[network] = enabled
        return self

    def twitter(self) -> "CommentCreateRequest":
        return self.sharing("twitter")

    def facebook(self) -> "CommentCreateRequest":
        return self.sharing("facebook")

    def tumblr(self) -> "CommentCreateRequest":
        return self.sharing("tumblr")

    def medium(self) -> "CommentCreateRequest":
        return self.sharing("medium")

    def _target(self, key: str, item: dict[str, Any]) -> "CommentCreateRequest":
        for target in self.TARGETS:
            self._body.pop(target, None)
        self._body[key] = item
        return self

    def movie(self, movie: SelectorInput) -> "CommentCreateRequest":
        return self._target("movie", build_item(movie, MovieSelector))

    def show(self, show: SelectorInput) -> "CommentCreateRequest":
        return self._target("show", build_item(show, ShowSelector))

    def season(self, season: SelectorInput) -> "CommentCreateRequest":
        return self._target("season", build_item(season, SeasonSelector))

    def episode(self, episode: SelectorInput) -> "CommentCreateRequest":
        return self._target("episode", build_item(episode, EpisodeSelector))

    def list(self, trakt_list: SelectorInput) -> "CommentCreateRequest":
        return self._target("list", build_item(trakt_list, ListSelector))

    def build_body(self) -> dict[str, Any]:
        if not any(target in self._body for target in self.TARGETS):
            raise ValueError("a comment needs a movie, show, season, episode or list")
        body = dict(self._body)
        if self._sharing:
            body["sharing"] = dict(self._sharing)
        return body

    def execute(self, access_token: str):
        return self._client.auth_post(
            api_path("comments"), access_token, self.build_body(), Comment
        )


class CommentPostRequest:
    """
    Modification ou reponse a un commentaire.

    Args:
        client: Client Trakt
        comment_id: Commentaire a modifier, ou parent de la reponse
        comment: Texte du commentaire
        update: True pour PUT /comments/{id}, False pour une reponse
    """

    def __init__(self, client, comment_id: Union[int, str], comment: str, update: bool) -> None:
        self._client = client
        self._comment_id = comment_id
        self._update = update
        self._body: dict[str, Any] = {"comment": comment, "spoiler": False}

    def spoiler(self, spoiler: bool = True) -> "CommentPostRequest":
        self._body["spoiler"] = spoiler
        return self

    def build_body(self) -> dict[str, Any]:
        return dict(self._body)

    def execute(self, access_token: str):
        if self._update:
            return self._client.auth_put(
                api_path("comments", self._comment_id), access_token, self.build_body(), Comment
            )
        return self._client.auth_post(
            api_path("comments", self._comment_id, "replies"),
            access_token,
            self.build_body(),
            Comment,
        )
