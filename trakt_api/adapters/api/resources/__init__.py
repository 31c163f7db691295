"""
Mixins d'endpoints Trakt, partages par TraktClient et AsyncTraktClient.

Exports:
- TraktResources: agregat de tous les groupes d'endpoints
- un mixin par groupe (AuthenticationMixin, MoviesMixin, ...)
"""

from trakt_api.adapters.api.resources.authentication import AuthenticationMixin
from trakt_api.adapters.api.resources.calendars import CalendarsMixin
from trakt_api.adapters.api.resources.checkin import CheckinMixin
from trakt_api.adapters.api.resources.comments import CommentsMixin
from trakt_api.adapters.api.resources.episodes import EpisodesMixin
from trakt_api.adapters.api.resources.lists import ListsMixin
from trakt_api.adapters.api.resources.metadata import MetadataMixin
from trakt_api.adapters.api.resources.movies import MoviesMixin
from trakt_api.adapters.api.resources.people import PeopleMixin
from trakt_api.adapters.api.resources.recommendations import RecommendationsMixin
from trakt_api.adapters.api.resources.search import SearchMixin
from trakt_api.adapters.api.resources.seasons import SeasonsMixin
from trakt_api.adapters.api.resources.shows import ShowsMixin
from trakt_api.adapters.api.resources.sync import SyncMixin
from trakt_api.adapters.api.resources.users import UsersMixin


class TraktResources(
    AuthenticationMixin,
    MetadataMixin,
    CalendarsMixin,
    CheckinMixin,
    CommentsMixin,
    MoviesMixin,
    ShowsMixin,
    SeasonsMixin,
    EpisodesMixin,
    PeopleMixin,
    ListsMixin,
    SearchMixin,
    RecommendationsMixin,
    SyncMixin,
    UsersMixin,
):
    """Tous les groupes d'endpoints de l'API Trakt v2."""


__all__ = [
    "AuthenticationMixin",
    "CalendarsMixin",
    "CheckinMixin",
    "CommentsMixin",
    "EpisodesMixin",
    "ListsMixin",
    "MetadataMixin",
    "MoviesMixin",
    "PeopleMixin",
    "RecommendationsMixin",
    "SearchMixin",
    "SeasonsMixin",
    "ShowsMixin",
    "SyncMixin",
    "TraktResources",
    "UsersMixin",
]
