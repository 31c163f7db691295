"""
Builder des calendriers (/calendars/{all|my}/...).

La date de debut et le nombre de jours sont des segments de chemin, pas
des parametres de query. Le nombre de jours est ignore sans date de
debut.
"""

from datetime import date, datetime
from typing import Any, Optional

from trakt_api.adapters.api.requests.filters import FiltersMixin
from trakt_api.adapters.api.requests.pagination import PaginatedRequest
from trakt_api.utils import api_path


class CalendarRequest(FiltersMixin, PaginatedRequest):
    """
    Requete de calendrier.

    Args:
        client: Client Trakt
        scope: "all" (public) ou "my" (necessite un access_token)
        kind: Segments du type de calendrier, ex. ("shows", "new")
    """

    def __init__(
        self,
        client,
        scope: str,
        kind: tuple[str, ...],
        model: Any,
        full_model: Any = None,
        access_token: Optional[str] = None,
    ) -> None:
        super().__init__(
            client,
            api_path("calendars", scope, *kind),
            model,
            full_model=full_model,
            access_token=access_token,
            paginated=False,
        )
        self._scope = scope
        self._kind = kind
        self._start_date: Optional[date] = None
        self._days: Optional[int] = None

    def start_date(self, start: date) -> "CalendarRequest":
        if isinstance(start, datetime):
            start = start.date()
        self._start_date = start
        return self

    def days(self, days: int) -> "CalendarRequest":
        if days < 1:
            raise ValueError("days must be positive")
        self._days = days
        return self

    def build_path(self) -> str:
        if self._start_date is None:
            return api_path("calendars", self._scope, *self._kind)
        return api_path(
            "calendars", self._scope, *self._kind, self._start_date, self._days
        )
