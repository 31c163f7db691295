"""
Endpoints calendriers.

calendar_all_* sont publics, calendar_my_* portent sur les series et
films suivis par l'utilisateur du token.
"""

from typing import Optional

from trakt_api.adapters.api.requests import CalendarRequest
from trakt_api.adapters.api.resources.base import ResourceMixin
from trakt_api.core.entities import (
    CalendarMovie,
    CalendarShow,
    FullCalendarMovie,
    FullCalendarShow,
)

ALL = "all"
MY = "my"


class CalendarsMixin(ResourceMixin):
    def _shows_calendar(
        self, scope: str, kind: tuple[str, ...], access_token: Optional[str] = None
    ) -> CalendarRequest:
        return CalendarRequest(
            self, scope, kind, list[CalendarShow], list[FullCalendarShow], access_token
        )

    def _movies_calendar(
        self, scope: str, kind: tuple[str, ...], access_token: Optional[str] = None
    ) -> CalendarRequest:
        return CalendarRequest(
            self, scope, kind, list[CalendarMovie], list[FullCalendarMovie], access_token
        )

    def calendar_all_shows(self) -> CalendarRequest:
        return self._shows_calendar(ALL, ("shows",))

    def calendar_all_new_shows(self) -> CalendarRequest:
        return self._shows_calendar(ALL, ("shows", "new"))

    def calendar_all_season_premieres(self) -> CalendarRequest:
        return self._shows_calendar(ALL, ("shows", "premieres"))

    def calendar_all_movies(self) -> CalendarRequest:
        return self._movies_calendar(ALL, ("movies",))

    def calendar_all_dvd(self) -> CalendarRequest:
        return self._movies_calendar(ALL, ("dvd",))

    def calendar_my_shows(self, access_token: str) -> CalendarRequest:
        return self._shows_calendar(MY, ("shows",), access_token)

    def calendar_my_new_shows(self, access_token: str) -> CalendarRequest:
        return self._shows_calendar(MY, ("shows", "new"), access_token)

    def calendar_my_season_premieres(self, access_token: str) -> CalendarRequest:
        return self._shows_calendar(MY, ("shows", "premieres"), access_token)

    def calendar_my_movies(self, access_token: str) -> CalendarRequest:
        return self._movies_calendar(MY, ("movies",), access_token)

    def calendar_my_dvd(self, access_token: str) -> CalendarRequest:
        return self._movies_calendar(MY, ("dvd",), access_token)
