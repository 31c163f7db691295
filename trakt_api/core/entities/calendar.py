"""Calendar entries."""

from datetime import date, datetime

from trakt_api.core.entities.common import TraktModel
from trakt_api.core.entities.episode import Episode, FullEpisode
from trakt_api.core.entities.movie import FullMovie, Movie
from trakt_api.core.entities.show import FullShow, Show


class CalendarShow(TraktModel):
    first_aired: datetime
    episode: Episode
    show: Show


class FullCalendarShow(CalendarShow):
    episode: FullEpisode
    show: FullShow


class CalendarMovie(TraktModel):
    released: date
    movie: Movie


class FullCalendarMovie(CalendarMovie):
    movie: FullMovie
