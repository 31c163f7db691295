"""
Movie models.

Movie is what Trakt returns by default; FullMovie adds the fields returned
with ?extended=full. Listing wrappers (trending, watched, ...) have a "Full"
twin whose nested movie is a FullMovie.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from trakt_api.core.entities.common import Ids, TraktModel


class Movie(TraktModel):
    title: str
    year: Optional[int] = None
    ids: Ids = Field(default_factory=Ids)


class FullMovie(Movie):
    tagline: Optional[str] = None
    overview: Optional[str] = None
    released: Optional[date] = None
    runtime: Optional[int] = None
    country: Optional[str] = None
    status: Optional[str] = None
    trailer: Optional[str] = None
    homepage: Optional[str] = None
    rating: Optional[float] = None
    votes: Optional[int] = None
    comment_count: Optional[int] = None
    updated_at: Optional[datetime] = None
    language: Optional[str] = None
    available_translations: list[str] = Field(default_factory=list)
    genres: list[str] = Field(default_factory=list)
    certification: Optional[str] = None


class TrendingMovie(TraktModel):
    watchers: int
    movie: Movie


class FullTrendingMovie(TrendingMovie):
    movie: FullMovie


class WatchedMovie(TraktModel):
    watcher_count: int
    play_count: int
    collected_count: int
    movie: Movie


class FullWatchedMovie(WatchedMovie):
    movie: FullMovie


class AnticipatedMovie(TraktModel):
    list_count: int
    movie: Movie


class FullAnticipatedMovie(AnticipatedMovie):
    movie: FullMovie


class UpdatedMovie(TraktModel):
    updated_at: datetime
    movie: Movie


class FullUpdatedMovie(UpdatedMovie):
    movie: FullMovie


class BoxOfficeMovie(TraktModel):
    revenue: int
    movie: Movie


class FullBoxOfficeMovie(BoxOfficeMovie):
    movie: FullMovie
