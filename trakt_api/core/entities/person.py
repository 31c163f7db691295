"""
People and credits models.

Crew departments come back as a JSON object keyed by department name
("directing", "costume & make-up", ...), kept here as a plain dict.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from trakt_api.core.entities.common import Ids, TraktModel
from trakt_api.core.entities.movie import Movie
from trakt_api.core.entities.show import Show


class Person(TraktModel):
    name: str
    ids: Ids = Field(default_factory=Ids)


class FullPerson(Person):
    biography: Optional[str] = None
    birthday: Optional[date] = None
    death: Optional[date] = None
    birthplace: Optional[str] = None
    homepage: Optional[str] = None
    gender: Optional[str] = None
    known_for_department: Optional[str] = None
    updated_at: Optional[datetime] = None


class CastPerson(TraktModel):
    characters: list[str] = Field(default_factory=list)
    character: Optional[str] = None
    episode_count: Optional[int] = None
    person: Person


class CrewPerson(TraktModel):
    jobs: list[str] = Field(default_factory=list)
    job: Optional[str] = None
    episode_count: Optional[int] = None
    person: Person


class People(TraktModel):
    """Cast and crew of a movie or show."""

    cast: list[CastPerson] = Field(default_factory=list)
    crew: dict[str, list[CrewPerson]] = Field(default_factory=dict)


class Character(TraktModel):
    characters: list[str] = Field(default_factory=list)
    character: Optional[str] = None
    episode_count: Optional[int] = None
    movie: Optional[Movie] = None
    show: Optional[Show] = None


class CrewMember(TraktModel):
    jobs: list[str] = Field(default_factory=list)
    job: Optional[str] = None
    episode_count: Optional[int] = None
    movie: Optional[Movie] = None
    show: Optional[Show] = None


class Credits(TraktModel):
    """Movie or show credits of a person."""

    cast: list[Character] = Field(default_factory=list)
    crew: dict[str, list[CrewMember]] = Field(default_factory=dict)
