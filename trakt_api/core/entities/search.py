"""Search results."""

from typing import Optional

from pydantic import Field

from trakt_api.core.entities.common import TraktModel
from trakt_api.core.entities.episode import Episode
from trakt_api.core.entities.lists import TraktList
from trakt_api.core.entities.movie import Movie
from trakt_api.core.entities.person import Person
from trakt_api.core.entities.show import Show
from trakt_api.core.value_objects import SearchItemType


class SearchResult(TraktModel):
    """
    One search hit. Only the attribute matching item_type is set, except
    for episodes where show is also present.
    """

    item_type: SearchItemType = Field(alias="type")
    score: Optional[float] = None
    movie: Optional[Movie] = None
    show: Optional[Show] = None
    episode: Optional[Episode] = None
    person: Optional[Person] = None
    list: Optional[TraktList] = None
