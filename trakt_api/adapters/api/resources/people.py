"""Endpoints personnes (acteurs, equipe)."""

from trakt_api.adapters.api.requests import PaginatedRequest
from trakt_api.adapters.api.resources.base import ItemId, ResourceMixin
from trakt_api.core.entities import Credits, FullPerson, Person, TraktList
from trakt_api.core.value_objects import ExtendedInfo, ListFilter, ListSort
from trakt_api.utils import api_path


class PeopleMixin(ResourceMixin):
    def person(self, person_id: ItemId):
        return self.get(api_path("people", person_id), Person)

    def person_full(self, person_id: ItemId):
        return self.get(
            api_path("people", person_id), FullPerson, params={"extended": ExtendedInfo.FULL}
        )

    def person_movie_credits(self, person_id: ItemId):
        return self.get(api_path("people", person_id, "movies"), Credits)

    def person_show_credits(self, person_id: ItemId):
        return self.get(api_path("people", person_id, "shows"), Credits)

    def person_lists(
        self,
        person_id: ItemId,
        list_filter: ListFilter = ListFilter.PERSONAL,
        sort: ListSort = ListSort.POPULAR,
    ) -> PaginatedRequest:
        return PaginatedRequest(
            self, api_path("people", person_id, "lists", list_filter, sort), TraktList
        )
