"""
Endpoints de recherche : texte libre et recherche par identifiant.
"""

from typing import Optional

from trakt_api.adapters.api.requests import ListingRequest, PaginatedRequest
from trakt_api.adapters.api.resources.base import ResourceMixin
from trakt_api.core.entities import Ids, SearchResult
from trakt_api.core.value_objects import IdType, SearchItemType, SearchType
from trakt_api.utils import api_path

# Ordre de preference des identifiants pour lookup_ids
LOOKUP_ORDER = (IdType.TRAKT, IdType.IMDB, IdType.TMDB, IdType.TVDB)


class SearchMixin(ResourceMixin):
    def search(self, search_type: SearchType, query: str) -> ListingRequest:
        """
        Recherche textuelle sur un ou plusieurs types d'elements.

        Example:
            client.search(SearchType.movie() | SearchType.show(), "tron").limit(5).execute()
        """
        return ListingRequest(
            self, api_path("search", str(search_type)), SearchResult, params={"query": query}
        )

    def id_lookup(
        self, id_type: IdType, item_id, item_type: Optional[SearchItemType] = None
    ) -> PaginatedRequest:
        """Recherche par identifiant ; le parametre type est omis s'il n'est pas donne."""
        return PaginatedRequest(
            self,
            api_path("search", id_type, item_id),
            SearchResult,
            params={"type": item_type},
        )

    def lookup_ids(self, ids: Ids, item_type: Optional[SearchItemType] = None) -> PaginatedRequest:
        """
        id_lookup avec le premier identifiant renseigne (trakt, imdb, tmdb, tvdb).

        Raises:
            ValueError: Si aucun de ces identifiants n'est renseigne
        """
        for id_type in LOOKUP_ORDER:
            value = getattr(ids, id_type.value)
            if value is not None:
                return self.id_lookup(id_type, value, item_type)
        raise ValueError("ids has no trakt, imdb, tmdb or tvdb identifier")
