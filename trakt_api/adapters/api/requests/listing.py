"""Listings filtrables : films, series, recherche."""

from trakt_api.adapters.api.requests.filters import FiltersMixin
from trakt_api.adapters.api.requests.pagination import PaginatedRequest


class ListingRequest(FiltersMixin, PaginatedRequest):
    """Pagination, niveau de detail et filtres."""
