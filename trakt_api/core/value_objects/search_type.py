"""
Ensemble de types pour l'endpoint /search/{type}.

Trakt accepte plusieurs types separes par des virgules, par exemple
/search/movie,show. SearchType est immuable et se compose par "|".
"""

from dataclasses import dataclass, field

from trakt_api.core.value_objects.item_types import SearchItemType


@dataclass(frozen=True)
class SearchType:
    """
    Ensemble des types d'elements a rechercher.

    Example:
        SearchType.of(SearchItemType.MOVIE, SearchItemType.SHOW)
        SearchType.movie() | SearchType.show()
        str(SearchType.all())  # "movie,show,episode,person,list"
    """

    items: frozenset[SearchItemType] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not self.items:
            raise ValueError("SearchType requires at least one item type")

    @classmethod
    def of(cls, *items: SearchItemType) -> "SearchType":
        return cls(frozenset(items))

    @classmethod
    def all(cls) -> "SearchType":
        return cls(frozenset(SearchItemType))

    @classmethod
    def movie(cls) -> "SearchType":
        return cls.of(SearchItemType.MOVIE)

    @classmethod
    def show(cls) -> "SearchType":
        return cls.of(SearchItemType.SHOW)

    @classmethod
    def episode(cls) -> "SearchType":
        return cls.of(SearchItemType.EPISODE)

    @classmethod
    def person(cls) -> "SearchType":
        return cls.of(SearchItemType.PERSON)

    @classmethod
    def list(cls) -> "SearchType":
        return cls.of(SearchItemType.LIST)

    def __or__(self, other: "SearchType") -> "SearchType":
        return SearchType(self.items | other.items)

    def __str__(self) -> str:
        # Ordre stable, celui de la declaration de SearchItemType
        return ",".join(item.value for item in SearchItemType if item in self.items)
