"""
Filtres communs des listings Trakt (films, series, calendriers, recherche).

Les filtres multi-valeurs sont joints par des virgules, les intervalles
rendus sous la forme "min-max".
"""

from typing import Optional

from trakt_api.core.value_objects import ShowStatus


class FiltersMixin:
    """Ajoute les setters de filtres a un builder disposant de _params."""

    def query(self, text: str):
        self._params["query"] = text
        return self

    def years(self, start: int, end: Optional[int] = None):
        self._params["years"] = str(start) if end is None else f"{start}-{end}"
        return self

    def genres(self, *slugs: str):
        self._params["genres"] = slugs
        return self

    def languages(self, *codes: str):
        self._params["languages"] = codes
        return self

    def countries(self, *codes: str):
        self._params["countries"] = codes
        return self

    def runtimes(self, low: int, high: int):
        self._params["runtimes"] = _range(low, high)
        return self

    def ratings(self, low: int, high: int):
        """Note Trakt entre 0 et 100."""
        self._params["ratings"] = _range(low, high)
        return self

    def certifications(self, *slugs: str):
        self._params["certifications"] = slugs
        return self

    def networks(self, *names: str):
        self._params["networks"] = names
        return self

    def status(self, *statuses: ShowStatus):
        self._params["status"] = statuses
        return self


def _range(low: int, high: int) -> str:
    if low > high:
        raise ValueError(f"invalid range {low}-{high}")
    return f"{low}-{high}"
