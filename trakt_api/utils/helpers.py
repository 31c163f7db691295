"""
Fonctions utilitaires partagees par les clients trakt-api.

Ce module centralise la construction des URLs et des parametres:
- api_path : assemble un chemin d'API a partir de segments
- query_value : convertit une valeur Python en valeur de query string
- clean_params : retire les parametres non definis
"""

from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Mapping, Optional
from urllib.parse import quote


def _segment(value: Any) -> str:
    """Convertit un segment de chemin en texte (enums -> valeur wire)."""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def api_path(*segments: Any) -> str:
    """
    Construit un chemin d'API a partir de segments.

    Les segments None sont ignores, les autres sont echappes un par un
    (un slug contenant "/" ne casse pas la route). Les virgules des
    listes de types ("movie,show") sont conservees.

    Example:
        api_path("shows", "the-expanse", "seasons", 3)
        # -> "/shows/the-expanse/seasons/3"
    """
    return "/" + "/".join(
        quote(_segment(segment), safe=",") for segment in segments if segment is not None
    )


def format_datetime(value: datetime) -> str:
    """Formate une date UTC au format ISO 8601 attendu par Trakt (suffixe Z)."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"


def query_value(value: Any) -> str:
    """Convertit une valeur en parametre de query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(query_value(item) for item in value)
    return _segment(value)


def clean_params(params: Optional[Mapping[str, Any]]) -> dict[str, str]:
    """Retire les parametres a None et convertit les autres en texte."""
    if not params:
        return {}
    return {key: query_value(value) for key, value in params.items() if value is not None}
