"""
Utilitaires et constantes pour trakt-api.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from trakt_api.utils.constants import (
    API_URL,
    API_VERSION,
    SITE_URL,
    STAGING_API_URL,
    STAGING_SITE_URL,
)
from trakt_api.utils.helpers import api_path, clean_params, query_value

__all__ = [
    "API_URL",
    "API_VERSION",
    "SITE_URL",
    "STAGING_API_URL",
    "STAGING_SITE_URL",
    "api_path",
    "clean_params",
    "query_value",
]
