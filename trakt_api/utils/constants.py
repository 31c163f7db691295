"""
Constantes globales pour trakt-api.

Ce module contient les constantes utilisees par les clients HTTP:
- URLs de base de l'API (production et staging)
- URLs du site pour l'autorisation OAuth
- Version de l'API et noms des headers fixes
- Noms des headers de pagination
"""

# API Trakt v2
API_URL = "https://api.trakt.tv"
STAGING_API_URL = "https://api-staging.trakt.tv"

# Site web (page d'autorisation OAuth)
SITE_URL = "https://trakt.tv"
STAGING_SITE_URL = "https://staging.trakt.tv"

API_VERSION = "2"

# Headers envoyes avec chaque requete
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_API_VERSION = "trakt-api-version"
HEADER_API_KEY = "trakt-api-key"
HEADER_AUTHORIZATION = "Authorization"

JSON_CONTENT_TYPE = "application/json"

# Headers de pagination renvoyes par l'API
PAGINATION_HEADERS = {
    "page": "X-Pagination-Page",
    "limit": "X-Pagination-Limit",
    "page_count": "X-Pagination-Page-Count",
    "item_count": "X-Pagination-Item-Count",
}

# Code renvoye par /oauth/device/token tant que l'utilisateur n'a pas valide
DEVICE_PENDING_STATUS = 400
DEVICE_SLOW_DOWN_STATUS = 429
