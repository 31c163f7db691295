"""
Clients de l'API Trakt v2.

Ce module fournit:
- TraktClient / AsyncTraktClient: clients bloquant et async
- Les exceptions (TraktError et sous-classes)
- with_retry: decorateur avec backoff exponentiel sur 429
"""

from trakt_api.adapters.api.client import AsyncTraktClient, BaseTraktClient, TraktClient
from trakt_api.adapters.api.errors import (
    ClientSecretNeededError,
    RateLimitError,
    TraktConnectionError,
    TraktDeserializationError,
    TraktError,
    TraktResponseError,
)
from trakt_api.adapters.api.retry import (
    async_request_with_retry,
    request_with_retry,
    with_retry,
)

__all__ = [
    "AsyncTraktClient",
    "BaseTraktClient",
    "ClientSecretNeededError",
    "RateLimitError",
    "TraktClient",
    "TraktConnectionError",
    "TraktDeserializationError",
    "TraktError",
    "TraktResponseError",
    "async_request_with_retry",
    "request_with_retry",
    "with_retry",
]
