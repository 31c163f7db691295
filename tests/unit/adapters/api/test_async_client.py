"""
Tests for AsyncTraktClient.

The async client shares every endpoint definition with TraktClient; these
tests check that endpoint methods and builders return awaitables and that
the decoded results and errors match the blocking client.
"""

import inspect
from datetime import date

import httpx
import pytest
import respx

from trakt_api.adapters.api.client import AsyncTraktClient, TraktClient
from trakt_api.adapters.api.errors import (
    ClientSecretNeededError,
    RateLimitError,
    TraktConnectionError,
    TraktResponseError,
)
from trakt_api.adapters.api.requests import MovieSelector
from trakt_api.core.entities import (
    AccessToken,
    FullMovie,
    FullTrendingMovie,
    Movie,
    PaginatedList,
    SyncAddResponse,
)
from trakt_api.core.value_objects import SearchType
from trakt_api.utils import STAGING_API_URL, STAGING_SITE_URL
from tests.conftest import ACCESS_TOKEN, CLIENT_ID, CLIENT_SECRET, body_of
from tests.fixtures.trakt_responses import (
    API_URL,
    CALENDAR_SHOWS_RESPONSE,
    MOVIE_FULL_RESPONSE,
    MOVIE_RESPONSE,
    MOVIES_TRENDING_FULL_RESPONSE,
    PAGINATION_HEADERS,
    SEARCH_RESPONSE,
    SYNC_ADD_RESPONSE,
    TOKEN_RESPONSE,
)


class TestAwaitables:
    """Endpoint methods return coroutines on the async client."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_endpoint_returns_coroutine(self, async_client: AsyncTraktClient):
        respx.get(f"{API_URL}/movies/tron-legacy-2010").mock(
            return_value=httpx.Response(200, json=MOVIE_RESPONSE)
        )

        pending = async_client.movie("tron-legacy-2010")
        assert inspect.isawaitable(pending)

        movie = await pending
        assert isinstance(movie, Movie)

    def test_authorize_url_is_plain_string(self):
        """Building the authorize URL performs no I/O."""
        url = AsyncTraktClient(CLIENT_ID).oauth_authorize_url("urn:ietf:wg:oauth:2.0:oob")
        assert isinstance(url, str)

    def test_secret_check_is_synchronous(self):
        client = AsyncTraktClient(CLIENT_ID)
        with pytest.raises(ClientSecretNeededError):
            client.oauth_get_token("code", "urn:ietf:wg:oauth:2.0:oob")


class TestAsyncEndpoints:
    """Builders and endpoints over the async transport."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_paginated_full_listing(self, async_client: AsyncTraktClient):
        route = respx.get(f"{API_URL}/movies/trending").mock(
            return_value=httpx.Response(
                200, json=MOVIES_TRENDING_FULL_RESPONSE, headers=PAGINATION_HEADERS
            )
        )

        page = await async_client.movies_trending().page(2).limit(10).full().execute()

        assert isinstance(page, PaginatedList)
        assert isinstance(page[0], FullTrendingMovie)
        assert page.page == 2
        params = route.calls.last.request.url.params
        assert (params["page"], params["limit"], params["extended"]) == ("2", "10", "full")

    @pytest.mark.asyncio
    @respx.mock
    async def test_movie_full(self, async_client: AsyncTraktClient):
        respx.get(f"{API_URL}/movies/tron-legacy-2010").mock(
            return_value=httpx.Response(200, json=MOVIE_FULL_RESPONSE)
        )

        movie = await async_client.movie_full("tron-legacy-2010")

        assert isinstance(movie, FullMovie)
        assert movie.certification == "PG-13"

    @pytest.mark.asyncio
    @respx.mock
    async def test_search(self, async_client: AsyncTraktClient):
        route = respx.get(f"{API_URL}/search/movie").mock(
            return_value=httpx.Response(200, json=SEARCH_RESPONSE[:1])
        )

        results = await async_client.search(SearchType.movie(), "tron").limit(1).execute()

        assert results[0].movie.title == "TRON: Legacy"
        assert route.calls.last.request.url.params["query"] == "tron"

    @pytest.mark.asyncio
    @respx.mock
    async def test_calendar(self, async_client: AsyncTraktClient):
        route = respx.get(f"{API_URL}/calendars/my/shows/2014-09-01/7").mock(
            return_value=httpx.Response(200, json=CALENDAR_SHOWS_RESPONSE)
        )

        entries = (
            await async_client.calendar_my_shows(ACCESS_TOKEN)
            .start_date(date(2014, 9, 1))
            .days(7)
            .execute()
        )

        assert entries[0].show.title == "True Blood"
        assert route.calls.last.request.headers["Authorization"] == f"Bearer {ACCESS_TOKEN}"

    @pytest.mark.asyncio
    @respx.mock
    async def test_sync_add(self, async_client: AsyncTraktClient):
        route = respx.post(f"{API_URL}/sync/watchlist").mock(
            return_value=httpx.Response(201, json=SYNC_ADD_RESPONSE)
        )

        result = await async_client.sync_watchlist_add().movie(
            MovieSelector().tmdb(20526)
        ).execute(ACCESS_TOKEN)

        assert isinstance(result, SyncAddResponse)
        assert body_of(route.calls.last.request)["movies"] == [{"ids": {"tmdb": 20526}}]

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_token(self, async_client: AsyncTraktClient):
        respx.post(f"{API_URL}/oauth/token").mock(
            return_value=httpx.Response(200, json=TOKEN_RESPONSE)
        )

        token = await async_client.oauth_get_token("abc", "urn:ietf:wg:oauth:2.0:oob")

        assert isinstance(token, AccessToken)

    @pytest.mark.asyncio
    @respx.mock
    async def test_next_episode_none(self, async_client: AsyncTraktClient):
        respx.get(f"{API_URL}/shows/ended-show/next_episode").mock(
            return_value=httpx.Response(204)
        )

        assert await async_client.show_next_episode("ended-show") is None


class TestAsyncErrors:
    """Error mapping on the async transport."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_response_error(self, async_client: AsyncTraktClient):
        respx.get(f"{API_URL}/users/private-user").mock(return_value=httpx.Response(401))

        with pytest.raises(TraktResponseError) as exc_info:
            await async_client.user_profile("private-user")

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    @respx.mock
    async def test_rate_limit(self, async_client: AsyncTraktClient):
        respx.get(f"{API_URL}/movies/trending").mock(
            return_value=httpx.Response(429, headers={"Retry-After": "2"})
        )

        with pytest.raises(RateLimitError) as exc_info:
            await async_client.movies_trending().execute()

        assert exc_info.value.retry_after == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_timeout(self, async_client: AsyncTraktClient):
        respx.get(f"{API_URL}/movies/trending").mock(side_effect=httpx.ReadTimeout("timed out"))

        with pytest.raises(TraktConnectionError):
            await async_client.movies_trending().execute()


class TestAsyncLifecycle:
    """Context manager and close."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_async_context_manager(self):
        respx.get(f"{API_URL}/movies/tron-legacy-2010").mock(
            return_value=httpx.Response(200, json=MOVIE_RESPONSE)
        )

        async with AsyncTraktClient(CLIENT_ID) as client:
            await client.movie("tron-legacy-2010")
            http_client = client._client

        assert http_client.is_closed
        assert client._client is None

    @respx.mock
    def test_into_sync(self):
        """The blocking twin keeps credentials, URLs, timeout and attempts."""
        async_client = AsyncTraktClient.staging(
            CLIENT_ID, CLIENT_SECRET, timeout=5.0, max_attempts=3
        )
        route = respx.get(f"{STAGING_API_URL}/movies/tron-legacy-2010").mock(
            return_value=httpx.Response(200, json=MOVIE_RESPONSE)
        )

        with async_client.into_sync() as client:
            assert isinstance(client, TraktClient)
            assert client == async_client
            assert client.site_url == STAGING_SITE_URL
            assert client.timeout == 5.0
            assert client.max_attempts == 3
            movie = client.movie("tron-legacy-2010")

        assert movie.title == "TRON: Legacy"
        assert route.called
