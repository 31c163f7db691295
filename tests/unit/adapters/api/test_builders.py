"""
Tests for the fluent request builders.

Builders are checked through build_path()/build_params()/build_body() and,
where the wire format matters, through a mocked request.
"""

from datetime import date, datetime, timezone

import httpx
import pytest
import respx

from trakt_api.adapters.api.client import TraktClient
from trakt_api.adapters.api.requests import (
    CalendarRequest,
    EpisodeSelector,
    ListingRequest,
    MovieSelector,
    PaginatedRequest,
    ShowSelector,
)
from trakt_api.core.entities import (
    CalendarShow,
    FullCalendarShow,
    FullMovie,
    Movie,
    PaginatedList,
)
from trakt_api.core.value_objects import ExtendedInfo, ShowStatus
from tests.conftest import ACCESS_TOKEN, body_of
from tests.fixtures.trakt_responses import (
    API_URL,
    CALENDAR_SHOWS_RESPONSE,
    CHECKIN_RESPONSE,
    COMMENT_RESPONSE,
    MOVIE_FULL_RESPONSE,
    MOVIE_RESPONSE,
    PAGINATION_HEADERS,
    SYNC_ADD_RESPONSE,
)


@pytest.fixture
def popular(client: TraktClient) -> PaginatedRequest:
    return PaginatedRequest(client, "/movies/popular", Movie, FullMovie)


class TestPaginatedRequest:
    """Tests for page/limit/extended handling."""

    def test_defaults(self, popular: PaginatedRequest):
        assert popular.build_path() == "/movies/popular"
        assert popular.build_params() == {}
        assert popular.response_model is Movie

    def test_page_and_limit(self, popular: PaginatedRequest):
        params = popular.page(3).limit(20).build_params()
        assert params == {"page": 3, "limit": 20}

    @pytest.mark.parametrize("value", [0, -1])
    def test_page_must_be_positive(self, popular: PaginatedRequest, value: int):
        with pytest.raises(ValueError):
            popular.page(value)
        with pytest.raises(ValueError):
            popular.limit(value)

    def test_full_switches_model(self, popular: PaginatedRequest):
        popular.full()
        assert popular.build_params() == {"extended": (ExtendedInfo.FULL,)}
        assert popular.response_model is FullMovie

    def test_none_restores_base_model(self, popular: PaginatedRequest):
        popular.full().none()
        assert "extended" not in popular.build_params()
        assert popular.response_model is Movie

    def test_metadata_keeps_base_model(self, popular: PaginatedRequest):
        popular.metadata()
        assert popular.response_model is Movie

    def test_full_without_full_model(self, client: TraktClient):
        request = PaginatedRequest(client, "/movies/tron/related", Movie)
        assert request.full().response_model is Movie

    @respx.mock
    def test_execute(self, popular: PaginatedRequest):
        route = respx.get(f"{API_URL}/movies/popular").mock(
            return_value=httpx.Response(200, json=[MOVIE_FULL_RESPONSE], headers=PAGINATION_HEADERS)
        )

        page = popular.page(2).limit(10).full().execute()

        params = route.calls.last.request.url.params
        assert (params["page"], params["limit"], params["extended"]) == ("2", "10", "full")
        assert isinstance(page, PaginatedList)
        assert isinstance(page[0], FullMovie)
        assert page.item_count == 143

    @respx.mock
    def test_multiple_extended_values(self, client: TraktClient):
        route = respx.get(f"{API_URL}/shows/got/seasons").mock(
            return_value=httpx.Response(200, json=[])
        )

        PaginatedRequest(client, "/shows/got/seasons", list[Movie], paginated=False).extended(
            ExtendedInfo.FULL, ExtendedInfo.EPISODES
        ).execute()

        assert route.calls.last.request.url.params["extended"] == "full,episodes"

    @respx.mock
    def test_auth_sets_bearer(self, popular: PaginatedRequest):
        route = respx.get(f"{API_URL}/movies/popular").mock(
            return_value=httpx.Response(200, json=[MOVIE_RESPONSE])
        )

        popular.auth(ACCESS_TOKEN).execute()

        assert route.calls.last.request.headers["Authorization"] == f"Bearer {ACCESS_TOKEN}"


class TestFilters:
    """Tests for the listing filters."""

    def test_single_year(self, client: TraktClient):
        request = ListingRequest(client, "/movies/popular", Movie)
        assert request.years(2010).build_params() == {"years": "2010"}

    def test_filters_render_as_query(self, client: TraktClient):
        request = (
            ListingRequest(client, "/shows/popular", Movie)
            .query("tron")
            .years(2010, 2020)
            .genres("action", "science-fiction")
            .languages("en")
            .countries("us", "fr")
            .runtimes(30, 60)
            .ratings(75, 100)
            .certifications("pg-13")
            .networks("HBO", "AMC")
            .status(ShowStatus.ENDED, ShowStatus.RETURNING)
        )

        with respx.mock:
            route = respx.get(f"{API_URL}/shows/popular").mock(
                return_value=httpx.Response(200, json=[])
            )
            request.execute()

        params = route.calls.last.request.url.params
        assert params["query"] == "tron"
        assert params["years"] == "2010-2020"
        assert params["genres"] == "action,science-fiction"
        assert params["languages"] == "en"
        assert params["countries"] == "us,fr"
        assert params["runtimes"] == "30-60"
        assert params["ratings"] == "75-100"
        assert params["certifications"] == "pg-13"
        assert params["networks"] == "HBO,AMC"
        assert params["status"] == "ended,returning series"

    def test_inverted_range(self, client: TraktClient):
        request = ListingRequest(client, "/movies/popular", Movie)
        with pytest.raises(ValueError):
            request.runtimes(120, 60)


class TestCalendarRequest:
    """Tests for the calendar path segments."""

    def _calendar(self, client: TraktClient) -> CalendarRequest:
        return CalendarRequest(
            client, "all", ("shows", "new"), list[CalendarShow], list[FullCalendarShow]
        )

    def test_path_without_dates(self, client: TraktClient):
        assert self._calendar(client).build_path() == "/calendars/all/shows/new"

    def test_path_with_start_and_days(self, client: TraktClient):
        request = self._calendar(client).start_date(date(2014, 9, 1)).days(7)
        assert request.build_path() == "/calendars/all/shows/new/2014-09-01/7"

    def test_datetime_start_uses_its_date(self, client: TraktClient):
        request = self._calendar(client).start_date(datetime(2014, 9, 1, 22, 30))
        assert request.build_path() == "/calendars/all/shows/new/2014-09-01"

    def test_days_without_start_is_ignored(self, client: TraktClient):
        request = self._calendar(client).days(3)
        assert request.build_path() == "/calendars/all/shows/new"

    def test_days_without_start_on_all_shows(self, client: TraktClient):
        assert client.calendar_all_shows().days(3).build_path() == "/calendars/all/shows"

    def test_days_must_be_positive(self, client: TraktClient):
        with pytest.raises(ValueError):
            self._calendar(client).days(0)

    @respx.mock
    def test_full_calendar(self, client: TraktClient):
        route = respx.get(f"{API_URL}/calendars/all/shows/new/2014-09-01/7").mock(
            return_value=httpx.Response(200, json=CALENDAR_SHOWS_RESPONSE)
        )

        entries = self._calendar(client).start_date(date(2014, 9, 1)).days(7).full().execute()

        assert route.calls.last.request.url.params["extended"] == "full"
        assert isinstance(entries[0], FullCalendarShow)
        assert not isinstance(entries, PaginatedList)


class TestCommentsRequest:
    """Tests for comment listings."""

    def test_default_path(self, client: TraktClient):
        assert client.comments_trending().build_path() == "/comments/trending/all/all"

    def test_comment_and_item_types(self, client: TraktClient):
        request = client.comments_recent().reviews().episodes()
        assert request.build_path() == "/comments/recent/reviews/episodes"
        assert client.comments_updates().shouts().lists().build_path() == (
            "/comments/updates/shouts/lists"
        )
        assert client.comments_trending().reviews().all_types().movies().build_path() == (
            "/comments/trending/all/movies"
        )

    def test_include_replies(self, client: TraktClient):
        request = client.comments_trending().include_replies()
        assert request.build_params() == {"include_replies": True}

    def test_user_comments_prefix(self, client: TraktClient):
        request = client.user_comments("sean").shows()
        assert request.build_path() == "/users/sean/comments/all/shows"


class TestCommentCreateRequest:
    """Tests for POST /comments."""

    def test_body_without_sharing(self, client: TraktClient):
        body = client.comment_create("Great!").movie(MovieSelector().trakt(16)).build_body()
        assert body == {"comment": "Great!", "spoiler": False, "movie": {"ids": {"trakt": 16}}}

    def test_target_is_required(self, client: TraktClient):
        with pytest.raises(ValueError):
            client.comment_create("Great!").build_body()

    def test_new_target_replaces_previous(self, client: TraktClient):
        body = (
            client.comment_create("Great!")
            .movie(MovieSelector().trakt(16))
            .show(ShowSelector().slug("game-of-thrones"))
            .build_body()
        )
        assert "movie" not in body
        assert body["show"] == {"ids": {"slug": "game-of-thrones"}}

    @respx.mock
    def test_execute(self, client: TraktClient):
        route = respx.post(f"{API_URL}/comments").mock(
            return_value=httpx.Response(201, json=COMMENT_RESPONSE)
        )

        comment = (
            client.comment_create("Great movie, the soundtrack alone is worth it!")
            .movie({"title": "TRON: Legacy", "year": 2010})
            .spoiler()
            .twitter()
            .medium()
            .execute(ACCESS_TOKEN)
        )

        assert comment.id == 417
        assert body_of(route.calls.last.request) == {
            "comment": "Great movie, the soundtrack alone is worth it!",
            "spoiler": True,
            "movie": {"title": "TRON: Legacy", "year": 2010},
            "sharing": {"twitter": True, "medium": True},
        }


class TestCommentPostRequest:
    """Tests for comment update and reply."""

    @respx.mock
    def test_update_uses_put(self, client: TraktClient):
        route = respx.put(f"{API_URL}/comments/417").mock(
            return_value=httpx.Response(200, json=COMMENT_RESPONSE)
        )

        client.comment_update(417, "Edited").spoiler().execute(ACCESS_TOKEN)

        assert body_of(route.calls.last.request) == {"comment": "Edited", "spoiler": True}

    @respx.mock
    def test_reply_uses_post(self, client: TraktClient):
        route = respx.post(f"{API_URL}/comments/417/replies").mock(
            return_value=httpx.Response(201, json={**COMMENT_RESPONSE, "id": 500, "parent_id": 417})
        )

        reply = client.comment_reply(417, "Agreed").execute(ACCESS_TOKEN)

        assert reply.parent_id == 417
        assert body_of(route.calls.last.request) == {"comment": "Agreed", "spoiler": False}


class TestSyncRequest:
    """Tests for the sync write builder."""

    def test_body_keeps_all_groups(self, client: TraktClient):
        request = client.sync_history_add()
        assert request.is_empty()
        assert request.build_body() == {"movies": [], "shows": [], "seasons": [], "episodes": []}

    @respx.mock
    def test_execute(self, client: TraktClient):
        route = respx.post(f"{API_URL}/sync/history").mock(
            return_value=httpx.Response(201, json=SYNC_ADD_RESPONSE)
        )
        watched_at = datetime(2014, 9, 1, 9, 10, 11, tzinfo=timezone.utc)

        result = (
            client.sync_history_add()
            .movies(
                MovieSelector().imdb("tt0372784").watched_at(watched_at),
                Movie.model_validate(MOVIE_RESPONSE),
            )
            .show(ShowSelector().trakt(1390).season(1))
            .episode(EpisodeSelector().trakt(1061))
            .execute(ACCESS_TOKEN)
        )

        assert result.added.movies == 2
        body = body_of(route.calls.last.request)
        assert body["movies"] == [
            {"ids": {"imdb": "tt0372784"}, "watched_at": "2014-09-01T09:10:11.000Z"},
            {
                "title": "TRON: Legacy",
                "year": 2010,
                "ids": {"trakt": 16, "slug": "tron-legacy-2010", "imdb": "tt1104001", "tmdb": 20526},
            },
        ]
        assert body["shows"] == [{"ids": {"trakt": 1390}, "seasons": [{"number": 1}]}]
        assert body["seasons"] == []
        assert body["episodes"] == [{"ids": {"trakt": 1061}}]

    def test_unidentified_item_is_rejected(self, client: TraktClient):
        with pytest.raises(ValueError):
            client.sync_watchlist_add().movie(MovieSelector().year(2010))


class TestCheckinRequest:
    """Tests for POST /checkin."""

    def test_target_is_required(self, client: TraktClient):
        with pytest.raises(ValueError):
            client.checkin().message("hello").build_body()

    def test_episode_with_show(self, client: TraktClient):
        body = (
            client.checkin()
            .episode(EpisodeSelector().season(1).number(1), ShowSelector().title("Breaking Bad"))
            .build_body()
        )
        assert body == {
            "episode": {"season": 1, "number": 1},
            "show": {"title": "Breaking Bad"},
            "sharing": {"twitter": False, "tumblr": False, "facebook": False},
        }

    def test_movie_replaces_episode(self, client: TraktClient):
        body = (
            client.checkin()
            .episode(EpisodeSelector().trakt(1), ShowSelector().trakt(2))
            .movie(MovieSelector().trakt(28))
            .build_body()
        )
        assert "episode" not in body
        assert "show" not in body
        assert body["movie"] == {"ids": {"trakt": 28}}

    @respx.mock
    def test_execute(self, client: TraktClient):
        route = respx.post(f"{API_URL}/checkin").mock(
            return_value=httpx.Response(201, json=CHECKIN_RESPONSE)
        )

        response = (
            client.checkin()
            .movie(MovieSelector().slug("guardians-of-the-galaxy-2014"))
            .message("Guardians of the Galaxy FTW!")
            .app_version("1.0")
            .app_date(date(2014, 9, 22))
            .twitter()
            .execute(ACCESS_TOKEN)
        )

        assert response.id == 3373536619
        assert response.sharing.twitter is True
        assert response.movie.title == "Guardians of the Galaxy"
        assert body_of(route.calls.last.request) == {
            "movie": {"ids": {"slug": "guardians-of-the-galaxy-2014"}},
            "message": "Guardians of the Galaxy FTW!",
            "app_version": "1.0",
            "app_date": "2014-09-22",
            "sharing": {"twitter": True, "tumblr": False, "facebook": False},
        }
