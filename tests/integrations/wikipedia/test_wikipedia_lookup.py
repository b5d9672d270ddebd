from __future__ import annotations

import pytest
import requests

from movie_lookup.config import MovieLookupSettings
from movie_lookup.integrations.wikipedia import WikipediaClient, build_search_url, build_summary_url
from movie_lookup.models.lookup_result import LookupStatus
from tests.fakes import NO_JSON, FakeResponse, FakeSession, load_fixture

SEARCH_BASE = "https://en.wikipedia.org/w/rest.php/v1"
SUMMARY_BASE = "https://en.wikipedia.org/api/rest_v1"
INCEPTION_SEARCH = f"{SEARCH_BASE}/search/page?q=Inception&limit=1"
INCEPTION_SUMMARY = f"{SUMMARY_BASE}/page/summary/Inception"


def _ok_routes() -> dict:
    return {
        INCEPTION_SEARCH: FakeResponse(200, load_fixture("wikipedia/search_page_sample.json")),
        INCEPTION_SUMMARY: FakeResponse(200, load_fixture("wikipedia/page_summary_sample.json")),
    }


def test_lookup_resolves_summary_in_two_stages() -> None:
    session = FakeSession(_ok_routes())

    result = WikipediaClient(session=session).lookup("Inception")

    assert result.status is LookupStatus.FOUND
    entry = result.value
    assert entry is not None
    assert entry.summary.startswith("Inception is a 2010 science fiction action film")
    assert entry.url == "https://en.wikipedia.org/wiki/Inception"
    assert entry.title == "Inception"
    assert session.urls == [INCEPTION_SEARCH, INCEPTION_SUMMARY]


def test_lookup_percent_encodes_search_query() -> None:
    session = FakeSession()

    WikipediaClient(session=session).lookup("Movie With Spaces & Special Characters")

    assert session.urls[0] == (
        f"{SEARCH_BASE}/search/page?q=Movie%20With%20Spaces%20%26%20Special%20Characters&limit=1"
    )


def test_build_summary_url_percent_encodes_page_key() -> None:
    assert build_summary_url(SUMMARY_BASE, "AC/DC_(film)") == f"{SUMMARY_BASE}/page/summary/AC%2FDC_%28film%29"
    assert build_search_url(SEARCH_BASE, "Amélie") == f"{SEARCH_BASE}/search/page?q=Am%C3%A9lie&limit=1"


@pytest.mark.parametrize("payload", [{"pages": []}, {}, {"pages": [{"title": "no key"}]}])
def test_lookup_is_not_found_without_candidates(payload) -> None:  # noqa: ANN001
    session = FakeSession({INCEPTION_SEARCH: FakeResponse(200, payload)})

    result = WikipediaClient(session=session).lookup("Inception")

    assert result.status is LookupStatus.NOT_FOUND
    assert result.value is None
    assert session.urls == [INCEPTION_SEARCH]


def test_lookup_is_unavailable_when_search_fails() -> None:
    session = FakeSession({INCEPTION_SEARCH: FakeResponse(500, {}, reason="Internal Server Error")})

    result = WikipediaClient(session=session).lookup("Inception")

    assert result.status is LookupStatus.UNAVAILABLE
    assert session.urls == [INCEPTION_SEARCH]


def test_lookup_is_unavailable_when_summary_fails() -> None:
    routes = _ok_routes()
    routes[INCEPTION_SUMMARY] = FakeResponse(503, {}, reason="Service Unavailable")
    session = FakeSession(routes)

    result = WikipediaClient(session=session).lookup("Inception")

    assert result.status is LookupStatus.UNAVAILABLE
    assert result.value is None


@pytest.mark.parametrize("failing_url", [INCEPTION_SEARCH, INCEPTION_SUMMARY])
def test_lookup_never_raises_on_network_errors(failing_url) -> None:  # noqa: ANN001
    routes = _ok_routes()
    routes[failing_url] = requests.ConnectionError("network down")
    session = FakeSession(routes)

    result = WikipediaClient(session=session).lookup("Inception")

    assert result.status is LookupStatus.UNAVAILABLE
    assert "network down" in (result.reason or "")


@pytest.mark.parametrize("failing_url", [INCEPTION_SEARCH, INCEPTION_SUMMARY])
def test_lookup_is_unavailable_when_transport_raises_unexpected_error(failing_url) -> None:  # noqa: ANN001
    routes = _ok_routes()
    routes[failing_url] = OSError("socket gone")
    session = FakeSession(routes)

    result = WikipediaClient(session=session).lookup("Inception")

    assert result.status is LookupStatus.UNAVAILABLE
    assert result.value is None
    assert result.reason == "socket gone"


def test_lookup_is_unavailable_for_malformed_summary() -> None:
    routes = _ok_routes()
    routes[INCEPTION_SUMMARY] = FakeResponse(200, {"extract": "text only"})
    session = FakeSession(routes)

    assert WikipediaClient(session=session).lookup("Inception").status is LookupStatus.UNAVAILABLE


def test_lookup_is_unavailable_for_non_json_search_body() -> None:
    session = FakeSession({INCEPTION_SEARCH: FakeResponse(200, NO_JSON, text="<html>")})

    assert WikipediaClient(session=session).lookup("Inception").status is LookupStatus.UNAVAILABLE


def test_lookup_uses_configured_language() -> None:
    session = FakeSession()
    settings = MovieLookupSettings(wikipedia_language="es")

    WikipediaClient(settings, session=session).lookup("Origen")

    assert session.urls == ["https://es.wikipedia.org/w/rest.php/v1/search/page?q=Origen&limit=1"]
    assert session.calls[0]["headers"]["user-agent"] == settings.user_agent
