"""
Wikipedia summary lookup for a free-text movie title.

Resolution is two-stage: a full-text page search picks the first candidate page key,
then the REST summary endpoint is fetched for that key. Lookups are best-effort and
never raise; failures come back as a non-found `LookupResult`.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping
from urllib.parse import quote, urlencode

import requests

from movie_lookup.config import MovieLookupSettings
from movie_lookup.integrations.http import ProviderError, request_json
from movie_lookup.models.lookup_result import LookupResult
from movie_lookup.models.movies import EncyclopediaEntry

logger = logging.getLogger(__name__)

PROVIDER_NAME = "Wikipedia"
SEARCH_LIMIT = 1


def build_search_url(base_url: str, title: str, *, limit: int = SEARCH_LIMIT) -> str:
    # quote_via=quote gives %20 for spaces instead of "+".
    query = urlencode({"q": title, "limit": limit}, quote_via=quote, safe="")
    return f"{base_url.rstrip('/')}/search/page?{query}"


def build_summary_url(base_url: str, page_key: str) -> str:
    return f"{base_url.rstrip('/')}/page/summary/{quote(page_key, safe='')}"


def first_page_key(payload: Mapping[str, Any]) -> str | None:
    pages = payload.get("pages")
    if not isinstance(pages, list) or not pages:
        return None
    first = pages[0]
    if not isinstance(first, Mapping):
        return None
    key = first.get("key")
    if isinstance(key, str) and key.strip():
        return key.strip()
    return None


def parse_summary(payload: Mapping[str, Any]) -> EncyclopediaEntry | None:
    extract = payload.get("extract")
    content_urls = payload.get("content_urls")
    desktop = content_urls.get("desktop") if isinstance(content_urls, Mapping) else None
    page_url = desktop.get("page") if isinstance(desktop, Mapping) else None
    if not isinstance(extract, str) or not isinstance(page_url, str):
        return None
    title = payload.get("title")
    return EncyclopediaEntry(
        summary=extract,
        url=page_url,
        title=title if isinstance(title, str) and title else None,
    )


class WikipediaClient:
    def __init__(
        self,
        settings: MovieLookupSettings | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        settings = settings or MovieLookupSettings()
        self._search_base_url = settings.wikipedia_search_base_url
        self._summary_base_url = settings.wikipedia_summary_base_url
        self._timeout_seconds = settings.http_timeout_seconds
        self._headers = {"user-agent": settings.user_agent}
        self._session = session or requests.Session()

    def _get_json(self, url: str) -> dict[str, Any]:
        return request_json(
            self._session,
            url,
            provider=PROVIDER_NAME,
            headers=self._headers,
            timeout_seconds=self._timeout_seconds,
        )

    def lookup(self, title: str) -> LookupResult[EncyclopediaEntry]:
        """
        Resolve `title` to a page summary.

        The first search candidate is used as-is; titles shared by several pages may
        resolve to an unrelated article.
        """

        try:
            search_payload = self._get_json(build_search_url(self._search_base_url, title))
        except ProviderError as exc:
            logger.warning("Wikipedia search failed for %r: %s", title, exc)
            return LookupResult.unavailable(str(exc))
        except Exception as exc:
            logger.warning("Wikipedia search failed for %r: %r", title, exc)
            return LookupResult.unavailable(str(exc))

        page_key = first_page_key(search_payload)
        if page_key is None:
            logger.info("Wikipedia search returned no pages for %r", title)
            return LookupResult.not_found(f"No Wikipedia page matched {title!r}.")

        try:
            summary_payload = self._get_json(build_summary_url(self._summary_base_url, page_key))
        except ProviderError as exc:
            logger.warning("Wikipedia summary fetch failed for page %r: %s", page_key, exc)
            if exc.is_not_found:
                return LookupResult.not_found(str(exc))
            return LookupResult.unavailable(str(exc))
        except Exception as exc:
            logger.warning("Wikipedia summary fetch failed for page %r: %r", page_key, exc)
            return LookupResult.unavailable(str(exc))

        entry = parse_summary(summary_payload)
        if entry is None:
            logger.warning("Wikipedia summary for page %r was missing extract or page url", page_key)
            return LookupResult.unavailable(f"Malformed Wikipedia summary for {page_key!r}.")
        return LookupResult.found(entry)
