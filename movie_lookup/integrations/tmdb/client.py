from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Mapping

import requests

from movie_lookup.config import MovieLookupSettings
from movie_lookup.integrations.http import ProviderError, request_json
from movie_lookup.integrations.tmdb.credits import extract_cast, extract_director, extract_writers
from movie_lookup.models.lookup_result import LookupResult
from movie_lookup.models.movies import Genre, MovieDetails, MovieSummary

logger = logging.getLogger(__name__)

PROVIDER_NAME = "TMDb"


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_float(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    return 0.0


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    return 0


def parse_movie_summary(item: Mapping[str, Any]) -> MovieSummary | None:
    movie_id = item.get("id")
    if not isinstance(movie_id, int) or isinstance(movie_id, bool):
        return None
    media_type = item.get("media_type")
    return MovieSummary(
        id=movie_id,
        title=_as_str(item.get("title")),
        overview=_as_str(item.get("overview")),
        release_date=_as_str(item.get("release_date")),
        vote_average=_as_float(item.get("vote_average")),
        media_type=media_type if isinstance(media_type, str) else None,
    )


def parse_movie_results(payload: Mapping[str, Any]) -> list[MovieSummary]:
    results = payload.get("results")
    if not isinstance(results, list):
        return []
    movies: list[MovieSummary] = []
    for item in results:
        movie = parse_movie_summary(item) if isinstance(item, Mapping) else None
        if movie is None:
            logger.debug("Skipping TMDb result without an integer id: %r", item)
            continue
        movies.append(movie)
    return movies


def merge_movie_details(details: Mapping[str, Any], credits: Mapping[str, Any]) -> MovieDetails:
    """
    Merge a `/movie/{id}` payload with its `/movie/{id}/credits` payload.

    Raises ValueError when the detail payload has no usable id.
    """

    movie_id = details.get("id")
    if not isinstance(movie_id, int) or isinstance(movie_id, bool):
        raise ValueError("TMDb movie details missing integer id.")

    genres_raw = details.get("genres")
    genres = tuple(
        Genre(id=g["id"], name=_as_str(g.get("name")))
        for g in (genres_raw if isinstance(genres_raw, list) else [])
        if isinstance(g, Mapping) and isinstance(g.get("id"), int)
    )

    crew = credits.get("crew")
    cast = credits.get("cast")
    crew_list = crew if isinstance(crew, list) else []
    cast_list = cast if isinstance(cast, list) else []

    poster_path = details.get("poster_path")
    return MovieDetails(
        id=movie_id,
        title=_as_str(details.get("title")),
        overview=_as_str(details.get("overview")),
        release_date=_as_str(details.get("release_date")),
        vote_average=_as_float(details.get("vote_average")),
        runtime=max(_as_int(details.get("runtime")), 0),
        genres=genres,
        director=extract_director(crew_list),
        writers=tuple(extract_writers(crew_list)),
        cast=tuple(extract_cast(cast_list)),
        poster_path=poster_path if isinstance(poster_path, str) and poster_path else None,
    )


class TmdbMovieClient:
    """
    Client for the TMDb movie endpoints used by the lookup flow.

    `search` is a primary path and raises `ProviderError`; `get_details` and `get_related`
    back secondary panels and report failures through `LookupResult` instead.
    """

    def __init__(
        self,
        settings: MovieLookupSettings,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self._api_key = settings.require_tmdb_api_key()
        self._base_url = settings.tmdb_api_base_url.rstrip("/")
        self._timeout_seconds = settings.http_timeout_seconds
        self._headers = {"user-agent": settings.user_agent}
        self._session = session or requests.Session()

    def _get_json(self, endpoint: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return request_json(
            self._session,
            f"{self._base_url}{endpoint}",
            provider=PROVIDER_NAME,
            params={"api_key": self._api_key, **(params or {})},
            headers=self._headers,
            timeout_seconds=self._timeout_seconds,
        )

    def search(self, query: str) -> list[MovieSummary]:
        logger.info("Searching TMDb for movie: %r", query)
        payload = self._get_json("/search/movie", {"query": query})
        return parse_movie_results(payload)

    def get_details(self, movie_id: int) -> LookupResult[MovieDetails]:
        movie_id = int(movie_id)
        with ThreadPoolExecutor(max_workers=2) as pool:
            details_future = pool.submit(self._get_json, f"/movie/{movie_id}")
            credits_future = pool.submit(self._get_json, f"/movie/{movie_id}/credits")

        errors = [exc for exc in (details_future.exception(), credits_future.exception()) if exc is not None]
        if errors:
            for exc in errors:
                logger.warning("TMDb details lookup failed for movie %d: %r", movie_id, exc)
            if any(isinstance(exc, ProviderError) and exc.is_not_found for exc in errors):
                return LookupResult.not_found(str(errors[0]))
            return LookupResult.unavailable(str(errors[0]))

        try:
            details = merge_movie_details(details_future.result(), credits_future.result())
        except (KeyError, TypeError, ValueError, OverflowError) as exc:
            logger.warning("TMDb details payload for movie %d was malformed: %s", movie_id, exc)
            return LookupResult.unavailable(f"Malformed TMDb details payload: {exc}")
        return LookupResult.found(details)

    def get_related(self, movie_id: int) -> LookupResult[list[MovieSummary]]:
        movie_id = int(movie_id)
        try:
            payload = self._get_json(f"/movie/{movie_id}/similar")
        except ProviderError as exc:
            logger.warning("TMDb similar-titles lookup failed for movie %d: %s", movie_id, exc)
            if exc.is_not_found:
                return LookupResult.not_found(str(exc))
            return LookupResult.unavailable(str(exc))
        except Exception as exc:
            logger.warning("TMDb similar-titles lookup failed for movie %d: %r", movie_id, exc)
            return LookupResult.unavailable(str(exc))
        return LookupResult.found(parse_movie_results(payload))
