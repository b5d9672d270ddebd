from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from movie_lookup.integrations.http import ProviderError
from movie_lookup.integrations.tmdb.client import TmdbMovieClient
from movie_lookup.integrations.wikipedia import WikipediaClient
from movie_lookup.models.lookup_result import LookupResult, LookupStatus
from movie_lookup.models.movies import EncyclopediaEntry, MovieDetails, MovieSummary

logger = logging.getLogger(__name__)

ENCYCLOPEDIA_NOT_FOUND_MESSAGE = "Wikipedia page not found for this movie."


@dataclass(frozen=True)
class SearchOutcome:
    """Primary search result as shown to a user: either movies or an error message."""

    query: str
    movies: list[MovieSummary]
    error: str | None = None


@dataclass(frozen=True)
class MovieView:
    movie_id: int
    title: str
    details: LookupResult[MovieDetails]
    encyclopedia: LookupResult[EncyclopediaEntry]

    @property
    def encyclopedia_notice(self) -> str | None:
        if self.encyclopedia.available:
            return None
        return ENCYCLOPEDIA_NOT_FOUND_MESSAGE

    @property
    def summary(self) -> str:
        entry = self.encyclopedia.value
        return entry.summary if entry is not None else ""

    @property
    def encyclopedia_url(self) -> str:
        entry = self.encyclopedia.value
        return entry.url if entry is not None else ""


def search_movies(client: TmdbMovieClient, query: str) -> SearchOutcome:
    """
    Run a primary search, trimming the user's input first.

    Provider failures clear the result list and carry the error message instead.
    """

    trimmed = (query or "").strip()
    if not trimmed:
        return SearchOutcome(query=trimmed, movies=[])
    try:
        movies = client.search(trimmed)
    except ProviderError as exc:
        logger.error("Movie search failed for %r: %s", trimmed, exc)
        return SearchOutcome(query=trimmed, movies=[], error=str(exc))
    return SearchOutcome(query=trimmed, movies=movies)


def build_movie_view(
    movie_id: int,
    title: str,
    *,
    movie_client: TmdbMovieClient,
    encyclopedia_client: WikipediaClient,
) -> MovieView:
    """
    Fetch structured details and the encyclopedia entry for a selected movie.

    Both lookups run concurrently and fail independently: a missing encyclopedia page
    does not hide the TMDb details, and vice versa.
    """

    with ThreadPoolExecutor(max_workers=2) as pool:
        details_future = pool.submit(movie_client.get_details, movie_id)
        encyclopedia_future = pool.submit(encyclopedia_client.lookup, title)

    details = details_future.result()
    encyclopedia = encyclopedia_future.result()

    if details.status is not LookupStatus.FOUND:
        logger.info("No TMDb details for movie %d (%s)", movie_id, details.status.value)
    if encyclopedia.status is not LookupStatus.FOUND:
        logger.info("No Wikipedia entry for %r (%s)", title, encyclopedia.status.value)

    return MovieView(movie_id=movie_id, title=title, details=details, encyclopedia=encyclopedia)


def view_for_summary(
    movie: MovieSummary,
    *,
    movie_client: TmdbMovieClient,
    encyclopedia_client: WikipediaClient,
) -> MovieView:
    return build_movie_view(
        movie.id,
        movie.title,
        movie_client=movie_client,
        encyclopedia_client=encyclopedia_client,
    )
