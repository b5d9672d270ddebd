#!/usr/bin/env python3
"""Search TMDb for a movie and print the aggregated TMDb + Wikipedia view."""

from __future__ import annotations

import argparse
import logging
import sys

from movie_lookup.aggregation.movie_view import MovieView, search_movies, view_for_summary
from movie_lookup.config import ConfigurationError, MovieLookupSettings
from movie_lookup.integrations.tmdb.client import TmdbMovieClient
from movie_lookup.integrations.wikipedia import WikipediaClient
from movie_lookup.models.movies import MovieSummary


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lookup_movie",
        description="Search TMDb by title and show details merged with a Wikipedia summary.",
    )
    parser.add_argument("query", help="Movie title to search for.")
    parser.add_argument(
        "--pick",
        type=int,
        default=None,
        help="1-based index of the search result to open (default: list results only).",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=10,
        help="Maximum number of search results to print (default: 10).",
    )
    parser.add_argument(
        "--related",
        action="store_true",
        help="Also list similar titles for the picked movie.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def _print_results(movies: list[MovieSummary], *, limit: int) -> None:
    for idx, movie in enumerate(movies[:limit], start=1):
        year = f" ({movie.release_year})" if movie.release_year else ""
        print(f"{idx:>3}. {movie.title}{year}  [tmdb {movie.id}]  rating {movie.vote_average:.1f}")


def _print_view(view: MovieView) -> None:
    print(f"\n== {view.title} ==")
    details = view.details.value
    if details is not None:
        if details.release_date:
            print(f"Released: {details.release_date}")
        if details.runtime:
            print(f"Runtime:  {details.runtime} min")
        if details.genres:
            print(f"Genres:   {', '.join(details.genre_names)}")
        if details.director:
            print(f"Director: {details.director}")
        if details.writers:
            print(f"Writers:  {', '.join(details.writers)}")
        if details.cast:
            print(f"Cast:     {', '.join(details.cast)}")
    else:
        print(f"TMDb details unavailable ({view.details.status.value}).")

    if view.encyclopedia_notice:
        print(f"\n{view.encyclopedia_notice}")
    else:
        print(f"\n{view.summary}\n{view.encyclopedia_url}")


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(list(sys.argv[1:] if argv is None else argv))
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = MovieLookupSettings.from_env()
        movie_client = TmdbMovieClient(settings)
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    encyclopedia_client = WikipediaClient(settings)

    outcome = search_movies(movie_client, args.query)
    if outcome.error:
        print(f"Search failed: {outcome.error}", file=sys.stderr)
        return 1
    if not outcome.movies:
        print("No movies found.")
        return 0

    _print_results(outcome.movies, limit=args.limit)
    if args.pick is None:
        return 0
    if not 1 <= args.pick <= len(outcome.movies):
        print(f"--pick must be between 1 and {len(outcome.movies)}.", file=sys.stderr)
        return 2

    selected = outcome.movies[args.pick - 1]
    view = view_for_summary(selected, movie_client=movie_client, encyclopedia_client=encyclopedia_client)
    _print_view(view)

    if args.related:
        related = movie_client.get_related(selected.id).value_or([])
        print("\nRelated movies:")
        if related:
            _print_results(related, limit=args.limit)
        else:
            print("  (none)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
