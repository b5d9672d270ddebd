"""
TMDb integration clients.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from movie_lookup.integrations.tmdb.client import (
        TmdbMovieClient,
        merge_movie_details,
        parse_movie_results,
    )
    from movie_lookup.integrations.tmdb.credits import (
        extract_cast,
        extract_director,
        extract_writers,
    )

_CLIENT_EXPORTS = ("TmdbMovieClient", "merge_movie_details", "parse_movie_results")
_CREDITS_EXPORTS = ("extract_cast", "extract_director", "extract_writers")

__all__ = [*_CLIENT_EXPORTS, *_CREDITS_EXPORTS]


def __getattr__(name: str):
    if name in _CLIENT_EXPORTS:
        from movie_lookup.integrations.tmdb import client

        return getattr(client, name)
    if name in _CREDITS_EXPORTS:
        from movie_lookup.integrations.tmdb import credits

        return getattr(credits, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
