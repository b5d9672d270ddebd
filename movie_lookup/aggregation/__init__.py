"""
Orchestration helpers that combine provider lookups into display-ready views.
"""

from movie_lookup.aggregation.movie_view import (
    ENCYCLOPEDIA_NOT_FOUND_MESSAGE,
    MovieView,
    SearchOutcome,
    build_movie_view,
    search_movies,
    view_for_summary,
)

__all__ = [
    "ENCYCLOPEDIA_NOT_FOUND_MESSAGE",
    "MovieView",
    "SearchOutcome",
    "build_movie_view",
    "search_movies",
    "view_for_summary",
]
