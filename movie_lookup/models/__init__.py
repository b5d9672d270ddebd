"""
Domain models shared across scripts and services.
"""

from movie_lookup.models.lookup_result import LookupResult, LookupStatus
from movie_lookup.models.movies import EncyclopediaEntry, Genre, MovieDetails, MovieSummary

__all__ = [
    "EncyclopediaEntry",
    "Genre",
    "LookupResult",
    "LookupStatus",
    "MovieDetails",
    "MovieSummary",
]
