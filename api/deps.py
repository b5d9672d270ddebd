"""
Dependency injection for provider clients and settings.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException

from movie_lookup.config import ConfigurationError, MovieLookupSettings
from movie_lookup.integrations.tmdb.client import TmdbMovieClient
from movie_lookup.integrations.wikipedia import WikipediaClient

logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> MovieLookupSettings:
    return MovieLookupSettings.from_env()


def get_movie_client(settings: Annotated[MovieLookupSettings, Depends(get_settings)]) -> TmdbMovieClient:
    """
    Returns a TMDb client, failing the request before any provider call when the
    API key is not configured.
    """
    try:
        return TmdbMovieClient(settings)
    except ConfigurationError as exc:
        logger.error("TMDb client is not configured: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc


def get_encyclopedia_client(settings: Annotated[MovieLookupSettings, Depends(get_settings)]) -> WikipediaClient:
    return WikipediaClient(settings)


# Type aliases for dependency injection
MovieClient = Annotated[TmdbMovieClient, Depends(get_movie_client)]
EncyclopediaClient = Annotated[WikipediaClient, Depends(get_encyclopedia_client)]
