"""
Movie search and detail endpoints.
"""
from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from api.deps import EncyclopediaClient, MovieClient
from movie_lookup.aggregation.movie_view import build_movie_view, search_movies
from movie_lookup.models.movies import MovieDetails, MovieSummary

router = APIRouter(prefix="/movies", tags=["movies"])


# --- Pydantic models ---

class Movie(BaseModel):
    id: int
    title: str
    overview: str
    release_date: str
    vote_average: float
    media_type: str | None = None


class Genre(BaseModel):
    id: int
    name: str


class Details(BaseModel):
    id: int
    title: str
    overview: str
    release_date: str
    vote_average: float
    runtime: int
    genres: list[Genre]
    director: str | None = None
    writers: list[str]
    cast: list[str]
    poster_path: str | None = None
    poster_url: str | None = None


class Encyclopedia(BaseModel):
    summary: str
    url: str
    title: str | None = None


class MovieViewOut(BaseModel):
    id: int
    title: str
    details_status: str
    details: Details | None = None
    encyclopedia_status: str
    encyclopedia: Encyclopedia | None = None
    encyclopedia_notice: str | None = None


class RelatedOut(BaseModel):
    status: str
    results: list[Movie]


def _movie_out(movie: MovieSummary) -> Movie:
    return Movie(
        id=movie.id,
        title=movie.title,
        overview=movie.overview,
        release_date=movie.release_date,
        vote_average=movie.vote_average,
        media_type=movie.media_type,
    )


def _details_out(details: MovieDetails) -> Details:
    return Details(
        id=details.id,
        title=details.title,
        overview=details.overview,
        release_date=details.release_date,
        vote_average=details.vote_average,
        runtime=details.runtime,
        genres=[Genre(id=g.id, name=g.name) for g in details.genres],
        director=details.director,
        writers=list(details.writers),
        cast=list(details.cast),
        poster_path=details.poster_path,
        poster_url=details.poster_url(),
    )


# --- Endpoints ---

@router.get("/search", response_model=list[Movie])
def search(client: MovieClient, q: str = Query(min_length=1)) -> list[Movie]:
    """Search TMDb by title; provider failures surface as 502."""
    outcome = search_movies(client, q)
    if outcome.error:
        raise HTTPException(status_code=502, detail=outcome.error)
    return [_movie_out(movie) for movie in outcome.movies]


@router.get("/{movie_id}", response_model=MovieViewOut)
def get_movie(
    movie_client: MovieClient,
    encyclopedia_client: EncyclopediaClient,
    movie_id: int,
    title: str = Query(min_length=1),
) -> MovieViewOut:
    """Aggregated TMDb details and Wikipedia summary for a selected movie."""
    view = build_movie_view(
        movie_id,
        title.strip(),
        movie_client=movie_client,
        encyclopedia_client=encyclopedia_client,
    )
    details = view.details.value
    entry = view.encyclopedia.value
    return MovieViewOut(
        id=movie_id,
        title=view.title,
        details_status=view.details.status.value,
        details=_details_out(details) if details is not None else None,
        encyclopedia_status=view.encyclopedia.status.value,
        encyclopedia=Encyclopedia(summary=entry.summary, url=entry.url, title=entry.title) if entry else None,
        encyclopedia_notice=view.encyclopedia_notice,
    )


@router.get("/{movie_id}/related", response_model=RelatedOut)
def get_related(client: MovieClient, movie_id: int) -> RelatedOut:
    """Similar titles; failures degrade to an empty list."""
    result = client.get_related(movie_id)
    return RelatedOut(
        status=result.status.value,
        results=[_movie_out(movie) for movie in result.value_or([])],
    )
