from __future__ import annotations

from dataclasses import dataclass, field

from movie_lookup.config import TMDB_IMAGE_BASE_URL


@dataclass(frozen=True)
class MovieSummary:
    """A search or similar-titles hit, in provider relevance order."""

    id: int
    title: str
    overview: str = ""
    release_date: str = ""  # YYYY-MM-DD or empty
    vote_average: float = 0.0
    media_type: str | None = None

    @property
    def release_year(self) -> int | None:
        head = self.release_date[:4]
        return int(head) if len(head) == 4 and head.isdigit() else None


@dataclass(frozen=True)
class Genre:
    id: int
    name: str


@dataclass(frozen=True)
class MovieDetails:
    """
    Detail document merged with normalized credits.

    Only built when both the detail and the credits fetch succeeded.
    """

    id: int
    title: str
    overview: str = ""
    release_date: str = ""
    vote_average: float = 0.0
    runtime: int = 0
    genres: tuple[Genre, ...] = field(default_factory=tuple)
    director: str | None = None
    writers: tuple[str, ...] = field(default_factory=tuple)
    cast: tuple[str, ...] = field(default_factory=tuple)
    poster_path: str | None = None

    @property
    def genre_names(self) -> list[str]:
        return [g.name for g in self.genres]

    def poster_url(self, size: str = "w500", *, base_url: str = TMDB_IMAGE_BASE_URL) -> str | None:
        if not self.poster_path:
            return None
        return f"{base_url.rstrip('/')}/{size}{self.poster_path}"


@dataclass(frozen=True)
class EncyclopediaEntry:
    summary: str
    url: str
    title: str | None = None
