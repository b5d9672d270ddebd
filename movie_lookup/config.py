"""
Runtime configuration for the provider clients.

Settings are resolved once (usually from the environment via `from_env`) and handed
to client constructors explicitly; clients never read the environment themselves.
"""
from __future__ import annotations

from dataclasses import dataclass

from movie_lookup.utils.env import env_float, env_str, load_env

TMDB_API_BASE_URL = "https://api.themoviedb.org/3"
TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p"
DEFAULT_WIKIPEDIA_LANGUAGE = "en"
DEFAULT_USER_AGENT = "movie-lookup/0.1 (https://github.com/movie-lookup/movie-lookup)"


class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing or invalid."""


@dataclass(frozen=True)
class MovieLookupSettings:
    tmdb_api_key: str | None = None
    tmdb_api_base_url: str = TMDB_API_BASE_URL
    tmdb_image_base_url: str = TMDB_IMAGE_BASE_URL
    wikipedia_language: str = DEFAULT_WIKIPEDIA_LANGUAGE
    user_agent: str = DEFAULT_USER_AGENT
    # None leaves the timeout to the transport.
    http_timeout_seconds: float | None = None

    @classmethod
    def from_env(cls, *, load_dotenv_file: bool = True) -> MovieLookupSettings:
        if load_dotenv_file:
            load_env()
        try:
            timeout = env_float("MOVIE_LOOKUP_HTTP_TIMEOUT")
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc
        return cls(
            tmdb_api_key=env_str("TMDB_API_KEY"),
            tmdb_api_base_url=env_str("TMDB_API_BASE_URL") or TMDB_API_BASE_URL,
            wikipedia_language=env_str("WIKIPEDIA_LANGUAGE") or DEFAULT_WIKIPEDIA_LANGUAGE,
            user_agent=env_str("MOVIE_LOOKUP_USER_AGENT") or DEFAULT_USER_AGENT,
            http_timeout_seconds=timeout,
        )

    def require_tmdb_api_key(self) -> str:
        resolved = (self.tmdb_api_key or "").strip()
        if not resolved:
            raise ConfigurationError("TMDB_API_KEY is not set.")
        return resolved

    @property
    def wikipedia_search_base_url(self) -> str:
        return f"https://{self.wikipedia_language}.wikipedia.org/w/rest.php/v1"

    @property
    def wikipedia_summary_base_url(self) -> str:
        return f"https://{self.wikipedia_language}.wikipedia.org/api/rest_v1"
