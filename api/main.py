"""
Movie Lookup API - FastAPI application.

Provides endpoints for:
- Searching TMDb by title
- An aggregated movie view (TMDb details + Wikipedia summary)
- Similar titles for a movie
"""
from __future__ import annotations

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routers import movies

logger = logging.getLogger(__name__)


def get_cors_origins() -> list[str]:
    """Origins from the comma-separated CORS_ALLOW_ORIGINS variable; empty means any origin."""
    raw = os.getenv("CORS_ALLOW_ORIGINS", "")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


app = FastAPI(
    title="Movie Lookup API",
    description="Movie search with TMDb metadata and Wikipedia summaries",
    version="0.1.0",
)

cors_origins = get_cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins or ["*"],
    allow_credentials=bool(cors_origins),
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(movies.router, prefix="/api/v1")


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "movie-lookup"}


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "healthy"}
