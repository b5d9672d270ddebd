"""
Normalization of TMDb `/movie/{id}/credits` payloads.

Pure functions over the raw `crew` / `cast` lists; they never raise and never touch the
network.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

DIRECTOR_JOB = "Director"
WRITER_JOBS = ("Screenplay", "Writer", "Story")

MAX_WRITERS = 3
MAX_CAST = 5


def _entries(items: Iterable[Any] | None) -> list[Mapping[str, Any]]:
    if not items:
        return []
    return [item for item in items if isinstance(item, Mapping)]


def _name(item: Mapping[str, Any]) -> str | None:
    name = item.get("name")
    if isinstance(name, str) and name.strip():
        return name.strip()
    return None


def extract_director(crew: Iterable[Mapping[str, Any]] | None) -> str | None:
    for person in _entries(crew):
        if person.get("job") == DIRECTOR_JOB:
            return _name(person)
    return None


def extract_writers(crew: Iterable[Mapping[str, Any]] | None, *, limit: int = MAX_WRITERS) -> list[str]:
    writers: list[str] = []
    seen: set[str] = set()
    for person in _entries(crew):
        if person.get("job") not in WRITER_JOBS:
            continue
        name = _name(person)
        if name is None or name in seen:
            continue
        seen.add(name)
        writers.append(name)
        if len(writers) >= limit:
            break
    return writers


def _billing_key(item: Mapping[str, Any]) -> tuple[int, int]:
    order = item.get("order")
    # bool is an int subclass; treat it as missing.
    if isinstance(order, int) and not isinstance(order, bool):
        return (0, order)
    return (1, 0)


def extract_cast(cast: Iterable[Mapping[str, Any]] | None, *, limit: int = MAX_CAST) -> list[str]:
    # sorted() is stable, so equal billing orders keep their input order.
    top_billed = sorted(_entries(cast), key=_billing_key)[:limit]
    return [name for name in map(_name, top_billed) if name is not None]
