from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class LookupStatus(str, Enum):
    FOUND = "found"
    # The provider answered but had nothing for this key.
    NOT_FOUND = "not_found"
    # The call failed (transport error, non-success status, malformed body).
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class LookupResult(Generic[T]):
    """
    Outcome of a best-effort provider lookup.

    Best-effort paths never raise; they report absence through `status` so callers can
    tell "no data" apart from "the call failed".
    """

    status: LookupStatus
    value: T | None = None
    reason: str | None = None

    @classmethod
    def found(cls, value: T) -> LookupResult[T]:
        return cls(status=LookupStatus.FOUND, value=value)

    @classmethod
    def not_found(cls, reason: str | None = None) -> LookupResult[T]:
        return cls(status=LookupStatus.NOT_FOUND, reason=reason)

    @classmethod
    def unavailable(cls, reason: str | None = None) -> LookupResult[T]:
        return cls(status=LookupStatus.UNAVAILABLE, reason=reason)

    @property
    def available(self) -> bool:
        return self.status is LookupStatus.FOUND

    def value_or(self, default: T) -> T:
        if self.status is LookupStatus.FOUND and self.value is not None:
            return self.value
        return default
