from __future__ import annotations

from typing import Any, Mapping

import requests


class ProviderError(RuntimeError):
    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        reason: str | None = None,
        body_snippet: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.body_snippet = body_snippet

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


def request_json(
    session: requests.Session,
    url: str,
    *,
    provider: str,
    params: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
    timeout_seconds: float | None = None,
) -> dict[str, Any]:
    """
    Issue a single GET and return the decoded JSON object.

    There is no retry: one failed attempt is final. Every failure mode (transport error,
    non-2xx status, non-JSON body, non-object body) is raised as `ProviderError`.
    """

    merged_headers = {"accept": "application/json", **(headers or {})}
    try:
        resp = session.get(url, params=params, headers=merged_headers, timeout=timeout_seconds)
    except requests.RequestException as exc:
        raise ProviderError(f"{provider} request failed: {exc}") from exc

    if not 200 <= resp.status_code < 300:
        reason = (resp.reason or "").strip()
        detail = f" ({reason})" if reason else ""
        raise ProviderError(
            f"{provider} request failed with HTTP {resp.status_code}{detail}.",
            status_code=resp.status_code,
            reason=reason or None,
            body_snippet=(resp.text or "")[:400],
        )

    try:
        payload = resp.json()
    except ValueError as exc:
        raise ProviderError(
            f"{provider} returned non-JSON response.",
            status_code=resp.status_code,
            body_snippet=(resp.text or "")[:400],
        ) from exc

    if not isinstance(payload, dict):
        raise ProviderError(f"{provider} returned unexpected JSON shape (not an object).", status_code=resp.status_code)
    return payload
