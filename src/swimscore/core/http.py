"""
HTTP helpers.

The only HTTP call shape ingestion needs is "GET JSON":
- deterministic defaults (timeout + User-Agent)
- raise on non-2xx so callers decide how to fail (the marine client falls back, the
  forecast client reports an upstream error)
"""

from __future__ import annotations

from typing import Any

import httpx


DEFAULT_USER_AGENT = "swimscore/0.1.0 (+https://local)"


def get_json(
    url: str,
    *,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    timeout_seconds: float = 15,
) -> Any:
    """GET `url` and return the decoded JSON response.

    Raises:
        httpx.HTTPError: On transport errors or non-2xx status codes.
        ValueError: If the response body is not valid JSON.
    """
    request_headers = {"User-Agent": DEFAULT_USER_AGENT}
    if headers:
        request_headers.update(headers)

    with httpx.Client(timeout=timeout_seconds) as client:
        resp = client.get(url, params=params, headers=request_headers)
        resp.raise_for_status()
        return resp.json()
