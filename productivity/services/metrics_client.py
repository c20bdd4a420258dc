r"""productivity/services/metrics_client.py

Thin client for the backend metrics API.

The functions here are a direct pass-through: no caching, no retries and no
fallback.  ``requests`` exceptions (including :class:`requests.HTTPError` for
non-2xx answers) reach the caller untouched, so each caller decides how to
present them.
"""

from __future__ import annotations

import logging
import time
from datetime import date
from typing import Any, Dict, Optional, Union

import requests

from ..core.config import get_settings

LOGGER = logging.getLogger(__name__)

DateLike = Union[str, date]


def _base_url(base_url: Optional[str]) -> str:
    return (base_url or get_settings().api_url).rstrip("/")


def _as_param(value: DateLike) -> str:
    return value.isoformat() if isinstance(value, date) else str(value)


def _log_response(method: str, url: str, response: requests.Response, started: float) -> None:
    LOGGER.info(
        "Metrics API request finished",
        extra={
            "method": method,
            "url": url,
            "status": response.status_code,
            "latency_ms": int((time.perf_counter() - started) * 1000),
        },
    )


def fetch_metrics(
    start_date: Optional[DateLike] = None,
    end_date: Optional[DateLike] = None,
    *,
    base_url: Optional[str] = None,
) -> Any:
    """Return the metrics payload for an optional date range.

    Parameters
    ----------
    start_date, end_date:
        ISO dates (strings or :class:`datetime.date`).  Each bound is sent as
        ``start_date`` / ``end_date`` only when provided; omitted bounds are
        left out of the query string entirely.
    base_url:
        Override for ``settings.api_url``.
    """

    params: Dict[str, str] = {}
    if start_date:
        params["start_date"] = _as_param(start_date)
    if end_date:
        params["end_date"] = _as_param(end_date)

    url = f"{_base_url(base_url)}/api/metrics"
    started = time.perf_counter()
    response = requests.get(url, params=params, timeout=get_settings().request_timeout_seconds)
    _log_response("GET", url, response, started)
    response.raise_for_status()
    return response.json()


def generate_dummy_data(
    count: int = 200,
    hours_ago: int = 8,
    *,
    base_url: Optional[str] = None,
) -> Any:
    """Ask the backend to seed ``count`` sample events spread over ``hours_ago`` hours."""

    url = f"{_base_url(base_url)}/api/seed/dummy-events"
    started = time.perf_counter()
    response = requests.post(
        url,
        json={"count": count, "hoursAgo": hours_ago},
        timeout=get_settings().request_timeout_seconds,
    )
    _log_response("POST", url, response, started)
    response.raise_for_status()
    return response.json()
