r"""productivity/services/llm_service.py

Demo-mode metrics loader backed by a generative completion endpoint.

The service asks a hosted language model to fabricate one shift's worth of
factory metrics and parses the JSON it returns.  If the endpoint cannot be
reached, answers with something that is not JSON, or returns JSON the
dashboard cannot render, the static reference dataset is returned instead.
Parsed values are otherwise kept exactly as generated.
:func:`load_metrics` never raises.
"""

from __future__ import annotations

import json
import logging
import re
import time
from dataclasses import dataclass
from typing import Any, Dict, Union

import requests

from ..core.config import get_settings
from ..models.schemas import MetricsSnapshot
from .sample_data import sample_snapshot

LOGGER = logging.getLogger(__name__)

METRICS_PROMPT = """Generate realistic productivity data for a factory with 6 workers and 6 workstations. Return ONLY valid JSON with no preamble or markdown.

Structure:
{
  "factory": {
    "totalProductiveTime": <hours>,
    "totalProductionCount": <units>,
    "avgProductionRate": <units/hour>,
    "avgUtilization": <percentage>
  },
  "workers": [
    {
      "id": "W1",
      "name": "<name>",
      "activeTime": <hours>,
      "idleTime": <hours>,
      "utilization": <percentage>,
      "unitsProduced": <count>,
      "unitsPerHour": <rate>
    }
    // ... 6 workers total
  ],
  "stations": [
    {
      "id": "S1",
      "name": "<station name>",
      "occupancyTime": <hours>,
      "utilization": <percentage>,
      "unitsProduced": <count>,
      "throughputRate": <units/hour>
    }
    // ... 6 stations total
  ]
}

Make data realistic for an 8-hour shift. Ensure metrics are consistent."""

_FENCE_RE = re.compile(r"```json|```")


@dataclass(frozen=True)
class Fetched:
    """Metrics parsed from a generated response."""

    snapshot: MetricsSnapshot


@dataclass(frozen=True)
class Fallback:
    """Reference metrics substituted after a failed load, with the reason."""

    snapshot: MetricsSnapshot
    reason: str


LoadResult = Union[Fetched, Fallback]


def build_request_body(prompt: str = METRICS_PROMPT) -> Dict[str, Any]:
    settings = get_settings()
    return {
        "model": settings.llm_model,
        "max_tokens": settings.llm_max_tokens,
        "messages": [{"role": "user", "content": prompt}],
    }


def _request_headers() -> Dict[str, str]:
    settings = get_settings()
    headers = {"Content-Type": "application/json"}
    if settings.llm_api_key:
        headers["x-api-key"] = settings.llm_api_key
        headers["anthropic-version"] = settings.llm_api_version
    return headers


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name!r}")


def strip_code_fences(text: str) -> str:
    """Remove every ```json / ``` marker and surrounding whitespace."""

    return _FENCE_RE.sub("", text).strip()


def parse_completion(body: Any) -> MetricsSnapshot:
    """Extract and validate the metrics JSON from a completion response body.

    Raises ``KeyError``/``IndexError``/``TypeError`` when the body does not
    have the ``{"content": [{"text": ...}]}`` shape, ``json.JSONDecodeError``
    when the text is not JSON (``ValueError`` for ``NaN``/``Infinity``, which
    strict JSON does not allow), and ``pydantic.ValidationError`` when the JSON
    lacks a field the dashboard renders.
    """

    text = body["content"][0]["text"]
    if not isinstance(text, str):
        raise TypeError(f"completion text is {type(text).__name__}, expected str")
    metrics = json.loads(strip_code_fences(text), parse_constant=_reject_constant)
    return MetricsSnapshot.model_validate(metrics)


def request_completion(prompt: str = METRICS_PROMPT) -> Any:
    """POST the prompt to the completion endpoint and return the decoded body."""

    settings = get_settings()
    started = time.perf_counter()
    response = requests.post(
        settings.llm_api_url,
        json=build_request_body(prompt),
        headers=_request_headers(),
        timeout=settings.llm_timeout_seconds,
    )
    LOGGER.info(
        "Completion request finished",
        extra={
            "method": "POST",
            "url": settings.llm_api_url,
            "status": response.status_code,
            "latency_ms": int((time.perf_counter() - started) * 1000),
            "model_used": settings.llm_model,
        },
    )
    response.raise_for_status()
    return response.json()


def load_metrics() -> LoadResult:
    """Return generated metrics, or the reference dataset on any failure."""

    try:
        snapshot = parse_completion(request_completion())
    except Exception as exc:
        reason = f"{type(exc).__name__}: {exc}"
        LOGGER.warning("Error loading generated metrics; using sample data", extra={"reason": reason})
        return Fallback(snapshot=sample_snapshot(), reason=reason)
    return Fetched(snapshot=snapshot)
