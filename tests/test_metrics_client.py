r"""tests/test_metrics_client.py"""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest
import requests

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from productivity.core.config import get_settings
from productivity.services import metrics_client
from productivity.services.metrics_client import fetch_metrics, generate_dummy_data


class _FakeResponse:
    def __init__(self, payload, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def json(self):
        return self._payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    monkeypatch.delenv("API_URL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def recorded_get(monkeypatch):
    calls = []

    def fake_get(url, **kwargs):
        calls.append({"url": url, **kwargs})
        return _FakeResponse({"factory": {"totalProductionCount": 12}})

    monkeypatch.setattr(metrics_client.requests, "get", fake_get)
    return calls


def test_fetch_metrics_without_dates_sends_no_params(recorded_get) -> None:
    payload = fetch_metrics()

    assert payload == {"factory": {"totalProductionCount": 12}}
    assert recorded_get[0]["url"] == "http://localhost:3001/api/metrics"
    assert recorded_get[0]["params"] == {}
    assert recorded_get[0]["timeout"] == 30.0


def test_fetch_metrics_with_start_date_only(recorded_get) -> None:
    fetch_metrics("2024-03-01")

    assert recorded_get[0]["params"] == {"start_date": "2024-03-01"}


def test_fetch_metrics_with_date_objects(recorded_get) -> None:
    fetch_metrics(date(2024, 3, 1), date(2024, 3, 2))

    assert recorded_get[0]["params"] == {"start_date": "2024-03-01", "end_date": "2024-03-02"}


def test_fetch_metrics_with_end_date_only(recorded_get) -> None:
    fetch_metrics(end_date="2024-03-02")

    assert recorded_get[0]["params"] == {"end_date": "2024-03-02"}


def test_base_url_comes_from_environment(monkeypatch, recorded_get) -> None:
    monkeypatch.setenv("API_URL", "http://metrics.internal:8080/")
    get_settings.cache_clear()

    fetch_metrics()

    assert recorded_get[0]["url"] == "http://metrics.internal:8080/api/metrics"


def test_explicit_base_url_overrides_settings(recorded_get) -> None:
    fetch_metrics(base_url="http://other:9000")

    assert recorded_get[0]["url"] == "http://other:9000/api/metrics"


def test_fetch_metrics_propagates_http_errors(monkeypatch) -> None:
    monkeypatch.setattr(
        metrics_client.requests,
        "get",
        lambda url, **kwargs: _FakeResponse({"detail": "boom"}, status_code=500),
    )

    with pytest.raises(requests.HTTPError) as excinfo:
        fetch_metrics()

    assert excinfo.value.response.status_code == 500


def test_fetch_metrics_propagates_transport_errors(monkeypatch) -> None:
    error = requests.ConnectionError("connection refused")

    def fake_get(url, **kwargs):
        raise error

    monkeypatch.setattr(metrics_client.requests, "get", fake_get)

    with pytest.raises(requests.ConnectionError) as excinfo:
        fetch_metrics("2024-03-01")

    assert excinfo.value is error


def test_generate_dummy_data_defaults(monkeypatch) -> None:
    calls = []

    def fake_post(url, **kwargs):
        calls.append({"url": url, **kwargs})
        return _FakeResponse({"inserted": 200})

    monkeypatch.setattr(metrics_client.requests, "post", fake_post)

    assert generate_dummy_data() == {"inserted": 200}
    assert calls[0]["url"] == "http://localhost:3001/api/seed/dummy-events"
    assert calls[0]["json"] == {"count": 200, "hoursAgo": 8}


def test_generate_dummy_data_custom_arguments(monkeypatch) -> None:
    calls = []

    def fake_post(url, **kwargs):
        calls.append(kwargs["json"])
        return _FakeResponse({"inserted": 50})

    monkeypatch.setattr(metrics_client.requests, "post", fake_post)

    generate_dummy_data(count=50, hours_ago=2)

    assert calls == [{"count": 50, "hoursAgo": 2}]


def test_generate_dummy_data_propagates_http_errors(monkeypatch) -> None:
    monkeypatch.setattr(
        metrics_client.requests,
        "post",
        lambda url, **kwargs: _FakeResponse({"detail": "nope"}, status_code=404),
    )

    with pytest.raises(requests.HTTPError):
        generate_dummy_data()
