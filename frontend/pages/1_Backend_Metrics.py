r"""frontend/pages/1_Backend_Metrics.py

Streamlit page for the backend metrics API.

Queries ``GET /api/metrics`` for an optional date range and can seed the
backend with dummy events.  The client raises on every failure; this page
turns those exceptions into messages.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, Optional

import requests
import streamlit as st

from productivity.core.config import get_settings
from productivity.core.observability import configure_logging
from productivity.services.metrics_client import fetch_metrics, generate_dummy_data

configure_logging(get_settings().log_level)

st.title("🗄️ Backend Metrics")
st.caption(f"Backend API: {get_settings().api_url}  ·  Set `API_URL` if needed.")


def _call_backend(action: str, call: Callable[[], Any]) -> Optional[Any]:
    """Run ``call`` and report failures; returns ``None`` when it failed."""

    try:
        return call()
    except requests.Timeout:
        st.error(f"The {action} request timed out. Please retry in a moment.")
    except requests.HTTPError as exc:
        detail: Any = str(exc)
        if exc.response is not None:
            try:
                body = exc.response.json()
                detail = body.get("detail", body) if isinstance(body, dict) else body
            except ValueError:
                detail = exc.response.text or str(exc)
        st.error(f"API error during {action}: {detail}")
    except requests.RequestException as exc:
        st.error(f"Unable to reach the metrics backend: {exc}")
    return None


with st.form(key="metrics_form"):
    st.subheader("Metrics")
    use_range = st.checkbox("Filter by date range", value=False)
    c1, c2 = st.columns(2)
    start: Optional[date] = c1.date_input("Start date", value=date.today(), disabled=not use_range)
    end: Optional[date] = c2.date_input("End date", value=date.today(), disabled=not use_range)
    submitted = st.form_submit_button("Fetch metrics")

if submitted:
    start_date = start if use_range else None
    end_date = end if use_range else None
    with st.spinner("Fetching metrics…"):
        payload = _call_backend("metrics", lambda: fetch_metrics(start_date, end_date))
    if payload is not None:
        st.session_state["backend_metrics"] = payload

if "backend_metrics" in st.session_state:
    st.json(st.session_state["backend_metrics"])

st.markdown("---")

with st.form(key="seed_form"):
    st.subheader("Seed dummy events")
    count = st.number_input("Event count", min_value=1, value=200, step=10)
    hours_ago = st.number_input("Spread over the last N hours", min_value=1, value=8, step=1)
    seed = st.form_submit_button("Generate dummy data")

if seed:
    with st.spinner("Seeding backend…"):
        result = _call_backend(
            "seeding", lambda: generate_dummy_data(count=int(count), hours_ago=int(hours_ago))
        )
    if result is not None:
        st.success("Dummy events generated.")
        st.json(result)
