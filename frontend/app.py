r"""frontend/app.py

Streamlit dashboard for factory productivity.

Shows factory-wide summary cards, worker utilization and production charts,
and worker/workstation tables whose rows can be selected for details.  In
demo mode the metrics are fabricated by a generative completion endpoint and
fall back to a built-in sample dataset when that is unavailable.  To run the
app locally use:

```bash
streamlit run frontend/app.py
```
"""

from typing import List, Optional

import altair as alt
import pandas as pd
import streamlit as st

from productivity.models.schemas import FactorySummary, StationMetric, WorkerMetric
from productivity.services.dashboard_state import DashboardState
from productivity.services.selection import RowSelection
from productivity.services.views import (
    production_points,
    production_shares,
    summary_cards,
    utilization_band,
    utilization_points,
)
from utils.state import get_dashboard_state

st.set_page_config(page_title="Factory Productivity Dashboard", layout="wide")

BAND_ICONS = {"high": "🟢", "medium": "🟡", "low": "🔴"}
CHART_COLORS = ["#3B82F6", "#10B981", "#F59E0B", "#EF4444", "#8B5CF6", "#EC4899"]


def _render_cards(factory: FactorySummary) -> None:
    for col, (label, value, unit) in zip(st.columns(4), summary_cards(factory)):
        col.metric(label, f"{value} {unit}")


def _render_charts(workers: List[WorkerMetric]) -> None:
    left, right = st.columns(2)

    util_df = pd.DataFrame([p.model_dump() for p in utilization_points(workers)])
    with left:
        st.subheader("Worker Utilization")
        if util_df.empty:
            st.info("No worker data.")
        else:
            chart = (
                alt.Chart(util_df)
                .mark_bar(color=CHART_COLORS[0])
                .encode(
                    x=alt.X("name:N", sort=None, title=None),
                    y=alt.Y("utilization:Q", scale=alt.Scale(domain=[0, 100])),
                    tooltip=["name", "utilization"],
                )
                .properties(height=250)
            )
            st.altair_chart(chart, use_container_width=True)

    points = production_points(workers)
    with right:
        st.subheader("Production by Worker")
        if not points:
            st.info("No worker data.")
        else:
            prod_df = pd.DataFrame([p.model_dump() for p in points])
            prod_df["share"] = [f"{share * 100:.0f}%" for share in production_shares(points)]
            chart = (
                alt.Chart(prod_df)
                .mark_arc(outerRadius=90)
                .encode(
                    theta=alt.Theta("units:Q"),
                    color=alt.Color(
                        "name:N",
                        sort=None,
                        scale=alt.Scale(range=CHART_COLORS),
                        legend=alt.Legend(title=None),
                    ),
                    tooltip=["name", "units", "share"],
                )
                .properties(height=250)
            )
            st.altair_chart(chart, use_container_width=True)


def _render_selectable_rows(rows, selection: RowSelection, key_prefix: str, time_attr: str) -> None:
    header = st.columns([3, 2, 2, 2])
    for col, title in zip(header, ["Name", "Hours", "Util %", "Units"]):
        col.caption(title)
    for row in rows:
        cols = st.columns([3, 2, 2, 2])
        is_selected = selection.selected_id == row.id
        if cols[0].button(
            row.name,
            key=f"{key_prefix}::{row.id}",
            type="primary" if is_selected else "secondary",
            use_container_width=True,
        ):
            selection.click(row)
            st.rerun()
        cols[1].write(f"{getattr(row, time_attr):.1f}h")
        cols[2].write(f"{BAND_ICONS[utilization_band(row.utilization)]} {row.utilization:.1f}%")
        cols[3].write(f"{row.units_produced}")


def _render_worker_table(state: DashboardState, workers: List[WorkerMetric]) -> None:
    st.subheader("👷 Worker Metrics")
    _render_selectable_rows(workers, state.workers_selection, "worker", "active_time")
    selected: Optional[WorkerMetric] = state.workers_selection.selected
    if selected is not None:
        with st.container(border=True):
            st.markdown(f"**{selected.name} - Details**")
            c1, c2 = st.columns(2)
            c1.metric("Idle Time", f"{selected.idle_time:.1f} hours")
            c2.metric("Production Rate", f"{selected.units_per_hour:.1f} units/hr")


def _render_station_table(state: DashboardState, stations: List[StationMetric]) -> None:
    st.subheader("🏭 Workstation Metrics")
    _render_selectable_rows(stations, state.stations_selection, "station", "occupancy_time")
    selected: Optional[StationMetric] = state.stations_selection.selected
    if selected is not None:
        with st.container(border=True):
            st.markdown(f"**{selected.name} - Details**")
            c1, c2 = st.columns(2)
            c1.metric("Throughput Rate", f"{selected.throughput_rate:.1f} units/hr")
            c2.metric("Total Units", f"{selected.units_produced} units")


state = get_dashboard_state()

st.title("Factory Productivity Dashboard")
st.caption("Real-time AI-powered worker and workstation monitoring")

if state.snapshot is None:
    with st.spinner("Loading dashboard…"):
        state.load()

head_left, head_right = st.columns([4, 1])
head_left.subheader("Factory Overview")
if head_right.button(
    "Refreshing…" if state.refreshing else "Refresh Data",
    disabled=state.loading,
    use_container_width=True,
):
    with st.spinner("Refreshing…"):
        state.refresh()
    st.rerun()

snapshot = state.snapshot
if snapshot is not None:
    _render_cards(snapshot.factory)
    st.divider()
    _render_charts(snapshot.workers)
    st.divider()
    left, right = st.columns(2)
    with left:
        _render_worker_table(state, snapshot.workers)
    with right:
        _render_station_table(state, snapshot.stations)

st.info(
    "**Demo Mode:** This dashboard displays simulated data. In production, metrics "
    "would be computed from real AI event streams stored in the database "
    "(see the *Backend Metrics* page)."
)
st.caption(f"Data source: {'built-in sample dataset' if state.is_fallback else 'generated'}")
