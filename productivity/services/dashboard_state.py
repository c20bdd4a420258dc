r"""productivity/services/dashboard_state.py

State container for one dashboard session.

The Streamlit page keeps a single :class:`DashboardState` in
``st.session_state`` and passes it to the render helpers.  Each load cycle is
tagged with a generation number; a completion is applied only if no newer
load has started since and the state has not been torn down, so a slow
response can never overwrite fresher data.

Streamlit runs a session's script synchronously and offers no session-end
callback, so inside the app the guard that matters is :meth:`DashboardState.cancel`,
which ``load`` calls when a rerun or stop interrupts a load.  :meth:`teardown`
is for callers that drive loads from worker threads and outlive the view.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from ..models.schemas import MetricsSnapshot, StationMetric, WorkerMetric
from .llm_service import Fallback, LoadResult, load_metrics
from .sample_data import sample_snapshot
from .selection import RowSelection

LOGGER = logging.getLogger(__name__)

Loader = Callable[[], LoadResult]


class DashboardState:
    """Loaded metrics, load flags and table selections for one session."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.snapshot: Optional[MetricsSnapshot] = None
        self.result: Optional[LoadResult] = None
        self.loading: bool = False
        self.refreshing: bool = False
        self.generation: int = 0
        self.closed: bool = False
        self.workers_selection: RowSelection[WorkerMetric] = RowSelection()
        self.stations_selection: RowSelection[StationMetric] = RowSelection()

    @property
    def is_fallback(self) -> bool:
        return isinstance(self.result, Fallback)

    def begin_load(self, refresh: bool = False) -> int:
        """Mark a load as in flight and return its generation token."""

        with self._lock:
            self.generation += 1
            self.loading = True
            self.refreshing = refresh
            return self.generation

    def complete_load(self, token: int, result: LoadResult) -> bool:
        """Apply ``result`` if ``token`` is still the newest load.

        Returns ``False`` when the result was discarded.
        """

        with self._lock:
            if self.closed or token != self.generation:
                LOGGER.info(
                    "Discarding stale metrics load",
                    extra={"token": token, "generation": self.generation, "closed": self.closed},
                )
                return False
            self.result = result
            self.snapshot = result.snapshot
            self.workers_selection.rebind(result.snapshot.workers)
            self.stations_selection.rebind(result.snapshot.stations)
            self.loading = False
            self.refreshing = False
            return True

    def load(self, loader: Loader = load_metrics, refresh: bool = False) -> bool:
        """Run one load cycle; returns whether its result was applied."""

        token = self.begin_load(refresh=refresh)
        try:
            result = loader()
        except Exception as exc:
            reason = f"{type(exc).__name__}: {exc}"
            LOGGER.warning("Metrics loader raised; using sample data", extra={"reason": reason})
            result = Fallback(snapshot=sample_snapshot(), reason=reason)
        except BaseException:
            # Streamlit stops or reruns a script by raising through it.
            self.cancel(token)
            raise
        return self.complete_load(token, result)

    def cancel(self, token: int) -> None:
        """Abandon the load ``token`` without touching the current data."""

        with self._lock:
            if token == self.generation:
                self.generation += 1
                self.loading = False
                self.refreshing = False

    def refresh(self, loader: Loader = load_metrics) -> bool:
        return self.load(loader=loader, refresh=True)

    def teardown(self) -> None:
        """Drop any load still in flight; later completions are ignored."""

        with self._lock:
            self.closed = True
            self.loading = False
            self.refreshing = False
