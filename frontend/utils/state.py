r"""frontend/utils/state.py"""

import streamlit as st

from productivity.core.config import get_settings
from productivity.core.observability import configure_logging
from productivity.services.dashboard_state import DashboardState

_STATE_KEY = "dashboard_state"


def get_dashboard_state() -> DashboardState:
    """Return this session's dashboard state, creating it on first use.

    The first call in a session also installs JSON logging so that loader
    diagnostics end up in the Streamlit server log.
    """

    state = st.session_state.get(_STATE_KEY)
    if state is None:
        configure_logging(get_settings().log_level)
        state = DashboardState()
        st.session_state[_STATE_KEY] = state
    return state
