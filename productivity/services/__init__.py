r"""productivity/services/__init__.py

Services backing the dashboard pages."""

from importlib import import_module
from typing import Any

__all__ = [
    "dashboard_state",
    "llm_service",
    "metrics_client",
    "sample_data",
    "selection",
    "views",
]


def __getattr__(name: str) -> Any:
    if name in __all__:
        module = import_module(f"{__name__}.{name}")
        globals()[name] = module
        return module
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
