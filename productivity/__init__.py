r"""productivity

Data layer for the factory productivity dashboard: metrics loading, the
backend metrics API client, derived chart series and per-session view state."""
