"""Pydantic models for factory, worker and station metrics."""
