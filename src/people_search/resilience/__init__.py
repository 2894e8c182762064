"""Resilience – retry policies for backend calls."""

from people_search.resilience.retry import TenacityRetryPolicy

__all__ = ["TenacityRetryPolicy"]
