"""Resilience – tenacity-backed retry."""
from people_search.resilience.retry.tenacity_adapter import TenacityRetryPolicy

__all__ = ["TenacityRetryPolicy"]
