"""Resilience – retry policies."""
from seat_inventory.resilience.retry import TenacityRetryPolicy

__all__ = ["TenacityRetryPolicy"]
