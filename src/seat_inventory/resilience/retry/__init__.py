"""Resilience – retry of whole units of work."""
from seat_inventory.resilience.retry.tenacity_adapter import TenacityRetryPolicy

__all__ = ["TenacityRetryPolicy"]
