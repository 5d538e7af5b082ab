"""Resilience – TenacityRetryPolicy.

A seat command loses the race when another writer appends to the same
stream between its load and its save.  The policy re-runs the whole
load-decide-save cycle so the retry decides against fresh state.
"""
from __future__ import annotations

from typing import Awaitable, Callable, TypeVar

import tenacity

from seat_inventory.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


def _log_retry(retry_state: tenacity.RetryCallState) -> None:
    outcome = retry_state.outcome
    logger.warning(
        "unit_of_work_retry",
        attempt=retry_state.attempt_number,
        error=repr(outcome.exception()) if outcome is not None else None,
    )


class TenacityRetryPolicy:
    """Re-run an async callable on the exception types in *retry_on*.

    ``max_attempts`` counts the first call.  Errors of any other type, such
    as a rejected reservation, surface on the first attempt.  When attempts
    run out the last error is re-raised unchanged::

        policy = TenacityRetryPolicy(max_attempts=5, retry_on=(OptimisticConcurrencyError,))
        events = await policy.execute_async(lambda: run_cycle(availability_id))
    """

    def __init__(
        self,
        max_attempts: int = 3,
        wait_seconds: float = 0.0,
        retry_on: tuple[type[BaseException], ...] = (Exception,),
    ) -> None:
        self.max_attempts = max_attempts
        self.wait_seconds = wait_seconds
        self.retry_on = retry_on

    async def execute_async(self, func: Callable[[], Awaitable[T]]) -> T:
        retrying = tenacity.AsyncRetrying(
            stop=tenacity.stop_after_attempt(self.max_attempts),
            wait=tenacity.wait_fixed(self.wait_seconds),
            retry=tenacity.retry_if_exception_type(self.retry_on),
            before_sleep=_log_retry,
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                result = await func()
        return result  # type: ignore[possibly-undefined]


__all__ = ["TenacityRetryPolicy"]
