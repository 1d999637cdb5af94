"""
Asynchronous job polling shared by every long-running operation.

A job is submitted once, then the job-status endpoint is polled until the
result is available or the ping budget is exhausted:

    Submitted -> Polling -> Done
                 Polling -> TimedOut

The wait between polls is the only suspension point.
"""

import asyncio
from typing import Any, Awaitable, Callable, Optional, Protocol

from .config import get_logger
from .exceptions import ApiError, AsyncTimeoutError, ValidationError
from .models import CallResult

logger = get_logger("poller")

DEFAULT_PING_INTERVAL = 3
DEFAULT_MAX_PINGS = 1000


class PollClient(Protocol):
    async def get_result(self) -> CallResult: ...


class AsyncJobPoller:
    """Drives the submit-then-poll protocol."""

    def __init__(
        self,
        interval: float = DEFAULT_PING_INTERVAL,
        max_pings: int = DEFAULT_MAX_PINGS,
        sleep: Optional[Callable[[float], Awaitable[Any]]] = None,
    ):
        if max_pings < 1:
            raise ValidationError(
                "Asynchronous calls max pings must be at least 1.",
                {"max_pings": max_pings},
            )
        self.interval = interval
        self.max_pings = max_pings
        self._sleep = sleep or asyncio.sleep

    async def run(
        self,
        submit: Callable[[], Awaitable[CallResult]],
        poll_client_factory: Callable[[str], PollClient],
    ) -> CallResult:
        """
        Submit a job and poll until it finishes.

        Args:
            submit: Coroutine function sending the asynchronous request
            poll_client_factory: Builds a poll client for a job id

        Returns:
            CallResult of the poll that returned the finished job

        Raises:
            ApiError: If the submission did not return a job id
            AsyncTimeoutError: If the job is still running after max_pings polls
        """
        submitted = await submit()
        job_id = submitted.job_id

        if not job_id:
            raise ApiError("An error occurred launching the asynchronous call.")

        logger.debug("Job %s submitted", job_id)

        for ping in range(1, self.max_pings + 1):
            if ping > 1:
                await self._sleep(self.interval)

            result = await poll_client_factory(job_id).get_result()

            if result.finished:
                logger.debug("Job %s finished after %d pings", job_id, ping)
                return result

            logger.debug("Job %s still running (ping %d)", job_id, ping)

        logger.warning("Job %s did not finish after %d pings", job_id, self.max_pings)
        raise AsyncTimeoutError(
            "Asynchronous call did not finish in expected timeframe.",
            {"job_id": job_id, "pings": self.max_pings},
        )
