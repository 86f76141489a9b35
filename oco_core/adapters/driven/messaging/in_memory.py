"""
In-Memory Job Queue Implementation

This adapter is for development and testing only.
It provides synchronous, in-process delivery of submitted jobs.

Characteristics:
- Synchronous (blocks until all handlers complete)
- No persistence (jobs lost if process crashes)
- Keeps only the most recent `history` jobs
- Handlers are chosen by the job's jobType, as the execution engine does
- Thread-safe (uses locks)

Usage:
    queue = InMemoryJobQueue()
    queue.subscribe(JobType.OCO, start_oco_processor)
    queue.submit(job)
"""

from collections import deque
from typing import Callable, Deque, Dict, List
from threading import Lock
import logging

from oco_core.domain.jobs import JobType, OcoJob


logger = logging.getLogger(__name__)

JobHandler = Callable[[OcoJob], None]


class InMemoryJobQueue:
    """
    In-memory job queue for development and testing.

    Implements JobSubmissionPort.
    """

    def __init__(self, history: int = 100):
        if history < 1:
            raise ValueError(f"history must be at least 1, got {history}")
        self._handlers: Dict[JobType, List[JobHandler]] = {}
        self._submitted: Deque[OcoJob] = deque(maxlen=history)
        self._lock = Lock()
        logger.info("InMemoryJobQueue initialized")

    def submit(self, job: OcoJob) -> None:
        """
        Record a job and hand it to every handler registered for its type.

        Note:
            Handlers are called synchronously in registration order.
            If a handler raises an exception, it is logged but other handlers still run.
        """
        job_type = job.job_type

        with self._lock:
            self._submitted.append(job)
            handlers = list(self._handlers.get(job_type, []))

        if not handlers:
            logger.debug(f"No handlers registered for job type: {job_type.value}")
            return

        logger.info(f"Dispatching job {job_type.value} (ID: {job.id}) to {len(handlers)} handler(s)")

        for handler in handlers:
            try:
                handler(job)
            except Exception as e:
                logger.error(
                    f"Handler {handler.__name__} failed for job {job_type.value} (ID: {job.id}): {e}",
                    exc_info=True,
                )

    def subscribe(self, job_type: JobType, handler: JobHandler) -> None:
        with self._lock:
            self._handlers.setdefault(JobType(job_type), []).append(handler)

        logger.info(f"Subscribed {handler.__name__} to job type: {JobType(job_type).value}")

    def unsubscribe(self, job_type: JobType, handler: JobHandler) -> None:
        """
        Unsubscribe handler from job type.

        Useful for testing cleanup.
        """
        with self._lock:
            handlers = self._handlers.get(JobType(job_type), [])
            try:
                handlers.remove(handler)
                logger.info(f"Unsubscribed {handler.__name__} from job type: {JobType(job_type).value}")
            except ValueError:
                logger.warning(f"Handler {handler.__name__} was not subscribed to {JobType(job_type).value}")

    @property
    def submitted(self) -> List[OcoJob]:
        """The most recent submitted jobs, oldest first."""
        with self._lock:
            return list(self._submitted)

    def clear_all(self) -> None:
        """Forget submitted jobs and subscriptions."""
        with self._lock:
            self._handlers.clear()
            self._submitted.clear()
        logger.info("Job queue cleared")

    def get_handler_count(self, job_type: JobType) -> int:
        """Get number of handlers for a job type (for testing)."""
        with self._lock:
            return len(self._handlers.get(JobType(job_type), []))
