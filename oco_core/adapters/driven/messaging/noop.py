from __future__ import annotations
import logging

from oco_core.domain.jobs import OcoJob

logger = logging.getLogger(__name__)


class NoopJobSubmitter:
    """Implements JobSubmissionPort by dropping every job."""

    def submit(self, job: OcoJob) -> None:
        logger.debug(f"Dropping job {job.id} (no-op submitter)")
        return None
