"""
Use Cases - Business Logic Orchestration

Use cases orchestrate domain logic and coordinate between ports.

Key principles:
- Each use case is a single business operation
- Use cases depend on ports (interfaces), not adapters (implementations)
- Submission is fire-and-forget; the execution service has the final word
"""

import logging
from enum import Enum

from oco_core.application.builder import build_oco_job, uuid4_id
from oco_core.application.ports import (
    IdGeneratorPort,
    InstrumentSelectionPort,
    JobSubmissionPort,
)
from oco_core.domain.draft import DraftState
from oco_core.domain.jobs import OcoJob
from oco_core.domain.validation import ValidationReport, ValidationStatus, validate_job
from oco_core.logging_filter import get_correlation_id, set_correlation_id


logger = logging.getLogger(__name__)


class ValidationPolicy(str, Enum):
    """What to do with a job whose validation report fails."""
    DEFER = "defer"  # Log and submit; the execution service decides
    STRICT = "strict"  # Refuse to submit


class NoInstrumentSelectedError(RuntimeError):
    """A job was requested before any instrument was selected."""


class JobValidationError(ValueError):
    """Raised under the STRICT policy when a job fails validation."""

    def __init__(self, report: ValidationReport):
        self.report = report
        failures = "; ".join(str(i) for i in report.issues if i.severity == ValidationStatus.FAIL)
        super().__init__(f"Job rejected before submission: {failures}")


# ============================================================================
# Submit Stop / Take-Profit Use Case
# ============================================================================

class SubmitStopTakeProfitUseCase:
    """
    Build an OCO job from a draft and submit it.

    This use case:
    1. Reads the selected instrument snapshot
    2. Builds the OcoJob (never fails for a well-typed draft)
    3. Validates it and applies the ValidationPolicy
    4. Hands the job to the submission port

    Does NOT:
    - Wait for, retry or observe the outcome of the submission
    - Modify the draft
    """

    def __init__(
        self,
        instruments: InstrumentSelectionPort,
        submitter: JobSubmissionPort,
        policy: ValidationPolicy = ValidationPolicy.DEFER,
        new_id: IdGeneratorPort = uuid4_id,
    ):
        self._instruments = instruments
        self._submitter = submitter
        self._policy = ValidationPolicy(policy)
        self._new_id = new_id

    @property
    def policy(self) -> ValidationPolicy:
        return self._policy

    def execute(self, draft: DraftState) -> OcoJob:
        """
        Build and submit a job.

        Args:
            draft: Draft snapshot to build from

        Returns:
            The submitted OcoJob

        Raises:
            NoInstrumentSelectedError: If no instrument is selected
            JobValidationError: Under STRICT, if validation fails
        """
        instrument = self._instruments.selected_instrument()
        if instrument is None:
            raise NoInstrumentSelectedError("Select an instrument before submitting a stop/take-profit job")

        job = build_oco_job(draft, instrument, new_id=self._new_id)

        previous_id = get_correlation_id()
        set_correlation_id(job.id)
        try:
            logger.debug(
                f"Built OCO job {job.id} on {job.trigger.exchange} {job.trigger.pair_name}: "
                f"low={'-' if job.low is None else job.low.leg.job_type.value} "
                f"high={'-' if job.high is None else job.high.leg.job_type.value}"
            )
            report = validate_job(job)
            self._apply_policy(job, report)
            self._submitter.submit(job)
            logger.info(
                f"Submitted OCO job {job.id} for {job.trigger.exchange} {job.trigger.pair_name} "
                f"({len(job.legs)} leg(s), validation {report.status.value})"
            )
        finally:
            set_correlation_id(previous_id)

        return job

    def _apply_policy(self, job: OcoJob, report: ValidationReport) -> None:
        if report.has_failures():
            if self._policy is ValidationPolicy.STRICT:
                logger.warning(f"Rejected OCO job {job.id}: {', '.join(report.codes())}")
                raise JobValidationError(report)
            logger.warning(
                f"OCO job {job.id} has validation failures ({', '.join(report.codes())}); "
                f"submitting anyway, the execution service decides"
            )
        elif report.has_warnings():
            logger.info(f"OCO job {job.id} validation warnings: {', '.join(report.codes())}")
