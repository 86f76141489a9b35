"""
Validation of OCO jobs before they are handed to the execution engine.

The builder never rejects anything; this module reports what the execution
engine is likely to reject, so that callers can choose a policy (see
SubmitStopTakeProfitUseCase).

Issue codes:
- EMPTY_BRACKET (FAIL): neither side has a threshold
- INVALID_NUMBER (FAIL): a price or amount is not a finite decimal
- NON_POSITIVE_VALUE (FAIL): a price or amount is zero or negative
- INVERTED_BRACKET (WARNING): the low threshold is not below the high one
- TRAILING_STOP_SIDE (WARNING): a trailing stop sits on the wrong side of its start
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import List, Optional

from oco_core.domain.jobs import (
    ConditionalLeg,
    Direction,
    OcoJob,
    ThresholdBinding,
    TrailingStopLeg,
)


class ValidationStatus(Enum):
    """Validation result status."""

    PASS = "PASS"
    FAIL = "FAIL"
    WARNING = "WARNING"


@dataclass
class ValidationIssue:
    """A single validation issue (error or warning)."""

    code: str
    severity: ValidationStatus
    message: str
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        return f"[{self.severity.value}] {self.code}: {self.message}"


@dataclass
class ValidationReport:
    """All issues found on one job, with the overall status."""

    status: ValidationStatus = ValidationStatus.PASS
    issues: List[ValidationIssue] = field(default_factory=list)
    metadata: dict = field(default_factory=dict)

    def add_issue(self, issue: ValidationIssue) -> None:
        """Add an issue to the report."""
        self.issues.append(issue)

        # Update overall status based on severity
        if issue.severity == ValidationStatus.FAIL:
            self.status = ValidationStatus.FAIL
        elif issue.severity == ValidationStatus.WARNING and self.status == ValidationStatus.PASS:
            self.status = ValidationStatus.WARNING

    def has_failures(self) -> bool:
        return self.status == ValidationStatus.FAIL

    def has_warnings(self) -> bool:
        return any(i.severity == ValidationStatus.WARNING for i in self.issues)

    def codes(self) -> List[str]:
        return [i.code for i in self.issues]

    def to_dict(self) -> dict:
        """Convert report to dictionary for JSON serialization."""
        return {
            "status": self.status.value,
            "issues": [
                {
                    "code": i.code,
                    "severity": i.severity.value,
                    "message": i.message,
                    "details": i.details,
                }
                for i in self.issues
            ],
            "metadata": self.metadata,
            "summary": {
                "total_issues": len(self.issues),
                "failures": sum(1 for i in self.issues if i.severity == ValidationStatus.FAIL),
                "warnings": sum(1 for i in self.issues if i.severity == ValidationStatus.WARNING),
            },
        }


# Plain decimal literal as the execution engine parses it: no whitespace,
# underscores or special values.
_DECIMAL_LITERAL = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def parse_decimal(text: str) -> Optional[Decimal]:
    """Parse a finite decimal literal, or return None."""
    if not isinstance(text, str) or not _DECIMAL_LITERAL.fullmatch(text):
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def _check_number(report: ValidationReport, path: str, text: str) -> Optional[Decimal]:
    value = parse_decimal(text)
    if value is None:
        report.add_issue(ValidationIssue(
            code="INVALID_NUMBER",
            severity=ValidationStatus.FAIL,
            message=f"{path} is not a number: {text!r}",
            details={"field": path, "value": text},
        ))
        return None
    if value <= 0:
        report.add_issue(ValidationIssue(
            code="NON_POSITIVE_VALUE",
            severity=ValidationStatus.FAIL,
            message=f"{path} must be positive, got {text}",
            details={"field": path, "value": text},
        ))
    return value


def _check_leg(report: ValidationReport, path: str, leg: ConditionalLeg) -> None:
    _check_number(report, f"{path}.amount", leg.amount)
    _check_number(report, f"{path}.limitPrice", leg.limit_price)
    if not isinstance(leg, TrailingStopLeg):
        return

    start = _check_number(report, f"{path}.startPrice", leg.start_price)
    stop = _check_number(report, f"{path}.stopPrice", leg.stop_price)
    if start is None or stop is None:
        return

    # A SELL stop protects a long position from below, a BUY stop a short one from above.
    misplaced = stop >= start if leg.direction is Direction.SELL else stop <= start
    if misplaced:
        report.add_issue(ValidationIssue(
            code="TRAILING_STOP_SIDE",
            severity=ValidationStatus.WARNING,
            message=(
                f"{path}: {leg.direction.value} trailing stop {leg.stop_price} is on the wrong "
                f"side of start price {leg.start_price}"
            ),
            details={"field": f"{path}.stopPrice", "start_price": leg.start_price, "stop_price": leg.stop_price},
        ))


def _check_binding(report: ValidationReport, side: str, binding: ThresholdBinding) -> Optional[Decimal]:
    threshold = _check_number(report, f"{side}.thresholdAsString", binding.threshold_as_string)
    _check_leg(report, f"{side}.job", binding.leg)
    return threshold


def validate_job(job: OcoJob) -> ValidationReport:
    """
    Check a built job against the rules the execution engine applies.

    Never raises; every problem becomes an issue in the returned report.
    """
    report = ValidationReport(metadata={"job_id": job.id, "pair": job.trigger.pair_name})

    if job.is_empty:
        report.add_issue(ValidationIssue(
            code="EMPTY_BRACKET",
            severity=ValidationStatus.FAIL,
            message="Neither a low nor a high threshold was given",
        ))
        return report

    low = _check_binding(report, "low", job.low) if job.low is not None else None
    high = _check_binding(report, "high", job.high) if job.high is not None else None

    if low is not None and high is not None and low >= high:
        report.add_issue(ValidationIssue(
            code="INVERTED_BRACKET",
            severity=ValidationStatus.WARNING,
            message=f"Low threshold {job.low.threshold_as_string} is not below high threshold {job.high.threshold_as_string}",
            details={"low": job.low.threshold_as_string, "high": job.high.threshold_as_string},
        ))

    return report
