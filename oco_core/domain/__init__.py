"""
Domain Layer - Pure Business Logic

This layer contains:
- Value objects for OCO jobs, conditional legs and tick triggers
- The editable stop-loss / take-profit draft
- Wire decoding and job validation

CRITICAL RULES:
- ZERO framework dependencies (no I/O, no transport)
- Pure Python only (stdlib + typing)
- All objects are immutable (dataclasses with frozen=True)
"""

from oco_core.domain.jobs import (
    JobType,
    Direction,
    TickTrigger,
    LimitOrderLeg,
    TrailingStopLeg,
    ConditionalLeg,
    ThresholdBinding,
    OcoJob,
)

from oco_core.domain.draft import (
    DraftField,
    DraftState,
    BracketSide,
    LegKind,
    resolve_field,
    with_field,
    merge,
)

from oco_core.domain.codec import (
    JobCodecError,
    MalformedJobError,
    UnknownJobTypeError,
    job_from_dict,
    leg_from_dict,
)

from oco_core.domain.validation import (
    ValidationStatus,
    ValidationIssue,
    ValidationReport,
    validate_job,
)

__all__ = [
    # Jobs
    "JobType",
    "Direction",
    "TickTrigger",
    "LimitOrderLeg",
    "TrailingStopLeg",
    "ConditionalLeg",
    "ThresholdBinding",
    "OcoJob",
    # Draft
    "DraftField",
    "DraftState",
    "BracketSide",
    "LegKind",
    "resolve_field",
    "with_field",
    "merge",
    # Codec
    "JobCodecError",
    "MalformedJobError",
    "UnknownJobTypeError",
    "job_from_dict",
    "leg_from_dict",
    # Validation
    "ValidationStatus",
    "ValidationIssue",
    "ValidationReport",
    "validate_job",
]
