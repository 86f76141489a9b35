"""
Decoding of jobs from their wire dictionaries.

Encoding lives on the value objects themselves (`to_dict`). The execution
engine dispatches on `jobType`, so the tags are kept exactly as sent.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from oco_core.domain.jobs import (
    ConditionalLeg,
    Direction,
    JobType,
    LimitOrderLeg,
    OcoJob,
    ThresholdBinding,
    TickTrigger,
    TrailingStopLeg,
)


class JobCodecError(ValueError):
    """Base error for jobs that cannot be decoded."""


class MalformedJobError(JobCodecError):
    """A required key is missing or has the wrong shape."""


class UnknownJobTypeError(JobCodecError):
    """The `jobType` tag is not one this core understands."""


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise MalformedJobError(f"Missing '{key}' in {data.get('jobType', 'job')} payload") from None
    except TypeError:
        raise MalformedJobError(f"Expected a mapping, got {type(data).__name__}") from None


def _job_type(data: Mapping[str, Any]) -> JobType:
    tag = _require(data, "jobType")
    try:
        return JobType(tag)
    except ValueError:
        raise UnknownJobTypeError(f"Unknown jobType: {tag!r}") from None


def _direction(data: Mapping[str, Any]) -> Direction:
    value = _require(data, "direction")
    try:
        return Direction(value)
    except ValueError:
        raise MalformedJobError(f"Unknown direction: {value!r}") from None


def trigger_from_dict(data: Mapping[str, Any]) -> TickTrigger:
    return TickTrigger(
        exchange=_require(data, "exchange"),
        base=_require(data, "base"),
        counter=_require(data, "counter"),
    )


def _limit_leg(data: Mapping[str, Any]) -> LimitOrderLeg:
    return LimitOrderLeg(
        id=_require(data, "id"),
        direction=_direction(data),
        trigger=trigger_from_dict(_require(data, "tickTrigger")),
        amount=_require(data, "amount"),
        limit_price=_require(data, "limitPrice"),
    )


def _trailing_leg(data: Mapping[str, Any]) -> TrailingStopLeg:
    start_price = _require(data, "startPrice")
    return TrailingStopLeg(
        id=_require(data, "id"),
        direction=_direction(data),
        trigger=trigger_from_dict(_require(data, "tickTrigger")),
        amount=_require(data, "amount"),
        start_price=start_price,
        # Older payloads may predate engine-side syncing.
        last_sync_price=data.get("lastSyncPrice", start_price),
        stop_price=_require(data, "stopPrice"),
        limit_price=_require(data, "limitPrice"),
    )


_LEG_DECODERS: Dict[JobType, Callable[[Mapping[str, Any]], ConditionalLeg]] = {
    JobType.LIMIT_ORDER: _limit_leg,
    JobType.SOFT_TRAILING_STOP: _trailing_leg,
}


def leg_from_dict(data: Mapping[str, Any]) -> ConditionalLeg:
    job_type = _job_type(data)
    decoder = _LEG_DECODERS.get(job_type)
    if decoder is None:
        raise UnknownJobTypeError(f"{job_type.value} cannot be used as an OCO leg")
    return decoder(data)


def binding_from_dict(data: Optional[Mapping[str, Any]]) -> Optional[ThresholdBinding]:
    if data is None:
        return None
    return ThresholdBinding(
        threshold_as_string=_require(data, "thresholdAsString"),
        leg=leg_from_dict(_require(data, "job")),
    )


def job_from_dict(data: Mapping[str, Any]) -> OcoJob:
    """
    Decode an OCO job.

    Raises:
        UnknownJobTypeError: If the tag is unknown or not OCO
        MalformedJobError: If a required key is missing
    """
    job_type = _job_type(data)
    if job_type is not JobType.OCO:
        raise UnknownJobTypeError(f"Expected an OCO job, got {job_type.value}")
    return OcoJob(
        id=_require(data, "id"),
        trigger=trigger_from_dict(_require(data, "tickTrigger")),
        low=binding_from_dict(data.get("low")),
        high=binding_from_dict(data.get("high")),
    )
