"""
Job Builder

Turns a finished DraftState and the selected instrument into an OcoJob.

The builder is total: it accepts any well-typed draft, performs no numeric
parsing and raises nothing. Blank thresholds leave their side out; malformed
numbers are passed through verbatim for validate_job or the execution engine
to judge.
"""

from __future__ import annotations

import uuid
from typing import Optional

from oco_core.application.ports import IdGeneratorPort
from oco_core.domain.draft import BracketSide, DraftState, LegKind
from oco_core.domain.jobs import (
    ConditionalLeg,
    Direction,
    LimitOrderLeg,
    OcoJob,
    ThresholdBinding,
    TickTrigger,
    TrailingStopLeg,
)


def uuid4_id() -> str:
    """Default id generator (UUID v4)."""
    return str(uuid.uuid4())


def make_limit_leg(
    *,
    new_id: IdGeneratorPort,
    direction: Direction,
    trigger: TickTrigger,
    amount: str,
    limit_price: str,
) -> LimitOrderLeg:
    return LimitOrderLeg(
        id=new_id(),
        direction=direction,
        trigger=trigger,
        amount=amount,
        limit_price=limit_price,
    )


def make_trailing_leg(
    *,
    new_id: IdGeneratorPort,
    direction: Direction,
    trigger: TickTrigger,
    amount: str,
    start_price: str,
    stop_price: str,
    limit_price: str,
) -> TrailingStopLeg:
    """Trailing leg whose sync price starts at the start price."""
    return TrailingStopLeg(
        id=new_id(),
        direction=direction,
        trigger=trigger,
        amount=amount,
        start_price=start_price,
        last_sync_price=start_price,
        stop_price=stop_price,
        limit_price=limit_price,
    )


def build_leg(
    draft: DraftState,
    side: BracketSide,
    trigger: TickTrigger,
    new_id: IdGeneratorPort = uuid4_id,
) -> ConditionalLeg:
    """Build the leg for one side. Amount and direction come from the draft as a whole."""
    if draft.leg_kind(side) is LegKind.TRAILING:
        return make_trailing_leg(
            new_id=new_id,
            direction=draft.direction,
            trigger=trigger,
            amount=draft.amount,
            start_price=draft.threshold(side),
            stop_price=draft.initial_trailing_stop,
            limit_price=draft.limit_price(side),
        )
    return make_limit_leg(
        new_id=new_id,
        direction=draft.direction,
        trigger=trigger,
        amount=draft.amount,
        limit_price=draft.limit_price(side),
    )


def build_binding(
    draft: DraftState,
    side: BracketSide,
    trigger: TickTrigger,
    new_id: IdGeneratorPort = uuid4_id,
) -> Optional[ThresholdBinding]:
    threshold = draft.threshold(side)
    if not threshold:
        return None
    return ThresholdBinding(
        threshold_as_string=threshold,
        leg=build_leg(draft, side, trigger, new_id),
    )


def build_oco_job(
    draft: DraftState,
    instrument: object,
    new_id: IdGeneratorPort = uuid4_id,
) -> OcoJob:
    """
    Build an OCO job from a draft snapshot.

    Args:
        draft: Finished draft (read only)
        instrument: Selected instrument; anything with exchange, base and
            counter attributes. Copied by value into the job.
        new_id: Id supplier, called once for the job and once per leg

    Returns:
        A fresh OcoJob. Both sides may be None; that is not rejected here.
    """
    trigger = TickTrigger(
        exchange=instrument.exchange,
        base=instrument.base,
        counter=instrument.counter,
    )
    job_id = new_id()

    job = OcoJob(
        id=job_id,
        trigger=trigger,
        low=build_binding(draft, BracketSide.LOW, trigger, new_id),
        high=build_binding(draft, BracketSide.HIGH, trigger, new_id),
    )
    return job
