"""
Job Domain Models

Value objects for an OCO (One-Cancels-the-Other) job and its conditional legs.
No framework dependencies.

Prices and amounts are carried as the decimal strings the trader typed.
Numeric interpretation belongs to validation and to the execution engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple, Union


# ============================================================================
# Enums
# ============================================================================

class JobType(str, Enum):
    """Wire discriminator the execution engine dispatches on."""
    LIMIT_ORDER = "LIMIT_ORDER"
    SOFT_TRAILING_STOP = "SOFT_TRAILING_STOP"
    OCO = "OCO"


class Direction(str, Enum):
    """Order direction, shared by every leg of a job."""
    BUY = "BUY"
    SELL = "SELL"


# ============================================================================
# Tick Trigger
# ============================================================================

@dataclass(frozen=True)
class TickTrigger:
    """
    Market whose tick stream prices and triggers a job.

    Attributes:
        exchange: Exchange code (e.g., binance)
        base: Base currency (e.g., BTC)
        counter: Counter currency (e.g., USD)
    """
    exchange: str
    base: str
    counter: str

    @property
    def pair_name(self) -> str:
        return f"{self.base}/{self.counter}"

    def to_dict(self) -> dict:
        return {
            "exchange": self.exchange,
            "base": self.base,
            "counter": self.counter,
        }


# ============================================================================
# Conditional Legs
# ============================================================================

@dataclass(frozen=True)
class LimitOrderLeg:
    """Plain limit order submitted when its threshold is crossed."""
    id: str
    direction: Direction
    trigger: TickTrigger
    amount: str
    limit_price: str

    job_type: ClassVar[JobType] = JobType.LIMIT_ORDER

    def to_dict(self) -> dict:
        return {
            "jobType": self.job_type.value,
            "id": self.id,
            "direction": self.direction.value,
            "tickTrigger": self.trigger.to_dict(),
            "amount": self.amount,
            "limitPrice": self.limit_price,
        }


@dataclass(frozen=True)
class TrailingStopLeg:
    """
    Soft trailing stop started when its threshold is crossed.

    The stop follows the market as it moves favourably. `last_sync_price`
    starts equal to `start_price`; after creation it belongs to the
    execution engine, which updates it while tracking the market.
    """
    id: str
    direction: Direction
    trigger: TickTrigger
    amount: str
    start_price: str
    last_sync_price: str
    stop_price: str
    limit_price: str

    job_type: ClassVar[JobType] = JobType.SOFT_TRAILING_STOP

    def to_dict(self) -> dict:
        return {
            "jobType": self.job_type.value,
            "id": self.id,
            "direction": self.direction.value,
            "tickTrigger": self.trigger.to_dict(),
            "amount": self.amount,
            "startPrice": self.start_price,
            "lastSyncPrice": self.last_sync_price,
            "stopPrice": self.stop_price,
            "limitPrice": self.limit_price,
        }


ConditionalLeg = Union[LimitOrderLeg, TrailingStopLeg]


# ============================================================================
# Threshold Binding & OCO Job
# ============================================================================

@dataclass(frozen=True)
class ThresholdBinding:
    """When the price crosses `threshold_as_string`, submit `leg`."""
    threshold_as_string: str
    leg: ConditionalLeg

    def to_dict(self) -> dict:
        # The execution engine calls the bound leg "job".
        return {
            "thresholdAsString": self.threshold_as_string,
            "job": self.leg.to_dict(),
        }


@dataclass(frozen=True)
class OcoJob:
    """
    A bracket of up to two legs under one cancellation group.

    `low` fires when the price falls to its threshold, `high` when it rises
    to its threshold. Firing one side cancels the other. Either side may be
    absent; a job with no sides at all is representable (see validate_job).
    """
    id: str
    trigger: TickTrigger
    low: Optional[ThresholdBinding] = None
    high: Optional[ThresholdBinding] = None

    job_type: ClassVar[JobType] = JobType.OCO

    @property
    def bindings(self) -> Tuple[ThresholdBinding, ...]:
        """Populated sides, low first."""
        return tuple(b for b in (self.low, self.high) if b is not None)

    @property
    def legs(self) -> Tuple[ConditionalLeg, ...]:
        return tuple(b.leg for b in self.bindings)

    @property
    def is_empty(self) -> bool:
        return self.low is None and self.high is None

    def to_dict(self) -> dict:
        return {
            "jobType": self.job_type.value,
            "id": self.id,
            "tickTrigger": self.trigger.to_dict(),
            "low": self.low.to_dict() if self.low is not None else None,
            "high": self.high.to_dict() if self.high is not None else None,
        }
