"""Composition root for dependency injection.

Factories here assemble use cases with concrete adapters.
"""

from __future__ import annotations

from oco_core import config as settings
from oco_core.application.session import StopTakeProfitSession
from oco_core.application.use_cases import SubmitStopTakeProfitUseCase, ValidationPolicy
from oco_core.adapters.driven.messaging.in_memory import InMemoryJobQueue
from oco_core.adapters.driven.messaging.noop import NoopJobSubmitter
from oco_core.adapters.driven.selection.static import StaticInstrumentSelection
from oco_core.domain.draft import DraftState
from oco_core.domain.jobs import Direction


_singletons: dict[str, object] = {}


def get_singleton(key: str, factory):
    if key not in _singletons:
        _singletons[key] = factory()
    return _singletons[key]


def reset() -> None:
    """Drop all singletons (tests, reconfiguration)."""
    _singletons.clear()


def get_instrument_selection() -> StaticInstrumentSelection:
    return get_singleton("instrument_selection", StaticInstrumentSelection)


def get_job_submitter():
    def factory():
        if settings.JOB_SUBMITTER == "noop":
            return NoopJobSubmitter()
        return InMemoryJobQueue(history=settings.JOB_HISTORY)

    return get_singleton("job_submitter", factory)


def get_submit_uc() -> SubmitStopTakeProfitUseCase:
    def factory():
        return SubmitStopTakeProfitUseCase(
            instruments=get_instrument_selection(),
            submitter=get_job_submitter(),
            policy=ValidationPolicy(settings.VALIDATION_POLICY),
        )

    return get_singleton("submit_uc", factory)


def new_session() -> StopTakeProfitSession:
    """A fresh editing session; sessions are never shared."""
    draft = DraftState(direction=Direction(settings.DEFAULT_DIRECTION))
    return StopTakeProfitSession(get_submit_uc(), draft)
