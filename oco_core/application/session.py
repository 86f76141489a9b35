"""
Stop / take-profit editing session.

Owns one DraftState for the lifetime of an editing form. Other affordances
(e.g. clicking a price on a chart) get a callback bound to a single field
through focus(); there is no process-wide update hook.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from oco_core.application.use_cases import SubmitStopTakeProfitUseCase
from oco_core.domain.draft import DraftField, DraftState, resolve_field, with_field
from oco_core.domain.jobs import OcoJob


logger = logging.getLogger(__name__)

FieldSetter = Callable[[Any], DraftState]


class StopTakeProfitSession:

    def __init__(self, submit_use_case: SubmitStopTakeProfitUseCase, draft: Optional[DraftState] = None):
        self._submit_use_case = submit_use_case
        self._initial = draft if draft is not None else DraftState()
        self._draft = self._initial
        self._focused: Optional[DraftField] = None

    @property
    def draft(self) -> DraftState:
        return self._draft

    @property
    def focused_field(self) -> Optional[DraftField]:
        """Field whose setter was handed out most recently."""
        return self._focused

    def change(self, draft: DraftState) -> DraftState:
        """Replace the whole draft (the form re-rendered with new values)."""
        self._draft = draft
        return self._draft

    def update(self, field: DraftField, value: Any) -> DraftState:
        self._draft = with_field(self._draft, field, value)
        return self._draft

    def focus(self, field: DraftField) -> FieldSetter:
        """
        Return a setter that writes into `field` only.

        The setter stays bound to its field even after another field is
        focused; callers drop it when focus moves.
        """
        field = resolve_field(field)
        self._focused = field
        logger.debug(f"Focus set to {field.value}")

        def set_value(value: Any) -> DraftState:
            return self.update(field, value)

        return set_value

    def submit(self) -> OcoJob:
        """Build and submit a job from the current draft, which is left as is."""
        return self._submit_use_case.execute(self._draft)

    def reset(self) -> DraftState:
        self._draft = self._initial
        self._focused = None
        return self._draft
