from __future__ import annotations
import logging
from typing import Optional

from oco_core.domain.jobs import TickTrigger

logger = logging.getLogger(__name__)


class StaticInstrumentSelection:
    """Implements InstrumentSelectionPort with a selection held in memory."""

    def __init__(self, instrument: Optional[TickTrigger] = None):
        self._instrument = instrument

    def select(self, exchange: str, base: str, counter: str) -> TickTrigger:
        self._instrument = TickTrigger(exchange=exchange, base=base, counter=counter)
        logger.info(f"Selected {exchange} {self._instrument.pair_name}")
        return self._instrument

    def clear(self) -> None:
        self._instrument = None

    def selected_instrument(self) -> Optional[TickTrigger]:
        return self._instrument
