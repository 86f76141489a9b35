"""
Port Definitions (Interfaces)

Ports are contracts that define how the application core interacts with external systems.
They are implemented by adapters in the adapters/ directory.

All ports use Protocol (PEP 544) for structural subtyping.
"""

from typing import Optional, Protocol

from oco_core.domain.jobs import OcoJob, TickTrigger


class IdGeneratorPort(Protocol):
    """
    Supplier of globally unique identifiers.

    One id is drawn per leg and one per job. Any UUID v4 equivalent will do.
    """

    def __call__(self) -> str:
        ...


class InstrumentSelectionPort(Protocol):
    """
    Port for the "currently selected instrument".

    Implementations:
    - StaticInstrumentSelection: holds a selection in memory
    """

    def selected_instrument(self) -> Optional[TickTrigger]:
        """
        Snapshot of the selected instrument.

        Returns:
            The selected TickTrigger, or None when nothing is selected
        """
        ...


class JobSubmissionPort(Protocol):
    """
    Port for handing a job to the execution service.

    Implementations:
    - InMemoryJobQueue: synchronous, in-process dispatch (development/testing)
    - NoopJobSubmitter: drops jobs

    Design:
    - Fire-and-forget (no return value)
    - The execution service owns retries, parsing and final validation
    """

    def submit(self, job: OcoJob) -> None:
        """
        Submit one job.

        Raises:
            Whatever the transport raises; callers see it unchanged
        """
        ...
