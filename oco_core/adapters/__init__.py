"""
Adapters Layer - Concrete Implementations of Ports

This layer contains implementations of the ports defined in application/ports.py.

Structure:
- driven/: Outbound adapters (things the application USES)
  - messaging/: Job submission (in-memory queue, no-op)
  - selection/: Currently selected instrument
  - serialization/: JSON wire codec for jobs

Key Principle: Adapters depend on ports, ports don't depend on adapters.
"""
