"""
OCO Core - Stop-Loss / Take-Profit Job Composition

This package contains the framework-independent core that turns a trader's
stop-loss / take-profit draft into a One-Cancels-the-Other (OCO) job,
following the Ports & Adapters (Hexagonal) architecture pattern.

Structure:
- domain/: Value objects for jobs, legs and the editable draft (NO I/O)
- application/: Job builder, submission use case, editing session and ports
- adapters/: Concrete implementations of ports
  - driven/: Outbound adapters (ids, instrument selection, job queue, codec)
- wiring/: Dependency injection container

Key Principle: Dependencies point INWARD.
- Domain has ZERO external dependencies
- Application depends only on domain
- Adapters depend on application ports (but not vice versa)
"""

__version__ = "1.0.0"
