"""Dependency wiring (composition root)."""
