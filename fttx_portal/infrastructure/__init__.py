"""Infrastructure Layer — IO-facing pieces: logging, template loading, request metrics.

Invariants:
    - Infrastructure never contains request-routing logic
    - Failures at startup map to core/errors.py types

Design Decisions:
    - Thin wrappers over libraries (ADR: single responsibility)
"""
