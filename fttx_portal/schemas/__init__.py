"""Pydantic Schemas — response contracts for the JSON endpoints.

Invariants:
    - Schemas describe what leaves the process; core/ types never serialize themselves to HTTP
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from core dataclasses: schemas are API contracts, core is the domain (ADR: DDD boundary)
"""
