"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Handlers only read app.state — nothing a request does changes the dataset

Design Decisions:
    - Thin routes delegate formatting to core/ and schemas/ (ADR: impureim sandwich)
"""
