"""Route Modules — one file per endpoint concern.

Invariants:
    - Each module defines its own APIRouter with tags
    - Routes never contain formatting logic (delegate to core/ and schemas/)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
