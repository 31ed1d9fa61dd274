"""NC FTTX Permitting Portal — read-only directory of North Carolina FTTX permitting rules.

Invariants:
    - Package root contains no executable code besides the version string
    - __version__ is the single source for the version reported by /health

Design Decisions:
    - Explicit imports only, no star exports (ADR: no convention-over-config)
"""

__version__ = "1.0.0"
