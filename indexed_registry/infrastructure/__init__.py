"""Infrastructure Layer — process-level concerns (logging setup).

Invariants:
    - Nothing in core/ imports from infrastructure/
"""
