"""Pydantic Schemas — validation of the construction-time configuration surface.

Invariants:
    - Schemas validate at the system boundary (caller-supplied config)
    - Domain types from core/ are never redefined here

Design Decisions:
    - Separate from core: schemas are input contracts, core is behavior (ADR: boundary)
"""
