"""Core Layer — pure indexing logic, no IO, no async, no global state.

Invariants:
    - No module in core/ imports from schemas/, infrastructure/, factory or config
    - Every structure-mutating operation ends with exactly one bulk invalidation

Design Decisions:
    - Functional helpers (resolver, inflector, builders) separated from the
      two stateful classes that own caches (ADR: impureim sandwich)
"""
