"""Indexed Registry — ordered record collections with self-maintaining lookup views.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Docstring-only __init__.py: explicit imports from submodules, no star exports
      (entry point: indexed_registry.factory.create_registry)
"""
