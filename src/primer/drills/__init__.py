"""Standalone drills: small textbook algorithms on numbers, text and grids.

Each function is pure and independent of the others. Arguments outside a
drill's domain raise `primer.domain.errors.DrillInputError`.

Public API:
- Nothing is re-exported at the package level. Import drills from their
  defining modules (``arithmetic``, ``text``, ``geometry``, ``grids``).
"""
