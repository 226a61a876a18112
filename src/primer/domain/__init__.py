"""Domain layer for PRIMER.

Contains the exercise rules: the CSS selector builder, value objects, JSON
(de)serialization and the domain error hierarchy. This package is
deliberately I/O free.

Dependency rule: do not import from `primer.entrypoints`.
"""
