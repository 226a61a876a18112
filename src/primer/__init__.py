"""PRIMER

A collection of small, self-contained programming exercises: a CSS selector
builder with ordering rules, JSON (de)serialization onto dataclass types, and
a set of arithmetic, text, geometry and grid drills.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
