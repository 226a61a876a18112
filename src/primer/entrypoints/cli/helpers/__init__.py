"""CLI helpers for PRIMER.

Utilities used by the command-line interface: labelled OSC-8 links for the
help epilog, NAME=LEVEL logger option parsing, a numeric Click parameter type,
and warning lines written to stderr with emoji→ASCII fallbacks.
"""

from .hyperlinks import hyperlink, see_also
from .messages import warn
from .params import NUMBER, JsonParamType

__all__ = ["warn", "hyperlink", "see_also", "NUMBER", "JsonParamType"]
