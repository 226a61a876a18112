"""Entrypoints (inbound adapters) for PRIMER.

Expose the exercises to the outside world through the ``primer`` CLI. Parse
and validate inputs, call the domain and drill functions, and present results.

Dependency rule: may import `primer.domain` and `primer.drills`; nothing in
those packages may import from here.
"""
