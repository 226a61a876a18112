"""The ``primer`` command-line interface."""
