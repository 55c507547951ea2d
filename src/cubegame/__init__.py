"""Cube game log analyzer.

Parses cube-drawing game logs and computes the feasibility and
minimum-power aggregates over them.
"""

__version__ = "0.1.0"
