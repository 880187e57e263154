"""
Outline Module

Traces the boundary of a labeled blob into an ordered point path.
"""

from .tracer import Outline, trace_boundary

__all__ = [
    "Outline",
    "trace_boundary",
]
