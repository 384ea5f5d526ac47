"""
Core graph data structures.

This module contains the fundamental graph representation used by a
ranking pass.
"""

from .graph import TextGraph

__all__ = ['TextGraph']
