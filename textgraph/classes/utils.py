"""
Utility functions for textgraph.

This module provides helpers shared across the textgraph package that work
on plain mappings and edge tuples rather than on a graph instance.
"""

import logging
from typing import Any, Dict, Iterable, List, Tuple

logger = logging.getLogger(__name__)


def sum_edge_weights(weights: Dict[Any, float]) -> float:
    """
    Sum the weights of a destination -> weight mapping.

    Summation follows the mapping's insertion order so that results are
    reproducible across runs.

    Args:
        weights: Dictionary mapping destination node -> edge weight

    Returns:
        Total weight, 0.0 for an empty mapping
    """
    total = 0.0
    for weight in weights.values():
        total += weight
    return total


def format_edge_list(edges: Iterable[Tuple[Any, Any, float]]) -> List[str]:
    """
    Format edges for a debug dump.

    Args:
        edges: Iterable of (from_node, to_node, weight) tuples

    Returns:
        One 'from - to: weight' line per edge

    Raises:
        ValueError: If an edge is not a 3-tuple
    """
    lines = []
    for edge in edges:
        if len(edge) != 3:
            raise ValueError(f"Expected (from, to, weight), got {edge!r}")
        from_node, to_node, weight = edge
        lines.append(f"{from_node} - {to_node}: {weight}")
    return lines
