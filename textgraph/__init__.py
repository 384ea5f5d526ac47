"""
TextGraph - Weighted Directed Graph for TextRank

A Python library providing the graph substrate for TextRank-style node
importance ranking over words or sentences. Tracks node scores, directed
weighted edges and the per-node aggregates a ranking iteration consumes.

Main Classes:
    TextGraph: Weighted directed graph with lazy node creation

Example:
    >>> from textgraph import TextGraph
    >>> graph = TextGraph()
    >>> graph.add_edge("river", "bank", 2.0)
    >>> graph.total_edge_weight_from("river")
    2.0
"""

__version__ = "0.1.0"
__author__ = "Chang Liao"

from textgraph.core.graph import TextGraph

__all__ = [
    'TextGraph',
]
