"""
Shared helpers used throughout the textgraph library.
"""

from .utils import format_edge_list, sum_edge_weights

__all__ = [
    'format_edge_list',
    'sum_edge_weights',
]
