"""
Core weighted graph data structure for TextRank-style ranking.

This module provides the graph structure consumed by a ranking pass, without
the ranking iteration itself.
"""

import logging
from typing import Dict, Generic, Hashable, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

from ..classes.utils import format_edge_list, sum_edge_weights

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


class TextGraph(Generic[T]):
    """
    Weighted directed graph over text units (words, lemmas, sentence indices).

    This class manages the graph state needed by a TextRank iteration:
    - Node scores, created lazily from edge endpoints
    - Inbound adjacency lists (who points to a node)
    - Directed edge weights keyed by ordered pair
    - Outbound link counts per node

    No query raises: unknown nodes yield 0.0, 0 or an empty list.
    Not thread-safe; serialize writers externally.
    """

    def __init__(self, starting_score: float = 0.15, damping: float = 0.85,
                 convergence_threshold: float = 0.001):
        """
        Initialize an empty graph.

        Args:
            starting_score: Score given to a node the first time it appears
            damping: Damping factor for a ranking pass
            convergence_threshold: Maximum score delta at which a ranking pass stops
        """
        self.starting_score = starting_score
        self.damping = damping
        self.convergence_threshold = convergence_threshold

        # Node scores
        self.nodes: Dict[T, float] = {}

        # Graph structure, graph[to] lists sources, edge_weights[from][to] holds weights
        self.graph: Dict[T, List[T]] = {}
        self.edge_weights: Dict[T, Dict[T, float]] = {}
        self.links_from: Dict[T, int] = {}

        logger.debug(f"Initialized TextGraph (starting_score={starting_score}, damping={damping}, "
                     f"convergence_threshold={convergence_threshold})")

    @property
    def number_of_nodes(self) -> int:
        return len(self.nodes)

    @property
    def number_of_edges(self) -> int:
        return sum(len(self.graph.get(node, ())) for node in self.nodes)

    def add_edge(self, from_node: T, to_node: T, weight: float = 1.0) -> None:
        """
        Add a weighted directed edge.

        Non-positive weights are ignored. Adding an existing edge again
        overwrites its weight without changing the adjacency or link counts.

        Args:
            from_node: Source node
            to_node: Destination node
            weight: Edge weight, must be > 0
        """
        if not weight > 0:
            return

        for node in (from_node, to_node):
            self._initialize_node(node)
        self._add_edge_to_graph(from_node, to_node)
        self._set_edge_weight(weight, from_node, to_node)

    def add_edges(self, edges: Iterable[Sequence]) -> int:
        """
        Add edges from a stream of (from, to[, weight]) tuples.

        Args:
            edges: Iterable of (from_node, to_node) or (from_node, to_node, weight)

        Returns:
            Number of edges accepted
        """
        accepted = 0
        rejected = 0

        for edge in edges:
            if len(edge) == 2:
                from_node, to_node = edge
                weight = 1.0
            else:
                from_node, to_node, weight = edge
            if weight > 0:
                self.add_edge(from_node, to_node, weight)
                accepted += 1
            else:
                rejected += 1

        logger.debug(f"Added {accepted} edges ({rejected} rejected); graph has "
                     f"{self.number_of_nodes} nodes and {self.number_of_edges} edges")
        return accepted

    def _initialize_node(self, node: T) -> None:
        """Give a node the starting score if it has not been seen before."""
        if node not in self.nodes:
            self.nodes[node] = self.starting_score

    def _add_edge_to_graph(self, from_node: T, to_node: T) -> None:
        sources = self.graph.get(to_node)
        if sources is None:
            self.graph[to_node] = [from_node]
            self._increment_edge_count(from_node)
        elif from_node not in sources:
            sources.append(from_node)
            self._increment_edge_count(from_node)

    def _set_edge_weight(self, weight: float, from_node: T, to_node: T) -> None:
        self.edge_weights.setdefault(from_node, {})[to_node] = weight

    def _increment_edge_count(self, from_node: T) -> None:
        self.links_from[from_node] = self.links_from.get(from_node, 0) + 1

    # Queries

    def edge_weight(self, from_node: T, to_node: T) -> float:
        """
        Get the weight of the edge between two nodes.

        Args:
            from_node: Source node
            to_node: Destination node

        Returns:
            Edge weight, or 0.0 if there is no such edge
        """
        return self.edge_weights.get(from_node, {}).get(to_node, 0.0)

    def nodes_pointing_to(self, node: T) -> List[T]:
        """
        Get the nodes with an edge into a node.

        Args:
            node: Destination node

        Returns:
            Source nodes in the order their edges were first added
        """
        return list(self.graph.get(node, ()))

    def number_of_links_from(self, node: T) -> int:
        """Get the number of distinct destinations reached from a node."""
        return self.links_from.get(node, 0)

    def total_edge_weight_from(self, node: T) -> float:
        """
        Get the total of all edge weights from a node.

        Args:
            node: Source node

        Returns:
            Sum of outbound edge weights, 0.0 if the node has none
        """
        return sum_edge_weights(self.edge_weights.get(node, {}))

    def score(self, node: T) -> float:
        """Get the current score of a node, 0.0 if it is not in the graph."""
        return self.nodes.get(node, 0.0)

    def edge_list(self) -> Iterator[Tuple[T, T, float]]:
        """Yield (from_node, to_node, weight) for every edge in insertion order."""
        for from_node, links in self.edge_weights.items():
            for to_node, weight in links.items():
                yield from_node, to_node, weight

    def print_edge_list(self) -> None:
        """Print the edge list, one 'from - to: weight' line per edge."""
        for line in format_edge_list(self.edge_list()):
            print(line)

    def edge_weight_matrix(self, order: Optional[Sequence[T]] = None) -> np.ndarray:
        """
        Build a dense weight matrix for the graph.

        Args:
            order: Node order for rows and columns, defaults to node insertion order.
                Nodes not in the graph get zero rows and columns.

        Returns:
            Array of shape (n, n) where M[i, j] = edge_weight(order[i], order[j])

        Raises:
            ValueError: If order contains duplicate nodes
        """
        if order is None:
            order = list(self.nodes)

        index = {node: i for i, node in enumerate(order)}
        if len(index) != len(order):
            raise ValueError("Node order contains duplicates")

        matrix = np.zeros((len(order), len(order)), dtype=float)
        for from_node, to_node, weight in self.edge_list():
            i = index.get(from_node)
            j = index.get(to_node)
            if i is not None and j is not None:
                matrix[i, j] = weight

        return matrix
