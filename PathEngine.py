from typing import List, Optional, Tuple

import numpy as np

from numba_func import dijkstra_kernel


class PathResult:
    """A least-cost path found by find_path, as a node sequence from source to destination."""

    def __init__(self, nodes: List[int], cost: float, total_delay: float):
        self.nodes = nodes
        self.cost = cost
        self.total_delay = total_delay

    @property
    def hop_count(self) -> int:
        return len(self.nodes) - 1

    @property
    def edges(self) -> List[Tuple[int, int]]:
        return [(self.nodes[i], self.nodes[i + 1]) for i in range(len(self.nodes) - 1)]

    def __eq__(self, other):
        if not isinstance(other, PathResult):
            return NotImplemented
        return self.nodes == other.nodes and self.cost == other.cost and self.total_delay == other.total_delay

    def __repr__(self):
        return f"PathResult(nodes={self.nodes}, cost={self.cost}, total_delay={self.total_delay})"


def find_path(source: int, destination: int, cost: np.ndarray, availability: np.ndarray,
              prop_delay: np.ndarray) -> Optional[PathResult]:
    """
    Least-cost path from source to destination restricted to edges with
    availability > 0.

    Args:
        source: source node index
        destination: destination node index
        cost: per-edge weight used for path selection
        availability: per-edge spare units; edges at 0 are absent
        prop_delay: per-edge propagation delay, summed along the chosen path

    Returns:
        PathResult, or None if the destination is unreachable
    """
    found, previous, distance = dijkstra_kernel(
        int(source), int(destination),
        np.array(cost, dtype=np.float64),
        np.array(availability, dtype=np.int64))

    if not found:
        return None

    # walk predecessors back to the source
    nodes = []
    current = destination
    while current != -1:
        nodes.append(int(current))
        current = previous[current]
    nodes.reverse()

    assert nodes[0] == source, f"path={nodes} does not start at {source}"

    total_delay = 0.0
    for u, v in zip(nodes[:-1], nodes[1:]):
        total_delay += float(prop_delay[u][v])

    return PathResult(nodes, float(distance[destination]), total_delay)
