from typing import Iterable, List, Tuple

import numpy as np

from Tool import parse_node_label, intern_labels, format_matrix

EdgeRecord = Tuple[str, str, float, int]


def load_topology(topology_file) -> List[EdgeRecord]:
    """
    Read edge records "<node> <node> <propDelay> <capacity>" from a topology file.
    Malformed lines are skipped; invalid node identifiers raise ValueError.
    """
    records = []
    with open(topology_file, 'r') as f:
        for line_no, line in enumerate(f, start=1):
            fields = line.split()
            if not fields:
                continue
            if len(fields) != 4:
                print(f"Skipping malformed topology record at line {line_no}: {line.strip()!r}")
                continue
            try:
                delay = int(fields[2])
                capacity = int(fields[3])
            except ValueError:
                print(f"Skipping malformed topology record at line {line_no}: {line.strip()!r}")
                continue
            records.append((parse_node_label(fields[0]), parse_node_label(fields[1]), delay, capacity))
    return records


class Topology:
    """
    Static network description: symmetric capacity and propagation delay
    matrices indexed by node. Both matrices are read-only once built.
    """

    def __init__(self, edges: Iterable[EdgeRecord], nodes: Iterable[str] = ()):
        edges = list(edges)
        labels = [label for u, v, _, _ in edges for label in (u, v)]
        labels.extend(nodes)
        self.labels, self.index = intern_labels(labels)
        self.num_nodes = len(self.labels)

        capacity = np.zeros((self.num_nodes, self.num_nodes), dtype=np.int64)
        prop_delay = np.zeros((self.num_nodes, self.num_nodes), dtype=np.float64)
        for u_label, v_label, delay, cap in edges:
            u, v = self.index[u_label], self.index[v_label]
            if u == v:
                raise ValueError(f"self-loop on node {u_label} is not allowed")
            if cap < 0:
                raise ValueError(f"negative capacity {cap} on edge {u_label}-{v_label}")
            # later declarations of the same edge overwrite earlier ones
            capacity[u][v] = capacity[v][u] = cap
            prop_delay[u][v] = prop_delay[v][u] = delay

        capacity.setflags(write=False)
        prop_delay.setflags(write=False)
        self.capacity = capacity
        self.prop_delay = prop_delay

    @classmethod
    def from_file(cls, topology_file, nodes: Iterable[str] = ()):
        return cls(load_topology(topology_file), nodes)

    def index_of(self, label: str) -> int:
        try:
            return self.index[parse_node_label(label)]
        except KeyError:
            raise KeyError(f"node {label!r} is not part of the topology") from None

    def label_of(self, index: int) -> str:
        return self.labels[index]

    def has_edge(self, u: int, v: int) -> bool:
        return self.capacity[u][v] > 0

    def edges(self) -> List[Tuple[int, int]]:
        """Undirected edges as (u, v) pairs with u < v."""
        rows, cols = np.nonzero(np.triu(self.capacity))
        return [(int(u), int(v)) for u, v in zip(rows, cols)]

    def path_labels(self, nodes: List[int]) -> str:
        return "".join(self.labels[n] for n in nodes)

    def total_capacity(self) -> int:
        return int(np.triu(self.capacity).sum())

    def dump(self, matrix=None) -> str:
        return format_matrix(self.capacity if matrix is None else matrix, self.labels)


class LinkState:
    """Spare capacity on every edge; decremented on admission, restored on reclamation."""

    def __init__(self, topology: Topology):
        self.topology = topology
        self.available = topology.capacity.copy()
        self.available.setflags(write=True)

    def reset(self):
        np.copyto(self.available, self.topology.capacity)

    def reserve(self, u: int, v: int, units: int = 1):
        assert self.available[u][v] >= units, \
            f"edge {self.topology.label_of(u)}-{self.topology.label_of(v)} has only {self.available[u][v]} units left"
        self.available[u][v] -= units
        self.available[v][u] = self.available[u][v]

    def release(self, reservation: np.ndarray):
        """Return a symmetric per-edge reservation matrix to the available pool."""
        self.available += reservation

    def in_use(self) -> np.ndarray:
        return self.topology.capacity - self.available

    def utilization(self) -> float:
        total = self.topology.total_capacity()
        return float(np.triu(self.in_use()).sum()) / total if total > 0 else 0.0

    def check_invariants(self):
        assert np.array_equal(self.available, self.available.T), "available capacity is not symmetric"
        assert (self.available >= 0).all(), "available capacity went negative"
        assert (self.available <= self.topology.capacity).all(), "available capacity exceeds link capacity"

    def dump(self) -> str:
        return self.topology.dump(self.available)
