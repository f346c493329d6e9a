from typing import List, Tuple

import numpy as np

from Network import Topology, load_topology
from Tool import parse_node_label

CallRecord = Tuple[float, str, str, float]


class CallEvent:
    def __init__(self, id, source, destination, arrival_time, duration, num_nodes):
        self.id = id
        self.source = source
        self.destination = destination
        self.arrival_time = arrival_time
        self.duration = duration
        self.end_time = arrival_time + duration
        self.is_active = False
        # units held on each edge, kept symmetric
        self.reservation = np.zeros((num_nodes, num_nodes), dtype=np.int64)

    def reserve(self, u, v, units=1):
        self.reservation[u][v] += units
        self.reservation[v][u] = self.reservation[u][v]

    def has_expired(self, now):
        return self.is_active and self.end_time <= now

    def reset(self):
        self.is_active = False
        self.reservation.fill(0)

    def __repr__(self):
        return (f"CallEvent(id={self.id}, {self.source}->{self.destination}, "
                f"arrival={self.arrival_time}, end={self.end_time}, active={self.is_active})")


def load_workload(workload_file) -> List[CallRecord]:
    """
    Read call records "<arrivalTime> <src> <dst> <duration>" in file order.
    The file is expected to be sorted by arrival time already.
    """
    records = []
    with open(workload_file, 'r') as f:
        for line_no, line in enumerate(f, start=1):
            fields = line.split()
            if not fields:
                continue
            if len(fields) != 4:
                print(f"Skipping malformed workload record at line {line_no}: {line.strip()!r}")
                continue
            try:
                arrival_time = float(fields[0])
                duration = float(fields[3])
            except ValueError:
                print(f"Skipping malformed workload record at line {line_no}: {line.strip()!r}")
                continue
            records.append((arrival_time, parse_node_label(fields[1]), parse_node_label(fields[2]), duration))
    return records


def make_call_events(records: List[CallRecord], topology: Topology) -> List[CallEvent]:
    events = []
    for i, (arrival_time, src, dst, duration) in enumerate(records):
        events.append(CallEvent(i, topology.index_of(src), topology.index_of(dst),
                                arrival_time, duration, topology.num_nodes))
    return events


def load_scenario(topology_file, workload_file) -> Tuple[Topology, List[CallEvent]]:
    """Load both input files; nodes named only by calls become isolated vertices."""
    edges = load_topology(topology_file)
    records = load_workload(workload_file)
    call_nodes = [label for _, src, dst, _ in records for label in (src, dst)]
    topology = Topology(edges, call_nodes)
    return topology, make_call_events(records, topology)
