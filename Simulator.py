from typing import Dict, Iterable, List

import numpy as np
from tqdm import tqdm

from CallEvent import CallEvent
from CostPolicy import CostPolicy, get_policy
from Ledger import ReservationLedger
from Network import LinkState, Topology
from PathEngine import PathResult
from Statistics import SimulationStatistics
from params import POLICY_ORDER


class Simulator:
    """
    Replays one call workload over a topology under each link-cost policy.

    Calls are processed in list order, which must be non-decreasing in
    arrival time. All per-run state is reset before every run, so results for
    different policies are independent.
    """

    def __init__(self, topology: Topology, events: List[CallEvent], show_progress=True):
        self.topology = topology
        self.events = events
        self.show_progress = show_progress
        self.link_state = LinkState(topology)
        self.ledger = ReservationLedger(events, self.link_state)
        self.statistics = SimulationStatistics()
        self.cost = np.zeros((topology.num_nodes, topology.num_nodes), dtype=np.float64)
        self.routes: Dict[int, PathResult] = {}
        self.metrics = {}

    def reset(self):
        self.link_state.reset()
        self.ledger.reset()
        self.statistics.reset()
        self.cost.fill(0.0)
        self.routes = {}
        self.metrics = {}

    def process_call(self, index: int, policy: CostPolicy) -> bool:
        """Reclaim expired calls, then admit or block events[index]. Returns True if admitted."""
        event = self.events[index]
        self.ledger.reclaim(index)

        self.cost = policy.cost_matrix(self.link_state, self.topology)
        path = policy.route(event.source, event.destination, self.cost, self.link_state, self.topology)

        if path is None:
            self.statistics.record_block()
            return False

        self.ledger.commit(index, path)
        self.statistics.record_admission(path.hop_count, path.total_delay)
        self.routes[index] = path
        return True

    def run(self, policy="SHPF"):
        policy = get_policy(policy)
        self.reset()

        for index in tqdm(range(len(self.events)), desc=policy.name, disable=not self.show_progress):
            self.process_call(index, policy)

        self.metrics = self.statistics.summary(policy.name)
        return self.metrics

    def run_all(self, policies: Iterable = POLICY_ORDER) -> Dict[str, dict]:
        results = {}
        for policy in policies:
            policy = get_policy(policy)
            results[policy.name] = self.run(policy)
        # leave the network clean for the next caller
        self.reset()
        return results

    def get_metrics(self):
        return self.metrics
