from typing import Dict, Optional

import numpy as np

from Network import LinkState, Topology
from PathEngine import PathResult, find_path
from params import INFINITE_HOPS


class CostPolicy:
    """
    A link-cost policy: builds the per-edge cost matrix for the current link
    state and decides whether a call is admitted.
    """
    name = None

    def cost_matrix(self, link_state: LinkState, topology: Topology) -> np.ndarray:
        raise NotImplementedError

    def route(self, source: int, destination: int, cost: np.ndarray,
              link_state: LinkState, topology: Topology) -> Optional[PathResult]:
        """Path to commit for this call, or None if the call is blocked."""
        return find_path(source, destination, cost, link_state.available, topology.prop_delay)

    def __repr__(self):
        return f"{type(self).__name__}()"


def _load_fraction(link_state: LinkState, topology: Topology) -> np.ndarray:
    # available / capacity, 0 where there is no edge
    fraction = np.zeros(topology.capacity.shape, dtype=np.float64)
    np.divide(link_state.available, topology.capacity, out=fraction, where=topology.capacity > 0)
    return fraction


class SHPF(CostPolicy):
    name = "SHPF"

    def cost_matrix(self, link_state, topology):
        return (link_state.available > 0).astype(np.float64)


class SDPF(CostPolicy):
    name = "SDPF"

    def cost_matrix(self, link_state, topology):
        return topology.prop_delay.astype(np.float64)


class LLP(CostPolicy):
    name = "LLP"

    def cost_matrix(self, link_state, topology):
        cost = 1.0 - _load_fraction(link_state, topology)
        cost[topology.capacity == 0] = 0.0
        return cost


class MFC(CostPolicy):
    name = "MFC"

    def cost_matrix(self, link_state, topology):
        return _load_fraction(link_state, topology)


class SHPO(SHPF):
    """
    Shortest hop path with look-ahead: the call is refused when the hop count
    achievable now is worse than on the fully available network.
    """
    name = "SHPO"

    def route(self, source, destination, cost, link_state, topology):
        actual = find_path(source, destination, cost, link_state.available, topology.prop_delay)
        if actual is None:
            return None

        ideal = find_path(source, destination, cost, topology.capacity, topology.prop_delay)
        hops_ideal = ideal.hop_count if ideal is not None else INFINITE_HOPS
        if actual.hop_count > hops_ideal:
            return None
        return actual


POLICIES: Dict[str, type] = {cls.name: cls for cls in (SHPF, SDPF, LLP, MFC, SHPO)}


def get_policy(name) -> CostPolicy:
    if isinstance(name, CostPolicy):
        return name
    try:
        return POLICIES[name.upper()]()
    except KeyError:
        raise KeyError(f"unknown policy {name!r}, expected one of {', '.join(POLICIES)}") from None
