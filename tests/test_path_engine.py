import numpy as np
import pytest

from Network import Topology
from PathEngine import find_path


def hop_costs(matrix):
    return (matrix > 0).astype(np.float64)


def test_finds_two_hop_path(line_topology):
    cap = line_topology.capacity
    path = find_path(0, 2, hop_costs(cap), cap, line_topology.prop_delay)
    assert path.nodes == [0, 1, 2]
    assert path.edges == [(0, 1), (1, 2)]
    assert path.hop_count == 2
    assert path.cost == 2.0
    assert path.total_delay == 2.0


def test_equal_cost_tie_goes_to_lowest_index(square_topology):
    cap = square_topology.capacity
    path = find_path(0, 3, hop_costs(cap), cap, square_topology.prop_delay)
    assert path.nodes == [0, 1, 3]


def test_delay_is_summed_from_propagation_not_cost():
    topology = Topology([("A", "B", 5, 1), ("B", "C", 7, 1)])
    cap = topology.capacity
    path = find_path(0, 2, hop_costs(cap), cap, topology.prop_delay)
    assert path.cost == 2.0
    assert path.total_delay == 12.0


def test_cost_matrix_steers_the_choice():
    # direct link A-C is one hop but slow
    topology = Topology([("A", "C", 10, 1), ("A", "B", 1, 1), ("B", "C", 1, 1)])
    cap = topology.capacity
    by_hops = find_path(0, 2, hop_costs(cap), cap, topology.prop_delay)
    by_delay = find_path(0, 2, np.asarray(topology.prop_delay), cap, topology.prop_delay)
    assert by_hops.nodes == [0, 2]
    assert by_delay.nodes == [0, 1, 2]
    assert by_delay.total_delay == 2.0


def test_edges_without_availability_are_absent(line_topology):
    available = line_topology.capacity.copy()
    available[1][2] = available[2][1] = 0
    assert find_path(0, 2, hop_costs(available), available, line_topology.prop_delay) is None
    assert find_path(0, 1, hop_costs(available), available, line_topology.prop_delay).nodes == [0, 1]


def test_isolated_node_is_unreachable():
    topology = Topology([("A", "B", 1, 1)], nodes=["C"])
    cap = topology.capacity
    assert find_path(0, 2, hop_costs(cap), cap, topology.prop_delay) is None
    assert find_path(2, 0, hop_costs(cap), cap, topology.prop_delay) is None
    # a node with no usable link never enters the search, not even as its own destination
    assert find_path(2, 2, hop_costs(cap), cap, topology.prop_delay) is None


def test_source_equal_to_destination_on_connected_node(line_topology):
    cap = line_topology.capacity
    path = find_path(1, 1, hop_costs(cap), cap, line_topology.prop_delay)
    assert path.nodes == [1]
    assert path.hop_count == 0
    assert path.total_delay == 0.0


def test_fractional_costs_are_not_truncated(square_topology):
    cap = square_topology.capacity
    cost = hop_costs(cap) * 0.0
    cost[0][1] = cost[1][0] = 0.25
    path = find_path(0, 3, cost, cap, square_topology.prop_delay)
    assert path.nodes == [0, 2, 3]
    assert path.cost == pytest.approx(0.0)
