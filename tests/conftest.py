import pytest

from CallEvent import make_call_events
from Network import Topology


@pytest.fixture
def line_topology():
    # A - B - C, one unit per link
    return Topology([("A", "B", 1, 1), ("B", "C", 1, 1)])


@pytest.fixture
def square_topology():
    # two parallel two-hop paths A-B-D and A-C-D
    return Topology([
        ("A", "B", 1, 4),
        ("B", "D", 1, 4),
        ("A", "C", 1, 4),
        ("C", "D", 1, 4),
    ])


@pytest.fixture
def mesh_topology():
    return Topology([
        ("A", "B", 3, 2),
        ("A", "C", 5, 3),
        ("B", "C", 1, 1),
        ("B", "D", 4, 2),
        ("C", "D", 2, 2),
        ("C", "E", 6, 1),
        ("D", "E", 2, 3),
    ])


MESH_WORKLOAD = [
    (0.0, "A", "E", 4.0),
    (0.5, "B", "E", 3.0),
    (1.0, "A", "D", 6.0),
    (1.2, "C", "E", 2.0),
    (1.5, "A", "E", 5.0),
    (2.0, "E", "A", 1.0),
    (2.5, "B", "D", 4.0),
    (3.0, "A", "C", 2.5),
    (3.3, "D", "A", 3.0),
    (4.0, "A", "E", 2.0),
    (4.5, "C", "B", 1.0),
    (5.0, "E", "B", 3.0),
    (6.0, "A", "E", 1.0),
    (7.5, "D", "C", 2.0),
]


@pytest.fixture
def mesh_events(mesh_topology):
    return make_call_events(MESH_WORKLOAD, mesh_topology)
