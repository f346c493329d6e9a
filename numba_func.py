import numba as nb
import numpy as np


@nb.njit(cache=True)
def dijkstra_kernel(source, destination, cost, availability):
    """
    Dijkstra over the edges with positive availability.

    Returns (found, previous, distance). Vertices without any available edge
    never enter the frontier; ties on distance go to the lowest index.
    """
    n = availability.shape[0]
    distance = np.empty(n, dtype=np.float64)
    distance[:] = np.inf
    previous = np.empty(n, dtype=np.int64)
    previous[:] = -1
    in_queue = np.zeros(n, dtype=np.bool_)

    for i in range(n):
        for j in range(n):
            if availability[i, j] > 0:
                in_queue[i] = True
                break

    distance[source] = 0.0
    found = False

    while True:
        u = -1
        best = np.inf
        for i in range(n):
            if in_queue[i] and distance[i] < best:
                best = distance[i]
                u = i

        # frontier exhausted, or only unreachable vertices left
        if u == -1:
            break

        in_queue[u] = False
        if u == destination:
            found = True
            break

        for j in range(n):
            if in_queue[j] and availability[u, j] > 0:
                alt = distance[u] + cost[u, j]
                if alt < distance[j]:
                    distance[j] = alt
                    previous[j] = u

    return found, previous, distance
