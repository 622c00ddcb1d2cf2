from math import inf

import pytest

from contestkit.shortest_path import ShortestPath


def _graph():
    sp = ShortestPath(5)
    sp.add_edge(1, 2, 1)
    sp.add_edge(2, 3, 1)
    sp.add_edge(1, 3, 5)
    sp.add_edge(3, 4, 2)
    return sp


def test_dijkstra_prefers_cheaper_route():
    sp = _graph()
    dist = sp.dijkstra(1)
    assert dist[3] == 2
    assert sp.get_path(3) == [1, 2, 3]


def test_unreachable_vertex():
    sp = _graph()
    dist = sp.dijkstra(1)
    assert dist[5] == inf
    assert sp.get_path(5) == []


def test_path_starts_at_source_and_ends_at_dest():
    sp = _graph()
    sp.dijkstra(4)
    path = sp.get_path(1)
    assert path[0] == 4 and path[-1] == 1


def test_bellman_ford_matches_dijkstra():
    sp = _graph()
    expected = sp.dijkstra(2)
    assert sp.bellman_ford(2) is False
    assert sp.dist == expected


def test_negative_edge_detected_and_spread():
    sp = ShortestPath(5)
    sp.add_edge(1, 2, 3)
    sp.add_edge(2, 3, -1)
    sp.add_edge(3, 4, 2)
    assert sp.bellman_ford(1) is True
    assert sp.mark_negative_reachable() == [1, 2, 3, 4]


def test_floyd_warshall_matches_dijkstra():
    sp = _graph()
    table = sp.floyd_warshall()
    for s in range(1, 6):
        assert table[s][1:] == sp.dijkstra(s)[1:]


def test_reset_clears_results():
    sp = _graph()
    sp.dijkstra(1)
    sp.reset()
    assert sp.get_path(3) == []


def test_bad_vertex():
    with pytest.raises(IndexError):
        _graph().dijkstra(6)