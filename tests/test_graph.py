import pytest

from contestkit.graph import Graph


def _tree():
    g = Graph(4)
    g.add_edge(1, 2)
    g.add_edge(1, 3)
    g.add_edge(2, 4)
    return g


def _path(n):
    g = Graph(n)
    for v in range(1, n):
        g.add_edge(v, v + 1)
    return g


def test_bfs_order():
    assert _tree().bfs(1) == [1, 2, 3, 4]


def test_bfs_only_reachable():
    g = Graph(4, directed=True)
    g.add_edge(1, 2)
    assert g.bfs(1) == [1, 2]


def test_dfs_postorder():
    order = _tree().dfs(1)
    assert order == [4, 2, 3, 1]


def test_farthest_and_diameter():
    g = _path(5)
    assert g.farthest_node(1) == (5, 4)
    assert g.diameter() == 4


def test_bad_vertex():
    with pytest.raises(IndexError):
        _tree().add_edge(0, 1)


def test_directed_cycles():
    g = Graph(4, directed=True)
    g.add_edge(1, 2)
    g.add_edge(2, 3)
    g.add_edge(3, 1)
    g.add_edge(3, 4)
    assert g.directed_cycles() == [[1, 2, 3]]


def test_dag_has_no_directed_cycles():
    g = Graph(3, directed=True)
    g.add_edge(1, 2)
    g.add_edge(2, 3)
    g.add_edge(1, 3)
    assert g.directed_cycles() == []


def test_undirected_cycle():
    assert _tree().has_undirected_cycle() is False
    g = _path(3)
    g.add_edge(3, 1)
    assert g.has_undirected_cycle() is True


def _dag():
    g = Graph(5, directed=True)
    for u, v in [(1, 3), (2, 3), (3, 4), (2, 5), (5, 4)]:
        g.add_edge(u, v)
    return g, [(1, 3), (2, 3), (3, 4), (2, 5), (5, 4)]


@pytest.mark.parametrize("method", ["topo_sort_kahn", "topo_sort_dfs"])
def test_topological_orders_respect_edges(method):
    g, edges = _dag()
    order = getattr(g, method)()
    assert sorted(order) == [1, 2, 3, 4, 5]
    pos = {v: i for i, v in enumerate(order)}
    assert all(pos[u] < pos[v] for u, v in edges)


def test_kahn_rejects_cycle():
    g = Graph(2, directed=True)
    g.add_edge(1, 2)
    g.add_edge(2, 1)
    with pytest.raises(ValueError):
        g.topo_sort_kahn()


def test_strongly_connected_components():
    g = Graph(4, directed=True)
    g.add_edge(1, 2)
    g.add_edge(2, 1)
    g.add_edge(2, 3)
    g.add_edge(3, 4)
    g.add_edge(4, 3)
    comps = g.strongly_connected_components()
    assert sorted(comps) == [[1, 2], [3, 4]]


def test_scc_partition_of_dag():
    g, _ = _dag()
    comps = g.strongly_connected_components()
    assert sorted(v for c in comps for v in c) == [1, 2, 3, 4, 5]
    assert all(len(c) == 1 for c in comps)


def test_bridges_on_path():
    bridges, arts = _path(3).bridges_and_articulation_points()
    assert {frozenset(b) for b in bridges} == {frozenset((1, 2)), frozenset((2, 3))}
    assert arts == [2]


def test_no_bridges_in_triangle():
    g = _path(3)
    g.add_edge(3, 1)
    assert g.bridges_and_articulation_points() == ([], [])