import random

import pytest

from contestkit.flow import (
    Dinic,
    DisjointPaths,
    EdmondsKarp,
    FordFulkerson,
    HopcroftKarp,
    MinCostMaxFlow,
    UnitMaxFlow,
)

CLASSIC = [
    (1, 2, 16), (1, 3, 13), (2, 3, 10), (3, 2, 4), (2, 4, 12),
    (4, 3, 9), (3, 5, 14), (5, 4, 7), (4, 6, 20), (5, 6, 4),
]


def _random_edges(rng, n, count, max_cap=9):
    edges = []
    for _ in range(count):
        u, v = rng.sample(range(1, n + 1), 2)
        edges.append((u, v, rng.randint(0, max_cap)))
    return edges


def _fill(net, edges):
    for u, v, cap in edges:
        net.add_edge(u, v, cap)
    return net


def _all_matrix(n):
    return [FordFulkerson(n), EdmondsKarp(n), Dinic(n)]


def test_single_edge():
    for net in _all_matrix(2):
        net.add_edge(1, 2, 5)
        assert net.max_flow(1, 2) == 5


def test_classic_network():
    assert _fill(FordFulkerson(6), CLASSIC).max_flow(1, 6) == 23
    assert _fill(EdmondsKarp(6), CLASSIC).max_flow(1, 6) == 23
    assert _fill(Dinic(6), CLASSIC).max_flow(1, 6) == 23


def test_disconnected_sink_gets_nothing():
    for net in (FordFulkerson(3), EdmondsKarp(3), Dinic(3)):
        net.add_edge(1, 2, 7)
        assert net.max_flow(1, 3) == 0


@pytest.mark.parametrize("seed", range(15))
def test_algorithms_agree_and_respect_source_capacity(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 8)
    edges = _random_edges(rng, n, rng.randint(1, 20))
    results = {type(net).__name__: _fill(net, edges).max_flow(1, n) for net in _all_matrix(n)}
    assert len(set(results.values())) == 1
    flow = results["Dinic"]
    assert 0 <= flow <= sum(cap for u, _, cap in edges if u == 1)
    assert flow <= sum(cap for _, v, cap in edges if v == n)
    mcmf = MinCostMaxFlow(n)
    for u, v, cap in edges:
        mcmf.add_edge(u, v, cap, rng.randint(0, 5))
    assert mcmf.max_flow(1, n)[0] == flow


def test_errors():
    for net in (FordFulkerson(3), EdmondsKarp(3), Dinic(3)):
        with pytest.raises(IndexError):
            net.add_edge(0, 2, 1)
        with pytest.raises(ValueError):
            net.add_edge(1, 2, -1)
        with pytest.raises(ValueError):
            net.max_flow(2, 2)


def test_min_cost_prefers_cheaper_path():
    mcmf = MinCostMaxFlow(5)
    mcmf.add_edge(5, 1, 1, 0)
    mcmf.add_edge(1, 2, 1, 1)
    mcmf.add_edge(2, 4, 1, 1)
    mcmf.add_edge(1, 3, 1, 5)
    mcmf.add_edge(3, 4, 1, 5)
    assert mcmf.max_flow(5, 4) == (1, 2)


def test_min_cost_single_edge_cost_scales_with_flow():
    mcmf = MinCostMaxFlow(2)
    mcmf.add_edge(1, 2, 4, 3)
    assert mcmf.max_flow(1, 2) == (4, 4 * 3)


def test_min_cost_errors():
    mcmf = MinCostMaxFlow(2)
    with pytest.raises(IndexError):
        mcmf.add_edge(1, 3, 1, 1)
    with pytest.raises(ValueError):
        mcmf.max_flow(1, 1)


def _unit_edges(rng, n, count):
    return [tuple(rng.sample(range(1, n + 1), 2)) for _ in range(count)]


@pytest.mark.parametrize("seed", range(15))
def test_unit_flow_matches_dinic_and_cut(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 8)
    edges = _unit_edges(rng, n, rng.randint(1, 20))
    unit = UnitMaxFlow(n)
    dinic = Dinic(n)
    for u, v in edges:
        unit.add_edge(u, v)
        dinic.add_edge(u, v, 1)
    flow = unit.max_flow(1, n)
    assert flow == dinic.max_flow(1, n)
    cut = unit.min_cut(1)
    assert len(cut) == flow
    for edge in cut:
        assert edge in edges


@pytest.mark.parametrize("seed", range(15))
def test_disjoint_paths_are_valid(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 8)
    edges = _unit_edges(rng, n, rng.randint(1, 20))
    net = DisjointPaths(n)
    for u, v in edges:
        net.add_edge(u, v)
    flow = net.max_flow(1, n)
    paths = net.disjoint_paths(1, flow)
    assert len(paths) == flow
    remaining = list(edges)
    for path in paths:
        assert path[0] == 1
        assert path[-1] == n
        for step in zip(path, path[1:]):
            assert step in remaining
            remaining.remove(step)


def test_disjoint_paths_two_routes():
    net = DisjointPaths(4)
    for u, v in [(1, 2), (2, 4), (1, 3), (3, 4)]:
        net.add_edge(u, v)
    assert net.max_flow(1, 4) == 2
    assert sorted(net.disjoint_paths(1, 2)) == [[1, 2, 4], [1, 3, 4]]


def test_unit_errors():
    net = UnitMaxFlow(3)
    with pytest.raises(IndexError):
        net.add_edge(1, 4)
    with pytest.raises(ValueError):
        net.max_flow(3, 3)


@pytest.mark.parametrize("seed", range(15))
def test_matching_matches_flow(seed):
    rng = random.Random(seed)
    n, m = rng.randint(1, 6), rng.randint(1, 6)
    pairs = {(rng.randint(1, n), rng.randint(1, m)) for _ in range(rng.randint(0, 15))}
    hk = HopcroftKarp(n, m)
    size = n + m + 2
    dinic = Dinic(size)
    for u in range(1, n + 1):
        dinic.add_edge(1, 1 + u, 1)
    for v in range(1, m + 1):
        dinic.add_edge(1 + n + v, size, 1)
    for u, v in pairs:
        hk.add_edge(u, v)
        dinic.add_edge(1 + u, 1 + n + v, 1)
    matched = hk.max_matching()
    assert matched == dinic.max_flow(1, size)
    for u in range(1, n + 1):
        v = hk.match_left[u]
        if v:
            assert (u, v) in pairs
            assert hk.match_right[v] == u
    assert sum(1 for v in hk.match_right[1:] if v) == matched


def test_matching_is_stable_when_called_twice():
    hk = HopcroftKarp(2, 2)
    for u, v in [(1, 1), (1, 2), (2, 1)]:
        hk.add_edge(u, v)
    first = hk.max_matching()
    assert first == 2
    assert hk.max_matching() == first


def test_matching_errors():
    hk = HopcroftKarp(2, 3)
    with pytest.raises(IndexError):
        hk.add_edge(3, 1)
    with pytest.raises(IndexError):
        hk.add_edge(1, 4)