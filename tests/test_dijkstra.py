import pytest

from labstructs.dijkstra import dijkstra, render_distances

GRAPH = [
    [0, 4, 0, 0, 0, 0],
    [4, 0, 8, 0, 0, 0],
    [0, 8, 0, 7, 0, 4],
    [0, 0, 7, 0, 9, 14],
    [0, 0, 0, 9, 0, 10],
    [0, 0, 4, 14, 10, 0],
]


def test_source_example():
    assert dijkstra(GRAPH, 0) == [0, 4, 12, 19, 26, 16]


@pytest.mark.parametrize("source", range(6))
def test_distances_respect_every_edge(source):
    dist = dijkstra(GRAPH, source)
    assert dist[source] == 0
    for u, row in enumerate(GRAPH):
        for v, weight in enumerate(row):
            if weight:
                assert dist[v] <= dist[u] + weight


def test_undirected_distances_are_symmetric():
    table = [dijkstra(GRAPH, s) for s in range(6)]
    for a in range(6):
        for b in range(6):
            assert table[a][b] == table[b][a]


def test_single_edge_distance_equals_its_weight():
    graph = [[0, 3], [3, 0]]
    assert dijkstra(graph, 0) == [0, 3]


def test_unreachable_vertex_is_none():
    graph = [[0, 2, 0], [2, 0, 0], [0, 0, 0]]
    assert dijkstra(graph, 0)[2] is None
    assert dijkstra(graph, 2) == [None, None, 0]


def test_rejects_non_square_matrix():
    with pytest.raises(ValueError):
        dijkstra([[0, 1], [1]], 0)


def test_rejects_negative_weight():
    with pytest.raises(ValueError):
        dijkstra([[0, -1], [-1, 0]], 0)


def test_rejects_bad_source():
    with pytest.raises(IndexError):
        dijkstra(GRAPH, 6)


def test_render_distances():
    text = render_distances([0, 4, None])
    assert text.split("\n") == [
        "Vertex \t Distance from Source",
        "0 \t\t 0",
        "1 \t\t 4",
        "2 \t\t inf",
    ]