import pytest

from labstructs.adjacency import AdjacencyListGraph, main

DEMO_EDGES = [(0, 1), (0, 4), (1, 2), (1, 3), (1, 4), (2, 3), (3, 4)]


def demo_graph():
    graph = AdjacencyListGraph(5)
    for u, v in DEMO_EDGES:
        graph.add_edge(u, v)
    return graph


def test_neighbors_newest_first():
    graph = demo_graph()
    assert graph.neighbors(1) == [4, 3, 2, 0]


def test_edges_are_symmetric():
    graph = demo_graph()
    for u, v in DEMO_EDGES:
        assert v in graph.neighbors(u)
        assert u in graph.neighbors(v)


def test_bfs_demo_order():
    assert demo_graph().bfs(0) == [0, 4, 1, 3, 2]


def test_dfs_demo_order():
    assert demo_graph().dfs(0) == [0, 4, 3, 2, 1]


def test_traversals_visit_component_once():
    graph = AdjacencyListGraph(6)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    graph.add_edge(4, 5)
    for order in (graph.bfs(0), graph.dfs(0)):
        assert order[0] == 0
        assert sorted(order) == [0, 1, 2]
    assert graph.bfs(3) == [3]


def test_bfs_level_ordering():
    graph = demo_graph()
    order = graph.bfs(2)
    position = {v: i for i, v in enumerate(order)}
    for vertex in order[1:]:
        earlier = [n for n in graph.neighbors(vertex) if position[n] < position[vertex]]
        assert earlier


def test_friend_suggestions_on_path():
    graph = AdjacencyListGraph(4)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    graph.add_edge(2, 3)
    friends, suggestions = graph.friend_suggestions(0)
    assert friends == [1]
    assert suggestions == [2]


def test_friend_suggestions_exclude_direct_friends():
    graph = demo_graph()
    friends, suggestions = graph.friend_suggestions(0)
    assert friends == sorted(graph.neighbors(0))
    assert not set(friends) & set(suggestions)
    assert 0 not in friends + suggestions


def test_render_lists_every_vertex():
    graph = demo_graph()
    lines = graph.render().splitlines()
    assert len(lines) == 5
    for vertex, line in enumerate(lines):
        head, _, rest = line.partition(":")
        assert int(head) == vertex
        assert [int(x) for x in rest.split()] == graph.neighbors(vertex)


def test_invalid_vertex():
    graph = AdjacencyListGraph(3)
    with pytest.raises(IndexError):
        graph.add_edge(0, 3)
    with pytest.raises(IndexError):
        graph.bfs(-1)


def test_negative_size():
    with pytest.raises(ValueError):
        AdjacencyListGraph(-1)


def test_main_reports_suggestions(tmp_path, capsys):
    data = tmp_path / "graph.txt"
    data.write_text("4 3\n0 1\n1 2\n2 3\n0\n", encoding="utf-8")
    assert main([str(data)]) == 0
    out = capsys.readouterr().out
    assert "Direct friends of user 0: 1" in out
    assert "Friend suggestions for user 0: 2" in out


def test_main_rejects_short_input(tmp_path, capsys):
    data = tmp_path / "graph.txt"
    data.write_text("4 3\n0 1\n", encoding="utf-8")
    assert main([str(data)]) == 1
    assert "error" in capsys.readouterr().err