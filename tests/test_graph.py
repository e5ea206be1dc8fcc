"""Tests for the directed graph container."""

import pytest

from grafos.graph import (
    DirectedGraph,
    InvalidLabel,
    compare_vertices,
    natural_chunks,
    sort_vertices,
)


def build(edges):
    graph = DirectedGraph()
    for src, dst in edges:
        graph.add_edge(src, dst)
    return graph


SAMPLE_EDGES = [("A", "B"), ("A", "C"), ("B", "C"), ("C", "A"), ("C", "D")]


def test_empty_graph():
    graph = DirectedGraph()
    assert len(graph) == 0
    assert graph.get_adjacency_list() == {}
    vertices, matrix = graph.get_adjacency_matrix()
    assert vertices == []
    assert matrix == []
    assert repr(graph) == "DirectedGraph(V=0, E=0)"


def test_add_vertex_is_idempotent():
    graph = DirectedGraph()
    graph.add_vertex("A")
    graph.add_edge("A", "B")
    graph.add_vertex("A")
    assert graph.adjacency["A"] == {"B"}
    assert len(graph) == 2


def test_add_edge_creates_both_ends():
    graph = DirectedGraph()
    graph.add_edge("X", "Y")
    assert "X" in graph and "Y" in graph
    assert graph.adjacency["Y"] == set()
    assert graph.has_edge("X", "Y")
    assert not graph.has_edge("Y", "X")


def test_duplicate_edges_collapse():
    graph = build([("A", "B"), ("A", "B"), ("A", "B")])
    assert graph.get_adjacency_list() == {"A": ["B"], "B": []}
    assert graph.edge_count() == 1


def test_no_dangling_neighbors():
    graph = build(SAMPLE_EDGES + [(1, "A"), ("Z", 2.5)])
    graph.add_vertex(0)
    for dsts in graph.adjacency.values():
        for dst in dsts:
            assert dst in graph.adjacency


def test_end_to_end_adjacency_list():
    adjacency = build(SAMPLE_EDGES).get_adjacency_list()
    assert {k: sorted(v) for k, v in adjacency.items()} == {
        "A": ["B", "C"],
        "B": ["C"],
        "C": ["A", "D"],
        "D": [],
    }


def test_end_to_end_adjacency_matrix():
    vertices, matrix = build(SAMPLE_EDGES).get_adjacency_matrix()
    assert vertices == ["A", "B", "C", "D"]
    assert matrix == [
        [0, 1, 1, 0],
        [0, 0, 1, 0],
        [1, 0, 0, 1],
        [0, 0, 0, 0],
    ]
    assert sum(map(sum, matrix)) == 5


def test_adjacency_list_is_a_snapshot():
    graph = build(SAMPLE_EDGES)
    adjacency = graph.get_adjacency_list()
    adjacency["A"].append("Q")
    adjacency["NEW"] = []
    assert graph.adjacency["A"] == {"B", "C"}
    assert "NEW" not in graph


def test_matrix_matches_list():
    graph = build(SAMPLE_EDGES + [("D", "D"), ("E", "A"), (3, "E")])
    graph.add_vertex("lonely")
    adjacency = graph.get_adjacency_list()
    vertices, matrix = graph.get_adjacency_matrix()
    for i, src in enumerate(vertices):
        for j, dst in enumerate(vertices):
            assert (matrix[i][j] == 1) == (dst in adjacency[src])


def test_matrix_is_deterministic():
    graph = build(SAMPLE_EDGES)
    assert graph.get_adjacency_matrix() == graph.get_adjacency_matrix()


def test_matrix_does_not_depend_on_insertion_order():
    forward = build(SAMPLE_EDGES)
    backward = build(reversed(SAMPLE_EDGES))
    assert forward.get_adjacency_matrix() == backward.get_adjacency_matrix()


def test_self_loop():
    graph = build(SAMPLE_EDGES + [("D", "D")])
    vertices, matrix = graph.get_adjacency_matrix()
    i = vertices.index("D")
    assert matrix[i][i] == 1
    assert graph.successors("D") == ["D"]


def test_natural_sort_order():
    graph = DirectedGraph()
    for vertex in ["B", "A", "C10", "C2"]:
        graph.add_vertex(vertex)
    assert graph.get_adjacency_matrix().vertices == ["A", "B", "C2", "C10"]


def test_sort_is_case_insensitive():
    assert sort_vertices(["b", "A", "c", "B10", "b9"]) == ["A", "b", "b9", "B10", "c"]


def test_numbers_sort_numerically():
    assert sort_vertices([10, 2, 1.5, 0, -3]) == [-3, 0, 1.5, 2, 10]


def test_mixed_numbers_and_strings():
    assert sort_vertices(["b", 10, "9", 2, "a"]) == [2, "9", 10, "a", "b"]


def test_compare_vertices():
    assert compare_vertices(2, 10) < 0
    assert compare_vertices("v10", "v2") > 0
    assert compare_vertices("x", "x") == 0
    # Case-insensitive ties still have a fixed order.
    assert compare_vertices("A", "a") < 0


def test_natural_chunks_split_digit_runs():
    assert natural_chunks("Route66b") == ["route", 66, "b"]
    assert natural_chunks("") == []


def test_accented_letters_sort_with_base_letter():
    assert sort_vertices(["z", "é", "f"]) == ["é", "f", "z"]
    assert sort_vertices(["Öl", "oz", "ob"]) == ["ob", "Öl", "oz"]
    assert compare_vertices("e", "é") < 0


def test_punctuation_sorts_before_digits_and_letters():
    assert sort_vertices(["1", "-a"]) == ["-a", "1"]
    assert sort_vertices(["b", "_x", "2", "a"]) == ["_x", "2", "a", "b"]


def test_float_and_string_order_is_pairwise():
    # Numbers compare by value, a number against a string by string form, so
    # these three labels form a cycle rather than a total order.
    assert compare_vertices(1.25, 1.5) < 0
    assert compare_vertices(1.5, "1.10") < 0
    assert compare_vertices("1.10", 1.25) < 0
    labels = [1.5, "1.10", 1.25]
    result = sort_vertices(labels)
    assert sorted(result, key=str) == sorted(labels, key=str)
    assert sort_vertices(labels) == result


@pytest.mark.parametrize("label", [None, {}, [], ("a",), object(), True, float("nan")])
def test_invalid_labels(label):
    graph = DirectedGraph()
    with pytest.raises(InvalidLabel) as info:
        graph.add_vertex(label)
    assert info.value.label is label
    assert len(graph) == 0


def test_invalid_label_is_a_value_error():
    with pytest.raises(ValueError):
        DirectedGraph().add_vertex(None)


@pytest.mark.parametrize("label", [0, "", -1, 2.5, "0"])
def test_valid_primitive_labels(label):
    graph = DirectedGraph()
    graph.add_vertex(label)
    assert label in graph


def test_invalid_edge_leaves_graph_unchanged():
    graph = DirectedGraph()
    with pytest.raises(InvalidLabel):
        graph.add_edge("A", None)
    with pytest.raises(InvalidLabel):
        graph.add_edge({}, "B")
    assert len(graph) == 0


def test_contains_unhashable():
    assert [] not in DirectedGraph()


def test_successors_unknown_vertex():
    with pytest.raises(KeyError):
        DirectedGraph().successors("missing")


def test_edges_in_display_order():
    graph = build([("b", "a"), ("a", "c"), ("a", "b")])
    assert list(graph.edges()) == [("a", "b"), ("a", "c"), ("b", "a")]
    assert repr(graph) == "DirectedGraph(V=3, E=3)"
