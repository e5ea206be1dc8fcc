"""Default files and the demo graph."""

from typing import List, Tuple

from grafos.graph import DirectedGraph

# Edges of the demo graph, in insertion order.
demo_edges: List[Tuple[str, str]] = [
    ("A", "B"),
    ("A", "C"),
    ("B", "C"),
    ("C", "A"),
    ("C", "D"),
    ("D", "D"),
]

# Vertices of the demo graph with no edges at all.
demo_isolated = ["E"]


def demo_graph() -> DirectedGraph[str]:
    graph: DirectedGraph[str] = DirectedGraph()
    for src, dst in demo_edges:
        graph.add_edge(src, dst)
    for vertex in demo_isolated:
        graph.add_vertex(vertex)
    return graph


grafos_yml = """\
# Width of each adjacency matrix cell.
cell_width: 3
# Shown for vertices with no outgoing edges.
empty_marker: "∅"
# Between neighbors in adjacency list lines.
separator: ", "
# Treat digit-only labels given on the command line as numbers.
numeric_labels: false
"""
