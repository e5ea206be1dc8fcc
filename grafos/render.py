"""Text rendering of graph projections."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, List, NamedTuple, TextIO

from grafos.graph import DirectedGraph, sort_vertices

if TYPE_CHECKING:
    from grafos.config import DisplayConfig


class RenderOptions(NamedTuple):

    """Options for rendering."""

    # Width of each matrix cell, including the label column.
    cell_width: int = 3
    # Shown in place of the neighbor list for vertices with no out-edges.
    empty_marker: str = "∅"
    separator: str = ", "

    @staticmethod
    def from_config(cfg: DisplayConfig) -> RenderOptions:
        return RenderOptions(
            cell_width=cfg["cell_width"],
            empty_marker=cfg["empty_marker"],
            separator=cfg["separator"],
        )


DEFAULT_OPTIONS = RenderOptions()


def format_adjacency_list(
    graph: DirectedGraph[Any], options: RenderOptions = DEFAULT_OPTIONS
) -> List[str]:
    """Format the adjacency list as one "v -> a, b" line per vertex."""
    adjacency = graph.get_adjacency_list()
    lines = []
    for vertex in sort_vertices(adjacency):
        successors = sort_vertices(adjacency[vertex])
        if successors:
            rhs = options.separator.join(str(dst) for dst in successors)
        else:
            rhs = options.empty_marker
        lines.append(f"{vertex} -> {rhs}")
    return lines


def format_adjacency_matrix(
    graph: DirectedGraph[Any], options: RenderOptions = DEFAULT_OPTIONS
) -> List[str]:
    """Format the adjacency matrix as a table with a header row.

    Labels wider than the cell width are printed in full, which misaligns the
    table rather than hiding part of a label.
    """
    width = options.cell_width
    vertices, matrix = graph.get_adjacency_matrix()
    header = " " * width + "".join(str(v).rjust(width) for v in vertices)
    lines = [header]
    for vertex, row in zip(vertices, matrix):
        cells = "".join(str(cell).rjust(width) for cell in row)
        lines.append(str(vertex).ljust(width) + cells)
    return lines


def print_adjacency_list(
    graph: DirectedGraph[Any],
    out: TextIO = sys.stdout,
    options: RenderOptions = DEFAULT_OPTIONS,
):
    for line in format_adjacency_list(graph, options):
        print(line, file=out)


def print_adjacency_matrix(
    graph: DirectedGraph[Any],
    out: TextIO = sys.stdout,
    options: RenderOptions = DEFAULT_OPTIONS,
):
    for line in format_adjacency_matrix(graph, options):
        print(line, file=out)
