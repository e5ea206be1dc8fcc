"""Generic directed graph structure."""

from __future__ import annotations

import logging
import math
import re
from functools import cmp_to_key, lru_cache
from typing import (
    Any,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    NamedTuple,
    Set,
    Tuple,
    TypeVar,
    Union,
)

from pyuca import Collator

Vertex = Union[str, int, float]

T = TypeVar("T", bound=Vertex)


class InvalidLabel(ValueError):

    """Raised when an object cannot be used as a vertex identifier."""

    def __init__(self, label: Any):
        super().__init__(f"invalid vertex label: {label!r}")
        self.label = label


def is_number(label: Any) -> bool:
    return isinstance(label, (int, float)) and not isinstance(label, bool)


def validate_label(label: Any):
    """Raise InvalidLabel unless label is a string or a (non-NaN) number."""
    if isinstance(label, str):
        return
    if is_number(label) and not (isinstance(label, float) and math.isnan(label)):
        return
    raise InvalidLabel(label)


DIGITS = re.compile(r"(\d+)")

COLLATOR = Collator()


def natural_chunks(s: str) -> List[Union[int, str]]:
    """Split a casefolded label into text runs and integer digit runs."""
    chunks: List[Union[int, str]] = []
    for i, part in enumerate(DIGITS.split(s.casefold())):
        if part:
            chunks.append(int(part) if i % 2 else part)
    return chunks


@lru_cache(maxsize=1024)
def collation_key(text: str) -> Tuple[int, ...]:
    return COLLATOR.sort_key(text)


def compare_chunks(a: Union[int, str], b: Union[int, str]) -> int:
    if isinstance(a, int) and isinstance(b, int):
        return (a > b) - (a < b)
    # A digit run against text collates like the digits it spells.
    ka, kb = collation_key(str(a)), collation_key(str(b))
    return (ka > kb) - (ka < kb)


def compare_text(a: str, b: str) -> int:
    """Collate two labels case-insensitively, digit runs by value.

    Text runs use the Unicode Collation Algorithm, so accented letters sit next
    to their base letter and punctuation sorts before digits and letters.
    """
    ca, cb = natural_chunks(a), natural_chunks(b)
    for x, y in zip(ca, cb):
        result = compare_chunks(x, y)
        if result:
            return result
    return (len(ca) > len(cb)) - (len(ca) < len(cb))


def compare_vertices(a: Vertex, b: Vertex) -> int:
    """Three-way comparison defining the display order of vertices.

    Two numbers compare by value. Anything else compares by string form with
    compare_text, then by plain string as a tie-break.
    """
    if is_number(a) and is_number(b):
        return (a > b) - (a < b)
    sa, sb = str(a), str(b)
    return compare_text(sa, sb) or (sa > sb) - (sa < sb)


def sort_vertices(vertices: Iterable[T]) -> List[T]:
    return sorted(vertices, key=cmp_to_key(compare_vertices))


class AdjacencyMatrix(NamedTuple):

    """Vertices in display order and the 0/1 matrix indexed by them."""

    vertices: List[Any]
    matrix: List[List[int]]


class DirectedGraph(Generic[T]):

    """A directed graph.

    Vertices are strings or numbers of type T. Each vertex maps to the set of
    its successors, so parallel edges collapse into one. Self-loops are
    allowed. Nothing is ever removed.
    """

    def __init__(self):
        self.adjacency: Dict[T, Set[T]] = {}

    def __repr__(self) -> str:
        return f"DirectedGraph(V={len(self.adjacency)}, E={self.edge_count()})"

    def __len__(self) -> int:
        return len(self.adjacency)

    def __contains__(self, vertex: object) -> bool:
        try:
            return vertex in self.adjacency
        except TypeError:
            return False

    def add_vertex(self, vertex: T):
        validate_label(vertex)
        if vertex not in self.adjacency:
            logging.debug("adding vertex %r", vertex)
            self.adjacency[vertex] = set()

    def add_edge(self, src: T, dst: T):
        # Validate both ends first so a bad dst does not leave src behind.
        validate_label(src)
        validate_label(dst)
        self.add_vertex(src)
        self.add_vertex(dst)
        logging.debug("adding edge %r -> %r", src, dst)
        self.adjacency[src].add(dst)

    def has_edge(self, src: T, dst: T) -> bool:
        return dst in self.adjacency.get(src, ())

    def edge_count(self) -> int:
        return sum(len(dsts) for dsts in self.adjacency.values())

    def successors(self, vertex: T) -> List[T]:
        """Return the successors of vertex in display order.

        Raises KeyError if the vertex is not in the graph.
        """
        return sort_vertices(self.adjacency[vertex])

    def vertices(self) -> List[T]:
        return sort_vertices(self.adjacency)

    def edges(self) -> Iterator[Tuple[T, T]]:
        for src in self.vertices():
            for dst in self.successors(src):
                yield src, dst

    def get_adjacency_list(self) -> Dict[T, List[T]]:
        """Return a copy of the adjacency structure with lists for sets."""
        return {src: list(dsts) for src, dsts in self.adjacency.items()}

    def get_adjacency_matrix(self) -> AdjacencyMatrix:
        vertices = self.vertices()
        index = {vertex: i for i, vertex in enumerate(vertices)}
        n = len(vertices)
        matrix = [[0] * n for _ in range(n)]
        for src, dsts in self.adjacency.items():
            row = matrix[index[src]]
            for dst in dsts:
                row[index[dst]] = 1
        return AdjacencyMatrix(vertices, matrix)
