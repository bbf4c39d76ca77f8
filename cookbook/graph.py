"""A directed graph stored as a mapping from node to its successors."""

from __future__ import annotations

from typing import Sequence


class Graph:
    """Directed graph of string-named nodes."""

    def __init__(self) -> None:
        self._edges: dict[str, set[str]] = {}

    def add_edge(self, src: str, dst: str) -> None:
        """Add an edge from src to dst."""
        self._edges.setdefault(src, set()).add(dst)

    def has_edge(self, src: str, dst: str) -> bool:
        """Report whether there is an edge from src to dst."""
        return dst in self._edges.get(src, ())


def main(argv: Sequence[str] | None = None) -> int:
    """Build a small graph and print the result of several edge queries."""
    graph = Graph()
    for src, dst in [("a", "b"), ("c", "d"), ("a", "d"), ("d", "a")]:
        graph.add_edge(src, dst)
    queries = [
        ("a", "b"), ("c", "d"), ("a", "d"), ("d", "a"),
        ("x", "b"), ("c", "d"), ("x", "d"), ("d", "x"),
    ]
    for src, dst in queries:
        print(str(graph.has_edge(src, dst)).lower())
    return 0