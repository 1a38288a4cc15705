"""A graph stored as adjacency lists keyed by node."""

from __future__ import annotations

from collections.abc import Iterator


class Graph:
    """Adjacency-list graph; edges may be directed or undirected."""

    def __init__(self) -> None:
        self._adj: dict[int, list[int]] = {}

    def add_edge(self, u: int, v: int, directed: bool = False) -> None:
        """Add an edge from ``u`` to ``v``, and back again unless directed."""
        self._adj.setdefault(u, []).append(v)
        if not directed:
            self._adj.setdefault(v, []).append(u)

    def neighbours(self, node: int) -> list[int]:
        """Return the nodes reachable from ``node`` by one edge, in insertion order."""
        return list(self._adj.get(node, ()))

    def __contains__(self, node: object) -> bool:
        return node in self._adj

    def __iter__(self) -> Iterator[int]:
        return iter(self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def format_adjacency(self) -> str:
        """Render the adjacency lists, one node per line."""
        lines = ["Adjacency List: "]
        lines.extend(
            f"{node}->" + "".join(f"{other}, " for other in others)
            for node, others in self._adj.items()
        )
        return "\n".join(lines) + "\n"