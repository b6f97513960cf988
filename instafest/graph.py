"""Directed graph of influencers with hype points and its structural analyses."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class _Search:
    """Outcome of one full depth-first search."""

    trees: list[list[int]]
    finished: dict[int, int]
    cycle_lengths: list[int]


@dataclass(frozen=True)
class Condensation:
    """Graph whose vertices are the strongly connected components of another graph.

    Components are listed in topological order: every edge in ``successors``
    leads from a component to one with a larger index.
    """

    components: tuple[tuple[int, ...], ...]
    component_of: dict[int, int]
    hype: tuple[int, ...]
    successors: tuple[tuple[int, ...], ...]

    def __len__(self) -> int:
        return len(self.components)


class Graph:
    """Directed graph on the vertices ``1..vertex_count``, each carrying hype points."""

    def __init__(
        self,
        vertex_count: int,
        adjacency: Mapping[int, Iterable[int]],
        hype: Iterable[int],
    ) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex count must not be negative: {vertex_count}")
        self.vertex_count = vertex_count
        self.hype = tuple(hype)
        if len(self.hype) != vertex_count:
            raise ValueError(
                f"expected {vertex_count} hype values, got {len(self.hype)}"
            )
        successors: dict[int, list[int]] = {u: [] for u in self.vertices}
        for u, targets in adjacency.items():
            self._check_vertex(u)
            for v in targets:
                self._check_vertex(v)
                successors[u].append(v)
        self.adjacency: dict[int, tuple[int, ...]] = {
            u: tuple(vs) for u, vs in successors.items()
        }
        self._first: Optional[_Search] = None

    @property
    def vertices(self) -> range:
        return range(1, self.vertex_count + 1)

    def _check_vertex(self, vertex: int) -> None:
        if not 1 <= vertex <= self.vertex_count:
            raise ValueError(
                f"vertex {vertex} is outside 1..{self.vertex_count}"
            )

    def _search(self, roots: Iterable[int]) -> _Search:
        """Depth-first search started from each undiscovered root in turn.

        The timer advances on every discovery and every finish; a back edge to
        vertex ``v`` records ``timer - discovered[v] + 1``.
        """
        discovered: dict[int, int] = {}
        finished: dict[int, int] = {}
        trees: list[list[int]] = []
        cycles: list[int] = []
        timer = 0
        for root in roots:
            if root in discovered:
                continue
            timer += 1
            discovered[root] = timer
            tree = [root]
            stack = [(root, iter(self.adjacency[root]))]
            while stack:
                u, pending = stack[-1]
                for v in pending:
                    if v not in discovered:
                        timer += 1
                        discovered[v] = timer
                        tree.append(v)
                        stack.append((v, iter(self.adjacency[v])))
                        break
                    if v not in finished:
                        cycles.append(timer - discovered[v] + 1)
                else:
                    stack.pop()
                    timer += 1
                    finished[u] = timer
            trees.append(tree)
        return _Search(trees, finished, cycles)

    def _first_search(self) -> _Search:
        if self._first is None:
            self._first = self._search(self.vertices)
        return self._first

    def cycle_lengths(self) -> list[int]:
        """Lengths recorded for each back edge met by a search in vertex order."""
        return list(self._first_search().cycle_lengths)

    def has_cycle(self) -> bool:
        return bool(self._first_search().cycle_lengths)

    def transpose(self) -> Graph:
        """The graph with every edge reversed, keeping the hype points."""
        reversed_edges: dict[int, list[int]] = {u: [] for u in self.vertices}
        for u in self.vertices:
            for v in self.adjacency[u]:
                reversed_edges[v].append(u)
        return Graph(self.vertex_count, reversed_edges, self.hype)

    def strongly_connected_components(self) -> list[list[int]]:
        """Components in topological order, each listed in discovery order."""
        finished = self._first_search().finished
        order = sorted(self.vertices, key=finished.__getitem__, reverse=True)
        return [list(tree) for tree in self.transpose()._search(order).trees]

    def condensation(self) -> Condensation:
        components = self.strongly_connected_components()
        component_of = {
            v: index for index, members in enumerate(components) for v in members
        }
        hype = tuple(sum(self.hype[v - 1] for v in members) for members in components)
        targets: list[set[int]] = [set() for _ in components]
        for u in self.vertices:
            for v in self.adjacency[u]:
                source, target = component_of[u], component_of[v]
                if source != target:
                    targets[source].add(target)
        return Condensation(
            components=tuple(tuple(members) for members in components),
            component_of=component_of,
            hype=hype,
            successors=tuple(tuple(sorted(found)) for found in targets),
        )