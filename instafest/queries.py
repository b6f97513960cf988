"""The four questions that can be asked about an influencer graph."""

from __future__ import annotations

import heapq
from abc import ABC, abstractmethod
from collections import deque
from typing import Optional

from instafest.graph import Graph


def topological_order(graph: Graph) -> Optional[list[int]]:
    """Smallest-first topological order of the vertices, or None if there is a cycle."""
    indegree = {v: 0 for v in graph.vertices}
    for u in graph.vertices:
        for v in graph.adjacency[u]:
            indegree[v] += 1
    ready = [v for v in graph.vertices if indegree[v] == 0]
    heapq.heapify(ready)
    order = []
    while ready:
        u = heapq.heappop(ready)
        order.append(u)
        for v in graph.adjacency[u]:
            indegree[v] -= 1
            if indegree[v] == 0:
                heapq.heappush(ready, v)
    return order if len(order) == graph.vertex_count else None


def max_hype(graph: Graph) -> int:
    """Largest hype collectable along a path of the component graph, never below 0."""
    cond = graph.condensation()
    indegree = [0] * len(cond)
    for targets in cond.successors:
        for v in targets:
            indegree[v] += 1
    best = [0] * len(cond)
    queue: deque[int] = deque()
    for index, count in enumerate(indegree):
        if count == 0:
            queue.append(index)
            best[index] = cond.hype[index]
    result = 0
    while queue:
        u = queue.popleft()
        result = max(result, best[u])
        for v in cond.successors[u]:
            best[v] = max(best[v], best[u] + cond.hype[v])
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)
    return result


class GraphQuery(ABC):
    """A question about a graph whose answer is one line of text."""

    @abstractmethod
    def run(self, graph: Graph) -> str:
        """Answer the question for ``graph``."""


class CycleQuery(GraphQuery):
    def run(self, graph: Graph) -> str:
        return "YES" if graph.has_cycle() else "NO"


class ComponentQuery(GraphQuery):
    def run(self, graph: Graph) -> str:
        components = graph.strongly_connected_components()
        largest = max((len(c) for c in components), default=0)
        return f"{len(components)} {largest}"


class OrderQuery(GraphQuery):
    def run(self, graph: Graph) -> str:
        order = topological_order(graph)
        if order is None:
            return "NO"
        return "".join(f"{v} " for v in order)


class MaxHypeQuery(GraphQuery):
    def run(self, graph: Graph) -> str:
        return str(max_hype(graph))


_QUERIES: dict[int, type[GraphQuery]] = {
    1: CycleQuery,
    2: ComponentQuery,
    3: OrderQuery,
    4: MaxHypeQuery,
}


def query_for(kind: int) -> GraphQuery:
    """The query numbered ``kind``; raises ValueError for an unknown number."""
    try:
        return _QUERIES[kind]()
    except KeyError:
        raise ValueError(f"unknown query type: {kind}") from None