"""Command that reads a graph and a list of queries and prints the answers."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

from instafest.graph import Graph
from instafest.queries import query_for


@dataclass(frozen=True)
class Problem:
    """A graph together with the query numbers to answer about it."""

    graph: Graph
    queries: tuple[int, ...]


def _reader(text: str):
    tokens: Iterator[str] = iter(text.split())

    def take(what: str) -> int:
        try:
            token = next(tokens)
        except StopIteration:
            raise ValueError(f"input ended while reading {what}") from None
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer for {what}, got {token!r}") from None

    return take


def parse_input(text: str) -> Problem:
    """Parse vertex and edge counts, hype points, edges and queries."""
    take = _reader(text)
    vertex_count = take("vertex count")
    edge_count = take("edge count")
    hype = [take("hype points") for _ in range(vertex_count)]
    adjacency: defaultdict[int, list[int]] = defaultdict(list)
    for _ in range(edge_count):
        source = take("edge source")
        target = take("edge target")
        adjacency[source].append(target)
    graph = Graph(vertex_count, adjacency, hype)
    query_count = take("query count")
    queries = tuple(take("query type") for _ in range(query_count))
    return Problem(graph, queries)


def answer(text: str) -> str:
    """Answer every known query in the input, one line each; unknown ones are skipped."""
    problem = parse_input(text)
    lines = []
    for kind in problem.queries:
        try:
            query = query_for(kind)
        except ValueError:
            continue
        lines.append(query.run(problem.graph))
    return "".join(f"{line}\n" for line in lines)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="instafest",
        description="Answer cycle, component, ordering and hype queries "
        "about a directed influencer graph read from standard input.",
    )
    parser.parse_args(argv)
    try:
        output = answer(sys.stdin.read())
    except ValueError as error:
        print(f"instafest: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())