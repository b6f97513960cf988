# instafest

A small toolkit that answers questions about a directed graph of influencers.
Each influencer has a number of *hype points*. An edge `a b` means that `a`
must come before `b`.

The package supports these queries:

| Type | Question | Output |
|------|----------|--------|
| 1 | Does the graph contain a cycle? | `YES` or `NO` |
| 2 | How many strongly connected components are there, and how large is the biggest one? | `count max_size` |
| 3 | What is a valid order? If there is a tie, the smallest vertex comes first. | the vertices, each followed by a space, or `NO` if there is a cycle |
| 4 | What is the largest total hype along a path through the graph of components? | one integer, never below 0 |

## Installation

```
pip install .
```

## Command line

The `instafest` command reads a problem from standard input. It prints one
answer line for each query. The input is a sequence of integers separated by
whitespace:

```
N M
h1 h2 ... hN
a1 b1
...
aM bM
Q
t1
...
tQ
```

The vertices are numbered from `1` to `N`. The command skips any query type
other than 1 to 4. If the input is malformed, the command prints a message to
standard error and exits with status 1. Malformed input includes missing
numbers, tokens that are not integers, a vertex outside `1..N`, and a negative
`N`.

```
$ printf '3 3\n1 2 3\n1 2\n2 3\n3 1\n4\n1\n2\n3\n4\n' | instafest
YES
1 3
NO
6
```

## Library

```python
from instafest.graph import Graph
from instafest.queries import topological_order, max_hype, query_for
from instafest.cli import answer, parse_input

graph = Graph(3, {1: [2], 2: [3], 3: []}, [5, 1, 4])
graph.has_cycle()                         # False
graph.strongly_connected_components()     # [[1], [2], [3]]
topological_order(graph)                  # [1, 2, 3]
max_hype(graph)                           # 10

query_for(2).run(graph)                   # "3 1"

answer("2 1\n1 2\n1 2\n1\n3\n")           # "1 2 \n"
```

- `Graph(vertex_count, adjacency, hype)` raises `ValueError` in three cases: a
  vertex is out of range, the number of hype values is wrong, or the vertex
  count is negative.
- `Graph.cycle_lengths()` lists the length recorded for each back edge that a
  depth-first search in vertex order finds.
- `Graph.transpose()` returns the graph with every edge reversed.
- `Graph.strongly_connected_components()` returns the components in
  topological order.
- `Graph.condensation()` returns a `Condensation`. It holds the components,
  the map `component_of` from each vertex to its component, the hype total of
  each component, and the edges between components.
- `topological_order(graph)` returns `None` when the graph has a cycle.
- `query_for(kind)` returns a `CycleQuery`, `ComponentQuery`, `OrderQuery` or
  `MaxHypeQuery` for the numbers 1 to 4. It raises `ValueError` for any other
  number. Each query's `run(graph)` returns the answer line as a string.
- `parse_input(text)` turns the text format into a `Problem`, which holds the
  graph and the query numbers.
- `answer(text)` returns all the answer lines. Each line ends with a newline.

## Development

```
pip install -e '.[test]'
pytest
```