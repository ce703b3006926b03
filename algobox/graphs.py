"""Undirected graphs on numbered vertices: traversals and components."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator, Sequence


class Graph:
    """An undirected graph with vertices numbered ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must not be negative")
        self.adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self.adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self.adjacency):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._check(u)
        self._check(v)
        self.adjacency[u].append(v)
        self.adjacency[v].append(u)

    def bfs(self, source: int) -> list[int]:
        """Vertices reachable from ``source`` in breadth-first order."""
        self._check(source)
        visited = {source}
        order = []
        queue = deque([source])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self.adjacency[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, source: int) -> list[int]:
        """Vertices reachable from ``source`` in recursive depth-first preorder."""
        self._check(source)
        visited = {source}
        order = [source]
        stack = [iter(self.adjacency[source])]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self.adjacency[neighbour]))
                    break
            else:
                stack.pop()
        return order

    def dfs_iterative(self, source: int) -> list[int]:
        """Depth-first order using an explicit stack.

        Vertices are marked when pushed, so the order differs from
        :meth:`dfs`: the most recently added neighbour is visited first.
        """
        self._check(source)
        visited = {source}
        order = []
        stack = [source]
        while stack:
            vertex = stack.pop()
            order.append(vertex)
            for neighbour in self.adjacency[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)
        return order

    def describe(self) -> str:
        """One line per vertex listing its neighbours."""
        lines = []
        for vertex, neighbours in enumerate(self.adjacency):
            links = "".join(f"-> {n}" for n in neighbours)
            lines.append(f"Adjacency list of vertex {vertex} is as :- {vertex} {links}")
        return "\n".join(lines)


def connected_components(adjacency: Sequence[Sequence[int]], nodes: int) -> int:
    """Count connected components of a graph with vertices ``1 .. nodes``.

    ``adjacency[node]`` lists the neighbours of ``node``; index 0 is unused.
    """
    visited = [False] * (nodes + 1)
    components = 0
    for node in range(1, nodes + 1):
        if visited[node]:
            continue
        components += 1
        visited[node] = True
        queue = deque([node])
        while queue:
            current = queue.popleft()
            for child in adjacency[current]:
                if not visited[child]:
                    visited[child] = True
                    queue.append(child)
    return components


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def _format_bfs(order: list[int], vertices: int) -> str:
    text = "->".join(map(str, order))
    # Every vertex gets a trailing arrow unless the walk covered the whole graph.
    return text if len(order) == vertices else text + "->"


def main(argv: Sequence[str] | None = None) -> int:
    """Read an undirected graph from standard input and print its traversals."""
    parser = argparse.ArgumentParser(
        description="Build an undirected graph interactively and print BFS and DFS orders from vertex 0."
    )
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter No. of Vertices : ", end="", flush=True)
        vertices = int(_take(tokens))
        if vertices <= 0:
            raise ValueError("the graph needs at least one vertex")
        graph = Graph(vertices)
        answer = "y"
        while answer == "y":
            print("Enter the two edges for connection : ", end="", flush=True)
            u = int(_take(tokens))
            v = int(_take(tokens))
            graph.add_edge(u, v)
            print("Do you want to enter more edges press(y) : ", end="", flush=True)
            answer = _take(tokens)
    except (EOFError, ValueError, IndexError) as exc:
        print()
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print("Graph Connections Are !!!")
    print(graph.describe())
    print("BFS Traversal is : " + _format_bfs(graph.bfs(0), vertices))
    print("DFS using recursion : " + " ".join(map(str, graph.dfs(0))))
    print("DFS using Stack : " + " ".join(map(str, graph.dfs_iterative(0))))
    return 0