"""Breadth-first and depth-first traversal of adjacency-matrix graphs.

Vertices are numbered from 1; row and column 0 of the matrix are unused as
neighbours.
"""

from __future__ import annotations

from collections import deque
from typing import Sequence


def _check_start(graph: Sequence[Sequence[int]], start: int) -> None:
    if not 0 <= start < len(graph):
        raise IndexError(f"start vertex {start} not in graph of {len(graph)} rows")


def bfs(graph: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the vertices in breadth-first order from start."""
    _check_start(graph, start)
    size = len(graph)
    visited = {start}
    order = [start]
    pending = deque([start])
    while pending:
        vertex = pending.popleft()
        for neighbour in range(1, size):
            if graph[vertex][neighbour] == 1 and neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                pending.append(neighbour)
    return order


def dfs(graph: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the vertices in depth-first order from start."""
    _check_start(graph, start)
    size = len(graph)
    visited: set[int] = set()
    order: list[int] = []

    def visit(vertex: int) -> None:
        if vertex in visited:
            return
        visited.add(vertex)
        order.append(vertex)
        for neighbour in range(1, size):
            if graph[vertex][neighbour] == 1 and neighbour not in visited:
                visit(neighbour)

    visit(start)
    return order