"""Breadth-first traversal over an implicit graph.

The graph is never materialised: callers pass a neighbour function and the
traversal only ever sees what that function returns. Game modules use it for
connectivity checks and multi-step piece movement.
"""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, TypeVar

T = TypeVar("T", bound=Hashable)


def bfs(
    start: T,
    neighbors: Callable[[T], Iterable[T]],
    max_depth: int = 0,
) -> list[list[T]]:
    """Return the nodes reachable from *start*, grouped by distance.

    ``result[d]`` holds the nodes first reached after ``d`` steps; a node
    appears in at most one bucket. ``max_depth == 0`` means unbounded: the
    search stops at the first empty bucket, which is kept as the last element.
    With a positive ``max_depth`` the result is padded with empty buckets so it
    always has ``max_depth + 1`` entries.
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")

    visited: set[T] = {start}
    nodes_by_depth: list[list[T]] = [[start]]

    depth = 1
    while max_depth == 0 or depth <= max_depth:
        bucket: list[T] = []
        for node in nodes_by_depth[depth - 1]:
            for neighbor in neighbors(node):
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                bucket.append(neighbor)
        nodes_by_depth.append(bucket)

        # Nothing new found, so no deeper bucket can be non-empty either
        if not bucket:
            break
        depth += 1

    while len(nodes_by_depth) <= max_depth:
        nodes_by_depth.append([])

    return nodes_by_depth
