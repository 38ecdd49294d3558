"""
Generic traversals over rooted structures.

Traversals:
    breadth_first_levels(after, root)    - BFS yielding (node, level) pairs
    depth_first_preorder(after, root)    - DFS yielding parent before children

`after` returns the children of a node. The structures walked here are
trees, so no visited set is kept: for graphs with cycles use
`pgm_graph.search`.
"""

from collections import deque
from typing import Callable, Iterable, Iterator, TypeVar

T = TypeVar("T")


def breadth_first_levels(
    after: Callable[[T], Iterable[T]], root: T | None
) -> Iterator[tuple[T, int]]:
    """Yields (node, level) level by level, the root being at level 0."""
    if root is None:
        return
    queue: deque[tuple[T, int]] = deque([(root, 0)])
    while queue:
        current, level = queue.popleft()
        yield current, level
        queue.extend((child, level + 1) for child in after(current))


def depth_first_preorder(
    after: Callable[[T], Iterable[T]], root: T | None
) -> Iterator[T]:
    """Yields parent before children, children in the order `after` gives them."""
    if root is None:
        return
    stack = [root]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(list(after(current))))


__all__ = [
    "breadth_first_levels",
    "depth_first_preorder",
]
