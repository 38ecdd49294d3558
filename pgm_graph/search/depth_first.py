"""
Depth-first forest engine.

One call walks every vertex of a graph and produces, at once:
- a spanning tree per connected part (as seen through the neighbor generator)
- discovery and finish timestamps from a single shared clock
- the partition of vertices into components, named after their tree root
- optionally, the back edges closing a cycle

The walk is iterative. All bookkeeping lives in lists indexed by a dense
vertex number assigned in identifier order, so nothing survives the call.

Visiting order is fixed: vertices in identifier order, with the optional
start vertex first; the edges out of a vertex in identifier order. Two runs
on the same graph, generator and start vertex give identical results.

Reference algorithm: Erciyes 2018, Alg. 6.7.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from pgm_graph.constants import CLOCK_START, UNVISITED, new_identifier
from pgm_graph.exceptions import TraversalCancelled, VertexNotFound
from pgm_graph.model import Edge, Node
from pgm_graph.model.graph import by_id
from pgm_graph.ops.edge import get_other
from pgm_graph.search.results import CycleInfo, DepthFirstResult
from pgm_graph.types import GraphLike, NeighborGenerator

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Frame:
    """A vertex being explored and how far through its edges the walk is."""

    vertex: int
    parent: int | None
    tree_edge: Edge | None
    component: int
    edges: tuple[Edge, ...]
    position: int = 0


class _TraversalContext:
    """Mutable state of a single traversal."""

    def __init__(
        self,
        graph: GraphLike,
        neighbor_generator: NeighborGenerator,
        check_cycle: bool,
        should_stop: Callable[[], bool] | None,
    ) -> None:
        self.graph = graph
        self.neighbor_generator = neighbor_generator
        self.check_cycle = check_cycle
        self.should_stop = should_stop

        self.nodes: tuple[Node, ...] = tuple(sorted(graph.vertices(), key=by_id))
        self.index: dict[str, int] = {node.id: i for i, node in enumerate(self.nodes)}
        count = len(self.nodes)

        self.marked = [False] * count
        self.discover = [UNVISITED] * count
        self.finish = [UNVISITED] * count
        self.pred: list[int | None] = [None] * count
        self.component = [-1] * count
        self.tree_edges: dict[int, list[Edge]] = {}
        # (ancestor, descendant, edge id) in detection order
        self.back_edges: list[tuple[int, int, str]] = []
        self.time = CLOCK_START

    def visiting_order(self, start: Node | None) -> list[int]:
        order = list(range(len(self.nodes)))
        if start is None:
            return order
        if start.id not in self.index:
            raise VertexNotFound(start.id, f"graph '{self.graph.id}'")
        first = self.index[start.id]
        order.remove(first)
        return [first, *order]

    def run(self, start: Node | None) -> None:
        for root in self.visiting_order(start):
            if self.marked[root]:
                continue
            logger.debug(f"New tree rooted at '{self.nodes[root].id}'")
            self.tree_edges[root] = []
            self.explore(root)

    def enter(self, vertex: int, parent: int | None, tree_edge: Edge | None, component: int) -> _Frame:
        if self.should_stop is not None and self.should_stop():
            raise TraversalCancelled(
                f"Traversal of graph '{self.graph.id}' stopped before '{self.nodes[vertex].id}'"
            )
        self.marked[vertex] = True
        self.pred[vertex] = parent
        self.component[vertex] = component
        self.time += 1
        self.discover[vertex] = self.time
        edges = tuple(sorted(self.neighbor_generator(self.nodes[vertex]), key=by_id))
        return _Frame(vertex, parent, tree_edge, component, edges)

    def explore(self, root: int) -> None:
        stack = [self.enter(root, None, None, root)]
        while stack:
            frame = stack[-1]
            if frame.position == len(frame.edges):
                self.time += 1
                self.finish[frame.vertex] = self.time
                stack.pop()
                continue

            edge = frame.edges[frame.position]
            frame.position += 1
            other = get_other(edge, self.nodes[frame.vertex])
            if other is None or other.id not in self.index:
                continue
            neighbor = self.index[other.id]

            if not self.marked[neighbor]:
                self.tree_edges[frame.component].append(edge)
                stack.append(self.enter(neighbor, frame.vertex, edge, frame.component))
            elif self.check_cycle and self.is_back_edge(frame, edge, neighbor):
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug(
                        f"Back edge '{edge.id}': '{self.nodes[frame.vertex].id}'"
                        f" -> '{self.nodes[neighbor].id}'"
                    )
                self.back_edges.append((neighbor, frame.vertex, edge.id))

    def is_back_edge(self, frame: _Frame, edge: Edge, neighbor: int) -> bool:
        """
        True when `edge` leads from the frame vertex to one of its ancestors, itself included.

        `neighbor` is already marked. The marked vertices not yet finished
        are exactly those on the work stack, i.e. the frame vertex and its
        ancestors, so no walk of the predecessor chain is needed.
        """
        if frame.tree_edge is not None and edge.id == frame.tree_edge.id:
            return False
        return self.finish[neighbor] == UNVISITED

    def result(self) -> DepthFirstResult:
        ids = [node.id for node in self.nodes]

        def id_of(vertex: int | None) -> str | None:
            return None if vertex is None else ids[vertex]

        cycle_order = tuple(
            CycleInfo(
                ancestor=ids[ancestor],
                descendant=ids[descendant],
                edge_id=edge_id,
                ancestor_discover_time=self.discover[ancestor],
                ancestor_finish_time=(
                    None if self.finish[ancestor] == UNVISITED else self.finish[ancestor]
                ),
                descendant_finish_time=self.finish[descendant],
            )
            for ancestor, descendant, edge_id in self.back_edges
        )
        cycle_map: dict[str, list[CycleInfo]] = {}
        for info in cycle_order:
            cycle_map.setdefault(info.descendant, []).append(info)

        return DepthFirstResult(
            new_identifier(),
            vertex_map={node.id: node for node in self.nodes},
            forest_edges={ids[root]: frozenset(edges) for root, edges in self.tree_edges.items()},
            predecessor_map={ids[v]: id_of(self.pred[v]) for v in range(len(ids))},
            component_map={ids[v]: ids[self.component[v]] for v in range(len(ids))},
            discover_map=dict(zip(ids, self.discover)),
            finish_map=dict(zip(ids, self.finish)),
            cycle_map={vertex_id: tuple(infos) for vertex_id, infos in cycle_map.items()},
            cycle_order=cycle_order,
        )


def depth_first_search(
    graph: GraphLike,
    neighbor_generator: NeighborGenerator,
    check_cycle: bool = False,
    start: Node | None = None,
    should_stop: Callable[[], bool] | None = None,
) -> DepthFirstResult:
    """
    Builds the depth-first forest of `graph`.

    Args:
        graph: Graph to traverse. Its vertex set is taken once, up front.
        neighbor_generator: vertex -> edges the walk may follow out of it.
            Use `out_edges` for directed semantics and `incident_edges`
            for undirected ones. Edges whose other end is not a vertex of
            the graph are ignored.
        check_cycle: Record back edges.
        start: Vertex to root the first tree at. Defaults to the vertex with
            the smallest identifier.
        should_stop: Polled before each vertex is discovered; returning
            True aborts the walk.

    Returns:
        A DepthFirstResult. An empty graph gives an empty result.

    Raises:
        VertexNotFound: `start` is not a vertex of `graph`.
        TraversalCancelled: `should_stop` returned True.

    Example:
        >>> result = depth_first_search(graph, incident_edges(graph), check_cycle=True)
        >>> result.component_count()
        2
    """
    context = _TraversalContext(graph, neighbor_generator, check_cycle, should_stop)
    context.run(start)
    result = context.result()
    logger.info(
        f"Depth-first search of graph '{graph.id}': {len(context.nodes)} vertices,"
        f" {result.component_count()} component(s), {len(result.cycle_list())} back edge(s)"
    )
    return result


__all__ = [
    "depth_first_search",
]
