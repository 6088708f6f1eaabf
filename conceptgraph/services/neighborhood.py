"""Bounded breadth-first neighborhood around one concept."""

import logging
from collections import deque

from conceptgraph.models.graph import GraphPayload

logger = logging.getLogger(__name__)


def _adjacency(graph: GraphPayload) -> dict[str, set[str]]:
    adj: dict[str, set[str]] = {}
    for edge in graph.edges:
        adj.setdefault(edge.source, set()).add(edge.target)
        adj.setdefault(edge.target, set()).add(edge.source)
    return adj


def get_neighborhood(graph: GraphPayload, center_id: str, hops: int = 2) -> GraphPayload:
    """Return the subgraph within ``hops`` edges of ``center_id``.

    Nodes keep their input order; an edge is kept only when both of its
    endpoints were reached. An unknown ``center_id`` yields an empty graph.
    """
    if not any(node.id == center_id for node in graph.nodes):
        logger.warning("Neighborhood center %r is not in the graph", center_id)
        return GraphPayload(nodes=[], edges=[])

    adj = _adjacency(graph)
    visited = {center_id}
    queue: deque[tuple[str, int]] = deque([(center_id, 0)])

    while queue:
        node_id, depth = queue.popleft()
        if depth >= hops:
            continue
        for neighbor in adj.get(node_id, ()):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append((neighbor, depth + 1))

    nodes = [n for n in graph.nodes if n.id in visited]
    edges = [e for e in graph.edges if e.source in visited and e.target in visited]

    logger.debug(
        "Neighborhood of %s (%d hops): %d nodes, %d edges",
        center_id, hops, len(nodes), len(edges),
    )
    return GraphPayload(nodes=nodes, edges=edges)
