import logging
from typing import Iterable

from conceptgraph.mappings import (
    CATEGORY_COLORS,
    COLOR_FALLBACK,
    NODE_SIZE_BASE,
    NODE_SIZE_MAX,
    NODE_SIZE_MIN,
    NODE_SIZE_PER_EDGE,
)
from conceptgraph.models.concept import ConceptRecord
from conceptgraph.models.filters import GraphFilters
from conceptgraph.models.graph import GraphEdge, GraphNode, GraphPayload

logger = logging.getLogger(__name__)


def category_color(category: str | None) -> str:
    if not category:
        return COLOR_FALLBACK
    return CATEGORY_COLORS.get(category, COLOR_FALLBACK)


def node_size(degree: int) -> float:
    size = NODE_SIZE_BASE + degree * NODE_SIZE_PER_EDGE
    return max(NODE_SIZE_MIN, min(NODE_SIZE_MAX, size))


def _edge_key(a: str, b: str) -> tuple[str, str]:
    """Order-independent key so A->B and B->A collapse to one edge."""
    return (a, b) if a < b else (b, a)


def _passes(concept: ConceptRecord, filters: GraphFilters) -> bool:
    if filters.visible_categories is not None and concept.category not in filters.visible_categories:
        return False

    if filters.selected_tags:
        tags = set(concept.tags)
        if not all(tag in tags for tag in filters.selected_tags):
            return False

    if filters.featured_only and not concept.featured:
        return False

    if filters.min_connections > 0 and len(concept.related_concepts or []) < filters.min_connections:
        return False

    if filters.explored_ids is not None:
        explored = concept.id in filters.explored_ids
        if filters.explored_filter == "explored" and not explored:
            return False
        if filters.explored_filter == "not-explored" and explored:
            return False

    return True


def filter_concepts(
    concepts: Iterable[ConceptRecord],
    filters: GraphFilters | None = None,
) -> list[ConceptRecord]:
    """Apply every filter dimension conjunctively, keeping input order."""
    if filters is None:
        return list(concepts)
    return [c for c in concepts if _passes(c, filters)]


def build_graph_payload(
    concepts: Iterable[ConceptRecord],
    filters: GraphFilters | None = None,
) -> GraphPayload:
    filtered = filter_concepts(concepts, filters)
    filtered_ids = {c.id for c in filtered}

    seen: set[tuple[str, str]] = set()
    edges: list[GraphEdge] = []
    degree: dict[str, int] = {}

    for concept in filtered:
        for target_id in concept.related_concepts or []:
            if target_id == concept.id or target_id not in filtered_ids:
                continue
            key = _edge_key(concept.id, target_id)
            if key in seen:
                continue
            seen.add(key)
            # Keep the orientation of the first declaration
            edges.append(GraphEdge(source=concept.id, target=target_id))
            degree[concept.id] = degree.get(concept.id, 0) + 1
            degree[target_id] = degree.get(target_id, 0) + 1

    nodes = [
        GraphNode(
            id=c.id,
            name=c.name,
            category=c.category,
            color=category_color(c.category),
            size=node_size(degree.get(c.id, 0)),
            tags=list(c.tags),
            aliases=list(c.aliases) if c.aliases is not None else None,
            summary=c.summary,
            icon=c.icon,
            featured=c.featured,
            connection_count=len(c.related_concepts or []),
        )
        for c in filtered
    ]

    logger.debug("Built graph: %d nodes, %d edges", len(nodes), len(edges))
    return GraphPayload(nodes=nodes, edges=edges)
