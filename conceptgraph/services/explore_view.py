import logging
from typing import AbstractSet, Mapping

from conceptgraph.models.concept import ConceptRecord
from conceptgraph.models.explore import ExploreView
from conceptgraph.services.explore_params import encode_query_string, parse_explore_params
from conceptgraph.services.graph_builder import build_graph_payload
from conceptgraph.services.neighborhood import get_neighborhood
from conceptgraph.services.search import find_concept_nodes

logger = logging.getLogger(__name__)


def build_explore_view(
    concepts: list[ConceptRecord],
    categories: list[str],
    params: Mapping[str, str] | str,
    center_id: str | None = None,
    explored_ids: AbstractSet[str] | None = None,
    hops: int = 2,
) -> ExploreView:
    """Decode the filters, build the graph, narrow and highlight it.

    The global graph is always built first; a center concept then narrows it
    to its neighborhood, and search highlights are computed against whichever
    graph is displayed. The returned ``query_string`` is the canonical
    re-encoding of the decoded filters.
    """
    state = parse_explore_params(params, categories)
    full = build_graph_payload(concepts, state.to_graph_filters(categories, explored_ids))

    displayed = full
    message: str | None = None
    if center_id:
        displayed = get_neighborhood(full, center_id, hops)
        if not displayed.nodes:
            message = f"Concept '{center_id}' is not in the current graph"
    elif not full.nodes:
        message = "No concepts match the current filters"

    highlighted = [n.id for n in find_concept_nodes(displayed.nodes, state.query.strip())]

    logger.info(
        "Explore view: center=%s nodes=%d/%d edges=%d highlighted=%d",
        center_id, len(displayed.nodes), len(full.nodes), len(displayed.edges), len(highlighted),
    )

    return ExploreView(
        nodes=displayed.nodes,
        edges=displayed.edges,
        highlighted_node_ids=highlighted,
        filters=state,
        query_string=encode_query_string(state, categories),
        center_node_id=center_id or None,
        is_local_view=bool(center_id),
        total_nodes=len(full.nodes),
        message=message,
    )
