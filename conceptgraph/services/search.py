from conceptgraph.models.graph import GraphNode


def find_concept_nodes(nodes: list[GraphNode], query: str) -> list[GraphNode]:
    """Case-insensitive substring match on node names and aliases."""
    if not query or not query.strip():
        return []
    lower = query.lower()
    return [
        n
        for n in nodes
        if lower in n.name.lower()
        or any(lower in alias.lower() for alias in n.aliases or [])
    ]
