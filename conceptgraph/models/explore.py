from pydantic import BaseModel, Field

from conceptgraph.models.filters import FilterState
from conceptgraph.models.graph import GraphEdge, GraphNode


class ExploreRequest(BaseModel):
    query_string: str = Field(default="", max_length=4000)
    center_id: str | None = Field(default=None, max_length=200)
    hops: int | None = Field(default=None, ge=0)
    explored_ids: list[str] | None = None


class ExploredIdsRequest(BaseModel):
    explored_ids: list[str] = Field(default_factory=list)


class ExploreView(BaseModel):
    nodes: list[GraphNode]
    edges: list[GraphEdge]
    highlighted_node_ids: list[str] = Field(default_factory=list)
    filters: FilterState
    query_string: str = ""
    center_node_id: str | None = None
    is_local_view: bool = False
    total_nodes: int = 0
    message: str | None = None
