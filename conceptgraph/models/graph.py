from pydantic import BaseModel, Field


class GraphNode(BaseModel):
    id: str
    name: str
    category: str
    color: str
    size: float
    tags: list[str] = Field(default_factory=list)
    aliases: list[str] | None = None
    summary: str = ""
    icon: str | None = None
    featured: bool = False
    connection_count: int = 0


class GraphEdge(BaseModel):
    source: str
    target: str


class GraphPayload(BaseModel):
    nodes: list[GraphNode] = Field(default_factory=list)
    edges: list[GraphEdge] = Field(default_factory=list)
