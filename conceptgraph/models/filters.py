from dataclasses import dataclass
from typing import AbstractSet, Literal

from pydantic import BaseModel, Field

ExploredFilter = Literal["all", "explored", "not-explored"]


@dataclass(frozen=True)
class GraphFilters:
    """Predicate set applied by the graph builder.

    ``visible_categories=None`` disables the category filter, while an empty
    set hides everything. ``explored_ids=None`` turns the explored filter
    into a no-op whatever ``explored_filter`` says.
    """

    visible_categories: AbstractSet[str] | None = None
    selected_tags: AbstractSet[str] | None = None
    featured_only: bool = False
    min_connections: int = 0
    explored_filter: ExploredFilter = "all"
    explored_ids: AbstractSet[str] | None = None


class FilterState(BaseModel):
    query: str = ""
    hidden_categories: list[str] = Field(default_factory=list)
    selected_tags: list[str] = Field(default_factory=list)
    featured_only: bool = False
    min_connections: int = Field(default=0, ge=0)
    explored_filter: ExploredFilter = "all"

    def to_graph_filters(
        self,
        categories: list[str],
        explored_ids: AbstractSet[str] | None = None,
    ) -> GraphFilters:
        hidden = set(self.hidden_categories)
        return GraphFilters(
            visible_categories={c for c in categories if c not in hidden},
            selected_tags=set(self.selected_tags),
            featured_only=self.featured_only,
            min_connections=self.min_connections,
            explored_filter=self.explored_filter,
            explored_ids=explored_ids,
        )
