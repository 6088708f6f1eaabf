from pydantic import BaseModel, ConfigDict, Field


class ConceptRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    name: str
    category: str
    tags: list[str] = Field(default_factory=list)
    aliases: list[str] | None = None
    related_concepts: list[str] | None = Field(default=None, alias="relatedConcepts")
    featured: bool = False
    summary: str = ""
    icon: str | None = None


class RelatedConcept(BaseModel):
    id: str
    name: str
    category: str
    color: str
    explored: bool = False


class ConceptDetail(BaseModel):
    concept: ConceptRecord
    color: str
    explored: bool = False
    related: list[RelatedConcept] = Field(default_factory=list)


class CategoryInfo(BaseModel):
    name: str
    color: str
