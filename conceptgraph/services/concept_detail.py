from typing import AbstractSet

from conceptgraph.models.concept import ConceptDetail, ConceptRecord, RelatedConcept
from conceptgraph.services.graph_builder import category_color


def build_concept_detail(
    concept: ConceptRecord,
    concept_map: dict[str, ConceptRecord],
    explored_ids: AbstractSet[str] | None = None,
) -> ConceptDetail:
    """Side-panel data for one concept, with related ids resolved to records."""
    explored_ids = explored_ids or set()
    related: list[RelatedConcept] = []
    for related_id in concept.related_concepts or []:
        other = concept_map.get(related_id)
        if other is None:
            continue
        related.append(
            RelatedConcept(
                id=other.id,
                name=other.name,
                category=other.category,
                color=category_color(other.category),
                explored=other.id in explored_ids,
            )
        )

    return ConceptDetail(
        concept=concept,
        color=category_color(concept.category),
        explored=concept.id in explored_ids,
        related=related,
    )
