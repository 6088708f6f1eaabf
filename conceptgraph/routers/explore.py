import logging

from fastapi import APIRouter, HTTPException, Query, Request

from conceptgraph.config import settings
from conceptgraph.models.concept import CategoryInfo, ConceptDetail
from conceptgraph.models.explore import ExploredIdsRequest, ExploreRequest, ExploreView
from conceptgraph.services.concept_detail import build_concept_detail
from conceptgraph.services.concept_store import get_categories, get_concept_map, get_concepts
from conceptgraph.services.explore_view import build_explore_view
from conceptgraph.services.graph_builder import category_color

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _hops(requested: int | None) -> int:
    if requested is None:
        return settings.NEIGHBORHOOD_HOPS
    return min(requested, settings.MAX_NEIGHBORHOOD_HOPS)


@router.get("/categories", response_model=list[CategoryInfo])
async def list_categories() -> list[CategoryInfo]:
    return [CategoryInfo(name=c, color=category_color(c)) for c in get_categories()]


@router.get("/explore", response_model=ExploreView)
async def explore_global(
    request: Request,
    hops: int | None = Query(default=None, ge=0),
) -> ExploreView:
    return build_explore_view(
        get_concepts(),
        get_categories(),
        request.url.query,
        hops=_hops(hops),
    )


@router.get("/explore/{concept_id}", response_model=ExploreView)
async def explore_local(
    concept_id: str,
    request: Request,
    hops: int | None = Query(default=None, ge=0),
) -> ExploreView:
    return build_explore_view(
        get_concepts(),
        get_categories(),
        request.url.query,
        center_id=concept_id,
        hops=_hops(hops),
    )


@router.post("/explore", response_model=ExploreView)
async def explore_with_progress(request: ExploreRequest) -> ExploreView:
    explored = set(request.explored_ids) if request.explored_ids is not None else None
    return build_explore_view(
        get_concepts(),
        get_categories(),
        request.query_string,
        center_id=request.center_id,
        explored_ids=explored,
        hops=_hops(request.hops),
    )


def _detail(concept_id: str, explored_ids: set[str] | None) -> ConceptDetail:
    concept_map = get_concept_map()
    concept = concept_map.get(concept_id)
    if concept is None:
        logger.info("Concept %s not found", concept_id)
        raise HTTPException(status_code=404, detail="Concept not found")
    return build_concept_detail(concept, concept_map, explored_ids)


@router.get("/concepts/{concept_id}", response_model=ConceptDetail)
async def get_concept(concept_id: str) -> ConceptDetail:
    return _detail(concept_id, None)


@router.post("/concepts/{concept_id}", response_model=ConceptDetail)
async def get_concept_with_progress(concept_id: str, request: ExploredIdsRequest) -> ConceptDetail:
    return _detail(concept_id, set(request.explored_ids))
