import json

import pytest

from conceptgraph.config import settings
from conceptgraph.models.concept import ConceptRecord
from conceptgraph.services import concept_store

CATEGORIES = ["Methods", "Systems", "Tools", "Principles", "Techniques"]


def make_concept(id: str, **overrides) -> ConceptRecord:
    data = {
        "id": id,
        "name": id,
        "category": "Concepts",
        "tags": [],
        "featured": False,
        "summary": "",
    }
    data.update(overrides)
    return ConceptRecord(**data)


def _raw_concepts() -> list[dict]:
    return [
        {
            "id": "a",
            "name": "Alpha",
            "category": "Methods",
            "tags": ["psychology", "learning"],
            "featured": True,
            "relatedConcepts": ["b", "c"],
        },
        {
            "id": "b",
            "name": "Beta",
            "category": "Tools",
            "tags": ["psychology"],
            "relatedConcepts": ["a"],
        },
        {
            "id": "c",
            "name": "Charlie",
            "category": "Methods",
            "tags": ["learning", "education"],
            "relatedConcepts": ["a", "d"],
        },
        {
            "id": "d",
            "name": "Delta",
            "category": "Principles",
            "tags": ["philosophy"],
            "featured": True,
            "relatedConcepts": ["c"],
        },
        {
            "id": "e",
            "name": "Echo",
            "category": "Tools",
            "tags": [],
            "relatedConcepts": [],
        },
    ]


@pytest.fixture
def categories() -> list[str]:
    return list(CATEGORIES)


@pytest.fixture
def all_concepts() -> list[ConceptRecord]:
    return [ConceptRecord.model_validate(item) for item in _raw_concepts()]


@pytest.fixture
def data_files(tmp_path, monkeypatch):
    """Point the concept store at temporary copies of the five-concept fixture."""
    concepts_path = tmp_path / "concepts.json"
    categories_path = tmp_path / "categories.json"
    concepts_path.write_text(json.dumps({"concepts": _raw_concepts()}), encoding="utf-8")
    categories_path.write_text(json.dumps(["All", *CATEGORIES]), encoding="utf-8")

    monkeypatch.setattr(settings, "CONCEPTS_PATH", str(concepts_path))
    monkeypatch.setattr(settings, "CATEGORIES_PATH", str(categories_path))
    concept_store.reset_store()
    yield tmp_path
    concept_store.reset_store()
