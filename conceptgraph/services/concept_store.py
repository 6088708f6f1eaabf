"""Read-only concept collection loaded from the JSON data files."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from conceptgraph.config import settings
from conceptgraph.mappings import ALL_CATEGORIES_LABEL
from conceptgraph.models.concept import ConceptRecord

logger = logging.getLogger(__name__)


class ConceptDataError(RuntimeError):
    """The concept or category data file is missing or malformed."""


_concepts: list[ConceptRecord] | None = None
_concept_map: dict[str, ConceptRecord] | None = None
_categories: list[str] | None = None


def _read_json(path_str: str):
    path = Path(path_str)
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise ConceptDataError(f"Data file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConceptDataError(f"Invalid JSON in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConceptDataError(f"Data file is not UTF-8: {path}") from e
    except OSError as e:
        raise ConceptDataError(f"Cannot read data file {path}: {e}") from e


def load_concepts(path: str) -> list[ConceptRecord]:
    raw = _read_json(path)
    # Either {"concepts": [...]} or a bare list
    items = raw.get("concepts", []) if isinstance(raw, dict) else raw
    if not isinstance(items, list):
        raise ConceptDataError(f"Expected a list of concepts in {path}")
    try:
        return [ConceptRecord.model_validate(item) for item in items]
    except ValidationError as e:
        raise ConceptDataError(f"Invalid concept record in {path}: {e}") from e


def load_categories(path: str) -> list[str]:
    raw = _read_json(path)
    if not isinstance(raw, list):
        raise ConceptDataError(f"Expected a list of categories in {path}")
    return [str(c) for c in raw if c != ALL_CATEGORIES_LABEL]


def get_concepts() -> list[ConceptRecord]:
    global _concepts
    if _concepts is None:
        _concepts = load_concepts(settings.CONCEPTS_PATH)
        logger.info("Loaded %d concepts from %s", len(_concepts), settings.CONCEPTS_PATH)
    return _concepts


def get_concept_map() -> dict[str, ConceptRecord]:
    global _concept_map
    if _concept_map is None:
        _concept_map = {c.id: c for c in get_concepts()}
    return _concept_map


def get_categories() -> list[str]:
    global _categories
    if _categories is None:
        _categories = load_categories(settings.CATEGORIES_PATH)
        logger.info("Loaded %d categories from %s", len(_categories), settings.CATEGORIES_PATH)
    return _categories


def reset_store() -> None:
    """Drop the cached snapshot so the next access reloads from disk."""
    global _concepts, _concept_map, _categories
    _concepts = None
    _concept_map = None
    _categories = None
