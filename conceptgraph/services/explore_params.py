"""Shareable query-string form of the explore filter state.

Only values that differ from the defaults are written, so the default view
maps to an empty query string. Parsing is lenient: unknown categories,
empty list tokens and malformed numbers fall back to defaults instead of
raising.

    q         free-text query (trimmed)
    hide      comma-joined hidden categories
    tags      comma-joined required tags (AND)
    featured  "1" for featured-only
    minDeg    minimum number of declared related concepts
    explored  "1" explored only, "0" not-explored only
"""

import re
from typing import Mapping
from urllib.parse import parse_qsl, urlencode

from conceptgraph.models.filters import ExploredFilter, FilterState

LIST_DELIMITER = ","

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def _join(values: list[str]) -> str:
    return LIST_DELIMITER.join(v for v in values if v)


def _split(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [token for token in raw.split(LIST_DELIMITER) if token]


def _parse_min_connections(raw: str | None) -> int:
    if not raw:
        return 0
    match = _LEADING_INT_RE.match(raw)
    if not match:
        return 0
    return max(int(match.group(1)), 0)


def _parse_explored(raw: str | None) -> ExploredFilter:
    if raw == "1":
        return "explored"
    if raw == "0":
        return "not-explored"
    return "all"


def _as_mapping(params: Mapping[str, str] | str) -> Mapping[str, str]:
    if not isinstance(params, str):
        return params
    parsed: dict[str, str] = {}
    # First occurrence wins for repeated keys
    for key, value in parse_qsl(params.lstrip("?"), keep_blank_values=True):
        parsed.setdefault(key, value)
    return parsed


def build_explore_params(state: FilterState, categories: list[str]) -> dict[str, str]:
    params: dict[str, str] = {}

    q = state.query.strip()
    if q:
        params["q"] = q

    # Written whenever anything is hidden, including every category, so
    # "show nothing" survives the round trip.
    hidden = _join(state.hidden_categories)
    if hidden:
        params["hide"] = hidden

    tags = _join(state.selected_tags)
    if tags:
        params["tags"] = tags

    if state.featured_only:
        params["featured"] = "1"
    if state.min_connections > 0:
        params["minDeg"] = str(state.min_connections)
    if state.explored_filter == "explored":
        params["explored"] = "1"
    elif state.explored_filter == "not-explored":
        params["explored"] = "0"

    return params


def encode_query_string(state: FilterState, categories: list[str]) -> str:
    return urlencode(build_explore_params(state, categories))


def parse_explore_params(
    params: Mapping[str, str] | str,
    categories: list[str],
) -> FilterState:
    params = _as_mapping(params)
    known = set(categories)

    return FilterState(
        query=params.get("q") or "",
        hidden_categories=[c for c in _split(params.get("hide")) if c in known],
        selected_tags=_split(params.get("tags")),
        featured_only=params.get("featured") == "1",
        min_connections=_parse_min_connections(params.get("minDeg")),
        explored_filter=_parse_explored(params.get("explored")),
    )
