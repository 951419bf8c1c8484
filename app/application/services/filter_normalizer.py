"""Turn raw query-string parameters into a canonical SearchFilters value.

Pure functions; no I/O. Numeric parameters are parsed leniently (leading
integer, like a browser's parseInt) and then bounded, so any input yields a
usable page/limit. Enum parameters are strict.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from app.application.dtos.search import SearchFilters
from app.domain.enums import SortBy, SortOrder, SuggestionType
from app.domain.exceptions import NormalizationError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100
NAME_LIST_SEPARATOR = ","

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_int(raw: str | None) -> int | None:
    """Return the leading integer of raw, or None when there is none ("12abc" -> 12)."""
    if raw is None:
        return None
    match = _LEADING_INT_RE.match(raw)
    if match is None:
        return None
    return int(match.group(1))


def parse_name_list(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated name list; trim, drop empties and case-insensitive duplicates."""
    if not raw:
        return ()
    seen: set[str] = set()
    names: list[str] = []
    for part in raw.split(NAME_LIST_SEPARATOR):
        name = part.strip()
        if not name or name.casefold() in seen:
            continue
        seen.add(name.casefold())
        names.append(name)
    return tuple(names)


def _parse_enum(raw: str | None, enum_cls: type, default, field: str):
    value = (raw or "").strip()
    if not value:
        return default
    try:
        return enum_cls(value)
    except ValueError:
        raise NormalizationError(
            f"Invalid {field} '{value}'. Must be one of: {', '.join(enum_cls.values())}",
            field=field,
        ) from None


def normalize_search_params(
    raw: Mapping[str, str | None],
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> SearchFilters:
    """Build SearchFilters from raw request parameters.

    Args:
        raw: Query parameters as received (strings, or None when absent).
        default_limit: Page size when limit is absent or unparseable.
        max_limit: Upper bound for limit.

    Returns:
        SearchFilters with page >= 1 and 1 <= limit <= max_limit.

    Raises:
        NormalizationError: sortBy or sortOrder is not a known value.
    """
    page = parse_int(raw.get("page"))
    page = max(page if page is not None else DEFAULT_PAGE, 1)

    limit = parse_int(raw.get("limit"))
    limit = min(max(limit if limit is not None else default_limit, 1), max_limit)

    sort_by = _parse_enum(raw.get("sortBy"), SortBy, SortBy.RELEVANCE, "sortBy")
    sort_order = _parse_enum(raw.get("sortOrder"), SortOrder, SortOrder.DESC, "sortOrder")

    return SearchFilters(
        page=page,
        limit=limit,
        query=(raw.get("query") or "").strip(),
        city=(raw.get("city") or "").strip(),
        country=(raw.get("country") or "").strip(),
        teacher_names=parse_name_list(raw.get("teachers")),
        musician_names=parse_name_list(raw.get("musicians")),
        sort_by=sort_by,
        sort_order=sort_order,
    )


def parse_suggestion_type(raw: str | None) -> SuggestionType:
    """Parse the suggestions `type` parameter (default all)."""
    return _parse_enum(raw, SuggestionType, SuggestionType.ALL, "type")
