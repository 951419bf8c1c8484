"""Tests for normalize_search_params and its parsing helpers."""

import pytest

from app.application.services.filter_normalizer import (
    normalize_search_params,
    parse_int,
    parse_name_list,
    parse_suggestion_type,
)
from app.domain.enums import SortBy, SortOrder, SuggestionType
from app.domain.exceptions import NormalizationError


def test_defaults_for_empty_params() -> None:
    filters = normalize_search_params({})
    assert filters.page == 1
    assert filters.limit == 20
    assert filters.query == ""
    assert filters.city == ""
    assert filters.country == ""
    assert filters.teacher_names == ()
    assert filters.musician_names == ()
    assert filters.sort_by is SortBy.RELEVANCE
    assert filters.sort_order is SortOrder.DESC
    assert filters.offset == 0


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("3", 3), ("3abc", 3), ("  7", 7), ("-2", -2), ("abc", None), ("", None), (None, None)],
)
def test_parse_int_takes_leading_integer(raw, expected) -> None:
    assert parse_int(raw) == expected


@pytest.mark.parametrize(
    ("limit", "expected"),
    [("0", 1), ("-5", 1), ("500", 100), ("100", 100), ("abc", 20), ("15", 15)],
)
def test_limit_is_clamped(limit, expected) -> None:
    assert normalize_search_params({"limit": limit}).limit == expected


@pytest.mark.parametrize(("page", "expected"), [("0", 1), ("-3", 1), ("x", 1), ("4", 4)])
def test_page_is_at_least_one(page, expected) -> None:
    assert normalize_search_params({"page": page}).page == expected


def test_limit_bounds_are_configurable() -> None:
    filters = normalize_search_params({"limit": "80"}, default_limit=10, max_limit=50)
    assert filters.limit == 50
    assert normalize_search_params({}, default_limit=10, max_limit=50).limit == 10


def test_offset_from_page_and_limit() -> None:
    assert normalize_search_params({"page": "3", "limit": "10"}).offset == 20


def test_text_fields_are_stripped() -> None:
    filters = normalize_search_params(
        {"query": "  blues  ", "city": " Madrid ", "country": "   "}
    )
    assert filters.query == "blues"
    assert filters.city == "Madrid"
    assert filters.country == ""
    assert filters.has_text_query
    assert not filters.has_named_filters


def test_name_lists_trimmed_and_deduplicated() -> None:
    assert parse_name_list(" Dan Repsch, ,dan repsch,Alice Mei,") == (
        "Dan Repsch",
        "Alice Mei",
    )
    assert parse_name_list("") == ()
    assert parse_name_list(None) == ()


def test_named_filters_flag() -> None:
    filters = normalize_search_params({"musicians": "Blue Moon Band"})
    assert filters.musician_names == ("Blue Moon Band",)
    assert filters.has_named_filters


def test_sort_values_parsed() -> None:
    filters = normalize_search_params({"sortBy": "date", "sortOrder": "asc"})
    assert filters.sort_by is SortBy.DATE
    assert filters.sort_order is SortOrder.ASC


def test_unknown_sort_by_raises() -> None:
    with pytest.raises(NormalizationError) as exc_info:
        normalize_search_params({"sortBy": "hype"})
    assert exc_info.value.error_code == "VALIDATION_ERROR"
    assert exc_info.value.details == {"field": "sortBy"}
    assert "relevance" in exc_info.value.message


def test_unknown_sort_order_raises() -> None:
    with pytest.raises(NormalizationError) as exc_info:
        normalize_search_params({"sortOrder": "sideways"})
    assert exc_info.value.details == {"field": "sortOrder"}


def test_suggestion_type_default_and_invalid() -> None:
    assert parse_suggestion_type(None) is SuggestionType.ALL
    assert parse_suggestion_type("teachers") is SuggestionType.TEACHERS
    with pytest.raises(NormalizationError):
        parse_suggestion_type("venues")
