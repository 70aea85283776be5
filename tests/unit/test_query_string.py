from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone

import pytest

from matchday_client.core.query_string import camel_case, query_to_mapping, stringify_query
from matchday_client.models.match import MatchStatus
from matchday_client.queries import (
    BaseListQuery,
    CompetitionStatsSummaryQuery,
    DateFilter,
    MatchOrder,
    MatchQuery,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("page", "page"),
        ("items_per_page", "itemsPerPage"),
        ("order_by", "orderBy"),
        ("match_group", "matchGroup"),
        ("from_", "from"),
    ],
)
def test_camel_case(name: str, expected: str):
    assert camel_case(name) == expected


def test_stringify_mapping_keeps_key_order():
    assert stringify_query({"itemsPerPage": 10, "page": 1}) == "itemsPerPage=10&page=1"


def test_stringify_indexes_arrays_with_brackets():
    assert stringify_query({"season": ["2025", "2024"]}) == "season[0]=2025&season[1]=2024"


def test_stringify_nested_objects_and_arrays_of_objects():
    query = {
        "orderBy": {"date": "desc"},
        "date": [{"gt": "a", "lt": "b"}, {"eq": "c"}],
    }
    assert stringify_query(query) == (
        "orderBy[date]=desc&date[0][gt]=a&date[0][lt]=b&date[1][eq]=c"
    )


def test_stringify_skips_none_and_empty_collections():
    assert stringify_query({"a": None, "b": [], "c": {}, "d": 1}) == "d=1"
    assert stringify_query(None) == ""
    assert stringify_query({}) == ""


def test_stringify_formats_scalars():
    query = {
        "flag": True,
        "off": False,
        "status": MatchStatus.FULL_TIME,
        "at": datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
        "day": date(2024, 1, 15),
    }
    assert stringify_query(query) == (
        "flag=true&off=false&status=full-time"
        "&at=2024-01-15T10%3A30%3A00.000Z&day=2024-01-15"
    )


def test_stringify_percent_encodes_values():
    assert stringify_query({"query": "Team A&B"}) == "query=Team%20A%26B"


def test_stringify_dataclass_query_uses_camel_case_names():
    query = BaseListQuery(page=2, items_per_page=20, query="fc")
    assert stringify_query(query) == "page=2&itemsPerPage=20&query=fc"


def test_stringify_match_query():
    query = MatchQuery(
        items_per_page=20,
        order_by=MatchOrder(date="desc"),
        date=[DateFilter(gt=date(2025, 1, 1))],
        season=["season-123"],
        status=[MatchStatus.SCHEDULED, MatchStatus.POSTPONED],
    )
    assert stringify_query(query) == (
        "itemsPerPage=20"
        "&orderBy[date]=desc"
        "&date[0][gt]=2025-01-01"
        "&season[0]=season-123"
        "&status[0]=scheduled&status[1]=postponed"
    )


def test_stringify_from_field_is_sent_as_from():
    query = CompetitionStatsSummaryQuery(from_=date(2025, 1, 1), to=date(2025, 6, 30))
    assert stringify_query(query) == "from=2025-01-01&to=2025-06-30"


def test_query_to_mapping_rejects_unsupported_types():
    with pytest.raises(TypeError):
        query_to_mapping("page=1")


def test_query_to_mapping_accepts_any_dataclass():
    @dataclass
    class _Custom:
        some_field: int = 1

    assert query_to_mapping(_Custom()) == {"someField": 1}
