from __future__ import annotations

from datetime import datetime

import pytest

from candidate_registry.domain.models import Candidate
from candidate_registry.domain.query_spec import NumOp, QueryField, QuerySpec, SortMode, TextOp
from candidate_registry.query.engine import QueryEngine, build_predicate, build_sort
from candidate_registry.query.filters import by_min_years


class _ListStore:
    """Minimal in-memory store; only find_all is used by the engine."""

    def __init__(self, candidates):
        self.candidates = list(candidates)
        self.find_all_calls = 0

    def find_all(self):
        self.find_all_calls += 1
        return list(self.candidates)

    def add(self, candidate):  # pragma: no cover - not used by the engine
        raise AssertionError("engine must not write")

    def update(self, candidate):  # pragma: no cover - not used by the engine
        raise AssertionError("engine must not write")

    def delete(self, candidate_id):  # pragma: no cover - not used by the engine
        raise AssertionError("engine must not write")


def _c(cid, name, age=30, industry="Software", years=5, registered_at=None):
    return Candidate(
        id=cid,
        name=name,
        age=age,
        industry=industry,
        years_of_experience=years,
        registered_at=registered_at,
    )


@pytest.fixture
def people():
    return [
        _c(1, "Bob", age=35, industry="Finance", years=10, registered_at=datetime(2024, 2, 1)),
        _c(2, "Alice", age=28, industry="Software", years=5, registered_at=datetime(2024, 1, 1)),
        _c(3, "carla", age=31, industry="Marketing", years=7, registered_at=None),
        _c(4, "alex", age=22, industry="software QA", years=1, registered_at=datetime(2023, 6, 1)),
    ]


@pytest.fixture
def engine(people):
    return QueryEngine(_ListStore(people))


def _names(candidates):
    return [c.name for c in candidates]


class TestTextPredicates:
    def test_name_contains_is_case_insensitive(self) -> None:
        engine = QueryEngine(_ListStore([_c(1, "Alice"), _c(2, "Bob")]))
        spec = QuerySpec(field=QueryField.NAME, text_op=TextOp.CONTAINS, query="A")
        assert _names(engine.run(spec)) == ["Alice"]

    def test_name_starts_with(self, engine) -> None:
        spec = QuerySpec(field=QueryField.NAME, text_op=TextOp.STARTS_WITH, query="AL")
        assert _names(engine.run(spec)) == ["alex", "Alice"]

    def test_name_equals(self, engine) -> None:
        spec = QuerySpec(field=QueryField.NAME, text_op=TextOp.EQUALS, query="CARLA")
        assert _names(engine.run(spec)) == ["carla"]

    def test_industry_contains_free_text(self, engine) -> None:
        spec = QuerySpec(field=QueryField.INDUSTRY, query="  SOFT ")
        assert _names(engine.run(spec)) == ["alex", "Alice"]

    def test_industry_blank_query_matches_all(self, engine, people) -> None:
        spec = QuerySpec(field=QueryField.INDUSTRY, query="   ")
        assert len(engine.run(spec)) == len(people)

    def test_industry_equals(self, engine) -> None:
        spec = QuerySpec(field=QueryField.INDUSTRY, text_op=TextOp.EQUALS, query="software")
        assert _names(engine.run(spec)) == ["Alice"]


class TestNumericPredicates:
    @pytest.mark.parametrize(
        ("field", "op", "query", "expected"),
        [
            (QueryField.AGE, NumOp.EQ, "28", ["Alice"]),
            (QueryField.AGE, NumOp.GTE, "31", ["Bob", "carla"]),
            (QueryField.AGE, NumOp.LTE, "28", ["Alice", "alex"]),
            (QueryField.YEARS, NumOp.EQ, "7", ["carla"]),
            (QueryField.YEARS, NumOp.GTE, "7", ["Bob", "carla"]),
            (QueryField.YEARS, NumOp.LTE, "5", ["Alice", "alex"]),
        ],
    )
    def test_operators(self, engine, field, op, query, expected) -> None:
        spec = QuerySpec(field=field, num_op=op, query=query, sort=SortMode.NAME_ASC)
        assert sorted(_names(engine.run(spec))) == sorted(expected)

    @pytest.mark.parametrize("query", ["abc", "", "3.5", "1_0", "ten"])
    def test_bad_number_matches_nothing(self, engine, query) -> None:
        spec = QuerySpec(field=QueryField.AGE, query=query)
        assert engine.run(spec) == []

    def test_years_gte_matches_min_years_helper(self, people) -> None:
        spec = QuerySpec(field=QueryField.YEARS, num_op=NumOp.GTE, query="5")
        predicate = build_predicate(spec)
        helper = by_min_years(5)
        manual = [c for c in people if c.years_of_experience >= 5]
        assert [c for c in people if predicate(c)] == manual
        assert [c for c in people if helper(c)] == manual

    def test_signed_number_is_accepted(self, engine) -> None:
        spec = QuerySpec(field=QueryField.YEARS, num_op=NumOp.GTE, query="+7")
        assert sorted(_names(engine.run(spec))) == ["Bob", "carla"]

    @pytest.mark.parametrize("query", ["99999999999999999999", "2147483648", "-2147483649"])
    def test_out_of_int_range_matches_nothing(self, engine, query) -> None:
        spec = QuerySpec(field=QueryField.AGE, num_op=NumOp.LTE, query=query)
        assert engine.run(spec) == []

    def test_int_range_limits_are_accepted(self, engine, people) -> None:
        spec = QuerySpec(field=QueryField.AGE, num_op=NumOp.LTE, query="2147483647")
        assert len(engine.run(spec)) == len(people)


class TestSorting:
    def test_name_desc(self) -> None:
        engine = QueryEngine(_ListStore([_c(1, "Alice"), _c(2, "Bob")]))
        spec = QuerySpec(field=QueryField.NAME, query="", sort=SortMode.NAME_DESC)
        assert _names(engine.run(spec)) == ["Bob", "Alice"]

    def test_name_asc_is_case_insensitive(self, engine) -> None:
        spec = QuerySpec(sort=SortMode.NAME_ASC)
        assert _names(engine.run(spec)) == ["alex", "Alice", "Bob", "carla"]

    def test_date_of_register_puts_missing_last(self, engine) -> None:
        spec = QuerySpec(sort=SortMode.DATEOFREGISTER)
        assert _names(engine.run(spec)) == ["alex", "Alice", "Bob", "carla"]

    def test_sort_is_stable_for_equal_keys(self) -> None:
        store = _ListStore([_c(1, "sam"), _c(2, "Sam"), _c(3, "SAM")])
        engine = QueryEngine(store)
        asc = engine.run(QuerySpec(sort=SortMode.NAME_ASC))
        desc = engine.run(QuerySpec(sort=SortMode.NAME_DESC))
        assert [c.id for c in asc] == [1, 2, 3]
        assert [c.id for c in desc] == [1, 2, 3]

    def test_build_sort_returns_reverse_flag(self) -> None:
        key, reverse = build_sort(QuerySpec(sort=SortMode.NAME_DESC))
        assert reverse is True
        assert key(_c(1, "ZoE")) == "zoe"


class TestExecution:
    def test_default_spec_returns_everything_sorted(self, engine, people) -> None:
        assert len(engine.run()) == len(people)

    def test_explicit_predicate_and_no_sort_keep_order(self, engine) -> None:
        result = engine.query(lambda c: c.age > 25)
        assert [c.id for c in result] == [1, 2, 3]

    def test_none_predicate_matches_all(self, engine, people) -> None:
        assert engine.query() == people

    def test_does_not_mutate_snapshot_or_store(self, people) -> None:
        store = _ListStore(people)
        engine = QueryEngine(store)
        engine.run(QuerySpec(sort=SortMode.NAME_DESC))
        assert store.candidates == people
        assert store.find_all_calls == 1

    def test_unknown_field_matches_all(self, people) -> None:
        spec = QuerySpec.model_construct(
            field="SALARY",
            text_op=TextOp.CONTAINS,
            num_op=NumOp.EQ,
            query="x",
            sort=SortMode.NAME_ASC,
        )
        predicate = build_predicate(spec)
        assert all(predicate(c) for c in people)
