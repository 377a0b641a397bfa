"""Unit tests for RepositoryQuery and the statement builders."""

from __future__ import annotations

import dataclasses

import pytest
from sqlalchemy import select
from sqlalchemy.dialects import sqlite

from repo_catalog.core.pagination import CursorCodec, CursorData
from repo_catalog.features.repositories.clauses import (
    KEYSET_COLUMN,
    build_join,
    build_order_limit,
    build_statement,
    build_where,
)
from repo_catalog.features.repositories.models import Repository
from repo_catalog.features.repositories.query import RepositoryQuery, RepositoryStatus
from repo_catalog.features.repositories.repository import collect_commit_ids


def _compile(stmt) -> str:
    return str(stmt.compile(dialect=sqlite.dialect()))


@pytest.mark.unit
class TestRepositoryQuery:
    def test_defaults_constrain_nothing(self):
        query = RepositoryQuery()

        assert query.ids == ()
        assert query.phids == ()
        assert query.callsigns == ()
        assert query.status == RepositoryStatus.ALL
        assert query.joins_summary is False

    def test_builders_return_new_instances(self):
        base = RepositoryQuery()

        narrowed = base.with_ids([5, 9])

        assert narrowed is not base
        assert base.ids == ()
        assert narrowed.ids == (5, 9)

    def test_scalar_values_are_accepted(self):
        query = RepositoryQuery().with_ids(5).with_phids("PHID-REPO-0005").with_callsigns("CORE")

        assert query.ids == (5,)
        assert query.phids == ("PHID-REPO-0005",)
        assert query.callsigns == ("CORE",)

    def test_none_clears_a_field(self):
        query = RepositoryQuery().with_ids([5]).with_ids(None).with_phids(None).with_callsigns(None)

        assert query.ids == ()
        assert query.phids == ()
        assert query.callsigns == ()
        assert "WHERE" not in _compile(build_where(select(Repository), query))

    def test_query_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            RepositoryQuery().ids = (1,)  # type: ignore[misc]

    def test_status_is_not_validated_when_set(self):
        assert RepositoryQuery().with_status("bogus").status == "bogus"

    @pytest.mark.parametrize(
        ("counts", "recent", "expected"),
        [(False, False, False), (True, False, True), (False, True, True), (True, True, True)],
    )
    def test_joins_summary(self, counts, recent, expected):
        query = RepositoryQuery().need_commit_counts(counts).need_most_recent_commits(recent)

        assert query.joins_summary is expected

    def test_status_values(self):
        assert RepositoryStatus.OPEN == "status-open"
        assert RepositoryStatus.CLOSED == "status-closed"
        assert RepositoryStatus.ALL == "status-all"


@pytest.mark.unit
class TestClauses:
    def test_no_join_without_attachments(self):
        sql = _compile(build_join(select(Repository), RepositoryQuery()))

        assert "repository_summary" not in sql

    def test_left_join_with_attachments(self):
        sql = _compile(build_join(select(Repository), RepositoryQuery().need_commit_counts()))

        assert (
            "LEFT OUTER JOIN repository_summary "
            "ON repository_summary.repository_id = repositories.id" in sql
        )
        assert "repository_summary.size" in sql
        assert "repository_summary.last_commit_id" in sql

    def test_where_only_for_populated_fields(self):
        sql = _compile(build_where(select(Repository), RepositoryQuery().with_callsigns(["A"])))

        assert "repositories.callsign IN" in sql
        assert "repositories.id IN" not in sql
        assert "repositories.phid IN" not in sql

    def test_where_never_targets_summary_table(self):
        query = RepositoryQuery().with_ids([1]).with_phids(["p"]).need_commit_counts()

        sql = _compile(build_where(select(Repository), query))

        assert "WHERE repositories.id IN" in sql
        assert "AND repositories.phid IN" in sql
        assert "repository_summary" not in sql.split("WHERE", 1)[1]

    def test_order_limit_is_reverse_with_probe_row(self):
        stmt = build_order_limit(select(Repository), None, 20)

        assert KEYSET_COLUMN is Repository.id
        assert "ORDER BY repositories.id DESC" in _compile(stmt)
        assert stmt._limit_clause.value == 21

    def test_cursor_predicate_follows_field_predicates(self):
        cursor = CursorCodec.encode(CursorData(field="id", value=40))

        stmt = build_statement(RepositoryQuery().with_ids([5, 9, 41]), cursor=cursor, limit=2)

        sql = _compile(stmt)
        assert "WHERE repositories.id IN (__[POSTCOMPILE_id_1]) AND repositories.id < ?" in sql

    def test_values_are_bound_not_inlined(self):
        stmt = build_statement(
            RepositoryQuery().with_callsigns(["x'); DROP TABLE repositories; --"]),
            limit=10,
        )

        assert "DROP TABLE" not in _compile(stmt)


@pytest.mark.unit
class TestCollectCommitIds:
    def test_skips_nulls_and_deduplicates(self):
        rows = [("a", 3, 11), ("b", 0, None), ("c", 1, 11), ("d", 2, 12)]

        assert collect_commit_ids(rows) == {11, 12}

    def test_empty_page(self):
        assert collect_commit_ids([]) == set()
