import pytest
from pydantic import ValidationError

from sqldomain import (
    DOMAIN_OPERATORS,
    NEGATIVE_TERM_OPERATORS,
    SQL_OPERATORS,
    TERM_OPERATORS,
    Connector,
    OperatorEntry,
    connector_sql,
    is_negative,
    is_term_operator,
    lookup,
)


def test_lookup():
    assert lookup("not in") == "NOT IN"
    assert lookup("=") == "="
    assert lookup("=ilike") == "ILIKE"
    assert lookup("unknown_token") is None


def test_lookup_is_exact():
    """no case folding or trimming"""
    assert lookup("NOT IN") is None
    assert lookup(" in") is None
    assert lookup("in") == "IN"


def test_term_operators_without_sql():
    """known domain operators that have no plain sql text"""
    for token in ("=?", "child_of", "parent_of", "any", "not any"):
        assert is_term_operator(token)
        assert lookup(token) is None


def test_every_sql_operator_is_a_term_operator():
    assert len(TERM_OPERATORS) == 19
    assert len(SQL_OPERATORS) == 14
    assert set(SQL_OPERATORS) <= set(TERM_OPERATORS)


def test_negative_operators():
    assert NEGATIVE_TERM_OPERATORS == {"!=", "not like", "not ilike", "not in"}
    assert is_negative("not in")
    assert not is_negative("in")
    assert SQL_OPERATORS["not ilike"].negative
    assert not SQL_OPERATORS["ilike"].negative


def test_entries_are_frozen():
    entry = SQL_OPERATORS["in"]
    assert entry == OperatorEntry(token="in", sql="IN")
    with pytest.raises(ValidationError):
        entry.sql = "NOT IN"


def test_table_is_read_only():
    with pytest.raises(TypeError):
        SQL_OPERATORS["like"] = OperatorEntry(token="like", sql="GLOB")  # type: ignore[index]


def test_connectors():
    assert DOMAIN_OPERATORS == {"!", "|", "&"}
    assert Connector("&") is Connector.AND
    assert Connector.NOT.sql == "NOT"
    assert connector_sql("|") == "OR"
    assert connector_sql("&") == "AND"
    assert connector_sql("!") == "NOT"
    assert connector_sql("and") is None
