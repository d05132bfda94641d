import pytest

from sqldomain import SQL, Select, term


def test_can_build_queries(length_gt, seq_eq):
    """can we combine fragments into selects?"""
    q = Select(table="oligos")

    # does it have the correct initial sql?
    assert q.query == 'SELECT * FROM "oligos"'
    assert q.params == []

    q = q.filter(length_gt)
    assert q.query == 'SELECT * FROM "oligos" WHERE length > ?'
    assert q.params == [20]

    # should return another select obj that we can chain
    q = q.filter(seq_eq)
    assert q.query == (
        'SELECT * FROM "oligos" WHERE (length > ?) AND (sequence = ?)'
    )
    assert q.params == [20, "ACGT"]


def test_select_is_immutable(length_gt):
    base = Select("oligos")
    base.filter(length_gt).limit(3)
    assert base.query == 'SELECT * FROM "oligos"'


def test_exclude(length_gt, seq_eq):
    q = Select("oligos").filter(length_gt).exclude(seq_eq)
    assert q.query == (
        'SELECT * FROM "oligos" WHERE (length > ?) AND (NOT (sequence = ?))'
    )
    assert q.params == [20, "ACGT"]


def test_full_statement_finalizes():
    q = (
        Select("oligos", ["sequence", "length"])
        .filter(term("length", ">=", 4))
        .exclude(term("tags", "in", ["weird"]))
        .order_by("length", desc=True)
        .limit(10)
        .offset(20)
    )
    stmt = q.to_sql()
    assert stmt.query() == (
        'SELECT "sequence", "length" FROM "oligos" '
        'WHERE ("length" >= ?) AND (NOT ("tags" IN (?))) '
        'ORDER BY "length" DESC LIMIT ? OFFSET ?'
    )
    final = stmt.finalize(strict=True)
    assert final.formatted().endswith("LIMIT $3 OFFSET $4")
    assert final.params() == [4, "weird", 10, 20]


def test_empty_filter_adds_no_where(length_gt):
    """filtering on an empty fragment is a no-op, no dangling WHERE"""
    assert Select("t").filter(SQL()).query == 'SELECT * FROM "t"'
    assert Select("t").exclude(SQL()).query == 'SELECT * FROM "t"'
    q = Select("t").filter(SQL()).filter(length_gt)
    assert q.query == 'SELECT * FROM "t" WHERE length > ?'
    assert q.params == [20]


def test_order_ascending():
    q = Select("oligos").order_by("tm")
    assert q.query == 'SELECT * FROM "oligos" ORDER BY "tm"'


@pytest.mark.parametrize("bad", [-1, 1.5, True, "3"])
def test_limit_rejects_bad_values(bad):
    with pytest.raises(ValueError):
        Select("oligos").limit(bad)
    with pytest.raises(ValueError):
        Select("oligos").offset(bad)


def test_to_sql_returns_fragment():
    stmt = Select("oligos").to_sql()
    assert isinstance(stmt, SQL)
    assert stmt.append(SQL("FOR UPDATE")).query() == 'SELECT * FROM "oligos" FOR UPDATE'
