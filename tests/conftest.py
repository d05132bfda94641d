import pytest
from sqldomain import SQL, identifier


@pytest.fixture
def update_statement():
    """UPDATE TABLE "foo" SET name=?, one=? built from three fragments"""
    return (
        SQL("UPDATE TABLE", None)
        .append(SQL(identifier("foo"), None))
        .append(SQL("SET name=?, one=?", [identifier("foo"), 1]))
    )


@pytest.fixture
def length_gt():
    return SQL("length > ?", [20])


@pytest.fixture
def seq_eq():
    return SQL("sequence = ?", ["ACGT"])
