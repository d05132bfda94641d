from typing import Any

from sqldomain.exceptions import UnknownOperatorError, UnsupportedOperatorError
from sqldomain.operators import is_term_operator, lookup
from sqldomain.query.sql import SQL, identifier

# operators whose value is a list rendered as (?, ?, ...)
_MEMBERSHIP = {"in", "not in"}
# operators whose pattern is wrapped in % (the = forms take the pattern as is)
_SUBSTRING = {"like", "not like", "ilike", "not ilike"}


def term(column: str, operator: str, value: Any) -> SQL:
    """
    render one domain term as a fragment on a quoted column

    examples:
      term("length", ">", 20)
      # -> SQL('"length" > ?', [20])

      term("tags", "not in", ["red", "green"])
      # -> SQL('"tags" NOT IN (?, ?)', ['red', 'green'])

      term("name", "ilike", "bob")
      # -> SQL('"name" ILIKE ?', ['%bob%'])

      term("name", "=like", "bob%")
      # -> SQL('"name" LIKE ?', ['bob%'])

      term("parent_id", "=", None)
      # -> SQL('"parent_id" IS NULL', [])

    raises UnknownOperatorError for tokens outside the domain vocabulary and
    UnsupportedOperatorError for domain operators with no plain sql form
    (child_of, parent_of, any, ...)
    """
    if not is_term_operator(operator):
        raise UnknownOperatorError(operator)
    sql_op = lookup(operator)
    if sql_op is None:
        raise UnsupportedOperatorError(operator)

    col = identifier(column)

    if operator in _MEMBERSHIP:
        if not isinstance(value, (list, tuple, set, frozenset)):
            raise TypeError(
                f"{operator!r} needs a list of values, got {type(value).__name__}"
            )
        values = list(value)
        if not values:
            # nothing is in an empty list
            return SQL("FALSE" if operator == "in" else "TRUE")
        placeholders = ", ".join("?" for _ in values)
        return SQL(f"{col} {sql_op} ({placeholders})", values)

    if value is None and operator in ("=", "!="):
        return SQL(f"{col} IS NULL" if operator == "=" else f"{col} IS NOT NULL")

    if operator in _SUBSTRING:
        if not isinstance(value, str):
            raise TypeError(
                f"{operator!r} needs a string pattern, got {type(value).__name__}"
            )
        value = f"%{value}%"
    return SQL(f"{col} {sql_op} ?", [value])
