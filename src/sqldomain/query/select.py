from typing import Optional, Self, Sequence

from sqldomain.query.sql import SQL, SQLParam, identifier


class Select:
    """builds chainable select statements out of fragments; never runs them"""

    def __init__(
        self,
        table: str,
        columns: Optional[Sequence[str]] = None,
        where: Optional[SQL] = None,
        order: Optional[str] = None,
        desc: bool = False,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ):
        self._table = table
        self._columns = tuple(columns) if columns else ()
        self._where = where
        self._order = order
        self._desc = desc
        self._limit = limit
        self._offset = offset

    def _copy(self, **changes) -> Self:
        state = {
            "columns": self._columns,
            "where": self._where,
            "order": self._order,
            "desc": self._desc,
            "limit": self._limit,
            "offset": self._offset,
        }
        state.update(changes)
        return self.__class__(self._table, **state)

    def filter(self, expression: SQL) -> Self:
        """returns a new select with expression anded in"""
        where = expression if self._where is None else (self._where & expression)
        return self._copy(where=where)

    def exclude(self, expression: SQL) -> Self:
        """returns a new select with not-expression anded in"""
        return self.filter(~expression)

    def order_by(self, column: str, desc: bool = False) -> Self:
        """returns a new select ordered by column"""
        return self._copy(order=column, desc=desc)

    def limit(self, n: int) -> Self:
        """returns a new select limited to n rows"""
        return self._copy(limit=_count("limit", n))

    def offset(self, n: int) -> Self:
        """returns a new select skipping the first n rows"""
        return self._copy(offset=_count("offset", n))

    def to_sql(self) -> SQL:
        """composes the statement; limit and offset are bound as params"""
        cols = ", ".join(identifier(c) for c in self._columns) or "*"
        stmt = SQL(f"SELECT {cols} FROM {identifier(self._table)}")
        if self._where:
            stmt = stmt.append(SQL("WHERE")).append(self._where)
        if self._order:
            direction = " DESC" if self._desc else ""
            stmt = stmt.append(SQL(f"ORDER BY {identifier(self._order)}{direction}"))
        if self._limit is not None:
            stmt = stmt.append(SQL("LIMIT ?", [self._limit]))
        if self._offset is not None:
            stmt = stmt.append(SQL("OFFSET ?", [self._offset]))
        return stmt

    @property
    def query(self) -> str:
        """returns the current select sql, placeholders intact"""
        return self.to_sql().query()

    @property
    def params(self) -> list[SQLParam]:
        """returns the current param list"""
        return self.to_sql().params()


def _count(what: str, n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise ValueError(f"{what} must be a non-negative int, got {n!r}")
    return n
