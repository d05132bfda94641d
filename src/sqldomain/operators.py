"""Domain filter vocabulary and the SQL text it maps to.

Term operators are the comparison/membership tokens found in a domain term
such as ``("name", "not ilike", "bob%")``. Boolean connectors (``!``, ``|``,
``&``) combine terms. Everything here is a read-only table; lookups are exact
and never raise.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel


class Connector(StrEnum):
    """boolean connectors of a domain expression"""

    NOT = "!"
    OR = "|"
    AND = "&"

    @property
    def sql(self) -> str:
        """sql keyword for this connector, e.g. Connector.OR.sql == 'OR'"""
        return self.name


DOMAIN_OPERATORS: frozenset[str] = frozenset(c.value for c in Connector)

TERM_OPERATORS: tuple[str, ...] = (
    "=",
    "!=",
    "<=",
    "<",
    ">",
    ">=",
    "=?",
    "=like",
    "=ilike",
    "like",
    "not like",
    "ilike",
    "not ilike",
    "in",
    "not in",
    "child_of",
    "parent_of",
    "any",
    "not any",
)

NEGATIVE_TERM_OPERATORS: frozenset[str] = frozenset(
    {"!=", "not like", "not ilike", "not in"}
)


class OperatorEntry(BaseModel):
    """one row of the operator table: domain token -> sql operator text"""

    model_config = {"frozen": True}

    token: str
    sql: str
    negative: bool = False


def _entry(token: str, sql: str) -> tuple[str, OperatorEntry]:
    return token, OperatorEntry(
        token=token, sql=sql, negative=token in NEGATIVE_TERM_OPERATORS
    )


SQL_OPERATORS: Mapping[str, OperatorEntry] = MappingProxyType(
    dict(
        [
            _entry("=", "="),
            _entry("!=", "!="),
            _entry("<=", "<="),
            _entry("<", "<"),
            _entry(">", ">"),
            _entry(">=", ">="),
            _entry("in", "IN"),
            _entry("not in", "NOT IN"),
            _entry("=like", "LIKE"),
            _entry("=ilike", "ILIKE"),
            _entry("like", "LIKE"),
            _entry("ilike", "ILIKE"),
            _entry("not like", "NOT LIKE"),
            _entry("not ilike", "NOT ILIKE"),
        ]
    )
)


def lookup(token: str) -> Optional[str]:
    """sql operator text for a domain term operator, or None if it has none"""
    entry = SQL_OPERATORS.get(token)
    return entry.sql if entry is not None else None


def is_term_operator(token: str) -> bool:
    return token in TERM_OPERATORS


def is_negative(token: str) -> bool:
    """true for the negated half of an operator pair (!=, not in, ...)"""
    return token in NEGATIVE_TERM_OPERATORS


def connector_sql(token: str) -> Optional[str]:
    """sql keyword for a boolean connector token ('!', '|', '&'), or None"""
    if token not in DOMAIN_OPERATORS:
        return None
    return Connector(token).sql
