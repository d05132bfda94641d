from .config import DEFAULT_STYLE, PlaceholderStyle
from .exceptions import (
    SQLDomainError,
    FragmentError,
    PlaceholderMismatchError,
    FragmentFinalizedError,
    UnbindableParameterError,
    OperatorError,
    UnknownOperatorError,
    UnsupportedOperatorError,
)
from .operators import (
    Connector,
    OperatorEntry,
    DOMAIN_OPERATORS,
    TERM_OPERATORS,
    NEGATIVE_TERM_OPERATORS,
    SQL_OPERATORS,
    lookup,
    is_term_operator,
    is_negative,
    connector_sql,
)
from .query import SQL, SQLParam, Select, identifier, term

__all__ = [
    "SQL",
    "SQLParam",
    "Select",
    "identifier",
    "term",
    "PlaceholderStyle",
    "DEFAULT_STYLE",
    "Connector",
    "OperatorEntry",
    "DOMAIN_OPERATORS",
    "TERM_OPERATORS",
    "NEGATIVE_TERM_OPERATORS",
    "SQL_OPERATORS",
    "lookup",
    "is_term_operator",
    "is_negative",
    "connector_sql",
    "SQLDomainError",
    "FragmentError",
    "PlaceholderMismatchError",
    "FragmentFinalizedError",
    "UnbindableParameterError",
    "OperatorError",
    "UnknownOperatorError",
    "UnsupportedOperatorError",
]
