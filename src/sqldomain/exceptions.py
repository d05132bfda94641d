from __future__ import annotations


class SQLDomainError(Exception):
    """Base exception for sqldomain errors."""

    pass


class FragmentError(SQLDomainError):
    """Raised for misuse of an SQL fragment."""

    pass


class PlaceholderMismatchError(FragmentError):
    """Raised by a strict finalize when markers and params don't line up."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"fragment has {expected} placeholder(s) but {actual} parameter(s)"
        )
        self.expected = expected
        self.actual = actual


class FragmentFinalizedError(FragmentError):
    """Raised when appending to a fragment that was already finalized."""

    pass


class UnbindableParameterError(FragmentError, TypeError):
    """Raised when a parameter value can't be bound by a query engine."""

    def __init__(self, value: object):
        super().__init__(
            f"cannot bind parameter of type {type(value).__name__}: {value!r}"
        )
        self.value = value


class OperatorError(SQLDomainError):
    """Base for domain operator errors."""

    pass


class UnknownOperatorError(OperatorError, KeyError):
    """Raised when a token is not a domain term operator."""

    def __init__(self, token: str):
        super().__init__(f"unknown domain operator: {token!r}")
        self.token = token

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class UnsupportedOperatorError(OperatorError):
    """Raised when a term operator has no direct SQL rendering."""

    def __init__(self, token: str):
        super().__init__(f"domain operator {token!r} has no SQL rendering")
        self.token = token
