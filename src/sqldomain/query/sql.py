import logging
from datetime import date, time
from decimal import Decimal
from typing import Any, Iterable, Optional, Self, Union
from uuid import UUID

from sqldomain.config import DEFAULT_STYLE, PlaceholderStyle
from sqldomain.exceptions import (
    FragmentFinalizedError,
    PlaceholderMismatchError,
    UnbindableParameterError,
)
from sqldomain.operators import Connector

logger = logging.getLogger(__name__)

# values a query engine can bind directly; datetime is covered by date
SQLParam = Union[None, bool, int, float, Decimal, str, bytes, date, time, UUID]
BINDABLE_TYPES = (type(None), bool, int, float, Decimal, str, bytes, date, time, UUID)


def _bindable(value: Any) -> SQLParam:
    if not isinstance(value, BINDABLE_TYPES):
        raise UnbindableParameterError(value)
    return value


class SQL:
    """sql fragment with parameters; append to build statements, finalize to run them

    the text is a ``?``-format string: every ``?`` is a placeholder for the
    parameter at the same position. escaping a literal ``?`` is not supported,
    quote identifiers with :func:`identifier` instead.

      SQL("UPDATE TABLE").append(SQL(identifier("foo"))).append(
          SQL("SET name=?, one=?", ["bar", 1])
      ).finalize().formatted()
      # -> 'UPDATE TABLE "foo" SET name=$1, one=$2'

    supports & for and, | for or, ~ for not; params concatenated in order
    """

    def __init__(self, text: str = "", params: Optional[Iterable[Any]] = None):
        """init with sql text and param list; text like "length > ?" """
        if isinstance(params, (str, bytes)):
            # a bare string would be split into one param per character
            raise TypeError(
                f"params must be a list of values, not {type(params).__name__}"
            )
        self._text = text
        self._params: list[SQLParam] = (
            [_bindable(p) for p in params] if params is not None else []
        )
        self._formatted: Optional[str] = None

    @classmethod
    def _raw(
        cls,
        text: str,
        params: list[SQLParam],
        formatted: Optional[str] = None,
    ) -> Self:
        """build without re-checking params that already came from a fragment"""
        obj = cls.__new__(cls)
        obj._text = text
        obj._params = list(params)
        obj._formatted = formatted
        return obj

    def _require_composable(self, action: str) -> None:
        if self._formatted is not None:
            raise FragmentFinalizedError(
                f"cannot {action} a finalized fragment: {self._text!r}"
            )

    # ----- accessors -----
    def query(self) -> str:
        """raw text, placeholders still in place"""
        return self._text

    def params(self) -> list[SQLParam]:
        """copy of the params in placeholder order"""
        return list(self._params)

    def formatted(self) -> str:
        """finalized text with $N placeholders; empty until finalize()"""
        return self._formatted or ""

    @property
    def finalized(self) -> bool:
        return self._formatted is not None

    def placeholder_count(self, style: Optional[PlaceholderStyle] = None) -> int:
        return self._text.count((style or DEFAULT_STYLE).marker)

    # ----- composition -----
    def append(self, other: "SQL") -> Self:
        """returns a new fragment: this text, a space, other text; params in order

        the space is always written, so SQL() is an identity only up to
        surrounding whitespace
        """
        if not isinstance(other, SQL):
            raise TypeError(f"can only append SQL, not {type(other).__name__}")
        self._require_composable("append to")
        other._require_composable("append")
        return self._raw(f"{self._text} {other._text}", self._params + other._params)

    def __add__(self, other: "SQL") -> Self:
        if not isinstance(other, SQL):
            return NotImplemented
        return self.append(other)

    @classmethod
    def join(cls, fragments: Iterable["SQL"], separator: str = ", ") -> Self:
        """joins fragments with a literal separator, e.g. for column or IN lists

          SQL.join([SQL("?", [1]), SQL("?", [2])]).query()  # -> '?, ?'
        """
        texts: list[str] = []
        params: list[SQLParam] = []
        for fragment in fragments:
            fragment._require_composable("join")
            texts.append(fragment._text)
            params.extend(fragment._params)
        return cls._raw(separator.join(texts), params)

    def _connect(self, connector: Connector, other: "SQL") -> Self:
        self._require_composable("combine")
        other._require_composable("combine")
        params = self._params + other._params
        # an empty side is no condition at all, keep the other one bare
        if not self._text:
            return self._raw(other._text, params)
        if not other._text:
            return self._raw(self._text, params)
        return self._raw(
            f"({self._text}) {connector.sql} ({other._text})", params
        )

    def __and__(self, other: "SQL") -> Self:
        """combine two fragments with and; params concatenated"""
        if not isinstance(other, SQL):
            return NotImplemented
        return self._connect(Connector.AND, other)

    def __or__(self, other: "SQL") -> Self:
        """combine two fragments with or; params concatenated"""
        if not isinstance(other, SQL):
            return NotImplemented
        return self._connect(Connector.OR, other)

    def __invert__(self) -> Self:
        """negate this fragment, params unchanged; an empty fragment stays empty"""
        self._require_composable("negate")
        if not self._text:
            return self._raw(self._text, self._params)
        return self._raw(f"{Connector.NOT.sql} ({self._text})", self._params)

    # ----- finalization -----
    def finalize(
        self, strict: bool = False, style: Optional[PlaceholderStyle] = None
    ) -> Self:
        """rewrite each placeholder to $1, $2, ... left to right

        every other character is copied as is. the result is a finalized
        fragment: read it with formatted(), it can't be appended to anymore.

        strict: raise PlaceholderMismatchError when the number of placeholders
          differs from the number of params, instead of only logging it
        """
        style = style or DEFAULT_STYLE
        counter = style.start
        out: list[str] = []
        for ch in self._text:
            if ch == style.marker:
                out.append(f"{style.prefix}{counter}")
                counter += 1
            else:
                out.append(ch)

        markers = counter - style.start
        if markers != len(self._params):
            if strict:
                raise PlaceholderMismatchError(markers, len(self._params))
            logger.warning(
                "finalizing fragment with %d placeholder(s) but %d parameter(s): %r",
                markers,
                len(self._params),
                self._text,
            )
        logger.debug("finalized fragment with %d placeholder(s)", markers)
        return self._raw(self._text, self._params, "".join(out))

    # ----- dunder -----
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SQL):
            return NotImplemented
        return (
            self._text == other._text
            and self._params == other._params
            and self._formatted == other._formatted
        )

    def __bool__(self) -> bool:
        return bool(self._text)

    def __repr__(self) -> str:
        if self._formatted is not None:
            return f"SQL({self._formatted!r}, {self._params!r}, finalized=True)"
        return f"SQL({self._text!r}, {self._params!r})"


def identifier(name: str, style: Optional[PlaceholderStyle] = None) -> str:
    """quote a table/column name: identifier("foo") -> '"foo"'

    embedded quote characters are NOT escaped, so never pass untrusted names
    """
    quote = (style or DEFAULT_STYLE).quote
    if quote in name:
        logger.warning("identifier %r contains an unescaped %s", name, quote)
    return f"{quote}{name}{quote}"
