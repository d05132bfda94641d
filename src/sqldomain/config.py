from __future__ import annotations

from pydantic import BaseModel, Field


class PlaceholderStyle(BaseModel):
    """How fragments mark, number and quote things.

    ``marker`` is the character written in fragment text where a parameter goes;
    ``finalize`` rewrites every marker to ``prefix`` followed by a running
    counter that begins at ``start``. ``quote`` wraps identifiers.

    Defaults give postgres style numbering: ``a = ?`` -> ``a = $1``.
    """

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    marker: str = Field(default="?", min_length=1, max_length=1)
    prefix: str = "$"
    start: int = Field(default=1, ge=0)
    quote: str = Field(default='"', min_length=1, max_length=1)


DEFAULT_STYLE = PlaceholderStyle()
