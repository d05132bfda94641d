from .sql import SQL, SQLParam, identifier
from .term import term
from .select import Select

__all__ = ["SQL", "SQLParam", "identifier", "term", "Select"]
