"""Clause and statement kind tables.

These tables are read by the compiler only. They are built once at import
time and exposed through read-only views.
"""

from enum import Enum, auto
from types import MappingProxyType
from typing import Final

__all__ = (
    "CLAUSE_KEYWORDS",
    "CLAUSE_ORDER",
    "PARENTHESIZED_KINDS",
    "ClauseKind",
    "SortDirection",
    "StatementKind",
)


class ClauseKind(Enum):
    """Role a clause plays inside a statement."""

    TABLE = auto()
    INTO = auto()
    COLUMNS = auto()
    ALIAS = auto()
    FROM = auto()
    SET = auto()
    VALUES = auto()
    WHERE = auto()
    UNION = auto()
    ORDER = auto()
    LIMIT = auto()
    OFFSET = auto()
    RETURNING = auto()

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def keyword(self) -> str:
        return CLAUSE_KEYWORDS[self]

    @property
    def parenthesized(self) -> bool:
        return self in PARENTHESIZED_KINDS


class StatementKind(Enum):
    """Top-level statement type."""

    NONE = ""
    SELECT = "SELECT "
    INSERT = "INSERT "
    UPDATE = "UPDATE "
    DELETE = "DELETE "

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def keyword(self) -> str:
        return self.value


class SortDirection(Enum):
    ASC = "ASC"
    DESC = "DESC"

    def __str__(self) -> str:
        return self.value


CLAUSE_KEYWORDS: Final = MappingProxyType({
    ClauseKind.TABLE: "",
    ClauseKind.INTO: "INTO ",
    ClauseKind.COLUMNS: "",
    ClauseKind.ALIAS: "AS ",
    ClauseKind.FROM: "FROM ",
    ClauseKind.SET: "SET ",
    ClauseKind.VALUES: "VALUES ",
    ClauseKind.WHERE: "WHERE ",
    ClauseKind.UNION: "",
    ClauseKind.ORDER: "ORDER BY ",
    ClauseKind.LIMIT: "LIMIT ",
    ClauseKind.OFFSET: "OFFSET ",
    ClauseKind.RETURNING: "RETURNING ",
})
"""Keyword written once before the first clause of each kind."""

CLAUSE_ORDER: Final = MappingProxyType({kind: rank for rank, kind in enumerate(ClauseKind)})
"""Render position of each kind; follows the declaration order of :class:`ClauseKind`."""

PARENTHESIZED_KINDS: Final = frozenset({ClauseKind.WHERE})
"""Kinds whose contiguous group is wrapped in parentheses."""
