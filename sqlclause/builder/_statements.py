"""Top-level statement constructors."""

from typing import TYPE_CHECKING

from sqlclause.builder._options import from_, into, table
from sqlclause.core.clauses import UnionClause
from sqlclause.core.kinds import StatementKind
from sqlclause.core.statement import Statement

if TYPE_CHECKING:
    from sqlclause.typing import Option

__all__ = (
    "delete",
    "insert",
    "select",
    "union",
    "union_all",
    "update",
)


def select(*options: "Option") -> Statement:
    """Create a SELECT statement from ``options``.

    Example:
        >>> select(columns("*"), from_("posts"), order_desc("created_at")).build()
        'SELECT * FROM posts ORDER BY created_at DESC'
    """
    return Statement(StatementKind.SELECT).apply(*options)


def insert(name: str, *options: "Option") -> Statement:
    """Create an INSERT into the table ``name``."""
    return Statement(StatementKind.INSERT).apply(into(name), *options)


def update(name: str, *options: "Option") -> Statement:
    """Create an UPDATE of the table ``name``."""
    return Statement(StatementKind.UPDATE).apply(table(name), *options)


def delete(name: str, *options: "Option") -> Statement:
    """Create a DELETE from the table ``name``."""
    return Statement(StatementKind.DELETE).apply(from_(name), *options)


def union(*statements: Statement) -> Statement:
    """Combine ``statements`` with UNION.

    The result has no leading keyword; each member renders itself in full
    and the arguments of all members are concatenated in order.
    """
    return Statement(StatementKind.NONE, tuple(UnionClause(statement) for statement in statements))


def union_all(*statements: Statement) -> Statement:
    """Combine ``statements`` with UNION ALL."""
    return Statement(StatementKind.NONE, tuple(UnionClause(statement, all_=True) for statement in statements))
