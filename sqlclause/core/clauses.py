"""Clause variants.

A clause is one fragment of a statement tagged with the :class:`ClauseKind`
it belongs to. ``separator`` is the text written before a clause when it
directly follows another clause of the same kind.
"""

from dataclasses import dataclass, field
from itertools import chain
from typing import TYPE_CHECKING, Union

from sqlclause.core.kinds import ClauseKind, SortDirection

if TYPE_CHECKING:
    from sqlclause.core.expressions import Expression
    from sqlclause.core.statement import Statement
    from sqlclause.typing import BoundArguments

__all__ = (
    "AND",
    "COMMA",
    "OR",
    "AliasClause",
    "Clause",
    "ListClause",
    "OrderClause",
    "PortionClause",
    "PredicateClause",
    "TableClause",
    "UnionClause",
)

AND = "AND"
OR = "OR"
COMMA = ","
LIST_SEPARATOR = ", "


@dataclass(frozen=True)
class TableClause:
    """FROM, INTO or the bare table name of an UPDATE."""

    kind: ClauseKind
    name: str

    def render(self) -> str:
        return self.name

    @property
    def separator(self) -> str:
        return LIST_SEPARATOR

    def bound_arguments(self) -> "BoundArguments":
        return ()


@dataclass(frozen=True)
class ListClause:
    """COLUMNS, RETURNING or a single VALUES group."""

    kind: ClauseKind
    items: "tuple[Expression, ...]"
    wrap: bool = False

    def render(self) -> str:
        items = LIST_SEPARATOR.join(item.render() for item in self.items)
        if self.wrap:
            return f"({items})"
        return items

    @property
    def separator(self) -> str:
        return LIST_SEPARATOR

    def bound_arguments(self) -> "BoundArguments":
        return tuple(chain.from_iterable(item.bound_arguments() for item in self.items))


@dataclass(frozen=True)
class PredicateClause:
    """A ``column operator value`` comparison used by WHERE and SET.

    WHERE predicates are joined by their conjunction (``AND``/``OR``), SET
    assignments by a comma.
    """

    kind: ClauseKind
    column: str
    operator: str
    value: "Expression"
    conjunction: str = AND

    def render(self) -> str:
        return f"{self.column} {self.operator} {self.value.render()}"

    @property
    def separator(self) -> str:
        if self.kind is ClauseKind.WHERE:
            return f" {self.conjunction} "
        return f"{self.conjunction} "

    def bound_arguments(self) -> "BoundArguments":
        return tuple(self.value.bound_arguments())


@dataclass(frozen=True)
class OrderClause:
    columns: "tuple[str, ...]"
    direction: SortDirection = SortDirection.ASC
    kind: ClauseKind = field(default=ClauseKind.ORDER, init=False)

    def render(self) -> str:
        return f"{LIST_SEPARATOR.join(self.columns)} {self.direction}"

    @property
    def separator(self) -> str:
        return LIST_SEPARATOR

    def bound_arguments(self) -> "BoundArguments":
        return ()


@dataclass(frozen=True)
class PortionClause:
    """LIMIT or OFFSET."""

    kind: ClauseKind
    count: int

    def render(self) -> str:
        return str(self.count)

    @property
    def separator(self) -> str:
        return ""

    def bound_arguments(self) -> "BoundArguments":
        return ()


@dataclass(frozen=True)
class AliasClause:
    name: str
    kind: ClauseKind = field(default=ClauseKind.ALIAS, init=False)

    def render(self) -> str:
        return self.name

    @property
    def separator(self) -> str:
        return LIST_SEPARATOR

    def bound_arguments(self) -> "BoundArguments":
        return ()


@dataclass(frozen=True)
class UnionClause:
    """One member of a UNION, holding an already composed statement."""

    statement: "Statement"
    all_: bool = False
    kind: ClauseKind = field(default=ClauseKind.UNION, init=False)

    def render(self) -> str:
        return self.statement.render()

    @property
    def separator(self) -> str:
        return " UNION ALL " if self.all_ else " UNION "

    def bound_arguments(self) -> "BoundArguments":
        return self.statement.bound_arguments()


Clause = Union[
    TableClause,
    ListClause,
    PredicateClause,
    OrderClause,
    PortionClause,
    AliasClause,
    UnionClause,
]
"""Closed set of clause variants understood by the compiler."""
