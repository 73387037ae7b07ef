"""Options: composable statement transformers.

Every function here returns an :data:`~sqlclause.typing.Option`, a callable
that takes a :class:`Statement` and returns a new one with a clause appended.
Options applied to a statement kind that has no use for them return the
statement unchanged, as do options given nothing to add.
"""

import logging
import operator
from collections.abc import Collection, Sequence
from dataclasses import replace
from itertools import chain
from typing import TYPE_CHECKING, Any, Final, Union

from sqlclause.core.clauses import (
    AND,
    COMMA,
    OR,
    AliasClause,
    ListClause,
    OrderClause,
    PortionClause,
    PredicateClause,
    TableClause,
)
from sqlclause.core.expressions import (
    Argument,
    Call,
    Expression,
    Identifier,
    Literal,
    Subquery,
    ValueList,
    to_expression,
    to_expressions,
)
from sqlclause.core.kinds import ClauseKind, SortDirection, StatementKind
from sqlclause.core.statement import Statement
from sqlclause.exceptions import SQLBuilderError
from sqlclause.utils.logging import get_logger

if TYPE_CHECKING:
    from sqlclause.typing import Option

__all__ = (
    "OP_EQ",
    "OP_GT",
    "OP_GT_OR_EQ",
    "OP_IN",
    "OP_IS",
    "OP_IS_NOT",
    "OP_LIKE",
    "OP_LT",
    "OP_LT_OR_EQ",
    "OP_NOT_EQ",
    "OP_NOT_IN",
    "as_",
    "columns",
    "count",
    "from_",
    "into",
    "limit",
    "offset",
    "options",
    "or_",
    "or_where",
    "or_where_in",
    "or_where_query",
    "order_asc",
    "order_desc",
    "returning",
    "set_",
    "set_raw",
    "sum_",
    "table",
    "values",
    "where",
    "where_in",
    "where_in_raw",
    "where_query",
)

logger = get_logger("sqlclause.builder")

OP_EQ: Final = "="
OP_NOT_EQ: Final = "!="
OP_GT: Final = ">"
OP_GT_OR_EQ: Final = ">="
OP_LT: Final = "<"
OP_LT_OR_EQ: Final = "<="
OP_LIKE: Final = "LIKE"
OP_IS: Final = "IS"
OP_IS_NOT: Final = "IS NOT"
OP_IN: Final = "IN"
OP_NOT_IN: Final = "NOT IN"

_LIST_OPERATORS: Final = frozenset({OP_IN, OP_NOT_IN})
_NULL_OPERATORS: Final = frozenset({OP_IS, OP_IS_NOT})

_FILTERED_KINDS: Final = frozenset({StatementKind.SELECT, StatementKind.UPDATE, StatementKind.DELETE})
_PAGED_KINDS: Final = frozenset({
    StatementKind.NONE,
    StatementKind.SELECT,
    StatementKind.UPDATE,
    StatementKind.DELETE,
})
_RETURNING_KINDS: Final = frozenset({StatementKind.INSERT, StatementKind.UPDATE, StatementKind.DELETE})


def _ignored(option_name: str, statement: Statement) -> Statement:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Ignoring %s option on %s statement", option_name, statement.kind)
    return statement


def _column_items(cols: "Sequence[Union[str, Expression]]") -> "tuple[Expression, ...]":
    return tuple(Identifier(col) if isinstance(col, str) else to_expression(col) for col in cols)


def options(*opts: "Option") -> "Option":
    """Fold ``opts`` into a single option applied left to right.

    Raises:
        SQLBuilderError: If one of ``opts`` is not callable.
    """
    for opt in opts:
        if not callable(opt):
            msg = f"Expected an option callable, got {type(opt).__name__}: {opt!r}"
            raise SQLBuilderError(msg)

    def _apply(statement: Statement) -> Statement:
        return statement.apply(*opts)

    return _apply


def columns(*cols: "Union[str, Expression]") -> "Option":
    """Select ``cols``, or name the target columns of an INSERT.

    On SELECT the columns are written as a plain list; on INSERT they become
    the parenthesized column group after the table name.
    """

    def _apply(statement: Statement) -> Statement:
        if not cols:
            return statement
        if statement.kind is StatementKind.SELECT:
            return statement.append(ListClause(ClauseKind.COLUMNS, _column_items(cols)))
        if statement.kind is StatementKind.INSERT:
            # INSERT takes a single column group.
            existing = tuple(
                chain.from_iterable(
                    clause.items for clause in statement.clauses_of(ClauseKind.COLUMNS) if isinstance(clause, ListClause)
                )
            )
            return statement.without(ClauseKind.COLUMNS).append(
                ListClause(ClauseKind.COLUMNS, existing + _column_items(cols), wrap=True)
            )
        return _ignored("columns", statement)

    return _apply


def _aggregate(name: str, cols: "Sequence[str]") -> "Option":
    call_expr = Call(name, tuple(Literal(col) for col in cols))

    def _apply(statement: Statement) -> Statement:
        if statement.kind is not StatementKind.SELECT:
            return _ignored(name.lower(), statement)
        return statement.append(ListClause(ClauseKind.COLUMNS, (call_expr,)))

    return _apply


def count(*cols: str) -> "Option":
    """Select ``COUNT(cols)``."""
    return _aggregate("COUNT", cols)


def sum_(col: str) -> "Option":
    """Select ``SUM(col)``."""
    return _aggregate("SUM", (col,))


def as_(name: str) -> "Option":
    """Alias the selected column group, e.g. ``COUNT(*) AS total``."""

    def _apply(statement: Statement) -> Statement:
        if statement.kind is not StatementKind.SELECT:
            return _ignored("as_", statement)
        return statement.append(AliasClause(name))

    return _apply


def from_(name: str) -> "Option":
    """Set the table a SELECT reads from or a DELETE removes from."""

    def _apply(statement: Statement) -> Statement:
        if statement.kind not in {StatementKind.SELECT, StatementKind.DELETE}:
            return _ignored("from_", statement)
        return statement.append(TableClause(ClauseKind.FROM, name))

    return _apply


def into(name: str) -> "Option":
    """Set the table an INSERT writes to."""

    def _apply(statement: Statement) -> Statement:
        if statement.kind is not StatementKind.INSERT:
            return _ignored("into", statement)
        return statement.append(TableClause(ClauseKind.INTO, name))

    return _apply


def table(name: str) -> "Option":
    """Set the table an UPDATE modifies."""

    def _apply(statement: Statement) -> Statement:
        if statement.kind is not StatementKind.UPDATE:
            return _ignored("table", statement)
        return statement.append(TableClause(ClauseKind.TABLE, name))

    return _apply


def _predicate_value(op: str, values: "Sequence[Any]") -> "Union[Expression, None]":
    """Turn the values given to a WHERE option into one expression.

    Returns ``None`` when there is nothing to compare against.
    """
    if len(values) == 1:
        value = values[0]
        if isinstance(value, ValueList) and not value.items:
            return None
        if isinstance(value, (Statement, Expression)):
            return to_expression(value)
        if op.upper() in _NULL_OPERATORS and (value is None or isinstance(value, bool)):
            return Literal(value)
        if op.upper() not in _LIST_OPERATORS:
            return Argument(value)
        if isinstance(value, Collection) and not isinstance(value, (str, bytes)):
            values = tuple(value)
    if not values:
        return None
    return ValueList(to_expressions(values))


def _where(col: str, op: str, values: "Sequence[Any]", conjunction: str, option_name: str) -> "Option":
    def _apply(statement: Statement) -> Statement:
        if statement.kind not in _FILTERED_KINDS:
            return _ignored(option_name, statement)
        value = _predicate_value(op, values)
        if value is None:
            return _ignored(f"{option_name} without values", statement)
        return statement.append(PredicateClause(ClauseKind.WHERE, col, op, value, conjunction))

    return _apply


def where(col: str, op: str, *values: Any) -> "Option":
    """Add a WHERE predicate joined to the previous one with AND.

    ``values`` decides the right-hand side:

    * an expression is used as it is (``lit(None)``, ``list_(1, 2)``, ...)
    * a statement becomes a parenthesized subquery
    * ``None``, ``True`` or ``False`` under ``IS``/``IS NOT`` is written as
      ``NULL``, ``TRUE`` or ``FALSE``
    * several values, or a sequence under ``IN``/``NOT IN``, become a
      parenthesized placeholder list
    * any other value is bound through a placeholder

    Without values, or with an empty ``IN`` sequence or list, the option does
    nothing.
    """
    return _where(col, op, values, AND, "where")


def or_where(col: str, op: str, *values: Any) -> "Option":
    """Like :func:`where`, joined to the previous predicate with OR."""
    return _where(col, op, values, OR, "or_where")


def where_query(col: str, op: str, query: Statement) -> "Option":
    """Compare ``col`` against a nested statement, joined with AND."""
    return _where(col, op, (Subquery(query),), AND, "where_query")


def or_where_query(col: str, op: str, query: Statement) -> "Option":
    """Compare ``col`` against a nested statement, joined with OR."""
    return _where(col, op, (Subquery(query),), OR, "or_where_query")


def where_in(col: str, *vals: Any) -> "Option":
    """``col IN (...)`` with one placeholder per value, joined with AND."""
    return _where(col, OP_IN, (ValueList(to_expressions(vals)),) if vals else (), AND, "where_in")


def or_where_in(col: str, *vals: Any) -> "Option":
    """``col IN (...)`` with one placeholder per value, joined with OR."""
    return _where(col, OP_IN, (ValueList(to_expressions(vals)),) if vals else (), OR, "or_where_in")


def where_in_raw(col: str, *vals: Any) -> "Option":
    """``col IN (...)`` with every value written straight into the SQL."""
    items = tuple(Literal(val) for val in vals)
    return _where(col, OP_IN, (ValueList(items),) if items else (), AND, "where_in_raw")


def or_(*opts: "Option") -> "Option":
    """Apply ``opts`` and join every WHERE predicate they add with OR."""
    combined = options(*opts)

    def _apply(statement: Statement) -> Statement:
        existing = {id(clause) for clause in statement.clauses}
        result = combined(statement)
        return result.replace_clauses(
            replace(clause, conjunction=OR)
            if isinstance(clause, PredicateClause) and clause.kind is ClauseKind.WHERE and id(clause) not in existing
            else clause
            for clause in result.clauses
        )

    return _apply


def set_(col: str, value: Any) -> "Option":
    """Assign ``value`` to ``col`` in an UPDATE.

    Plain values are bound; expressions such as ``lit("NOW()")`` are used as
    they are.
    """

    def _apply(statement: Statement) -> Statement:
        if statement.kind is not StatementKind.UPDATE:
            return _ignored("set_", statement)
        return statement.append(PredicateClause(ClauseKind.SET, col, OP_EQ, to_expression(value), COMMA))

    return _apply


def set_raw(col: str, value: Any) -> "Option":
    """Assign ``value`` to ``col`` in an UPDATE, written straight into the SQL."""
    return set_(col, Literal(value))


def values(*vals: Any) -> "Option":
    """Add one parenthesized VALUES group to an INSERT.

    Call it once per row to insert several rows.
    """

    def _apply(statement: Statement) -> Statement:
        if statement.kind is not StatementKind.INSERT:
            return _ignored("values", statement)
        if not vals:
            return _ignored("values without values", statement)
        return statement.append(ListClause(ClauseKind.VALUES, to_expressions(vals), wrap=True))

    return _apply


def _portion(kind: ClauseKind, n: int) -> "Option":
    amount = operator.index(n)

    def _apply(statement: Statement) -> Statement:
        if statement.kind not in _PAGED_KINDS or amount < 0:
            return _ignored(str(kind), statement)
        return statement.without(kind).append(PortionClause(kind, amount))

    return _apply


def limit(n: int) -> "Option":
    """Set the LIMIT. A later call replaces an earlier one."""
    return _portion(ClauseKind.LIMIT, n)


def offset(n: int) -> "Option":
    """Set the OFFSET. A later call replaces an earlier one."""
    return _portion(ClauseKind.OFFSET, n)


def _order(direction: SortDirection, cols: "Sequence[str]") -> "Option":
    def _apply(statement: Statement) -> Statement:
        if statement.kind not in _PAGED_KINDS or not cols:
            return _ignored(f"order_{str(direction).lower()}", statement)
        return statement.append(OrderClause(tuple(cols), direction))

    return _apply


def order_asc(*cols: str) -> "Option":
    return _order(SortDirection.ASC, cols)


def order_desc(*cols: str) -> "Option":
    return _order(SortDirection.DESC, cols)


def returning(*cols: "Union[str, Expression]") -> "Option":
    """Add a RETURNING list to an INSERT, UPDATE or DELETE."""

    def _apply(statement: Statement) -> Statement:
        if statement.kind not in _RETURNING_KINDS or not cols:
            return _ignored("returning", statement)
        return statement.append(ListClause(ClauseKind.RETURNING, _column_items(cols)))

    return _apply
