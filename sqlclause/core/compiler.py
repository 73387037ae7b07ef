"""Statement assembly engine.

Rendering happens in two steps:

1. :func:`render_statement` writes the statement keyword and walks the clause
   list once. Clauses are first stable-sorted by kind so every kind forms one
   contiguous group; each group gets its keyword exactly once, same-kind
   clauses are joined by the separator of the clause that follows, and
   parenthesized groups (WHERE) close and reopen a parenthesis whenever the
   conjunction switches. The result still carries raw ``?`` placeholders,
   which is what nested statements embed.
2. :func:`compile_statement` numbers the placeholders of the outermost text
   in the configured style and pairs it with the bound arguments.
"""

import logging
from collections.abc import Iterator, Sequence
from itertools import chain
from typing import TYPE_CHECKING, Any, Optional

from mypy_extensions import mypyc_attr

from sqlclause.core.config import get_default_config
from sqlclause.core.kinds import CLAUSE_ORDER, ClauseKind, StatementKind
from sqlclause.core.parameters import ParameterStyle, convert_placeholders
from sqlclause.exceptions import ExtraParameterError, MissingParameterError
from sqlclause.utils.logging import get_logger, log_with_context

if TYPE_CHECKING:
    from sqlclause.core.clauses import Clause
    from sqlclause.core.config import StatementConfig
    from sqlclause.core.statement import Statement
    from sqlclause.typing import BoundArguments

__all__ = (
    "CompiledStatement",
    "collect_arguments",
    "compile_statement",
    "order_clauses",
    "render_clauses",
    "render_statement",
)

logger = get_logger("sqlclause.core.compiler")


@mypyc_attr(allow_interpreted_subclasses=True)
class CompiledStatement:
    """Final SQL text paired with the arguments for its placeholders."""

    __slots__ = ("_hash", "operation_type", "parameter_style", "parameters", "sql")

    def __init__(
        self,
        sql: str,
        parameters: "BoundArguments",
        parameter_style: ParameterStyle,
        operation_type: str,
    ) -> None:
        self.sql = sql
        self.parameters = parameters
        self.parameter_style = parameter_style
        self.operation_type = operation_type
        self._hash: Optional[int] = None

    def __iter__(self) -> "Iterator[Any]":
        """Unpack as ``sql, parameters`` for driver calls."""
        return iter((self.sql, list(self.parameters)))

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self.sql, repr(self.parameters), self.parameter_style))
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompiledStatement):
            return False
        return (
            self.sql == other.sql
            and self.parameters == other.parameters
            and self.parameter_style == other.parameter_style
            and self.operation_type == other.operation_type
        )

    def __repr__(self) -> str:
        return (
            f"CompiledStatement(sql={self.sql!r}, "
            f"parameters={self.parameters!r}, "
            f"style={str(self.parameter_style)!r})"
        )


def order_clauses(clauses: "Sequence[Clause]") -> "list[Clause]":
    """Group clauses by kind, keeping insertion order within each kind."""
    return sorted(clauses, key=lambda clause: CLAUSE_ORDER[clause.kind])


def render_clauses(clauses: "Sequence[Clause]") -> str:
    """Concatenate already ordered clauses into SQL text.

    Args:
        clauses: Clauses in render order; same-kind clauses must be adjacent.

    Returns:
        The clause text with raw ``?`` placeholders.
    """
    parts: list[str] = []
    opened: set[ClauseKind] = set()
    last = len(clauses) - 1

    for index, clause in enumerate(clauses):
        kind = clause.kind
        grouped = kind.parenthesized
        prev = clauses[index - 1] if index > 0 else None

        if kind not in opened:
            opened.add(kind)
            parts.append(kind.keyword)
            if grouped:
                parts.append("(")

        parts.append(clause.render())

        if index == last:
            if grouped:
                parts.append(")")
            break

        following = clauses[index + 1]
        if following.kind is kind:
            separator = following.separator
            # A conjunction switch isolates the run before it in its own group.
            if grouped and prev is not None and prev.kind is kind and separator != clause.separator:
                parts.extend((")", separator, "("))
            else:
                parts.append(separator)
            continue

        if grouped:
            parts.append(")")
        parts.append(" ")

    return "".join(parts)


def render_statement(kind: StatementKind, clauses: "Sequence[Clause]") -> str:
    """Render a statement with raw ``?`` placeholders."""
    return f"{kind.keyword}{render_clauses(order_clauses(clauses))}".strip()


def collect_arguments(clauses: "Sequence[Clause]") -> "BoundArguments":
    """Return the bound arguments of ``clauses`` in render order."""
    return tuple(chain.from_iterable(clause.bound_arguments() for clause in order_clauses(clauses)))


def compile_statement(statement: "Statement", config: "Optional[StatementConfig]" = None) -> CompiledStatement:
    """Render ``statement`` and number its placeholders.

    Args:
        statement: The statement to compile.
        config: Compilation settings. Defaults to :func:`get_default_config`.

    Raises:
        MissingParameterError: The text holds more placeholders than arguments.
        ExtraParameterError: More arguments were bound than placeholders rendered.

    Returns:
        The compiled statement.
    """
    config = config or get_default_config()
    raw_sql = statement.render()
    arguments = statement.bound_arguments()
    sql, placeholder_count = convert_placeholders(raw_sql, config.parameter_style)

    if placeholder_count != len(arguments):
        msg = f"Statement renders {placeholder_count} placeholder(s) but binds {len(arguments)} argument(s)"
        if config.strict_parameters:
            if placeholder_count > len(arguments):
                raise MissingParameterError(msg, sql)
            raise ExtraParameterError(msg, sql)
        logger.warning("%s: %s", msg, sql)

    log_with_context(
        logger,
        logging.DEBUG,
        "Compiled statement",
        operation_type=statement.operation_type,
        parameter_style=str(config.parameter_style),
        clause_count=len(statement.clauses),
        parameter_count=len(arguments),
    )
    return CompiledStatement(sql, arguments, config.parameter_style, statement.operation_type)
