"""The immutable statement value.

A :class:`Statement` is a statement kind plus an ordered tuple of clauses.
Options never modify a statement in place: each one returns a new value, so
a partially built statement can be shared as a template and extended along
several branches without interference.

Example:
    >>> from sqlclause import columns, from_, select, where
    >>> query = select(columns("*"), from_("users"), where("username", "=", "me"))
    >>> query.build()
    'SELECT * FROM users WHERE (username = $1)'
    >>> query.args()
    ['me']
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Optional

from sqlclause.core.compiler import CompiledStatement, collect_arguments, compile_statement, render_statement
from sqlclause.core.config import MYSQL_CONFIG
from sqlclause.core.kinds import ClauseKind, StatementKind
from sqlclause.exceptions import SQLBuilderError

if TYPE_CHECKING:
    from sqlclause.core.clauses import Clause
    from sqlclause.core.config import StatementConfig
    from sqlclause.typing import BoundArguments, Option

__all__ = ("Statement",)


@dataclass(frozen=True)
class Statement:
    """A composed SQL statement.

    ``render`` and ``bound_arguments`` make a statement usable as an
    expression, which is how subqueries and UNION members are embedded.
    """

    kind: StatementKind = StatementKind.NONE
    clauses: "tuple[Clause, ...]" = ()

    def __str__(self) -> str:
        return self.build()

    @property
    def operation_type(self) -> str:
        if self.kind is StatementKind.NONE and self.has(ClauseKind.UNION):
            return "UNION"
        return self.kind.name

    def has(self, kind: ClauseKind) -> bool:
        """Return whether the statement holds a clause of ``kind``."""
        return any(clause.kind is kind for clause in self.clauses)

    def clauses_of(self, kind: ClauseKind) -> "tuple[Clause, ...]":
        return tuple(clause for clause in self.clauses if clause.kind is kind)

    def append(self, *clauses: "Clause") -> "Statement":
        """Return a copy with ``clauses`` appended."""
        if not clauses:
            return self
        return replace(self, clauses=self.clauses + clauses)

    def without(self, kind: ClauseKind) -> "Statement":
        """Return a copy without any clause of ``kind``."""
        if not self.has(kind):
            return self
        return replace(self, clauses=tuple(clause for clause in self.clauses if clause.kind is not kind))

    def replace_clauses(self, clauses: "Iterable[Clause]") -> "Statement":
        return replace(self, clauses=tuple(clauses))

    def apply(self, *options: "Option") -> "Statement":
        """Apply ``options`` left to right and return the result.

        Raises:
            SQLBuilderError: If an option is not callable.
        """
        statement = self
        for option in options:
            if not callable(option):
                msg = f"Expected an option callable, got {type(option).__name__}: {option!r}"
                raise SQLBuilderError(msg)
            statement = option(statement)
        return statement

    def render(self) -> str:
        """Return the statement text with unnumbered ``?`` placeholders."""
        return render_statement(self.kind, self.clauses)

    def bound_arguments(self) -> "BoundArguments":
        """Return the bound arguments in placeholder order."""
        return collect_arguments(self.clauses)

    def compile(self, config: "Optional[StatementConfig]" = None) -> CompiledStatement:
        """Render and number placeholders according to ``config``."""
        return compile_statement(self, config)

    def build(self, config: "Optional[StatementConfig]" = None) -> str:
        """Return the final SQL, with ``$n`` placeholders unless ``config`` says otherwise."""
        return self.compile(config).sql

    def build_mysql(self) -> str:
        """Return the final SQL with unnumbered ``?`` placeholders."""
        return self.compile(MYSQL_CONFIG).sql

    def args(self) -> "list[Any]":
        """Return the arguments for the placeholders of :meth:`build`, in order."""
        return list(self.bound_arguments())
