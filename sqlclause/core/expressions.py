"""Expression primitives.

An expression is one fragment of SQL text plus the values it binds. Bound
values always render as a bare ``?``; numbering happens once, when the
outermost statement is compiled.

Example:
    >>> expr = call("COALESCE", ident("nickname"), arg("anonymous"))
    >>> expr.render()
    'COALESCE(nickname, ?)'
    >>> expr.bound_arguments()
    ('anonymous',)
"""

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import chain
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sqlclause.typing import BoundArguments

__all__ = (
    "Argument",
    "Call",
    "Expression",
    "Identifier",
    "Literal",
    "Subquery",
    "ValueList",
    "arg",
    "call",
    "ident",
    "list_",
    "lit",
    "subquery",
    "to_expression",
    "to_expressions",
)

PLACEHOLDER = "?"


@runtime_checkable
class Expression(Protocol):
    """Anything that renders SQL text and reports the values it binds."""

    def render(self) -> str: ...

    def bound_arguments(self) -> "BoundArguments": ...


@dataclass(frozen=True)
class Identifier:
    """A column, table or other name, rendered verbatim."""

    name: str

    def render(self) -> str:
        return self.name

    def bound_arguments(self) -> "BoundArguments":
        return ()


@dataclass(frozen=True)
class Literal:
    """A value written straight into the SQL text, never parameterized.

    Use it for things like ``NOW()`` or ``NULL`` that must not be bound.
    """

    value: Any

    def render(self) -> str:
        if self.value is None:
            return "NULL"
        if isinstance(self.value, bool):
            return "TRUE" if self.value else "FALSE"
        return str(self.value)

    def bound_arguments(self) -> "BoundArguments":
        return ()


@dataclass(frozen=True)
class Argument:
    """A single bound value, rendered as a placeholder."""

    value: Any

    def render(self) -> str:
        return PLACEHOLDER

    def bound_arguments(self) -> "BoundArguments":
        return (self.value,)


@dataclass(frozen=True)
class ValueList:
    """Comma separated items, optionally wrapped in parentheses."""

    items: "tuple[Expression, ...]"
    wrap: bool = True

    def render(self) -> str:
        items = ", ".join(item.render() for item in self.items)
        if self.wrap:
            return f"({items})"
        return items

    def bound_arguments(self) -> "BoundArguments":
        return tuple(chain.from_iterable(item.bound_arguments() for item in self.items))


@dataclass(frozen=True)
class Call:
    """A function call such as ``COUNT(*)`` or ``SUM(size)``."""

    name: str
    args: "tuple[Expression, ...]" = ()

    def render(self) -> str:
        return f"{self.name}({', '.join(expr.render() for expr in self.args)})"

    def bound_arguments(self) -> "BoundArguments":
        return tuple(chain.from_iterable(expr.bound_arguments() for expr in self.args))


@dataclass(frozen=True)
class Subquery:
    """A nested statement embedded in parentheses.

    The nested statement renders through its raw path, so its placeholders
    stay unnumbered until the enclosing statement is compiled.
    """

    statement: Expression

    def render(self) -> str:
        return f"({self.statement.render()})"

    def bound_arguments(self) -> "BoundArguments":
        return tuple(self.statement.bound_arguments())


def ident(name: str) -> Identifier:
    """Return an identifier expression rendered as the given string."""
    return Identifier(name)


def lit(value: Any) -> Literal:
    """Return a literal expression placed into the SQL text itself.

    For example ``where("deleted_at", "IS NOT", lit(None))`` renders
    ``deleted_at IS NOT NULL``.
    """
    return Literal(value)


def arg(value: Any) -> Argument:
    """Return an argument expression bound through a placeholder."""
    return Argument(value)


def list_(*values: Any) -> ValueList:
    """Return a parenthesized list with one placeholder per value.

    Expressions are kept as they are and statements become subqueries.
    """
    return ValueList(to_expressions(values))


def call(name: str, *args: Any) -> Call:
    """Return a call expression. Plain string arguments are identifiers."""
    return Call(name, tuple(_call_argument(value) for value in args))


def subquery(statement: Expression) -> Subquery:
    return Subquery(statement)


def to_expression(value: Any) -> Expression:
    """Coerce ``value`` into an expression.

    Expressions pass through unchanged, statements become parenthesized
    subqueries and anything else is bound as an argument.
    """
    from sqlclause.core.statement import Statement

    if isinstance(value, Statement):
        return Subquery(value)
    if isinstance(value, Expression):
        return value
    return Argument(value)


def to_expressions(values: Iterable[Any]) -> "tuple[Expression, ...]":
    return tuple(to_expression(value) for value in values)


def _call_argument(value: Any) -> Expression:
    if isinstance(value, str):
        return Identifier(value)
    return to_expression(value)
