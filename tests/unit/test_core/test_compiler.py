"""Tests for clause ordering, rendering and compilation."""

import logging
from dataclasses import dataclass

import pytest

from sqlclause import (
    CompiledStatement,
    ParameterStyle,
    StatementConfig,
    columns,
    from_,
    lit,
    or_where,
    select,
    set_,
    update,
    where,
)
from sqlclause.core.clauses import OrderClause, PortionClause, TableClause
from sqlclause.core.compiler import compile_statement, order_clauses, render_clauses, render_statement
from sqlclause.core.kinds import ClauseKind, SortDirection, StatementKind
from sqlclause.exceptions import ExtraParameterError, MissingParameterError


@dataclass(frozen=True)
class UnrenderedArgument:
    """Binds a value without rendering a placeholder for it."""

    value: object

    def render(self) -> str:
        return "NOW()"

    def bound_arguments(self) -> "tuple[object, ...]":
        return (self.value,)


def test_order_clauses_is_stable() -> None:
    first = OrderClause(("a",))
    second = OrderClause(("b",), SortDirection.DESC)
    limit = PortionClause(ClauseKind.LIMIT, 5)
    table = TableClause(ClauseKind.FROM, "t")

    assert order_clauses([limit, first, table, second]) == [table, first, second, limit]


def test_render_clauses_empty() -> None:
    assert render_clauses([]) == ""
    assert render_statement(StatementKind.SELECT, ()) == "SELECT"
    assert render_statement(StatementKind.NONE, ()) == ""


def test_render_statement_groups_out_of_order_clauses() -> None:
    clauses = (
        PortionClause(ClauseKind.LIMIT, 10),
        TableClause(ClauseKind.FROM, "posts"),
        OrderClause(("id",)),
    )
    assert render_statement(StatementKind.SELECT, clauses) == "SELECT FROM posts ORDER BY id ASC LIMIT 10"


def test_conjunction_switch_opens_a_new_group() -> None:
    query = select(
        columns("*"),
        from_("users"),
        where("a", "=", 1),
        or_where("b", "=", 2),
        where("c", "=", 3),
        where("d", "=", 4),
    )
    assert query.build() == "SELECT * FROM users WHERE (a = $1 OR b = $2) AND (c = $3 AND d = $4)"
    assert query.args() == [1, 2, 3, 4]


def test_compile_returns_compiled_statement() -> None:
    query = select(columns("*"), from_("users"), where("id", "=", 7))
    compiled = query.compile()

    assert isinstance(compiled, CompiledStatement)
    assert compiled.sql == "SELECT * FROM users WHERE (id = $1)"
    assert compiled.parameters == (7,)
    assert compiled.parameter_style is ParameterStyle.NUMERIC
    assert compiled.operation_type == "SELECT"

    sql, params = compiled
    assert sql == compiled.sql
    assert params == [7]


def test_compiled_statement_equality_and_hash() -> None:
    query = select(columns("*"), from_("users"), where("id", "=", 7))
    assert query.compile() == query.compile()
    assert hash(query.compile()) == hash(query.compile())
    assert query.compile() != query.compile(StatementConfig(parameter_style=ParameterStyle.QMARK))
    assert query.compile() != "SELECT * FROM users WHERE (id = $1)"
    assert "style='numeric'" in repr(query.compile())


def test_arguments_follow_render_order() -> None:
    query = update("users", where("id", "=", 1), set_("email", "me@example.com"))
    assert query.build() == "UPDATE users SET email = $1 WHERE (id = $2)"
    assert query.args() == ["me@example.com", 1]


def test_bare_placeholder_literal_is_missing_an_argument() -> None:
    query = select(columns("*"), from_("users"), where("id", "=", lit("?")))
    with pytest.raises(MissingParameterError) as exc_info:
        query.compile()
    assert exc_info.value.sql == "SELECT * FROM users WHERE (id = $1)"


def test_unrendered_argument_is_extra() -> None:
    query = select(columns("*"), from_("users"), where("created_at", "<", UnrenderedArgument(1)))
    with pytest.raises(ExtraParameterError):
        query.compile()


def test_lenient_config_logs_mismatch(caplog: pytest.LogCaptureFixture) -> None:
    query = select(columns("*"), from_("users"), where("created_at", "<", UnrenderedArgument(1)))
    config = StatementConfig(strict_parameters=False)

    with caplog.at_level(logging.WARNING, logger="sqlclause"):
        compiled = compile_statement(query, config)

    assert compiled.sql == "SELECT * FROM users WHERE (created_at < NOW())"
    assert compiled.parameters == (1,)
    assert "binds 1 argument(s)" in caplog.text


def test_compile_logs_debug_context(caplog: pytest.LogCaptureFixture) -> None:
    query = select(columns("*"), from_("users"), where("id", "=", 7))

    with caplog.at_level(logging.DEBUG, logger="sqlclause.core.compiler"):
        query.compile()

    records = [record for record in caplog.records if record.getMessage() == "Compiled statement"]
    assert records
    assert records[-1].extra_fields == {  # type: ignore[attr-defined]
        "operation_type": "SELECT",
        "parameter_style": "numeric",
        "clause_count": 3,
        "parameter_count": 1,
    }
