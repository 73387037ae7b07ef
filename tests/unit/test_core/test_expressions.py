"""Unit tests for the expression primitives."""

from typing import Any

import pytest

from sqlclause import columns, from_, select, where
from sqlclause.core.expressions import (
    Argument,
    Call,
    Expression,
    Identifier,
    Literal,
    Subquery,
    ValueList,
    arg,
    call,
    ident,
    list_,
    lit,
    subquery,
    to_expression,
)


def test_identifier_renders_verbatim() -> None:
    expr = ident("users.email")
    assert expr.render() == "users.email"
    assert expr.bound_arguments() == ()


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "NULL"),
        (True, "TRUE"),
        (False, "FALSE"),
        (25, "25"),
        ("NOW()", "NOW()"),
        ("'draft'", "'draft'"),
    ],
)
def test_literal_rendering(value: Any, expected: str) -> None:
    expr = lit(value)
    assert expr.render() == expected
    assert expr.bound_arguments() == ()


def test_argument_renders_placeholder() -> None:
    expr = arg({"key": "value"})
    assert expr.render() == "?"
    assert expr.bound_arguments() == ({"key": "value"},)


def test_list_is_wrapped_with_one_placeholder_per_value() -> None:
    expr = list_(1, 2, 3)
    assert expr.render() == "(?, ?, ?)"
    assert expr.bound_arguments() == (1, 2, 3)


def test_list_keeps_expressions() -> None:
    expr = list_(1, lit("DEFAULT"), arg("x"))
    assert expr.render() == "(?, DEFAULT, ?)"
    assert expr.bound_arguments() == (1, "x")


def test_unwrapped_value_list() -> None:
    expr = ValueList((Identifier("id"), Identifier("email")), wrap=False)
    assert expr.render() == "id, email"


def test_call_renders_name_and_arguments() -> None:
    expr = call("COALESCE", ident("nickname"), arg("anonymous"), lit("'n/a'"))
    assert expr.render() == "COALESCE(nickname, ?, 'n/a')"
    assert expr.bound_arguments() == ("anonymous",)


def test_call_treats_strings_as_identifiers() -> None:
    assert call("LOWER", "email").render() == "LOWER(email)"
    assert call("NOW").render() == "NOW()"


def test_nested_call_arguments_are_left_to_right() -> None:
    expr = Call("GREATEST", (Call("LEAST", (Argument(1), Argument(2))), Argument(3)))
    assert expr.render() == "GREATEST(LEAST(?, ?), ?)"
    assert expr.bound_arguments() == (1, 2, 3)


def test_subquery_uses_raw_placeholders() -> None:
    inner = select(columns("post_id"), from_("tags"), where("name", "LIKE", "%sql%"))
    expr = subquery(inner)
    assert expr.render() == "(SELECT post_id FROM tags WHERE (name LIKE ?))"
    assert expr.bound_arguments() == ("%sql%",)


def test_to_expression_coercion() -> None:
    statement = select(columns("id"), from_("users"))
    identifier = ident("id")

    assert isinstance(to_expression(statement), Subquery)
    assert to_expression(identifier) is identifier
    assert to_expression(5) == Argument(5)
    assert to_expression("text") == Argument("text")


def test_expression_protocol() -> None:
    assert isinstance(ident("id"), Expression)
    assert isinstance(Literal(1), Expression)
    assert isinstance(select(columns("*")), Expression)
    assert not isinstance(5, Expression)
    assert not isinstance("id", Expression)


def test_expressions_are_immutable() -> None:
    expr = ident("id")
    with pytest.raises(AttributeError):
        expr.name = "other"  # type: ignore[misc]
