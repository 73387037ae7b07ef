"""Core clause engine: expressions, clauses, statements and their compilation."""

from sqlclause.core.clauses import (
    AliasClause,
    Clause,
    ListClause,
    OrderClause,
    PortionClause,
    PredicateClause,
    TableClause,
    UnionClause,
)
from sqlclause.core.compiler import CompiledStatement, compile_statement, render_statement
from sqlclause.core.config import DEFAULT_CONFIG, MYSQL_CONFIG, StatementConfig, get_default_config
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
from sqlclause.core.kinds import (
    CLAUSE_KEYWORDS,
    CLAUSE_ORDER,
    PARENTHESIZED_KINDS,
    ClauseKind,
    SortDirection,
    StatementKind,
)
from sqlclause.core.parameters import ParameterStyle, convert_placeholders, count_placeholders
from sqlclause.core.statement import Statement
from sqlclause.core.validation import ValidationResult, validate_sql

__all__ = (
    "CLAUSE_KEYWORDS",
    "CLAUSE_ORDER",
    "DEFAULT_CONFIG",
    "MYSQL_CONFIG",
    "PARENTHESIZED_KINDS",
    "AliasClause",
    "Argument",
    "Call",
    "Clause",
    "ClauseKind",
    "CompiledStatement",
    "Expression",
    "Identifier",
    "ListClause",
    "Literal",
    "OrderClause",
    "ParameterStyle",
    "PortionClause",
    "PredicateClause",
    "SortDirection",
    "Statement",
    "StatementConfig",
    "StatementKind",
    "Subquery",
    "TableClause",
    "UnionClause",
    "ValidationResult",
    "ValueList",
    "arg",
    "call",
    "compile_statement",
    "convert_placeholders",
    "count_placeholders",
    "get_default_config",
    "ident",
    "list_",
    "lit",
    "render_statement",
    "subquery",
    "to_expression",
    "validate_sql",
)
