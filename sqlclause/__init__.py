"""sqlclause: composable SQL statement building for Python."""

from sqlclause import builder, core, exceptions, utils
from sqlclause.__metadata__ import __version__
from sqlclause.builder import (
    OP_EQ,
    OP_GT,
    OP_GT_OR_EQ,
    OP_IN,
    OP_IS,
    OP_IS_NOT,
    OP_LIKE,
    OP_LT,
    OP_LT_OR_EQ,
    OP_NOT_EQ,
    OP_NOT_IN,
    as_,
    columns,
    count,
    delete,
    from_,
    insert,
    into,
    limit,
    offset,
    options,
    or_,
    or_where,
    or_where_in,
    or_where_query,
    order_asc,
    order_desc,
    returning,
    select,
    set_,
    set_raw,
    sum_,
    table,
    union,
    union_all,
    update,
    values,
    where,
    where_in,
    where_in_raw,
    where_query,
)
from sqlclause.core import (
    MYSQL_CONFIG,
    CompiledStatement,
    Expression,
    ParameterStyle,
    Statement,
    StatementConfig,
    ValidationResult,
    arg,
    call,
    ident,
    list_,
    lit,
    validate_sql,
)
from sqlclause.exceptions import (
    ExtraParameterError,
    MissingParameterError,
    ParameterError,
    ParameterStyleMismatchError,
    SQLBuilderError,
    SQLClauseError,
    SQLParsingError,
)

__all__ = (
    "MYSQL_CONFIG",
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
    "CompiledStatement",
    "Expression",
    "ExtraParameterError",
    "MissingParameterError",
    "ParameterError",
    "ParameterStyle",
    "ParameterStyleMismatchError",
    "SQLBuilderError",
    "SQLClauseError",
    "SQLParsingError",
    "Statement",
    "StatementConfig",
    "ValidationResult",
    "__version__",
    "arg",
    "as_",
    "builder",
    "call",
    "columns",
    "core",
    "count",
    "delete",
    "exceptions",
    "from_",
    "ident",
    "insert",
    "into",
    "limit",
    "list_",
    "lit",
    "offset",
    "options",
    "or_",
    "or_where",
    "or_where_in",
    "or_where_query",
    "order_asc",
    "order_desc",
    "returning",
    "select",
    "set_",
    "set_raw",
    "sum_",
    "table",
    "union",
    "union_all",
    "update",
    "utils",
    "validate_sql",
    "values",
    "where",
    "where_in",
    "where_in_raw",
    "where_query",
)
