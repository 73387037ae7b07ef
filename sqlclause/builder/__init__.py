"""Statement constructors and the options they are composed from.

Example:
    >>> from sqlclause.builder import columns, from_, order_desc, select, where
    >>> query = select(
    ...     columns("*"),
    ...     from_("posts"),
    ...     where("user_id", "=", 10),
    ...     order_desc("created_at"),
    ... )
    >>> query.build()
    'SELECT * FROM posts WHERE (user_id = $1) ORDER BY created_at DESC'

Options are plain callables, so new ones can be written as functions that
take and return a statement:

    >>> def search(col, pattern):
    ...     def _apply(statement):
    ...         if not pattern:
    ...             return statement
    ...         return where(col, "LIKE", f"%{pattern}%")(statement)
    ...     return _apply
"""

from sqlclause.builder._options import (
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
    from_,
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
    set_,
    set_raw,
    sum_,
    table,
    values,
    where,
    where_in,
    where_in_raw,
    where_query,
)
from sqlclause.builder._statements import delete, insert, select, union, union_all, update

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
    "delete",
    "from_",
    "insert",
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
    "select",
    "set_",
    "set_raw",
    "sum_",
    "table",
    "union",
    "union_all",
    "update",
    "values",
    "where",
    "where_in",
    "where_in_raw",
    "where_query",
)
