"""Opt-in syntax check for rendered statements.

Composition never validates anything; a malformed statement is normally
only noticed by the database. :func:`validate_sql` lets callers parse the
rendered text with sqlglot ahead of time, for instance in their own unit
tests.
"""

from typing import TYPE_CHECKING, Optional, Union

import sqlglot
from sqlglot.errors import ParseError, TokenError

from sqlclause.core.config import get_default_config
from sqlclause.core.statement import Statement
from sqlclause.exceptions import SQLParsingError
from sqlclause.utils.logging import get_logger

if TYPE_CHECKING:
    from sqlglot import exp

    from sqlclause.core.config import StatementConfig

__all__ = (
    "ValidationResult",
    "validate_sql",
)

logger = get_logger("sqlclause.core.validation")


class ValidationResult:
    """Outcome of parsing a statement."""

    __slots__ = ("expression", "is_valid", "issues")

    def __init__(
        self,
        is_valid: bool,
        issues: Optional[list[str]] = None,
        expression: "Optional[exp.Expression]" = None,
    ) -> None:
        self.is_valid = is_valid
        self.issues = issues if issues is not None else []
        self.expression = expression

    def __bool__(self) -> bool:
        return self.is_valid

    def __repr__(self) -> str:
        return f"ValidationResult(is_valid={self.is_valid!r}, issues={self.issues!r})"

    @property
    def operation_type(self) -> Optional[str]:
        """Upper-case statement type detected by the parser, e.g. ``SELECT``."""
        if self.expression is None:
            return None
        return self.expression.key.upper()


def validate_sql(
    statement: Union[Statement, str],
    dialect: Optional[str] = None,
    strict: bool = False,
    config: "Optional[StatementConfig]" = None,
) -> ValidationResult:
    """Parse a statement and report whether it is syntactically valid.

    Statements are parsed in their raw form, with ``?`` placeholders.

    Args:
        statement: A composed statement or raw SQL text.
        dialect: sqlglot dialect to parse with. Defaults to the dialect of ``config``.
        strict: Raise instead of returning an invalid result.
        config: Settings supplying the default dialect. Defaults to :func:`get_default_config`.

    Raises:
        SQLParsingError: If ``strict`` is set and the SQL does not parse.

    Returns:
        The validation result.
    """
    if dialect is None:
        dialect = (config or get_default_config()).dialect
    sql = statement.render() if isinstance(statement, Statement) else statement

    if not sql or not sql.strip():
        issues = ["Statement is empty"]
    else:
        try:
            expression = sqlglot.parse_one(sql, read=dialect)
        except (ParseError, TokenError) as e:
            errors = getattr(e, "errors", None) or []
            issues = [str(error.get("description") or e) for error in errors] or [str(e)]
        else:
            return ValidationResult(True, expression=expression)

    logger.debug("Statement failed validation: %s", "; ".join(issues))
    if strict:
        msg = f"SQL parsing failed: {'; '.join(issues)}"
        raise SQLParsingError(msg)
    return ValidationResult(False, issues)
