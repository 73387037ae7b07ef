"""Placeholder styles and placeholder substitution.

Statements render every bound value as a bare ``?``. When a statement is
compiled the ``?`` markers are rewritten, left to right, into the style the
target driver expects. Quoted strings, comments and PostgreSQL's JSON
operators (``??``, ``?|``, ``?&``) are skipped so a question mark inside
them is never mistaken for a placeholder.
"""

import re
from enum import Enum
from functools import lru_cache
from typing import Final, Union

from sqlclause.exceptions import ParameterStyleMismatchError

__all__ = (
    "ParameterStyle",
    "convert_placeholders",
    "count_placeholders",
)

_PLACEHOLDER_REGEX: Final = re.compile(
    r"""
    # Literals and comments, matched first and left untouched
    (?P<dquote>"(?:[^"\\]|\\.)*") |
    (?P<squote>'(?:[^'\\]|\\.)*') |
    (?P<dollar_quoted_string>\$(?P<dollar_quote_tag_inner>\w*)?\$[\s\S]*?\$(?P=dollar_quote_tag_inner)\$) |
    (?P<line_comment>--[^\r\n]*) |
    (?P<block_comment>/\*(?:[^*]|\*(?!/))*\*/) |
    # PostgreSQL JSON operators that contain a question mark
    (?P<pg_q_operator>\?\?|\?\||\?&) |
    (?P<qmark>\?)
    """,
    re.VERBOSE | re.MULTILINE | re.DOTALL,
)


class ParameterStyle(Enum):
    """Placeholder style expected by a database driver."""

    QMARK = "qmark"
    """``?`` (sqlite3, MySQL drivers, ODBC)."""

    NUMERIC = "numeric"
    """``$1`` (asyncpg, psqlpy)."""

    POSITIONAL_COLON = "positional_colon"
    """``:1`` (oracledb)."""

    PYFORMAT_POSITIONAL = "pyformat_positional"
    """``%s`` (psycopg, pymysql)."""

    def __str__(self) -> str:
        return self.value

    def placeholder(self, position: int) -> str:
        """Return the placeholder text for the 1-based ``position``."""
        if self is ParameterStyle.NUMERIC:
            return f"${position}"
        if self is ParameterStyle.POSITIONAL_COLON:
            return f":{position}"
        if self is ParameterStyle.PYFORMAT_POSITIONAL:
            return "%s"
        return "?"

    @classmethod
    def from_value(cls, value: "Union[ParameterStyle, str]") -> "ParameterStyle":
        """Resolve a style from an enum member or its name.

        Raises:
            ParameterStyleMismatchError: If ``value`` names no known style.
        """
        if isinstance(value, ParameterStyle):
            return value
        normalized = str(value).strip().lower()
        for style in cls:
            if normalized in {style.value, style.name.lower()}:
                return style
        msg = f"Unknown parameter style {value!r}. Expected one of: {', '.join(s.value for s in cls)}"
        raise ParameterStyleMismatchError(msg)


@lru_cache(maxsize=512)
def convert_placeholders(sql: str, style: ParameterStyle) -> "tuple[str, int]":
    """Rewrite the ``?`` placeholders of ``sql`` into ``style``.

    The k-th placeholder found scanning left to right becomes the style's
    k-th placeholder. For pyformat every literal ``%`` is doubled so the
    driver does not read it as a conversion.

    Args:
        sql: Raw statement text using ``?`` placeholders.
        style: Target placeholder style.

    Returns:
        The converted text and the number of placeholders found.
    """
    if style is ParameterStyle.PYFORMAT_POSITIONAL:
        sql = sql.replace("%", "%%")

    position = 0

    def _replace(match: "re.Match[str]") -> str:
        nonlocal position
        if match.lastgroup != "qmark":
            return match.group(0)
        position += 1
        return style.placeholder(position)

    converted = _PLACEHOLDER_REGEX.sub(_replace, sql)
    return converted, position


def count_placeholders(sql: str) -> int:
    """Return the number of ``?`` placeholders in ``sql``."""
    return sum(1 for match in _PLACEHOLDER_REGEX.finditer(sql) if match.lastgroup == "qmark")
