from typing import Any, Optional

__all__ = (
    "ExtraParameterError",
    "MissingParameterError",
    "ParameterError",
    "ParameterStyleMismatchError",
    "SQLBuilderError",
    "SQLClauseError",
    "SQLParsingError",
)


class SQLClauseError(Exception):
    """Base exception class from which all sqlclause exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLClauseError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class SQLBuilderError(SQLClauseError):
    """Issues composing a statement from options."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues building SQL statement."
        super().__init__(message)


class SQLParsingError(SQLClauseError):
    """Issues parsing a rendered SQL statement."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues parsing SQL statement."
        super().__init__(message)


class ParameterError(SQLClauseError):
    """Placeholders and bound arguments of a statement disagree."""

    sql: Optional[str]

    def __init__(self, message: str, sql: Optional[str] = None) -> None:
        detail_message = message
        if sql:
            detail_message = f"{message}\nSQL: {sql}"
        super().__init__(detail=detail_message)
        self.sql = sql


class MissingParameterError(ParameterError):
    """The rendered text holds more placeholders than bound arguments."""


class ExtraParameterError(ParameterError):
    """More bound arguments were supplied than placeholders rendered."""


class ParameterStyleMismatchError(ParameterError):
    """An unknown placeholder style was requested."""
