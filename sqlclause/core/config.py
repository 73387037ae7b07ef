"""Compilation settings.

:class:`StatementConfig` is passed explicitly to ``Statement.compile`` and
``Statement.build``; there is no global mutable configuration.
"""

from dataclasses import dataclass, replace
from typing import Any, Final, Optional, Union

from sqlclause.core.parameters import ParameterStyle

__all__ = (
    "DEFAULT_CONFIG",
    "MYSQL_CONFIG",
    "StatementConfig",
    "get_default_config",
)


@dataclass(frozen=True)
class StatementConfig:
    """Configuration for compiling statements."""

    parameter_style: ParameterStyle = ParameterStyle.NUMERIC
    """Placeholder style written into the compiled SQL."""

    strict_parameters: bool = True
    """Raise when the placeholder count differs from the bound argument count."""

    dialect: Optional[str] = "postgres"
    """sqlglot dialect :func:`sqlclause.core.validation.validate_sql` parses with when none is given."""

    def __post_init__(self) -> None:
        style: Union[ParameterStyle, str] = self.parameter_style
        if not isinstance(style, ParameterStyle):
            object.__setattr__(self, "parameter_style", ParameterStyle.from_value(style))

    def replace(self, **changes: Any) -> "StatementConfig":
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)


DEFAULT_CONFIG: Final = StatementConfig()
MYSQL_CONFIG: Final = StatementConfig(parameter_style=ParameterStyle.QMARK, dialect="mysql")


def get_default_config() -> StatementConfig:
    """Return the configuration used when none is given."""
    return DEFAULT_CONFIG
