import pytest

from sqlclause.core.config import DEFAULT_CONFIG, MYSQL_CONFIG, StatementConfig, get_default_config
from sqlclause.core.parameters import ParameterStyle
from sqlclause.exceptions import ParameterStyleMismatchError


def test_defaults() -> None:
    config = StatementConfig()
    assert config.parameter_style is ParameterStyle.NUMERIC
    assert config.strict_parameters is True
    assert config.dialect == "postgres"
    assert get_default_config() is DEFAULT_CONFIG


def test_mysql_config() -> None:
    assert MYSQL_CONFIG.parameter_style is ParameterStyle.QMARK
    assert MYSQL_CONFIG.dialect == "mysql"


def test_style_given_by_name() -> None:
    assert StatementConfig(parameter_style="positional_colon").parameter_style is ParameterStyle.POSITIONAL_COLON  # type: ignore[arg-type]


def test_unknown_style_name() -> None:
    with pytest.raises(ParameterStyleMismatchError):
        StatementConfig(parameter_style="bogus")  # type: ignore[arg-type]


def test_replace_returns_new_config() -> None:
    lenient = DEFAULT_CONFIG.replace(strict_parameters=False)
    assert lenient.strict_parameters is False
    assert DEFAULT_CONFIG.strict_parameters is True
    assert lenient.parameter_style is DEFAULT_CONFIG.parameter_style


def test_config_is_frozen() -> None:
    with pytest.raises(AttributeError):
        DEFAULT_CONFIG.dialect = "sqlite"  # type: ignore[misc]
