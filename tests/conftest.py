from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from sqlclause import Statement, columns, from_, select


@pytest.fixture
def users_query() -> Statement:
    """A partially built SELECT shared as a template."""
    return select(columns("*"), from_("users"))


@pytest.fixture
def restore_sqlclause_logger() -> Generator[logging.Logger, None, None]:
    """Undo handler, level and propagation changes made to the library logger."""
    logger = logging.getLogger("sqlclause")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
