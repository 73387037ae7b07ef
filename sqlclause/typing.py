from typing import TYPE_CHECKING

from typing_extensions import TypeAlias

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from sqlclause.core.statement import Statement

__all__ = ("BoundArguments", "Option")

BoundArguments: TypeAlias = "tuple[Any, ...]"
"""Ordered values bound to the ``?`` placeholders of a rendered fragment."""

Option: TypeAlias = "Callable[[Statement], Statement]"
"""A statement transformer: takes a statement value and returns a new one."""
