"""
Core type definitions for fnkit.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import enum
import typing
from collections.abc import Callable

# ============================================================================
# Unit
# ============================================================================


@typing.final
class Unit(enum.Enum):
    """
    The one-element type.

    Result of computations that only change state (put, modify).
    NOTE: Не используем None: у Unit ровно одно значение, и оно не путается
          с "значения нет".
    """

    UNIT = "()"

    def __repr__(self) -> str:
        return "()"


UNIT: typing.Final = Unit.UNIT

# ============================================================================
# Type aliases
# ============================================================================

# Fn = plain one-argument function
type Fn[A, B] = Callable[[A], B]

# Endo = function from a type to itself
type Endo[A] = Callable[[A], A]

# Transition = the function wrapped by State: input state -> (output state, value)
type Transition[SA, SB, A] = Callable[[SA], tuple[SB, A]]

__all__ = (
    # Unit
    "Unit",
    "UNIT",
    # Type aliases
    "Fn",
    "Endo",
    "Transition",
)
