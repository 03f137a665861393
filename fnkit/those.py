"""
Those
=====

Right-biased disjunction with three possibilities:

- That(left)         - only the left value
- This(right)        - only the right value
- These(left, right) - both values

Those[A, B] is like Result / Either, except that it can also hold an A
and a B at the same time. Right-biased: map, to_option, get_or_else
work on the right value.

Closed union: fold is implemented by each variant and everything else
is derived from fold.

Interop with kungfu:
- optional values are Option (Some(x) / Nothing())
- the two-case disjunction is Result: left -> Error(a), right -> Ok(b)
"""

from __future__ import annotations

import abc
import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import assert_never

from kungfu import Error, Nothing, Ok, Option, Result, Some

from ._helpers import const, identity


class _ThoseBase[A, B](abc.ABC):
    """Operations shared by That / This / These, all defined through fold."""

    __slots__ = ()

    @abc.abstractmethod
    def fold[C](
        self,
        on_left: Callable[[A], C],
        on_right: Callable[[B], C],
        on_both: Callable[[A, B], C],
        /,
    ) -> C:
        """Eliminate Those: exactly one of the three functions is called."""

    # Predicates

    def is_left(self) -> bool:
        """Only the left value is present (That)."""
        return self.fold(const(True), const(False), lambda _a, _b: False)

    def is_right(self) -> bool:
        """Only the right value is present (This)."""
        return self.fold(const(False), const(True), lambda _a, _b: False)

    def is_both(self) -> bool:
        """Both values are present (These)."""
        return self.fold(const(False), const(False), lambda _a, _b: True)

    # Projections

    def left(self) -> Option[A]:
        """Left value, if any (That or These)."""
        return self.fold(Some, const(Nothing()), lambda a, _: Some(a))

    def right(self) -> Option[B]:
        """Right value, if any (This or These)."""
        return self.fold(const(Nothing()), Some, lambda _, b: Some(b))

    def only_left(self) -> Option[A]:
        """Left value only when it is alone (That)."""
        return self.fold(Some, const(Nothing()), lambda _a, _b: Nothing())

    def only_right(self) -> Option[B]:
        """Right value only when it is alone (This)."""
        return self.fold(const(Nothing()), Some, lambda _a, _b: Nothing())

    def only_left_or_right(self) -> Option[Result[B, A]]:
        """Error(left) for That, Ok(right) for This, Nothing for These."""
        return self.fold(
            lambda a: Some(Error(a)),
            lambda b: Some(Ok(b)),
            lambda _a, _b: Nothing(),
        )

    def only_both(self) -> Option[tuple[A, B]]:
        """(left, right) only when both are present (These)."""
        return self.fold(const(Nothing()), const(Nothing()), lambda a, b: Some((a, b)))

    # Conversions

    def to_either(self) -> Result[B, A]:
        """
        Collapse into Result, right value wins.

        That(a) -> Error(a), This(b) -> Ok(b), These(a, b) -> Ok(b).
        """
        return self.fold(Error, Ok, lambda _, b: Ok(b))

    def to_option(self) -> Option[B]:
        """Right-biased: same as right()."""
        return self.right()

    def get_or_else(self, default: B, /) -> B:
        """Right value if present, default otherwise."""
        return self.fold(const(default), identity, lambda _, b: b)

    # Functor operations

    def bimap[C, D](
        self,
        f_left: Callable[[A], C],
        f_right: Callable[[B], D],
        /,
    ) -> Those[C, D]:
        """Map both sides. The variant is preserved."""
        return self.fold(
            lambda a: That(f_left(a)),
            lambda b: This(f_right(b)),
            lambda a, b: These(f_left(a), f_right(b)),
        )

    def map[D](self, f: Callable[[B], D], /) -> Those[A, D]:
        """Map the right value."""
        return self.bimap(identity, f)

    def map_left[C](self, f: Callable[[A], C], /) -> Those[C, B]:
        """Map the left value."""
        return self.bimap(f, identity)

    def swap(self) -> Those[B, A]:
        """Exchange sides: That <-> This, These(a, b) -> These(b, a)."""
        return self.fold(
            lambda a: This(a),
            lambda b: That(b),
            lambda a, b: These(b, a),
        )


@typing.final
@dataclass(frozen=True, slots=True)
class That[A, B](_ThoseBase[A, B]):
    """Only the left value."""

    left_value: A

    def fold[C](
        self,
        on_left: Callable[[A], C],
        on_right: Callable[[B], C],
        on_both: Callable[[A, B], C],
        /,
    ) -> C:
        _ = (on_right, on_both)
        return on_left(self.left_value)


@typing.final
@dataclass(frozen=True, slots=True)
class This[A, B](_ThoseBase[A, B]):
    """Only the right value."""

    right_value: B

    def fold[C](
        self,
        on_left: Callable[[A], C],
        on_right: Callable[[B], C],
        on_both: Callable[[A, B], C],
        /,
    ) -> C:
        _ = (on_left, on_both)
        return on_right(self.right_value)


@typing.final
@dataclass(frozen=True, slots=True)
class These[A, B](_ThoseBase[A, B]):
    """Both values."""

    left_value: A
    right_value: B

    def fold[C](
        self,
        on_left: Callable[[A], C],
        on_right: Callable[[B], C],
        on_both: Callable[[A, B], C],
        /,
    ) -> C:
        _ = (on_left, on_right)
        return on_both(self.left_value, self.right_value)


type Those[A, B] = That[A, B] | This[A, B] | These[A, B]


# ============================================================================
# Constructors
# ============================================================================


def from_options[A, B](oa: Option[A], ob: Option[B], /) -> Option[Those[A, B]]:
    """
    Pair two independent optionals.

    Both present -> Some(These), one present -> Some(That) / Some(This),
    neither -> Nothing.
    """
    match oa, ob:
        case Some(a), Some(b):
            return Some(These(a, b))
        case Some(a), _:
            return Some(That(a))
        case _, Some(b):
            return Some(This(b))
        case _:
            return Nothing()


def from_either[A, B](result: Result[B, A], /) -> Those[A, B]:
    """Error(a) -> That(a), Ok(b) -> This(b). Never produces These."""
    match result:
        case Ok(value):
            return This(value)
        case Error(error):
            return That(error)
        case _ as unreachable:
            assert_never(unreachable)


__all__ = (
    "Those",
    "That",
    "This",
    "These",
    "from_options",
    "from_either",
)
