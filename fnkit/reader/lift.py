"""
Lift combinators for Reader
===========================

Sugar over the generic lift_aM / lift_mM for Reader (*_r suffix).
Every lifted computation reads the same environment.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from ..lift import lift_aM, lift_mM
from .monad import Reader


# ============================================================================
# Monadic lifts
# ============================================================================


def lift_m_r[R](f: Callable[..., typing.Any], /) -> Callable[..., Reader[R, typing.Any]]:
    """Lift a function of any arity into Reader (monadic)."""
    return lift_mM(f, pure=Reader.pure)


def lift_m1_r[R, A, B](f: Callable[[A], B], /) -> Callable[[Reader[R, A]], Reader[R, B]]:
    """
    Lift a unary function into Reader.

    Example:
        length = lift_m1_r(len)
        length(Reader.ask()).run_reader("abc")  # 3
    """
    return lift_mM(f, pure=Reader.pure, arity=1)


def lift_m2_r[R, A, B, C](
    f: Callable[[A, B], C],
    /,
) -> Callable[[Reader[R, A], Reader[R, B]], Reader[R, C]]:
    """Lift a binary function into Reader."""
    return lift_mM(f, pure=Reader.pure, arity=2)


def lift_m3_r[R, A, B, C, D](
    f: Callable[[A, B, C], D],
    /,
) -> Callable[[Reader[R, A], Reader[R, B], Reader[R, C]], Reader[R, D]]:
    """Lift a ternary function into Reader."""
    return lift_mM(f, pure=Reader.pure, arity=3)


# ============================================================================
# Applicative lifts
# ============================================================================


def lift_a_r[R](f: Callable[..., typing.Any], /) -> Callable[..., Reader[R, typing.Any]]:
    """Lift a function of any arity into Reader (applicative)."""
    return lift_aM(f)


def lift_a1_r[R, A, B](f: Callable[[A], B], /) -> Callable[[Reader[R, A]], Reader[R, B]]:
    return lift_aM(f, arity=1)


def lift_a2_r[R, A, B, C](
    f: Callable[[A, B], C],
    /,
) -> Callable[[Reader[R, A], Reader[R, B]], Reader[R, C]]:
    return lift_aM(f, arity=2)


def lift_a3_r[R, A, B, C, D](
    f: Callable[[A, B, C], D],
    /,
) -> Callable[[Reader[R, A], Reader[R, B], Reader[R, C]], Reader[R, D]]:
    return lift_aM(f, arity=3)


# ============================================================================
# Collection operations
# ============================================================================


def traverse_r[R, A, T](
    items: Iterable[A],
    handler: Callable[[A], Reader[R, T]],
) -> Reader[R, list[T]]:
    """Monadic map: A -> Reader[R, T] for every item, all against one environment."""
    readers = [handler(item) for item in items]

    def wrapper(environment: R) -> list[T]:
        return [r._reader(environment) for r in readers]

    return Reader(wrapper)


def sequence_r[R, T](readers: Iterable[Reader[R, T]]) -> Reader[R, list[T]]:
    """
    Flip structure: [Reader[T]] -> Reader[[T]].

    Implemented as traverse_r(id).
    """
    return traverse_r(readers, handler=lambda r: r)


__all__ = (
    # Monad
    "lift_m_r",
    "lift_m1_r",
    "lift_m2_r",
    "lift_m3_r",
    # Applicative
    "lift_a_r",
    "lift_a1_r",
    "lift_a2_r",
    "lift_a3_r",
    # Collection
    "traverse_r",
    "sequence_r",
)
