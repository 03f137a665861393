"""
Lift combinators for State
==========================

Подъём обычных функций в State: N вычислений выполняются слева направо,
их значения передаются в функцию.

- lift_a* - через map + ap (applicative)
- lift_m* - через then + pure (monad)

For pure functions both families give the same result.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from ..lift import lift_aM, lift_mM
from .monad import State


# ============================================================================
# Applicative lifts
# ============================================================================


def lift_a[S](
    f: Callable[..., typing.Any],
    /,
) -> Callable[..., State[S, typing.Any, typing.Any]]:
    """Lift a function of any arity into State (applicative)."""
    return lift_aM(f)


def lift_a1[S, SB, A, B](f: Callable[[A], B], /) -> Callable[[State[S, SB, A]], State[S, SB, B]]:
    """
    Lift a unary function into State.

    Example:
        inc = lift_a1(lambda x: x + 1)
        inc(State.get()).run(1)  # (1, 2)
    """
    return lift_aM(f, arity=1)


def lift_a2[S, SB, A, B, C](
    f: Callable[[A, B], C],
    /,
) -> Callable[[State[S, S, A], State[S, SB, B]], State[S, SB, C]]:
    """Lift a binary function into State: first computation runs first."""
    return lift_aM(f, arity=2)


def lift_a3[S, SB, A, B, C, D](
    f: Callable[[A, B, C], D],
    /,
) -> Callable[[State[S, S, A], State[S, S, B], State[S, SB, C]], State[S, SB, D]]:
    """Lift a ternary function into State, effects run left to right."""
    return lift_aM(f, arity=3)


# ============================================================================
# Monadic lifts
# ============================================================================


def lift_m[S](
    f: Callable[..., typing.Any],
    /,
) -> Callable[..., State[S, typing.Any, typing.Any]]:
    """Lift a function of any arity into State (monadic)."""
    return lift_mM(f, pure=State.pure)


def lift_m1[SA, SB, A, B](f: Callable[[A], B], /) -> Callable[[State[SA, SB, A]], State[SA, SB, B]]:
    """Lift a unary function into State via then + pure."""
    return lift_mM(f, pure=State.pure, arity=1)


def lift_m2[SA, SB, SC, A, B, C](
    f: Callable[[A, B], C],
    /,
) -> Callable[[State[SA, SB, A], State[SB, SC, B]], State[SA, SC, C]]:
    """
    Lift a binary function into State via then + pure.

    Each computation starts from the state the previous one ended with,
    so the state type may change at every step.
    """
    return lift_mM(f, pure=State.pure, arity=2)


def lift_m3[SA, SB, SC, SD, A, B, C, D](
    f: Callable[[A, B, C], D],
    /,
) -> Callable[[State[SA, SB, A], State[SB, SC, B], State[SC, SD, C]], State[SA, SD, D]]:
    """Lift a ternary function into State via then + pure."""
    return lift_mM(f, pure=State.pure, arity=3)


# ============================================================================
# Collection operations
# ============================================================================


def traverse[S, A, T](
    items: Iterable[A],
    handler: Callable[[A], State[S, S, T]],
) -> State[S, S, list[T]]:
    """
    Monadic map: A -> State[S, S, T] for every item, state threaded left to right.

    NOTE: Runs as a loop, not a chain of then(): long inputs don't grow the stack.
    """
    steps = [handler(item) for item in items]

    def wrapper(s: S) -> tuple[S, list[T]]:
        values: list[T] = []
        for step in steps:
            s, value = step._run(s)
            values.append(value)
        return s, values

    return State(wrapper)


def sequence[S, T](states: Iterable[State[S, S, T]]) -> State[S, S, list[T]]:
    """
    Flip structure: [State[T]] -> State[[T]].

    Implemented as traverse(id).
    """
    return traverse(states, handler=lambda st: st)


__all__ = (
    # Applicative
    "lift_a",
    "lift_a1",
    "lift_a2",
    "lift_a3",
    # Monad
    "lift_m",
    "lift_m1",
    "lift_m2",
    "lift_m3",
    # Collection
    "traverse",
    "sequence",
)
