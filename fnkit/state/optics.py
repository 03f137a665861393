"""
Lens helpers for State
======================

Read and update one part of the state through a Lens.

Example:
    counter = Lens.attr("counter")

    step = over(counter, lambda n: n + 1).then_discard(view(counter))
    step.run(App(counter=1))  # (App(counter=2), 2)
"""

from __future__ import annotations

from .._types import Endo, Unit
from ..lens import Lens
from .monad import State


def view[S, T](lens: Lens[S, T], /) -> State[S, S, T]:
    """Get the focused part of the state as the value."""
    return State.gets(lens.get)


def assign[S, T](lens: Lens[S, T], value: T, /) -> State[S, S, Unit]:
    """Replace the focused part of the state."""
    return State.modify(lambda s: lens.set(s, value))


def over[S, T](lens: Lens[S, T], f: Endo[T], /) -> State[S, S, Unit]:
    """Apply f to the focused part of the state."""
    return State.modify(lambda s: lens.mod(s, f))


def zoom[S, T, A](lens: Lens[S, T], inner: State[T, T, A], /) -> State[S, S, A]:
    """
    Run a computation over the focused part of a larger state.

    inner only sees lens.get(s); its final state is written back with lens.set.
    """

    def wrapper(s: S) -> tuple[S, A]:
        t, a = inner._run(lens.get(s))
        return lens.set(s, t), a

    return State(wrapper)


__all__ = (
    "view",
    "assign",
    "over",
    "zoom",
)
