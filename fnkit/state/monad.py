"""Indexed State Monad

State[SA, SB, A] is a computation that starts from a state of type SA,
ends with a state of type SB and yields a value of type A:

    SA -> (SB, A)

When SA == SB it is the usual state monad (see StateT alias).
All combinators build new State values; nothing runs until a terminal
operation (run / eval / exec) is called."""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._helpers import const, identity
from .._log import logger
from .._types import UNIT, Transition, Unit


class State[SA, SB, A]:
    """Indexed State Monad.

    Wraps a pure transition function SA -> (SB, A).

    Functor laws:
    - Identity: m.map(identity) ≡ m
    - Composition: m.map(f).map(g) ≡ m.map(lambda x: g(f(x)))

    Monadic laws:
    - Left identity: State.pure(a).then(f) ≡ f(a)
    - Right identity: m.then(State.pure) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(lambda x: f(x).then(g))

    Equality of State values is observational: two computations are equal
    when run(s) agrees for every initial state s.
    """

    __slots__ = ("_run",)

    def __init__(self, run: Transition[SA, SB, A], /) -> None:
        """Create State from a transition function SA -> (SB, A)."""
        self._run = run

    # Constructors

    @staticmethod
    def state[S, V](run: Callable[[S], tuple[S, V]], /) -> State[S, S, V]:
        """Wrap a same-type transition function S -> (S, V)."""
        return State(run)

    @staticmethod
    def pure[S, V](value: V, /) -> State[S, S, V]:
        """Lift a value into the monad. State passes through unchanged."""

        def wrapper(s: S) -> tuple[S, V]:
            return s, value

        return State(wrapper)

    @staticmethod
    def gets[S, V](f: Callable[[S], V], /) -> State[S, S, V]:
        """Project a read-only view of the state as the value."""

        def wrapper(s: S) -> tuple[S, V]:
            return s, f(s)

        return State(wrapper)

    @staticmethod
    def get[S]() -> State[S, S, S]:
        """Fetch the current state as the value."""
        return State.gets(identity)

    @staticmethod
    def put[S, T](s: T, /) -> State[S, T, Unit]:
        """
        Replace the state.

        The previous state is ignored, so its type may differ from the new one.
        """

        def wrapper(_: S) -> tuple[T, Unit]:
            return s, UNIT

        return State(wrapper)

    @staticmethod
    def modify[S, T](f: Callable[[S], T], /) -> State[S, T, Unit]:
        """
        Replace the state with f(state).

        f may change the state type: State.modify(str) goes int -> str.
        """

        def wrapper(s: S) -> tuple[T, Unit]:
            return f(s), UNIT

        return State(wrapper)

    # Terminal operations

    def run(self, initial: SA, /) -> tuple[SB, A]:
        """Run with the provided initial state, return (final state, value)."""
        logger.debug("running State from %r", initial)
        return self._run(initial)

    def eval(self, initial: SA, /) -> A:
        """Run and keep only the final value."""
        return self.run(initial)[1]

    def exec(self, initial: SA, /) -> SB:
        """Run and keep only the final state."""
        return self.run(initial)[0]

    # Functor operations

    def transform[SC, B](
        self,
        f: Callable[[SB, A], tuple[SC, B]],
        /,
    ) -> State[SA, SC, B]:
        """
        Post-process both the resulting state and the value.

        The most general single-step combinator: map, with_state and bimap
        are all transform with a specific f.
        """
        run = self._run

        def wrapper(s: SA) -> tuple[SC, B]:
            sb, a = run(s)
            return f(sb, a)

        return State(wrapper)

    def map[B](self, f: Callable[[A], B], /) -> State[SA, SB, B]:
        """Functor fmap - apply function to the value, state transition untouched."""
        return self.transform(lambda s, a: (s, f(a)))

    def with_state[SC](self, f: Callable[[SB], SC], /) -> State[SA, SC, A]:
        """Post-process the resulting state, value untouched."""
        return self.transform(lambda s, a: (f(s), a))

    def bimap[SC, B](
        self,
        f_state: Callable[[SB], SC],
        f_value: Callable[[A], B],
        /,
    ) -> State[SA, SC, B]:
        """Map the resulting state and the value at once."""
        return self.transform(lambda s, a: (f_state(s), f_value(a)))

    # Monad operations

    def then[SC, B](self, f: Callable[[A], State[SB, SC, B]], /) -> State[SA, SC, B]:
        """
        Monadic bind (>>=).

        Runs self, feeds the value to f and runs the resulting computation
        from the state self ended with.
        """
        run = self._run

        def wrapper(s: SA) -> tuple[SC, B]:
            sb, a = run(s)
            return f(a)._run(sb)

        return State(wrapper)

    flat_map = then

    def then_discard[SC, B](self, next_state: State[SB, SC, B], /) -> State[SA, SC, B]:
        """Sequence (>>): run self, drop its value, continue with next_state."""
        return self.then(const(next_state))

    # Applicative operations

    def ap[B](self, sf: State[SA, SA, Callable[[A], B]], /) -> State[SA, SB, B]:
        """
        Applicative apply (<*>).

        Order is fixed: sf runs first, then self runs from the state sf
        left behind; the function sf produced is applied to self's value.
        """
        run = self._run

        def wrapper(s: SA) -> tuple[SB, B]:
            s1, fab = sf._run(s)
            s2, a = run(s1)
            return s2, fab(a)

        return State(wrapper)

    # Cartesian operations

    @typing.overload
    def product[B](self, b: State[SA, typing.Any, B], /) -> State[SA, SB, tuple[A, B]]: ...

    @typing.overload
    def product[B, C](
        self,
        b: State[SA, typing.Any, B],
        c: State[SA, typing.Any, C],
        /,
    ) -> State[SA, SB, tuple[A, B, C]]: ...

    @typing.overload
    def product[B, C, D](
        self,
        b: State[SA, typing.Any, B],
        c: State[SA, typing.Any, C],
        d: State[SA, typing.Any, D],
        /,
    ) -> State[SA, SB, tuple[A, B, C, D]]: ...

    @typing.overload
    def product(
        self,
        *others: State[SA, typing.Any, typing.Any],
    ) -> State[SA, SB, tuple[typing.Any, ...]]: ...

    def product(
        self,
        *others: State[SA, typing.Any, typing.Any],
    ) -> State[SA, SB, tuple[typing.Any, ...]]:
        """
        Run self and others independently from the same initial state.

        Unlike then/ap nothing is sequenced: every computation sees the
        initial state. The resulting state is the one self produced;
        the states produced by others are discarded.
        """
        if not others:
            raise TypeError("product() needs at least one other State")
        run = self._run

        def wrapper(s: SA) -> tuple[SB, tuple[typing.Any, ...]]:
            sb, a = run(s)
            return sb, (a, *(other._run(s)[1] for other in others))

        return State(wrapper)

    # Protocol methods

    def __call__(self, initial: SA, /) -> tuple[SB, A]:
        """Same as run()."""
        return self.run(initial)

    def __repr__(self) -> str:
        return f"State({self._run!r})"


# Plain (non-indexed) state: the state type never changes
type StateT[S, A] = State[S, S, A]

# Namespace-style constructors: S.get(), S.put(...), S.modify(...)
state = State.state
pure = State.pure
get = State.get
gets = State.gets
put = State.put
modify = State.modify

__all__ = (
    "State",
    "StateT",
    "state",
    "pure",
    "get",
    "gets",
    "put",
    "modify",
)
