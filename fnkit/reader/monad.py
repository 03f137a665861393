"""Reader Monad

Reader[R, A] - computation that reads an immutable environment R
and produces a value A. The environment is shared by every step and
never threaded forward as a changed value (see local for a scoped change).

Built the same way as State: a wrapped pure function, combinators
return new Reader values, run_reader is the only terminal operation."""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._helpers import const, identity
from .._log import logger
from .._types import Endo, Fn


class Reader[R, A]:
    """Reader Monad.

    Wraps a pure function R -> A.

    Monadic laws:
    - Left identity: Reader.pure(a).then(f) ≡ f(a)
    - Right identity: m.then(Reader.pure) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(lambda x: f(x).then(g))

    local law:
    - Reader.ask().local(f).run_reader(e) == f(e)
    """

    __slots__ = ("_reader",)

    def __init__(self, reader: Callable[[R], A], /) -> None:
        self._reader = reader

    # Constructors

    @staticmethod
    def reader[E, V](f: Callable[[E], V], /) -> Reader[E, V]:
        """Wrap a function of the environment."""
        return Reader(f)

    @staticmethod
    def ask[E]() -> Reader[E, E]:
        """Retrieve the environment itself."""
        return Reader(identity)

    @staticmethod
    def asks[E, V](f: Callable[[E], V], /) -> Reader[E, V]:
        """Retrieve a function of the environment. Same as ask().map(f)."""
        return Reader.ask().map(f)

    @staticmethod
    def pure[E, V](value: V, /) -> Reader[E, V]:
        """Lift a value into the monad. The environment is ignored."""
        return Reader(const(value))

    # Terminal operations

    def run_reader(self, environment: R, /) -> A:
        """Run against the environment and extract the value."""
        logger.debug("running Reader with %r", environment)
        return self._reader(environment)

    # Environment operations

    def local(self, f: Endo[R], /) -> Reader[R, A]:
        """Run the same computation against an environment modified by f."""
        reader = self._reader

        def wrapper(environment: R) -> A:
            return reader(f(environment))

        return Reader(wrapper)

    # Functor operations

    def map[B](self, f: Fn[A, B], /) -> Reader[R, B]:
        """Functor fmap - apply function to the value."""
        reader = self._reader

        def wrapper(environment: R) -> B:
            return f(reader(environment))

        return Reader(wrapper)

    # Monad operations

    def then[B](self, f: Callable[[A], Reader[R, B]], /) -> Reader[R, B]:
        """
        Monadic bind (>>=).

        f(value) reads the very same environment as self.
        """
        reader = self._reader

        def wrapper(environment: R) -> B:
            return f(reader(environment))._reader(environment)

        return Reader(wrapper)

    flat_map = then

    # Applicative operations

    def ap[B](self, rf: Reader[R, Callable[[A], B]], /) -> Reader[R, B]:
        """Applicative apply (<*>): rf's function applied to self's value."""
        reader = self._reader

        def wrapper(environment: R) -> B:
            return rf._reader(environment)(reader(environment))

        return Reader(wrapper)

    # Cartesian operations

    @typing.overload
    def product[B](self, b: Reader[R, B], /) -> Reader[R, tuple[A, B]]: ...

    @typing.overload
    def product[B, C](self, b: Reader[R, B], c: Reader[R, C], /) -> Reader[R, tuple[A, B, C]]: ...

    @typing.overload
    def product[B, C, D](
        self,
        b: Reader[R, B],
        c: Reader[R, C],
        d: Reader[R, D],
        /,
    ) -> Reader[R, tuple[A, B, C, D]]: ...

    @typing.overload
    def product(self, *others: Reader[R, typing.Any]) -> Reader[R, tuple[typing.Any, ...]]: ...

    def product(self, *others: Reader[R, typing.Any]) -> Reader[R, tuple[typing.Any, ...]]:
        """Read the same environment with self and others, pair up the values."""
        if not others:
            raise TypeError("product() needs at least one other Reader")
        readers = (self._reader, *(other._reader for other in others))

        def wrapper(environment: R) -> tuple[typing.Any, ...]:
            return tuple(reader(environment) for reader in readers)

        return Reader(wrapper)

    # Protocol methods

    def __call__(self, environment: R, /) -> A:
        """Same as run_reader()."""
        return self.run_reader(environment)

    def __repr__(self) -> str:
        return f"Reader({self._reader!r})"


def run_reader[R, A](reader: Reader[R, A], /) -> Callable[[R], A]:
    """Turn a Reader back into a plain function of the environment."""
    return reader.run_reader


# Namespace-style constructors: Rd.ask(), Rd.asks(...)
reader = Reader.reader
ask = Reader.ask
asks = Reader.asks
pure = Reader.pure

__all__ = (
    "Reader",
    "run_reader",
    "reader",
    "ask",
    "asks",
    "pure",
)
