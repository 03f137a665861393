"""
Generic lift combinators
========================

Lift an N-ary pure function into any applicative / monad.

Architecture (same as the rest of the library):
- Generic combinators (*M functions) work with any type that has the
  needed methods; type-specific constructors are passed in (pure=...)
- Sugar for State lives in fnkit.state.lift (no suffix)
- Sugar for Reader lives in fnkit.reader.lift (*_r suffix)
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from ._helpers import curry

# ============================================================================
# Capabilities
# ============================================================================


class Functor(typing.Protocol):
    def map(self, f: Callable[[typing.Any], typing.Any], /) -> typing.Any: ...


class Applicative(Functor, typing.Protocol):
    def ap(self, sf: typing.Any, /) -> typing.Any: ...


class Monad(Functor, typing.Protocol):
    def then(self, f: Callable[[typing.Any], typing.Any], /) -> typing.Any: ...


def _check_arity(expected: int | None, got: int) -> None:
    if got < 1:
        raise TypeError("lifted function needs at least one computation")
    if expected is not None and got != expected:
        raise TypeError(f"lifted function takes {expected} computation(s), got {got}")


# ============================================================================
# Generic combinators
# ============================================================================


def lift_aM[M: Applicative](
    f: Callable[..., typing.Any],
    /,
    *,
    arity: int | None = None,
) -> Callable[..., M]:
    """
    Lift f into an applicative using map + ap.

    The first computation is mapped with curried f, every next one is
    applied with ap, so effects run left to right:

        lift_aM(f)(a, b, c) ≡ c.ap(b.ap(a.map(curry(f))))

    arity=None accepts any number (>= 1) of computations.
    """

    def lifted(*ms: M) -> M:
        _check_arity(arity, len(ms))
        first, *rest = ms
        acc = first.map(curry(f, len(ms)))
        for m in rest:
            acc = m.ap(acc)
        return acc

    return lifted


def lift_mM[M: Monad](
    f: Callable[..., typing.Any],
    /,
    *,
    pure: Callable[[typing.Any], M],
    arity: int | None = None,
) -> Callable[..., M]:
    """
    Lift f into a monad using then + pure.

        lift_mM(f, pure=P)(a, b) ≡ a.then(lambda x: b.then(lambda y: P(f(x, y))))

    arity=None accepts any number (>= 1) of computations.
    """

    def lifted(*ms: M) -> M:
        _check_arity(arity, len(ms))

        def bind_from(index: int, args: tuple[typing.Any, ...]) -> M:
            if index == len(ms):
                return pure(f(*args))
            return ms[index].then(lambda x: bind_from(index + 1, (*args, x)))

        return bind_from(0, ())

    return lifted


__all__ = (
    # Capabilities
    "Functor",
    "Applicative",
    "Monad",
    # Generic
    "lift_aM",
    "lift_mM",
)
