"""Internal helpers for fnkit.

Common functions used across multiple modules.
These are not part of the public API but can be used for building custom monads."""

from __future__ import annotations

import typing
from collections.abc import Callable


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def const[T](value: T) -> Callable[[typing.Any], T]:
    """Function that ignores its argument and always returns value."""
    def constant(_: typing.Any) -> T:
        return value
    return constant


def compose[A, B, C](g: Callable[[B], C], f: Callable[[A], B]) -> Callable[[A], C]:
    """Right-to-left composition: compose(g, f)(x) == g(f(x))."""
    def composed(x: A) -> C:
        return g(f(x))
    return composed


def curry(f: Callable[..., typing.Any], arity: int) -> Callable[[typing.Any], typing.Any]:
    """
    Turn an uncurried N-ary function into a chain of one-argument functions.

    Example:
        add3 = curry(lambda a, b, c: a + b + c, 3)
        add3(1)(2)(3)  # 6

    NOTE: arity is explicit: Python callables don't reliably report it
          (builtins, functools.partial, *args).
    """
    if arity < 1:
        raise ValueError("curry arity must be >= 1")

    def collect(args: tuple[typing.Any, ...]) -> Callable[[typing.Any], typing.Any]:
        def step(x: typing.Any) -> typing.Any:
            collected = (*args, x)
            if len(collected) == arity:
                return f(*collected)
            return collect(collected)
        return step

    return collect(())


__all__ = (
    "identity",
    "const",
    "compose",
    "curry",
)
