"""
Lens
====

A composable pure get/set pair focusing on one part of a (possibly nested)
structure. Lenses never mutate: set returns a new structure.

Lens laws:
- get-set: lens.set(a, lens.get(a)) == a
- set-get: lens.get(lens.set(a, b)) == b
- set-set: lens.set(lens.set(a, b1), b2) == lens.set(a, b2)

Composition direction:
- outer.and_then(inner) - reads outward-to-inward (call order = nesting order)
- inner.compose(outer)  - reads inward-to-outward (mathematical order)

Both build the same Lens: a.and_then(b) is b.compose(a).
"""

from __future__ import annotations

import dataclasses
import typing
from collections.abc import Callable, Mapping

from ._helpers import identity
from ._types import Endo


class Lens[A, B]:
    """
    Bidirectional accessor: view B inside A.

    Example:
        address = Lens.attr("address")
        zip_code = Lens.attr("zip_code")
        person_zip = address.and_then(zip_code)

        person_zip.get(person)          # person.address.zip_code
        person_zip.set(person, 1234)    # new person with new address
    """

    __slots__ = ("_get", "_set")

    def __init__(self, get: Callable[[A], B], set: Callable[[A, B], A], /) -> None:
        self._get = get
        self._set = set

    # Constructors

    @staticmethod
    def identity[T]() -> Lens[T, T]:
        """Lens focusing on the whole structure."""
        return Lens(identity, lambda _, b: b)

    @staticmethod
    def attr(name: str, /) -> Lens[typing.Any, typing.Any]:
        """
        Lens on a dataclass field.

        set goes through dataclasses.replace, so frozen dataclasses work.
        """
        return Lens(
            lambda a: getattr(a, name),
            lambda a, b: dataclasses.replace(a, **{name: b}),
        )

    @staticmethod
    def key[K, V](key: K, /) -> Lens[Mapping[K, V], V]:
        """
        Lens on a mapping entry.

        set builds a new dict; the source mapping is left alone.
        NOTE: get raises KeyError for a missing key, like mapping[key].
        """
        return Lens(
            lambda m: m[key],
            lambda m, v: {**m, key: v},
        )

    @staticmethod
    def index[T](i: int, /) -> Lens[tuple[T, ...], T]:
        """Lens on a tuple element. set builds a new tuple."""

        def set_item(t: tuple[T, ...], v: T) -> tuple[T, ...]:
            items = list(t)
            items[i] = v
            return tuple(items)

        return Lens(lambda t: t[i], set_item)

    # Accessors

    def get(self, a: A, /) -> B:
        """Extract the view from a source."""
        return self._get(a)

    def set(self, a: A, b: B, /) -> A:
        """Return a new source with the view replaced by b."""
        return self._set(a, b)

    def mod(self, a: A, f: Endo[B], /) -> A:
        """
        Apply f to the view.

        lens.mod(a, identity) == a
        """
        return self.set(a, f(self.get(a)))

    # Composition

    def compose[C](self, that: Lens[C, A], /) -> Lens[C, B]:
        """
        Focus through that first, then through self.

        self is the inner lens, that is the outer one: Lens[A, B] ∘ Lens[C, A].
        """

        def get(c: C) -> B:
            return self.get(that.get(c))

        def set(c: C, b: B) -> C:
            return that.mod(c, lambda a: self.set(a, b))

        return Lens(get, set)

    def and_then[C](self, that: Lens[B, C], /) -> Lens[A, C]:
        """
        Focus through self first, then through that.

        Lens[A, B] followed by Lens[B, C] is Lens[A, C]. Defined as that.compose(self).
        """
        return that.compose(self)

    def __repr__(self) -> str:
        return f"Lens({self._get!r}, {self._set!r})"


__all__ = ("Lens",)
