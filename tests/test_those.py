from __future__ import annotations

import dataclasses
import typing

import pytest
from kungfu import Error, Nothing, Ok, Some

from fnkit import That, These, This, Those, from_either, from_options

from _support import MISSING, is_some, option_value, result_pair

THOSE: list[Those[str, int]] = [
    That("some.value"),
    This(123),
    These("some.value", 123),
]

OPTIONS: list[tuple[typing.Any, typing.Any]] = [
    (Some("some.value"), Some(123)),
    (Nothing(), Some(123)),
    (Some("some.value"), Nothing()),
    (Nothing(), Nothing()),
]

those_params = pytest.mark.parametrize("those", THOSE, ids=repr)


class TestFoldDerivedConsistency:
    @those_params
    def test_left_defined_for_left_and_both(self, those: Those[str, int]) -> None:
        assert (those.is_left() or those.is_both()) == is_some(those.left())

    @those_params
    def test_right_defined_for_right_and_both(self, those: Those[str, int]) -> None:
        assert (those.is_right() or those.is_both()) == is_some(those.right())

    @those_params
    def test_exactly_one_predicate_holds(self, those: Those[str, int]) -> None:
        assert [those.is_left(), those.is_right(), those.is_both()].count(True) == 1

    @those_params
    def test_only_left_or_right(self, those: Those[str, int]) -> None:
        only_left = option_value(those.only_left())
        only_right = option_value(those.only_right())
        if only_left is not MISSING:
            expected: tuple[str, typing.Any] | None = ("error", only_left)
        elif only_right is not MISSING:
            expected = ("ok", only_right)
        else:
            expected = None

        actual = those.only_left_or_right()
        assert (result_pair(option_value(actual)) if is_some(actual) else None) == expected

    @those_params
    def test_only_both_consistent_with_left_and_right(self, those: Those[str, int]) -> None:
        left, right = option_value(those.left()), option_value(those.right())
        expected = (left, right) if MISSING not in (left, right) else MISSING
        assert option_value(those.only_both()) == expected

    @those_params
    def test_is_left_consistent_with_to_option(self, those: Those[str, int]) -> None:
        assert those.is_left() == (not is_some(those.to_option()))

    @those_params
    def test_to_either_consistent_with_right(self, those: Those[str, int]) -> None:
        side, value = result_pair(those.to_either())
        right = option_value(those.right())
        if right is MISSING:
            assert (side, value) == ("error", option_value(those.left()))
        else:
            assert (side, value) == ("ok", right)

    @those_params
    def test_get_or_else_consistent_with_to_option(self, those: Those[str, int]) -> None:
        other = 456
        right = option_value(those.to_option())
        assert those.get_or_else(other) == (other if right is MISSING else right)

    @those_params
    def test_fold_calls_exactly_one_function(self, those: Those[str, int]) -> None:
        calls: list[str] = []
        those.fold(
            lambda a: calls.append("left"),
            lambda b: calls.append("right"),
            lambda a, b: calls.append("both"),
        )
        assert len(calls) == 1


class TestFromOptions:
    @pytest.mark.parametrize(("oa", "ob"), OPTIONS)
    def test_consistent_with_input_options(self, oa: typing.Any, ob: typing.Any) -> None:
        maybe = from_options(oa, ob)
        if not is_some(maybe):
            assert (is_some(oa), is_some(ob)) == (False, False)
            return
        those = option_value(maybe)
        assert option_value(those.left()) == option_value(oa)
        assert option_value(those.right()) == option_value(ob)

    def test_variants(self) -> None:
        assert option_value(from_options(Some("a"), Some(1))) == These("a", 1)
        assert option_value(from_options(Some("a"), Nothing())) == That("a")
        assert option_value(from_options(Nothing(), Some(1))) == This(1)
        assert not is_some(from_options(Nothing(), Nothing()))

    @those_params
    def test_option_roundtrip(self, those: Those[str, int]) -> None:
        assert option_value(from_options(those.left(), those.right())) == those


class TestFromEither:
    def test_ok_is_this(self) -> None:
        assert from_either(Ok(1)) == This(1)

    def test_error_is_that(self) -> None:
        assert from_either(Error("boom")) == That("boom")

    @pytest.mark.parametrize("those", [That("x"), This(1)], ids=repr)
    def test_roundtrip_through_either(self, those: Those[str, int]) -> None:
        assert from_either(those.to_either()) == those

    def test_these_loses_left_through_either(self) -> None:
        assert from_either(These("x", 1).to_either()) == This(1)


class TestMapping:
    @those_params
    def test_bimap_preserves_variant(self, those: Those[str, int]) -> None:
        mapped = those.bimap(str.upper, lambda n: n + 1)
        assert type(mapped) is type(those)

    def test_bimap_values(self) -> None:
        assert That("a").bimap(str.upper, str) == That("A")
        assert This(1).bimap(str.upper, str) == This("1")
        assert These("a", 1).bimap(str.upper, str) == These("A", "1")

    def test_map_is_right_biased(self) -> None:
        assert That("a").map(lambda n: n + 1) == That("a")
        assert This(1).map(lambda n: n + 1) == This(2)
        assert These("a", 1).map(lambda n: n + 1) == These("a", 2)

    def test_map_left(self) -> None:
        assert That("a").map_left(str.upper) == That("A")
        assert This(1).map_left(str.upper) == This(1)
        assert These("a", 1).map_left(str.upper) == These("A", 1)

    def test_swap(self) -> None:
        assert That("a").swap() == This("a")
        assert This(1).swap() == That(1)
        assert These("a", 1).swap() == These(1, "a")


class TestValueSemantics:
    def test_equality_is_variant_sensitive(self) -> None:
        assert That("x") != This("x")
        assert That("x") == That("x")
        assert These("x", 1) != These(1, "x")

    def test_hash_is_structural(self) -> None:
        assert len({That(1), That(1), This(1), These(1, 1), These(1, 1)}) == 3

    def test_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            That("x").left_value = "y"  # type: ignore[misc]

    def test_pattern_matching(self) -> None:
        def describe(those: Those[str, int]) -> str:
            match those:
                case That(a):
                    return f"left {a}"
                case This(b):
                    return f"right {b}"
                case These(a, b):
                    return f"both {a} {b}"

        assert [describe(t) for t in THOSE] == [
            "left some.value",
            "right 123",
            "both some.value 123",
        ]
