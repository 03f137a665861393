from __future__ import annotations

import pytest

from fnkit import UNIT, State, StateT
from fnkit.state import (
    lift_a,
    lift_a1,
    lift_a2,
    lift_a3,
    lift_m,
    lift_m1,
    lift_m2,
    lift_m3,
    sequence,
    traverse,
)

add1: StateT[int, int] = State.state(lambda n: (n + 1, n))
double: StateT[int, int] = State.state(lambda n: (n * 2, n))


def subtract(x: int, y: int) -> int:
    return x - y


class TestApplicativeLifts:
    def test_lift_a1(self) -> None:
        assert lift_a1(lambda x: x * 10)(add1).run(1) == (2, 10)

    def test_lift_a1_on_get(self) -> None:
        assert lift_a1(lambda x: x + 1)(State.get()).run(1) == (1, 2)

    def test_lift_a2_sequences_left_to_right(self) -> None:
        # add1: 1 -> 2 (value 1), double: 2 -> 4 (value 2)
        assert lift_a2(subtract)(add1, double).run(1) == (4, -1)

    def test_lift_a2_order_matters(self) -> None:
        # double: 1 -> 2 (value 1), add1: 2 -> 3 (value 2)
        assert lift_a2(subtract)(double, add1).run(1) == (3, -1)
        assert lift_a2(subtract)(double, add1).run(3) == (7, -3)

    def test_lift_a3(self) -> None:
        assert lift_a3(lambda a, b, c: (a, b, c))(add1, add1, add1).run(1) == (4, (1, 2, 3))

    def test_lift_a_variadic(self) -> None:
        assert lift_a(lambda *xs: sum(xs))(add1, add1, add1, add1).run(0) == (4, 6)

    def test_fixed_arity_is_checked(self) -> None:
        with pytest.raises(TypeError):
            lift_a2(subtract)(add1)

    def test_variadic_needs_a_computation(self) -> None:
        with pytest.raises(TypeError):
            lift_a(lambda: 0)()


class TestMonadicLifts:
    def test_lift_m1(self) -> None:
        assert lift_m1(lambda x: x * 10)(add1).run(1) == (2, 10)

    def test_lift_m2(self) -> None:
        assert lift_m2(subtract)(add1, double).run(1) == (4, -1)

    def test_lift_m3(self) -> None:
        assert lift_m3(lambda a, b, c: (a, b, c))(add1, double, add1).run(1) == (5, (1, 2, 4))

    def test_lift_m_variadic(self) -> None:
        assert lift_m(lambda *xs: list(xs))(add1, double, add1, double).run(1) == (10, [1, 2, 4, 5])

    def test_lift_m2_with_changing_state_type(self) -> None:
        pair = lift_m2(lambda a, b: (a, b))(State.modify(len), State.gets(lambda n: n + 1))
        assert pair.run([1, 2]) == (2, (UNIT, 3))

    @pytest.mark.parametrize("initial", [0, 1, 5, -3])
    def test_lift_a_and_lift_m_agree(self, initial: int) -> None:
        f = lambda a, b, c: a * 100 + b * 10 + c  # noqa: E731
        assert (
            lift_a3(f)(add1, double, add1).run(initial)
            == lift_m3(f)(add1, double, add1).run(initial)
        )

    def test_fixed_arity_is_checked(self) -> None:
        with pytest.raises(TypeError):
            lift_m1(str)(add1, add1)


class TestCollection:
    def test_traverse_threads_state(self) -> None:
        bump = lambda k: State.state(lambda n: (n + k, n))  # noqa: E731
        assert traverse([1, 2, 3], bump).run(0) == (6, [0, 1, 3])

    def test_traverse_empty(self) -> None:
        assert traverse([], lambda _: add1).run(7) == (7, [])

    def test_sequence(self) -> None:
        assert sequence([add1, add1, add1]).run(5) == (8, [5, 6, 7])

    def test_sequence_long_input(self) -> None:
        assert sequence([add1] * 5000).run(0) == (5000, list(range(5000)))

    def test_sequence_is_rerunnable(self) -> None:
        steps = sequence(iter([add1, double]))
        assert steps.run(1) == steps.run(1) == (4, [1, 2])
