from __future__ import annotations

from dataclasses import dataclass

from fnkit import UNIT, Lens, State
from fnkit.state import assign, over, view, zoom


@dataclass(frozen=True)
class App:
    counter: int
    name: str


counter = Lens.attr("counter")
name = Lens.attr("name")
add1 = State.state(lambda n: (n + 1, n))


class TestLensState:
    def test_view(self) -> None:
        app = App(counter=3, name="x")
        assert view(counter).run(app) == (app, 3)

    def test_assign(self) -> None:
        assert assign(name, "y").run(App(1, "x")) == (App(1, "y"), UNIT)

    def test_over(self) -> None:
        assert over(counter, lambda n: n * 10).run(App(2, "x")) == (App(20, "x"), UNIT)

    def test_over_then_view(self) -> None:
        step = over(counter, lambda n: n + 1).then_discard(view(counter))
        assert step.run(App(counter=1, name="x")) == (App(counter=2, name="x"), 2)

    def test_zoom_runs_inner_on_focus(self) -> None:
        assert zoom(counter, add1).run(App(1, "x")) == (App(2, "x"), 1)

    def test_zoom_leaves_rest_untouched(self) -> None:
        inner = State.modify(str.upper).then_discard(State.gets(len))
        assert zoom(name, inner).run(App(5, "abc")) == (App(5, "ABC"), 3)
