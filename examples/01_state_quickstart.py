from __future__ import annotations

from _infra import Cart, Item, banner, run

from fnkit import UNIT, Lens, State
from fnkit import state as S


def add_item(item: Item) -> S.StateT[Cart, int]:
    """Append an item, yield the new item count."""
    items = Lens.attr("items")
    return S.over(items, lambda xs: (*xs, item)).then_discard(S.view(items).map(len))


def total() -> S.StateT[Cart, float]:
    return S.gets(lambda cart: sum(i.price * i.quantity for i in cart.items))


def main() -> None:
    banner("01_state_quickstart: State, then, product, indexed steps")

    shopping = (
        add_item(Item("apple", 0.5, 4))
        .then_discard(add_item(Item("bread", 2.0)))
        .then_discard(total())
    )
    cart, amount = shopping.run(Cart(owner="ada"))
    print(f"{cart.owner}: {len(cart.items)} items, total {amount:.2f}")

    # product: both computations see the same starting cart
    snapshot = total().product(S.gets(lambda c: len(c.items)))
    print(snapshot.eval(cart))

    # indexed: Cart -> float -> str, the state type changes at every step
    receipt = State.modify(lambda c: sum(i.price * i.quantity for i in c.items)).then_discard(
        State.modify(lambda amount: f"{amount:.2f} EUR")
    )
    text, result = receipt.run(cart)
    assert result is UNIT
    print(text)


if __name__ == "__main__":
    run(main, debug=True)
