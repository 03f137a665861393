from __future__ import annotations

from _infra import Cart, Item, banner, run
from kungfu import Nothing, Some

from fnkit import Lens, That, These, This, Those, from_options


def describe(pair: Those[str, Item]) -> str:
    return pair.fold(
        lambda coupon: f"coupon {coupon} without items",
        lambda item: f"{item.sku} without coupon",
        lambda coupon, item: f"{item.sku} with coupon {coupon}",
    )


def main() -> None:
    banner("03_lens_those: nested updates and three-way pairing")

    first_item = Lens.attr("items").and_then(Lens.index(0))
    quantity = first_item.and_then(Lens.attr("quantity"))

    cart = Cart(owner="ada", items=(Item("apple", 0.5),))
    bigger = quantity.mod(cart, lambda q: q * 3)
    print(quantity.get(cart), "->", quantity.get(bigger))

    for pair in (That("SPRING"), This(Item("pear", 1.0)), These("SPRING", Item("fig", 3.0))):
        print(describe(pair), "| right-biased:", pair.map(lambda i: i.sku).get_or_else("-"))

    match from_options(Nothing(), Nothing()):
        case Some(found):
            print("unexpected", found)
        case _:
            print("nothing to pair")


if __name__ == "__main__":
    run(main)
