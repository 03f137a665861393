from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Config:
    greeting: str
    currency: str = "EUR"
    tax_rate: float = 0.2


@dataclass(frozen=True, slots=True)
class Item:
    sku: str
    price: float
    quantity: int = 1


def _empty_items() -> tuple[Item, ...]:
    return ()


@dataclass(frozen=True, slots=True)
class Cart:
    owner: str
    items: tuple[Item, ...] = field(default_factory=_empty_items)
    coupon: str | None = None


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None], *, debug: bool = False) -> None:  # pragma: no cover (examples only)
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    main()
