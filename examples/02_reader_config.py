from __future__ import annotations

from _infra import Config, banner, run

from fnkit import Reader, lift_m2_r
from fnkit import reader as Rd


def price_with_tax(net: float) -> Reader[Config, float]:
    return Rd.asks(lambda cfg: round(net * (1 + cfg.tax_rate), 2))


def format_price(amount: float) -> Reader[Config, str]:
    return Rd.asks(lambda cfg: f"{amount:.2f} {cfg.currency}")


def main() -> None:
    banner("02_reader_config: Reader, local, lift")

    line = price_with_tax(10.0).then(format_price)
    greeting = Rd.asks(lambda cfg: cfg.greeting)
    message = lift_m2_r(lambda hello, price: f"{hello}! you pay {price}")(greeting, line)

    config = Config(greeting="hello")
    print(message.run_reader(config))

    # local: same program, tax-free environment
    tax_free = message.local(lambda cfg: Config(cfg.greeting, cfg.currency, tax_rate=0.0))
    print(tax_free.run_reader(config))


if __name__ == "__main__":
    run(main)
